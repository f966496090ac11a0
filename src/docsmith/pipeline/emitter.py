"""
Artifact emission: packaging the config, tree and rendered pages.

Two artifact shapes are produced, both as JSON text:

* the **config artifact**, keyed by a caller-chosen id, embeds the
  serialized config and serialized page tree as opaque strings for the
  presentation runtime to deserialize:

    ```json
    {"config": "{\\n  \\"title\\": ...}", "rootPage": "{\\n  \\"title\\": ...}"}
    ```

* one **page artifact** per content document, keyed by
  [artifact_id()][docsmith.utils.identifiers.artifact_id] of its source
  path, carrying ``route``, full ``title``, ``layout``, ``theme``,
  ``namespace``, ``leafName`` and the rendered ``body``.

Rendering is delegated to a [Renderer][docsmith.core.rendering.Renderer];
the emitter only assembles metadata and markup.
"""

from __future__ import annotations

from collections.abc import Sequence

from docsmith.core.exceptions import DuplicateArtifactError
from docsmith.core.rendering import Renderer
from docsmith.core.serializer import dumps
from docsmith.models import ArtifactKind, ConfigDocument, ContentDocument, EmittedArtifact, PageNode
from docsmith.models.constants import DEFAULT_CONFIG_ARTIFACT_ID, DEFAULT_ROOT_NAMESPACE
from docsmith.utils.identifiers import artifact_id, leaf_name, namespace_of


def full_title(page_title: str, config_title: str) -> str:
    """Browser title of a page: ``"Guide - Docs"``, or just ``"Docs"`` for the home page."""
    if page_title == config_title:
        return config_title
    return f"{page_title} - {config_title}"


def emit_config(
    config: ConfigDocument,
    root: PageNode,
    *,
    artifact_id: str = DEFAULT_CONFIG_ARTIFACT_ID,
) -> EmittedArtifact:
    """Emit the combined config + page tree artifact."""
    payload = dumps({"config": dumps(config), "rootPage": dumps(root)})
    return EmittedArtifact(
        artifact_id=artifact_id,
        payload=payload,
        kind=ArtifactKind.CONFIG,
        source=config.source_path,
    )


def emit_page(
    document: ContentDocument,
    config: ConfigDocument,
    renderer: Renderer,
    *,
    root_namespace: str = DEFAULT_ROOT_NAMESPACE,
) -> EmittedArtifact:
    """Emit the artifact for one content document."""
    payload = dumps(
        {
            "route": document.route,
            "title": full_title(document.title, config.title),
            "layout": document.layout,
            "theme": config.theme,
            "namespace": namespace_of(root_namespace, document.source_path),
            "leafName": leaf_name(document.source_path),
            "body": renderer.render(document.body),
        }
    )
    return EmittedArtifact(
        artifact_id=artifact_id(document.source_path),
        payload=payload,
        kind=ArtifactKind.PAGE,
        source=document.source_path,
    )


class ArtifactEmitter:
    """Emits every artifact of a run, refusing colliding artifact ids.

    Args:
        renderer: Body renderer shared by all page artifacts of the run.
        root_namespace: Prefix for page namespaces.
        config_artifact_id: Id of the config artifact.
    """

    def __init__(
        self,
        renderer: Renderer,
        *,
        root_namespace: str = DEFAULT_ROOT_NAMESPACE,
        config_artifact_id: str = DEFAULT_CONFIG_ARTIFACT_ID,
    ) -> None:
        self._renderer = renderer
        self._root_namespace = root_namespace
        self._config_artifact_id = config_artifact_id

    def check_ids(self, config: ConfigDocument, documents: Sequence[ContentDocument]) -> None:
        """Raise if two outputs would share an artifact id.

        Raises:
            DuplicateArtifactError: Naming the id and every colliding source.
        """
        sources_by_id: dict[str, list[str]] = {self._config_artifact_id: [config.source_path]}
        for document in documents:
            sources_by_id.setdefault(artifact_id(document.source_path), []).append(
                document.source_path
            )
        for key, sources in sources_by_id.items():
            if len(sources) > 1:
                raise DuplicateArtifactError(key, sources)

    def emit_all(
        self,
        config: ConfigDocument,
        root: PageNode,
        documents: Sequence[ContentDocument],
    ) -> list[EmittedArtifact]:
        """Config artifact first, then one page artifact per document in input order."""
        self.check_ids(config, documents)
        artifacts = [emit_config(config, root, artifact_id=self._config_artifact_id)]
        artifacts.extend(
            emit_page(document, config, self._renderer, root_namespace=self._root_namespace)
            for document in documents
        )
        return artifacts
