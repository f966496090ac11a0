"""
Generation run orchestration.

[Generator][docsmith.pipeline.generator.Generator] drives one run over an
immutable snapshot of inputs:

1. parse the project config;
2. extract every content document and derive its route -- independent per
   document, spread over a thread pool;
3. assemble the page tree -- the single synchronization point;
4. serialize and emit the config artifact and one artifact per page.

A run is whole-or-nothing: the first
[DocsmithError][docsmith.core.exceptions.DocsmithError] aborts it and no
artifacts are returned. Re-running over unchanged inputs produces
byte-identical artifact ids and payloads.

Examples:
    ```python
    from docsmith.models import SourceFile
    from docsmith.pipeline import Generator

    generator = Generator.from_dict({"root_namespace": "Acme.Docs"})
    artifacts = generator.generate_from_sources(
        [
            SourceFile("Docs.yaml", "title: Acme\\ntheme: Primer\\n"),
            SourceFile("Index.md", "---\\ntitle: Acme\\nlayout: Home\\n---\\n# Welcome\\n"),
        ]
    )
    ```
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Self

from pydantic import ValidationError

from docsmith.core.exceptions import ConfigurationError, DocsmithError
from docsmith.core.frontmatter import load_document, parse_config
from docsmith.core.logger import Logger
from docsmith.core.rendering import MarkdownRenderer, Renderer
from docsmith.core.yaml import load_yaml
from docsmith.models import ContentDocument, EmittedArtifact, SourceFile
from docsmith.tree.assembler import assemble_tree
from docsmith.utils.routes import route_depth

from .configs import GenerationOptions
from .emitter import ArtifactEmitter


def partition_sources(
    sources: Iterable[SourceFile],
    *,
    config_name: str = "Docs.yaml",
    content_suffix: str = ".md",
) -> tuple[SourceFile, list[SourceFile]]:
    """Split *sources* into the single config file and the content files.

    Matching is case-insensitive: the config file is the one whose path ends
    with ``config_name``; content files end with ``content_suffix``. Other
    files are ignored. Content order follows input order.

    Raises:
        ConfigurationError: If there is not exactly one config candidate.
    """
    config_candidates: list[SourceFile] = []
    contents: list[SourceFile] = []
    config_lower = config_name.lower()
    suffix_lower = content_suffix.lower()

    for source in sources:
        lowered = source.path.lower()
        if lowered.endswith(config_lower):
            config_candidates.append(source)
        elif lowered.endswith(suffix_lower):
            contents.append(source)

    if not config_candidates:
        raise ConfigurationError(f"no configuration file matching {config_name!r} among inputs")
    if len(config_candidates) > 1:
        paths = ", ".join(s.path for s in config_candidates)
        raise ConfigurationError(f"multiple configuration files match {config_name!r}: {paths}")

    return config_candidates[0], contents


class Generator:
    """Runs the extract -> assemble -> emit pipeline.

    Attributes:
        _options: [GenerationOptions][docsmith.pipeline.configs.GenerationOptions]
            for every run of this generator.
        _renderer: Optional caller-supplied renderer; when absent a
            [MarkdownRenderer][docsmith.core.rendering.MarkdownRenderer] is
            built from ``options.markdown`` at the start of each run.
        _logger: [Logger][docsmith.core.logger.Logger] named ``docsmith``.
    """

    def __init__(
        self,
        options: GenerationOptions | None = None,
        *,
        renderer: Renderer | None = None,
    ) -> None:
        self._options = options if options is not None else GenerationOptions()
        self._renderer = renderer
        self._logger = Logger("docsmith", json_output=self._options.log_json)

    @property
    def options(self) -> GenerationOptions:
        """The run options (read-only)."""
        return self._options

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def from_yaml(cls, config_path: str, **kwargs: Any) -> Self:
        """Create a generator from a YAML options file.

        See Also:
            [from_dict()][docsmith.pipeline.generator.Generator.from_dict]:
                Construct from a pre-parsed dictionary.
        """
        return cls.from_dict(load_yaml(config_path), **kwargs)

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> Self:
        """Create a generator from an options dictionary.

        Raises:
            ConfigurationError: If ``data`` does not validate as
                [GenerationOptions][docsmith.pipeline.configs.GenerationOptions].
        """
        try:
            options = GenerationOptions(**data)
        except ValidationError as e:
            raise ConfigurationError(f"invalid generation options: {e}") from e
        return cls(options=options, **kwargs)

    # -------------------------------------------------------------------------
    # Stages
    # -------------------------------------------------------------------------

    def load_documents(self, sources: Sequence[SourceFile]) -> list[ContentDocument]:
        """Extract every source, in parallel when ``max_workers > 1``.

        Results keep input order; the first failure propagates.
        """
        workers = min(self._options.max_workers, len(sources))
        if workers <= 1:
            return [load_document(source) for source in sources]
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="docsmith") as pool:
            return list(pool.map(load_document, sources))

    def _make_renderer(self) -> Renderer:
        if self._renderer is not None:
            return self._renderer
        markdown = self._options.markdown
        return MarkdownRenderer(markdown.extensions, markdown.extension_configs)

    def generate(
        self,
        config_source: SourceFile,
        content_sources: Sequence[SourceFile],
    ) -> list[EmittedArtifact]:
        """Run the pipeline and return every artifact, config artifact first.

        Raises:
            DocsmithError: Any subclass; nothing is emitted on failure.
        """
        started = time.monotonic()
        self._logger.info(
            "generation_started", config=config_source.path, documents=len(content_sources)
        )

        try:
            config = parse_config(config_source.text, source=config_source.path)
            documents = self.load_documents(content_sources)
            self._logger.debug("documents_loaded", count=len(documents))

            root = assemble_tree(documents)
            self._logger.debug(
                "tree_assembled",
                pages=len(documents),
                depth=max(route_depth(d.route) for d in documents),
            )

            emitter = ArtifactEmitter(
                self._make_renderer(),
                root_namespace=self._options.root_namespace,
                config_artifact_id=self._options.config_artifact_id,
            )
            artifacts = emitter.emit_all(config, root, documents)
        except DocsmithError as e:
            self._logger.error("generation_failed", error_type=type(e).__name__, error=str(e))
            raise

        self._logger.info(
            "generation_completed",
            artifacts=len(artifacts),
            duration_s=round(time.monotonic() - started, 3),
        )
        return artifacts

    def generate_from_sources(self, sources: Iterable[SourceFile]) -> list[EmittedArtifact]:
        """Partition a mixed list of inputs, then [generate()][docsmith.pipeline.generator.Generator.generate]."""
        config_source, content_sources = partition_sources(
            sources,
            config_name=self._options.config_filename,
            content_suffix=self._options.content_suffix,
        )
        return self.generate(config_source, content_sources)
