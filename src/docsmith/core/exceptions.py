"""docsmith exception hierarchy.

Every failure in a generation run is fatal: the pipeline is whole-or-nothing,
so none of these errors are retried or recovered locally. Each exception
carries enough context (source paths, routes, artifact ids) for the host
build to report the problem precisely.

Exception hierarchy:

```text
DocsmithError (base -- never raised directly)
├── ConfigurationError       -- invalid options, bad input partition
├── MalformedDocumentError   -- front matter missing/unparsable/required keys
├── TreeError                -- page tree cannot be assembled
│   ├── MissingRootError     -- no document resolves to "/"
│   ├── DuplicateRouteError  -- two documents share a route
│   └── OrphanPageError      -- route has no ancestor chain to the root
├── DuplicateArtifactError   -- two outputs share an artifact id
└── SerializationError       -- structured data cannot be produced
```

See Also:
    [extract()][docsmith.core.frontmatter.extract]: Raises
        [MalformedDocumentError][docsmith.core.exceptions.MalformedDocumentError].
    [assemble_tree()][docsmith.tree.assembler.assemble_tree]: Raises the
        [TreeError][docsmith.core.exceptions.TreeError] family.
    [ArtifactEmitter][docsmith.pipeline.emitter.ArtifactEmitter]: Raises
        [DuplicateArtifactError][docsmith.core.exceptions.DuplicateArtifactError].
"""

from __future__ import annotations

from collections.abc import Sequence


class DocsmithError(Exception):
    """Base exception for all docsmith errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(DocsmithError):
    """Invalid generation options or an unusable set of input files.

    See Also:
        [GenerationOptions][docsmith.pipeline.configs.GenerationOptions]:
            Options model whose validation failures surface here.
        [partition_sources()][docsmith.pipeline.generator.partition_sources]:
            Raises this when the config file cannot be identified.
    """


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


class MalformedDocumentError(DocsmithError):
    """A document's metadata block is missing, unparsable, or incomplete.

    Attributes:
        source: Relative path (or label) of the offending document.
        reason: Human-readable description of what is wrong.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


# ---------------------------------------------------------------------------
# Page tree
# ---------------------------------------------------------------------------


class TreeError(DocsmithError):
    """Base for errors raised while assembling the page tree."""


class MissingRootError(TreeError):
    """No content document resolves to the root route ``/``.

    Attributes:
        paths: Source paths of every document that was considered.
    """

    def __init__(self, paths: Sequence[str]) -> None:
        self.paths = tuple(paths)
        super().__init__(
            f"no document resolves to route '/' (checked {len(self.paths)} documents); "
            "add an 'index' page at the project root"
        )


class DuplicateRouteError(TreeError):
    """Two or more content documents resolve to the same route.

    Attributes:
        route: The ambiguous route.
        paths: Source paths of every document mapping to ``route``.
    """

    def __init__(self, route: str, paths: Sequence[str]) -> None:
        self.route = route
        self.paths = tuple(paths)
        super().__init__(f"route {route!r} is produced by multiple documents: {', '.join(self.paths)}")


class OrphanPageError(TreeError):
    """Documents whose routes have no page at an intermediate level.

    Attributes:
        orphans: ``(route, source_path)`` pairs that were never attached to
            the tree, in input order.
    """

    def __init__(self, orphans: Sequence[tuple[str, str]]) -> None:
        self.orphans = tuple(orphans)
        listed = ", ".join(f"{route} ({path})" for route, path in self.orphans)
        super().__init__(f"pages without a parent page: {listed}")


# ---------------------------------------------------------------------------
# Artifacts
# ---------------------------------------------------------------------------


class DuplicateArtifactError(DocsmithError):
    """Two distinct outputs sanitize to the same artifact id.

    Attributes:
        artifact_id: The colliding id.
        sources: Labels of the outputs that collided.
    """

    def __init__(self, artifact_id: str, sources: Sequence[str]) -> None:
        self.artifact_id = artifact_id
        self.sources = tuple(sources)
        super().__init__(f"artifact id {artifact_id!r} is shared by: {', '.join(self.sources)}")


class SerializationError(DocsmithError):
    """Structured data cannot be produced from a tree or config value."""
