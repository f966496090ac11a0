r"""Docsmith -- static documentation-site generator.

Reads a YAML project config and a set of Markdown files with front matter,
derives a URL route for each file, nests the pages into a tree and emits
JSON artifacts for a presentation runtime.

Imports flow strictly downward:

```text
              pipeline         Options, emission, run orchestration
             /   |   \
          core  tree  utils    Parsing, serialization, assembly, helpers
             \   |   /
              models           Pure frozen dataclasses (zero I/O)
```

Attributes:
    models: Pure frozen dataclasses. Zero I/O, depends only on stdlib.
    core: Exceptions, logging, YAML, front matter, serialization, rendering.
    tree: Page tree assembly and navigation queries.
    utils: Route derivation and artifact identifiers.
    pipeline: Generation options, artifact emission and the generator.

Note:
    For lightweight usage, import directly from subpackages::

        from docsmith.models import PageNode
        from docsmith.utils import derive_route

    Top-level imports (``from docsmith import Generator``) use lazy loading
    and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("docsmith")

__all__ = [
    "ConfigDocument",
    "ContentDocument",
    "DocsmithError",
    "DuplicateArtifactError",
    "DuplicateRouteError",
    "EmittedArtifact",
    "GenerationOptions",
    "Generator",
    "Logger",
    "MalformedDocumentError",
    "MissingRootError",
    "OrphanPageError",
    "PageNode",
    "SourceFile",
    "assemble_tree",
    "derive_route",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "DocsmithError": ("docsmith.core", "DocsmithError"),
    "DuplicateArtifactError": ("docsmith.core", "DuplicateArtifactError"),
    "DuplicateRouteError": ("docsmith.core", "DuplicateRouteError"),
    "Logger": ("docsmith.core", "Logger"),
    "MalformedDocumentError": ("docsmith.core", "MalformedDocumentError"),
    "MissingRootError": ("docsmith.core", "MissingRootError"),
    "OrphanPageError": ("docsmith.core", "OrphanPageError"),
    "ConfigDocument": ("docsmith.models", "ConfigDocument"),
    "ContentDocument": ("docsmith.models", "ContentDocument"),
    "EmittedArtifact": ("docsmith.models", "EmittedArtifact"),
    "PageNode": ("docsmith.models", "PageNode"),
    "SourceFile": ("docsmith.models", "SourceFile"),
    "assemble_tree": ("docsmith.tree", "assemble_tree"),
    "derive_route": ("docsmith.utils", "derive_route"),
    "GenerationOptions": ("docsmith.pipeline", "GenerationOptions"),
    "Generator": ("docsmith.pipeline", "Generator"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'docsmith' has no attribute {name!r}")


def __dir__() -> list[str]:
    return list(__all__)
