"""Pure frozen dataclasses with zero I/O for documents, pages and artifacts.

The models layer is the foundation of the package. It has **no dependencies**
on any other docsmith package -- only the Python standard library. Every
model uses ``@dataclass(frozen=True, slots=True)``; validation happens in
``__post_init__`` so invalid instances never escape the constructor, and
metadata is deep-frozen (``MappingProxyType`` mappings, tuple sequences).

Attributes:
    SourceFile: Project-relative path and raw text supplied by the host.
    ConfigDocument: Project configuration (``title``, ``theme`` and extras).
    ContentDocument: One page's route, front matter and Markdown body.
    PageNode: Node of the assembled page tree, owning its children.
    EmittedArtifact: A named JSON payload handed back to the host.
    ArtifactKind: Enum distinguishing the config artifact from page artifacts.

See Also:
    [docsmith.core][]: Extraction, serialization and rendering over these models.
    [docsmith.tree][]: Assembles [PageNode][docsmith.models.page.PageNode] trees.
"""

from .artifact import EmittedArtifact
from .config import ConfigDocument
from .constants import (
    CHILDREN_KEY,
    DEFAULT_CONFIG_ARTIFACT_ID,
    DEFAULT_ROOT_NAMESPACE,
    INDEX_NAME,
    LINK_KEY,
    ROOT_ROUTE,
    ArtifactKind,
)
from .document import ContentDocument
from .page import PageNode
from .source import SourceFile


__all__ = [
    "CHILDREN_KEY",
    "DEFAULT_CONFIG_ARTIFACT_ID",
    "DEFAULT_ROOT_NAMESPACE",
    "INDEX_NAME",
    "LINK_KEY",
    "ROOT_ROUTE",
    "ArtifactKind",
    "ConfigDocument",
    "ContentDocument",
    "EmittedArtifact",
    "PageNode",
    "SourceFile",
]
