"""Shared constants for the models layer.

Placing them here lets the models, utils and tree layers agree on the
fixed route, reserved tree keys and default labels without importing each
other.
"""

from __future__ import annotations

from enum import StrEnum


ROOT_ROUTE = "/"
"""Route of the tree root, produced by the project-level ``index`` page."""

INDEX_NAME = "index"
"""Base name (case-insensitive) of a page that represents its directory."""

DEFAULT_ROOT_NAMESPACE = "Docsmith"
"""Namespace label used when the host does not supply one."""

DEFAULT_CONFIG_ARTIFACT_ID = "DocsmithData"
"""Artifact id of the combined config + page tree artifact."""

LINK_KEY = "link"
"""Key under which a serialized page node exposes its route."""

CHILDREN_KEY = "children"
"""Key under which a serialized page node exposes its children."""

RESERVED_PAGE_KEYS = frozenset({LINK_KEY, CHILDREN_KEY})


class ArtifactKind(StrEnum):
    """Kinds of artifacts produced by a generation run.

    Attributes:
        CONFIG: The single artifact embedding the config and page tree.
        PAGE: One artifact per content document.
    """

    CONFIG = "config"
    PAGE = "page"
