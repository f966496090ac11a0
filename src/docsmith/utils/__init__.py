"""Pure path helpers: route derivation and identifier sanitization.

Attributes:
    derive_route: Canonical route of a project-relative path.
    artifact_id: Artifact key for a path.
    namespace_of: Dotted namespace label for a path's directory.
    leaf_name: Sanitized base name of a path.
"""

from .identifiers import artifact_id, leaf_name, namespace_of
from .routes import derive_route, is_within, parent_route, relative_segments, route_depth


__all__ = [
    "artifact_id",
    "derive_route",
    "is_within",
    "leaf_name",
    "namespace_of",
    "parent_route",
    "relative_segments",
    "route_depth",
]
