"""Identifier sanitization for artifact keys and namespace labels.

Three pure, total functions derive names from a project-relative path, each
with its own substitution rule:

| Function | Input | Separators | Other non-alphanumerics |
|---|---|---|---|
| ``artifact_id`` | whole path | ``_`` | ``_`` |
| ``namespace_of`` | directory part | ``.`` | ``_`` |
| ``leaf_name`` | base name, no extension | -- | ``_`` |

Case is preserved. Uniqueness of artifact ids is checked by the
[ArtifactEmitter][docsmith.pipeline.emitter.ArtifactEmitter], not here.
"""

from __future__ import annotations

from docsmith.models.source import normalize_path

from .routes import split_path, strip_extension, substitute_non_alnum


def artifact_id(path: str) -> str:
    """Key for the artifact generated from *path*.

    ``guide/Getting-Started.md`` -> ``guide_Getting_Started_md``.
    """
    return substitute_non_alnum(normalize_path(path), "_")


def namespace_of(root: str, path: str) -> str:
    """Dotted grouping label for *path* under *root*.

    ``namespace_of("Docs", "api/v2-beta/index.md")`` -> ``Docs.api.v2_beta``;
    files at the project root get *root* unchanged.
    """
    directories, _ = split_path(path)
    label = ".".join(substitute_non_alnum(d, "_") for d in directories)
    return f"{root}.{label}" if label else root


def leaf_name(path: str) -> str:
    """Type-style name of the file at *path*: ``guide/Quick-Start.md`` -> ``Quick_Start``."""
    _, name = split_path(path)
    return substitute_non_alnum(strip_extension(name), "_")
