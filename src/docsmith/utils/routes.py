"""Route derivation from project-relative file paths.

A page's route is a pure function of where its file lives:

* the whole path is lower-cased, so routes are case-insensitive;
* each directory segment keeps its alphanumerics and maps everything else
  to ``_``;
* the file's base name (extension stripped) becomes a trailing segment with
  non-alphanumerics mapped to ``-``, unless it is ``index``, in which case
  the page *is* its directory.

Examples:
    ```python
    derive_route("index.md")                  # '/'
    derive_route("guide/Getting-Started.md")  # '/guide/getting-started'
    derive_route("Guide/Index.md")            # '/guide'
    derive_route("my docs/a b.md")            # '/my_docs/a-b'
    ```

The helpers below compare routes segment by segment, so ``/ab`` is never
considered to live under ``/a``.
"""

from __future__ import annotations

from docsmith.models.constants import INDEX_NAME, ROOT_ROUTE


def substitute_non_alnum(text: str, replacement: str) -> str:
    """Replace every non-alphanumeric character of *text* with *replacement*."""
    return "".join(ch if ch.isalnum() else replacement for ch in text)


def split_path(path: str) -> tuple[list[str], str]:
    """Split *path* into directory segments and file name.

    Both ``/`` and ``\\`` separate segments; empty and ``.`` segments are
    dropped.
    """
    segments = [s for s in path.replace("\\", "/").split("/") if s and s != "."]
    if not segments:
        return [], ""
    return segments[:-1], segments[-1]


def strip_extension(name: str) -> str:
    """Drop the last extension of *name* (``a.en.md`` -> ``a.en``, ``.md`` -> ``''``)."""
    stem, dot, _ = name.rpartition(".")
    return stem if dot else name


def derive_route(relative_path: str) -> str:
    """Compute the canonical route of the file at *relative_path*.

    Total and deterministic: any string, including ``""``, yields a route
    starting with ``/``. A base name that is empty after stripping the
    extension is treated like ``index``.
    """
    directories, name = split_path(relative_path.lower())
    base = strip_extension(name)

    route = ROOT_ROUTE + "/".join(substitute_non_alnum(d, "_") for d in directories)
    if base and base != INDEX_NAME:
        route = route.rstrip("/") + "/" + substitute_non_alnum(base, "-")
    return route


def is_within(route: str, ancestor: str) -> bool:
    """Return True if *route* equals *ancestor* or lies below it."""
    if ancestor == ROOT_ROUTE:
        return route.startswith(ROOT_ROUTE)
    return route == ancestor or route.startswith(ancestor + "/")


def relative_segments(route: str, ancestor: str) -> list[str]:
    """Segments of *route* below *ancestor*; empty when they are equal.

    Raises:
        ValueError: If *route* is not within *ancestor*.
    """
    if not is_within(route, ancestor):
        raise ValueError(f"route {route!r} is not within {ancestor!r}")
    remainder = route[len(ancestor) :].strip("/")
    return remainder.split("/") if remainder else []


def parent_route(route: str) -> str | None:
    """Route one level up, or None for the root."""
    stripped = route.rstrip("/")
    if not stripped:
        return None
    head = stripped.rpartition("/")[0]
    return head or ROOT_ROUTE


def route_depth(route: str) -> int:
    """Number of segments in *route* (the root has depth 0)."""
    return len(relative_segments(route, ROOT_ROUTE))
