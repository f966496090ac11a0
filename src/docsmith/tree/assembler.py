"""
Page tree assembly by immediate route parentage.

Given every [ContentDocument][docsmith.models.document.ContentDocument] of
a project, builds one [PageNode][docsmith.models.page.PageNode] tree rooted
at the page with route ``/``. A page is attached to the page exactly one
route segment above it, never to a more distant ancestor:

```text
/                 index.md
├── /guide        guide/index.md
│   └── /guide/setup   guide/setup.md
└── /faq          faq.md
```

The recursion works on shrinking candidate lists: a parent scans its
candidates for routes one segment deeper, and each child recurses over the
candidates that lie under its own route. Sibling order is input order.

Every failure is fatal to the run:

* two documents with the same route ->
  [DuplicateRouteError][docsmith.core.exceptions.DuplicateRouteError]
* no document with route ``/`` ->
  [MissingRootError][docsmith.core.exceptions.MissingRootError]
* a page whose intermediate parent page does not exist (``/a/b`` without
  ``/a``) -> [OrphanPageError][docsmith.core.exceptions.OrphanPageError]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from docsmith.core.exceptions import DuplicateRouteError, MissingRootError, OrphanPageError
from docsmith.models import ContentDocument, PageNode
from docsmith.models.constants import ROOT_ROUTE
from docsmith.utils.routes import is_within, relative_segments


logger = logging.getLogger(__name__)


def _check_unique_routes(documents: Sequence[ContentDocument]) -> None:
    paths_by_route: dict[str, list[str]] = {}
    for document in documents:
        paths_by_route.setdefault(document.route, []).append(document.source_path)
    for route, paths in paths_by_route.items():
        if len(paths) > 1:
            raise DuplicateRouteError(route, paths)


def _build(
    route: str,
    metadata: Mapping[str, Any],
    candidates: Sequence[ContentDocument],
    consumed: set[str],
) -> PageNode:
    children: list[PageNode] = []
    for document in candidates:
        if len(relative_segments(document.route, route)) != 1:
            continue
        subtree = [
            c for c in candidates if c.route != document.route and is_within(c.route, document.route)
        ]
        consumed.add(document.route)
        children.append(_build(document.route, document.metadata, subtree, consumed))
    return PageNode(route=route, metadata=metadata, children=tuple(children))


def assemble(root: ContentDocument, rest: Sequence[ContentDocument]) -> PageNode:
    """Nest *rest* under *root* by immediate route parentage.

    Args:
        root: The document the tree hangs from (normally route ``/``).
        rest: Every other document, in the order siblings should appear.

    Returns:
        The root [PageNode][docsmith.models.page.PageNode].

    Raises:
        DuplicateRouteError: If two documents (root included) share a route.
        OrphanPageError: If any document of *rest* could not be attached.
    """
    _check_unique_routes([root, *rest])

    candidates = [d for d in rest if is_within(d.route, root.route)]
    consumed: set[str] = set()
    tree = _build(root.route, root.metadata, candidates, consumed)

    orphans = [(d.route, d.source_path) for d in rest if d.route not in consumed]
    if orphans:
        raise OrphanPageError(orphans)

    logger.debug("tree_assembled root=%s pages=%d", root.route, len(consumed) + 1)
    return tree


def assemble_tree(documents: Sequence[ContentDocument]) -> PageNode:
    """Find the root page among *documents* and assemble the full tree.

    Raises:
        DuplicateRouteError: If two documents share a route.
        MissingRootError: If no document resolves to ``/``.
        OrphanPageError: If a document has no parent page.
    """
    _check_unique_routes(documents)

    root = next((d for d in documents if d.route == ROOT_ROUTE), None)
    if root is None:
        raise MissingRootError([d.source_path for d in documents])

    return assemble(root, [d for d in documents if d is not root])
