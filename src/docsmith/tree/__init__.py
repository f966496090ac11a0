"""Page tree assembly and navigation queries.

Attributes:
    assemble_tree: Build the page tree from every content document.
        See [assemble_tree()][docsmith.tree.assembler.assemble_tree].
    assemble: Nest documents under an explicit root.
    breadcrumbs: Root-to-page trail for a route.
    find_page: Look up a page by exact route.
    is_page_active: Active / active-section test for navigation items.
    route_from_uri: Current route from an absolute URI.
"""

from .assembler import assemble, assemble_tree
from .navigation import breadcrumbs, find_page, is_page_active, route_from_uri


__all__ = [
    "assemble",
    "assemble_tree",
    "breadcrumbs",
    "find_page",
    "is_page_active",
    "route_from_uri",
]
