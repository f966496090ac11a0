"""
Navigation queries over an assembled page tree.

The tree stores no parent pointers, so every ancestor question is answered
by walking down from the root and following the child whose route contains
the current route. These helpers back breadcrumbs and "active section"
highlighting in the presentation layer.

Examples:
    ```python
    route = route_from_uri("https://docs.example.com/guide/setup", "https://docs.example.com/")
    # '/guide/setup'
    [page.title for page in breadcrumbs(root, route)]
    # ['Home', 'Guide', 'Setup']
    ```
"""

from __future__ import annotations

from urllib.parse import urlsplit

from docsmith.models import PageNode
from docsmith.models.constants import ROOT_ROUTE
from docsmith.utils.routes import is_within


def route_from_uri(uri: str, base_uri: str) -> str:
    """Current route of *uri* relative to the site's *base_uri*.

    Query strings and fragments are dropped; a trailing slash is trimmed
    except for the root.
    """
    path = uri[len(base_uri) :] if uri.startswith(base_uri) else urlsplit(uri).path
    path = path.split("#", 1)[0].split("?", 1)[0]
    return ROOT_ROUTE + path.strip("/")


def breadcrumbs(root: PageNode, route: str) -> list[PageNode]:
    """Pages from *root* down to the deepest page containing *route*.

    The walk stops at the deepest match, so an unknown route yields the
    trail of its closest existing ancestor (at least ``[root]``).
    """
    trail = [root]
    current = root
    while current.route != route:
        nxt = next(
            (child for child in current.children if is_within(route, child.route)),
            None,
        )
        if nxt is None:
            break
        trail.append(nxt)
        current = nxt
    return trail


def find_page(root: PageNode, route: str) -> PageNode | None:
    """The page whose route is exactly *route*, or None."""
    page = breadcrumbs(root, route)[-1]
    return page if page.route == route else None


def is_page_active(page: PageNode, route: str, *, allow_parent: bool) -> bool:
    """Whether *page* corresponds to the current *route*.

    With ``allow_parent`` a page is also active when *route* lies below it,
    which is how a navigation section stays highlighted on its sub-pages.
    """
    if allow_parent:
        return is_within(route, page.route)
    return route == page.route
