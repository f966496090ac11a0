"""
Nodes of the assembled page tree.

The tree is owned top-down: each [PageNode][docsmith.models.page.PageNode]
holds its children and nothing points back to a parent. Ancestor lookups
(breadcrumbs, active-section highlighting) walk down from the root by route
prefix instead; see [docsmith.tree.navigation][].

See Also:
    [assemble()][docsmith.tree.assembler.assemble]: Builds the tree.
    [to_structured()][docsmith.core.serializer.to_structured]: Serializes a
        node with its metadata, ``link`` and ``children`` fields.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from ._validation import deep_freeze, normalize_metadata, validate_mapping, validate_route
from .constants import CHILDREN_KEY, LINK_KEY


@dataclass(frozen=True, slots=True)
class PageNode:
    """Immutable page tree node.

    Attributes:
        route: Canonical route of the page.
        metadata: The page's front matter, in source order.
        children: Direct child pages, in input order.

    Examples:
        ```python
        leaf = PageNode("/guide/setup", {"title": "Setup", "layout": "Page"})
        guide = PageNode("/guide", {"title": "Guide", "layout": "Page"}, (leaf,))
        [node.route for node in guide.walk()]  # ['/guide', '/guide/setup']
        ```
    """

    route: str
    metadata: Mapping[str, Any] = field(default_factory=dict)
    children: tuple[PageNode, ...] = ()

    def __post_init__(self) -> None:
        validate_route(self.route, "route")
        validate_mapping(self.metadata, "metadata")
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, PageNode):
                raise TypeError(f"children must contain PageNode, got {type(child).__name__}")
        object.__setattr__(self, "metadata", deep_freeze(normalize_metadata(self.metadata, "metadata")))
        object.__setattr__(self, "children", children)

    @property
    def title(self) -> str | None:
        return self.metadata.get("title")

    @property
    def layout(self) -> str | None:
        return self.metadata.get("layout")

    def walk(self) -> Iterator[PageNode]:
        """Yield this node and every descendant, depth-first pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    @classmethod
    def from_structured(cls, value: Mapping[str, Any]) -> PageNode:
        """Rebuild a node from its serialized form.

        ``link`` becomes the route, ``children`` is rebuilt recursively and
        every other key is kept as metadata (already camelCased).

        Raises:
            ValueError: If ``link`` is missing.
            TypeError: If ``children`` is not a list.
        """
        validate_mapping(value, "value")
        if LINK_KEY not in value:
            raise ValueError(f"value is missing {LINK_KEY!r}")
        children = value.get(CHILDREN_KEY, [])
        if not isinstance(children, list | tuple):
            raise TypeError(f"{CHILDREN_KEY} must be a list, got {type(children).__name__}")
        metadata = {k: v for k, v in value.items() if k not in (LINK_KEY, CHILDREN_KEY)}
        return cls(
            route=value[LINK_KEY],
            metadata=metadata,
            children=tuple(cls.from_structured(child) for child in children),
        )
