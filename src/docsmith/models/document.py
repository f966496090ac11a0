"""
Content documents extracted from Markdown sources.

A [ContentDocument][docsmith.models.document.ContentDocument] pairs a
page's front matter with its unrendered body and the route derived from its
location. Documents are immutable once extracted and are the input of the
[tree assembler][docsmith.tree.assembler].
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ._validation import (
    deep_freeze,
    normalize_metadata,
    validate_mapping,
    validate_route,
    validate_str_no_null,
    validate_str_not_empty,
)


PAGE_REQUIRED_KEYS = ("title", "layout")


@dataclass(frozen=True, slots=True)
class ContentDocument:
    """One page: location, route, front matter and Markdown body.

    Attributes:
        source_path: Relative, slash-normalized path of the source file.
        route: Canonical route derived from ``source_path``.
        metadata: Front-matter fields in source order; always contains
            ``title`` and ``layout``.
        body: Markdown source following the front matter, unmodified.

    Note:
        Routes are lower-cased by construction while ``title`` and
        ``layout`` keep the author's casing.
    """

    source_path: str
    route: str
    metadata: Mapping[str, Any] = field(default_factory=dict)
    body: str = ""

    def __post_init__(self) -> None:
        validate_str_no_null(self.source_path, "source_path")
        validate_route(self.route, "route")
        validate_mapping(self.metadata, "metadata")
        validate_str_no_null(self.body, "body")
        metadata = normalize_metadata(self.metadata, "metadata")
        for key in PAGE_REQUIRED_KEYS:
            validate_str_not_empty(metadata.get(key), f"metadata.{key}")
        object.__setattr__(self, "metadata", deep_freeze(metadata))

    @property
    def title(self) -> str:
        return self.metadata["title"]

    @property
    def layout(self) -> str:
        return self.metadata["layout"]
