"""
Front-matter extraction for content documents and the project config.

A content document starts with a YAML metadata block fenced by ``---``
lines; everything after the closing fence is the Markdown body:

```text
---
title: Getting Started
layout: Page
short_title: Start
---
# Getting Started
...
```

The closing fence may also be ``...`` (the YAML end-of-document marker). A
leading UTF-8 byte-order mark is ignored. The project configuration is a
plain YAML document with no fences.

All functions here are pure over their input text and raise
[MalformedDocumentError][docsmith.core.exceptions.MalformedDocumentError]
naming the offending source.

See Also:
    [parse_yaml_text()][docsmith.core.yaml.parse_yaml_text]: The
        ``yaml.safe_load`` wrapper used for both block types.
    [derive_route()][docsmith.utils.routes.derive_route]: Combined with
        extraction in [load_document()][docsmith.core.frontmatter.load_document].
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any

import yaml

from docsmith.models import ConfigDocument, ContentDocument, SourceFile
from docsmith.models._validation import normalize_metadata
from docsmith.models.config import CONFIG_REQUIRED_KEYS
from docsmith.models.constants import RESERVED_PAGE_KEYS
from docsmith.models.document import PAGE_REQUIRED_KEYS
from docsmith.utils.routes import derive_route

from .exceptions import MalformedDocumentError
from .yaml import parse_yaml_scalars, parse_yaml_text


FENCE = "---"
CLOSING_FENCES = ("---", "...")
_BOM = "\ufeff"


def split_front_matter(raw_text: str, *, source: str = "<string>") -> tuple[str, str]:
    """Split *raw_text* into the raw metadata block and the body.

    Raises:
        MalformedDocumentError: If the text does not open with a fence line
            or the block is never closed.
    """
    text = raw_text[1:] if raw_text.startswith(_BOM) else raw_text
    lines = text.splitlines(keepends=True)

    if not lines or lines[0].rstrip() != FENCE:
        raise MalformedDocumentError(source, f"document does not start with a {FENCE!r} metadata block")

    for index in range(1, len(lines)):
        if lines[index].rstrip() in CLOSING_FENCES:
            return "".join(lines[1:index]), "".join(lines[index + 1 :])

    raise MalformedDocumentError(source, "metadata block is not terminated")


def parse_metadata(
    block: str,
    *,
    source: str = "<string>",
    required: Collection[str] = (),
    reserved: Collection[str] = (),
) -> dict[str, Any]:
    """Parse a YAML key-value block into a metadata mapping.

    Args:
        block: YAML text of the block (without fences).
        source: Label used in error messages.
        required: Keys that must be present with a non-empty scalar value.
            Non-string scalars are replaced by their YAML source text.
        reserved: Keys that must not appear.

    Returns:
        The normalized metadata in source order (see
        [normalize_metadata()][docsmith.models._validation.normalize_metadata]).

    Raises:
        MalformedDocumentError: If the block is not valid YAML, is not a
            mapping, holds unsupported values, or violates ``required`` /
            ``reserved``.
    """
    try:
        data = parse_yaml_text(block)
    except yaml.YAMLError as e:
        raise MalformedDocumentError(source, f"invalid YAML in metadata block: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedDocumentError(
            source, f"metadata block must be a key-value mapping, got {type(data).__name__}"
        )

    try:
        metadata: dict[str, Any] = normalize_metadata(data, "metadata")
    except (TypeError, ValueError) as e:
        raise MalformedDocumentError(source, str(e)) from e

    clashes = [key for key in metadata if key in reserved]
    if clashes:
        raise MalformedDocumentError(source, f"reserved keys in metadata block: {', '.join(clashes)}")

    scalars: dict[str, Any] | None = None
    for key in required:
        value = metadata.get(key)
        if value is None:
            raise MalformedDocumentError(source, f"required key {key!r} is missing")
        if isinstance(value, dict | list):
            raise MalformedDocumentError(
                source, f"required key {key!r} must be a scalar, got {type(value).__name__}"
            )
        if not isinstance(value, str):
            # Keep the author's spelling: "Yes" not "True", "1.50" not "1.5".
            if scalars is None:
                scalars = _source_scalars(block)
            spelled = scalars.get(key)
            metadata[key] = spelled if isinstance(spelled, str) else str(value)
        if not metadata[key].strip():
            raise MalformedDocumentError(source, f"required key {key!r} is empty")

    return metadata


def _source_scalars(block: str) -> dict[str, Any]:
    data = parse_yaml_scalars(block)
    return data if isinstance(data, dict) else {}


def extract(
    raw_text: str,
    *,
    source: str = "<string>",
    required: Collection[str] = PAGE_REQUIRED_KEYS,
) -> tuple[dict[str, Any], str]:
    """Extract ``(metadata, body)`` from a content document.

    The body is returned exactly as it appears after the closing fence.
    ``link`` and ``children`` are reserved for the page tree and rejected.
    """
    block, body = split_front_matter(raw_text, source=source)
    metadata = parse_metadata(block, source=source, required=required, reserved=RESERVED_PAGE_KEYS)
    return metadata, body


def parse_config(raw_text: str, *, source: str = "Docs.yaml") -> ConfigDocument:
    """Parse the project configuration document (plain YAML, no fences)."""
    text = raw_text[1:] if raw_text.startswith(_BOM) else raw_text
    data = parse_metadata(text, source=source, required=CONFIG_REQUIRED_KEYS)
    return ConfigDocument(source_path=source, data=data)


def load_document(source: SourceFile) -> ContentDocument:
    """Extract a content source and attach its derived route.

    This is the per-document unit of work; it shares no state and can run
    on any worker.
    """
    metadata, body = extract(source.text, source=source.path)
    return ContentDocument(
        source_path=source.path,
        route=derive_route(source.path),
        metadata=metadata,
        body=body,
    )
