"""
Structured-data serialization of the config and page tree.

Converts [PageNode][docsmith.models.page.PageNode] trees and
[ConfigDocument][docsmith.models.config.ConfigDocument] values into plain
JSON-compatible data with **camelCase** keys, whatever casing the authors
used in YAML (``short_title``, ``short-title``, ``ShortTitle`` all become
``shortTitle``). Page nodes carry their route under ``link`` and their
children as a nested ``children`` list:

```json
{
  "title": "Home",
  "layout": "Page",
  "link": "/",
  "children": [{"title": "Guide", "layout": "Page", "link": "/guide", "children": []}]
}
```

Key order follows source order and JSON is written with fixed settings, so
identical input always yields byte-identical text.

See Also:
    [PageNode.from_structured()][docsmith.models.page.PageNode.from_structured]:
        Inverse of [to_structured()][docsmith.core.serializer.to_structured]
        for page nodes.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from docsmith.models import ConfigDocument, PageNode
from docsmith.models.constants import CHILDREN_KEY, LINK_KEY

from .exceptions import SerializationError


_WORD_SEPARATORS = re.compile(r"[_\-\s]+")


def _lower_leading(word: str) -> str:
    """Lower-case the leading capital run (``URLPath`` -> ``urlPath``)."""
    chars = list(word)
    for i, ch in enumerate(chars):
        if not ch.isupper():
            break
        # Keep the capital that starts the next word
        if i > 0 and i + 1 < len(chars) and not chars[i + 1].isupper():
            break
        chars[i] = ch.lower()
    return "".join(chars)


def camel_case(key: str) -> str:
    """Convert *key* to camelCase.

    Examples:
        ```python
        camel_case("short_title")  # 'shortTitle'
        camel_case("logo-path")    # 'logoPath'
        camel_case("ShortTitle")   # 'shortTitle'
        camel_case("shortTitle")   # 'shortTitle'
        ```
    """
    words = [w for w in _WORD_SEPARATORS.split(key) if w]
    if not words:
        return key
    head, *rest = words
    return _lower_leading(head) + "".join(w[0].upper() + w[1:] for w in rest)


def _camel_mapping(mapping: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    origin: dict[str, str] = {}
    for key, value in mapping.items():
        converted = camel_case(key)
        if converted in result:
            raise SerializationError(
                f"keys {origin[converted]!r} and {key!r} both serialize to {converted!r}"
            )
        origin[converted] = key
        result[converted] = to_structured(value)
    return result


def to_structured(value: Any) -> Any:
    """Convert *value* into JSON-compatible data with camelCase keys.

    Accepts page nodes, config documents, mappings, sequences and scalars
    (``str``, ``int``, ``float``, ``bool``, ``None``).

    Raises:
        SerializationError: On camelCase key collisions, metadata keys that
            shadow ``link``/``children``, or unsupported value types.
    """
    if isinstance(value, PageNode):
        result = _camel_mapping(value.metadata)
        for reserved in (LINK_KEY, CHILDREN_KEY):
            if reserved in result:
                raise SerializationError(
                    f"page {value.route!r} metadata shadows the reserved key {reserved!r}"
                )
        result[LINK_KEY] = value.route
        result[CHILDREN_KEY] = [to_structured(child) for child in value.children]
        return result

    if isinstance(value, ConfigDocument):
        return _camel_mapping(value.data)

    if isinstance(value, Mapping):
        return _camel_mapping(value)

    if isinstance(value, list | tuple):
        return [to_structured(item) for item in value]

    if value is None or isinstance(value, str | int | float | bool):
        return value

    raise SerializationError(f"cannot serialize value of type {type(value).__name__}")


def dumps(value: Any) -> str:
    """Serialize *value* to deterministic JSON text.

    Raises:
        SerializationError: See [to_structured()][docsmith.core.serializer.to_structured];
            also raised for non-finite floats.
    """
    structured = to_structured(value)
    try:
        return json.dumps(structured, ensure_ascii=False, indent=2, allow_nan=False)
    except ValueError as e:
        raise SerializationError(str(e)) from e


def load_tree(text: str) -> PageNode:
    """Parse serialized tree text back into a [PageNode][docsmith.models.page.PageNode]."""
    return PageNode.from_structured(json.loads(text))
