"""Shared validation helpers for frozen dataclass models.

Private module -- not part of the public API. Used by ``__post_init__``
methods in sibling model modules and by the front-matter extractor to
enforce runtime type constraints and deep immutability of metadata.
"""

from __future__ import annotations

import datetime
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


_DEFAULT_MAX_DEPTH: int = 50


def validate_instance(value: Any, expected: type, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an instance of *expected*."""
    if not isinstance(value, expected):
        article = "an" if expected.__name__[0] in "AEIOUaeiou" else "a"
        raise TypeError(f"{name} must be {article} {expected.__name__}, got {type(value).__name__}")


def validate_str_no_null(value: Any, name: str) -> None:
    """Raise if *value* is not a ``str`` or contains null bytes."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    if "\x00" in value:
        raise ValueError(f"{name} contains null bytes")


def validate_str_not_empty(value: Any, name: str) -> None:
    """Raise if *value* is not a non-empty ``str`` without null bytes."""
    validate_str_no_null(value, name)
    if not value.strip():
        raise ValueError(f"{name} must not be empty")


def validate_mapping(value: Any, name: str) -> None:
    """Raise ``TypeError`` if *value* is not a ``Mapping``."""
    if not isinstance(value, Mapping):
        raise TypeError(f"{name} must be a Mapping, got {type(value).__name__}")


def validate_route(value: Any, name: str) -> None:
    """Raise if *value* is not a route string starting with ``/``."""
    validate_str_no_null(value, name)
    if not value.startswith("/"):
        raise ValueError(f"{name} must start with '/', got {value!r}")


def normalize_metadata(
    obj: Any,
    name: str,
    *,
    max_depth: int = _DEFAULT_MAX_DEPTH,
    _depth: int = 0,
) -> Any:
    """Recursively coerce a parsed YAML value into the metadata value union.

    The union is ``str | int | float | bool | None | list | dict``:

    * Dates and datetimes become ISO-8601 strings.
    * Tuples become lists.
    * Mapping keys must be strings; key order is preserved.

    Args:
        obj: The value to normalize.
        name: Field name for error messages.
        max_depth: Maximum nesting depth (defaults to 50).
        _depth: Current recursion depth (internal use).

    Returns:
        A plain, JSON-compatible copy of *obj*.

    Raises:
        TypeError: For non-string keys or unsupported value types.
        ValueError: For non-finite floats, null bytes or excessive nesting.
    """
    if _depth > max_depth:
        raise ValueError(f"{name} is nested deeper than {max_depth} levels")

    if obj is None or isinstance(obj, bool | int):
        return obj

    if isinstance(obj, float):
        if not math.isfinite(obj):
            raise ValueError(f"{name} contains a non-finite number")
        return obj

    if isinstance(obj, str):
        if "\x00" in obj:
            raise ValueError(f"{name} contains null bytes")
        return obj

    if isinstance(obj, datetime.date):
        return obj.isoformat()

    if isinstance(obj, Mapping):
        result: dict[str, Any] = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"{name} keys must be str, got {type(key).__name__}")
            result[key] = normalize_metadata(
                value, f"{name}.{key}", max_depth=max_depth, _depth=_depth + 1
            )
        return result

    if isinstance(obj, list | tuple):
        return [
            normalize_metadata(item, f"{name}[{i}]", max_depth=max_depth, _depth=_depth + 1)
            for i, item in enumerate(obj)
        ]

    raise TypeError(f"{name} has unsupported type {type(obj).__name__}")


def deep_freeze(obj: Any) -> Any:
    """Recursively wrap dicts with ``MappingProxyType`` and turn lists into tuples."""
    if isinstance(obj, Mapping):
        return MappingProxyType({k: deep_freeze(v) for k, v in obj.items()})
    if isinstance(obj, list | tuple):
        return tuple(deep_freeze(item) for item in obj)
    return obj
