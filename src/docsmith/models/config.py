"""
Project-level configuration document.

One [ConfigDocument][docsmith.models.config.ConfigDocument] is parsed per
generation run from the host's configuration file (``Docs.yaml`` by
default). Only ``title`` and ``theme`` are interpreted; every other key is
carried opaquely to the serialized config so themes can define their own
settings (``logo_path``, for example).

See Also:
    [parse_config()][docsmith.core.frontmatter.parse_config]: Builds this
        model from raw YAML text.
    [to_structured()][docsmith.core.serializer.to_structured]: Serializes it
        with camelCase keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ._validation import (
    deep_freeze,
    normalize_metadata,
    validate_mapping,
    validate_str_no_null,
    validate_str_not_empty,
)


CONFIG_REQUIRED_KEYS = ("title", "theme")


@dataclass(frozen=True, slots=True)
class ConfigDocument:
    """Immutable project configuration.

    Attributes:
        source_path: Relative path of the configuration file.
        data: Every key of the configuration, in source order.

    Examples:
        ```python
        config = ConfigDocument("Docs.yaml", {"title": "Docs", "theme": "Primer"})
        config.title  # 'Docs'
        config.extra  # {}
        ```
    """

    source_path: str
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        validate_str_no_null(self.source_path, "source_path")
        validate_mapping(self.data, "data")
        data = normalize_metadata(self.data, "data")
        for key in CONFIG_REQUIRED_KEYS:
            validate_str_not_empty(data.get(key), f"data.{key}")
        object.__setattr__(self, "data", deep_freeze(data))

    @property
    def title(self) -> str:
        """Site title, appended to page titles."""
        return self.data["title"]

    @property
    def theme(self) -> str:
        """Theme name used to resolve page layouts."""
        return self.data["theme"]

    @property
    def extra(self) -> dict[str, Any]:
        """Keys other than ``title`` and ``theme``, in source order."""
        return {k: v for k, v in self.data.items() if k not in CONFIG_REQUIRED_KEYS}
