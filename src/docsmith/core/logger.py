"""
Structured logging with key=value and JSON output support.

Wraps the standard library ``logging`` module so that generation events
carry their context as fields rather than interpolated text. Two formats
are supported: human-readable key=value pairs (default) and one JSON
object per line for build systems that ingest machine-readable logs.

Values containing spaces, equals signs, or quotes are escaped and wrapped
in double quotes. Long values (rendered HTML, for example) are truncated
to a configurable maximum length.

``StructuredFormatter`` reads the ``structured_kv`` extra field attached by
``Logger`` and appends it as key=value pairs. Installed on a root handler
it also formats the plain ``logging.getLogger(__name__)`` calls made by
the lower layers.

Examples:
    ```python
    from docsmith.core.logger import Logger

    logger = Logger("docsmith")
    logger.info("tree_assembled", pages=12, depth=3)
    # Output: tree_assembled pages=12 depth=3

    json_logger = Logger("docsmith", json_output=True)
    json_logger.info("tree_assembled", pages=12)
    # Output: {"timestamp": "...", "level": "info", "logger": "docsmith", ...}
    ```
"""

from __future__ import annotations

import datetime
import json
import logging
from typing import Any, ClassVar


def _truncate(value: str, max_value_length: int | None) -> str:
    if max_value_length and len(value) > max_value_length:
        return value[:max_value_length] + f"...<truncated {len(value) - max_value_length} chars>"
    return value


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Format a dictionary as space-separated key=value pairs.

    Args:
        kwargs: Key-value pairs to format.
        max_value_length: Maximum characters per value before truncation.
            Pass None to disable truncation.
        prefix: String prepended to the output (default: single space).

    Returns:
        Formatted string, e.g. ' route=/guide title="Getting Started"'.
        Returns empty string if kwargs is empty.
    """
    if not kwargs:
        return ""

    parts = []
    for k, v in kwargs.items():
        s = _truncate(str(v), max_value_length)
        if not s or " " in s or "=" in s or '"' in s or "'" in s:
            escaped = s.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'{k}="{escaped}"')
        else:
            parts.append(f"{k}={s}")

    return prefix + " ".join(parts)


class StructuredFormatter(logging.Formatter):
    """Formats log records as ``level logger message key=value ...``.

    Records without ``structured_kv`` are emitted with the same prefix so
    output from ``Logger`` and plain stdlib loggers lines up.
    """

    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        extra: dict[str, Any] = getattr(record, "structured_kv", {})
        if extra:
            base += format_kv_pairs(extra)
        return base


class Logger:
    """Structured logger that attaches keyword arguments as fields.

    All public methods mirror the standard logging API with an added
    ``**kwargs`` parameter.

    Examples:
        ```python
        logger = Logger("docsmith")
        logger.info("documents_loaded", count=8)
        logger.error("generation_failed", error="route '/' is missing")
        ```
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(
        self,
        name: str,
        *,
        json_output: bool = False,
        max_value_length: int | None = None,
    ) -> None:
        """Initialize a structured logger.

        Args:
            name: Logger name passed to ``logging.getLogger``.
            json_output: If True, emit JSON objects instead of key=value pairs.
            max_value_length: Maximum character length for individual values
                before truncation. Defaults to 1000.
        """
        if max_value_length is None:
            max_value_length = self._DEFAULT_MAX_VALUE_LENGTH
        self._logger = logging.getLogger(name)
        self._json_output = json_output
        self._max_value_length = max_value_length

    @property
    def name(self) -> str:
        return self._logger.name

    def _format_json(self, msg: str, level: str, kwargs: dict[str, Any]) -> str:
        record = {
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
            "level": level,
            "logger": self._logger.name,
            "message": msg,
            **kwargs,
        }
        return json.dumps(record, default=str)

    def _make_extra(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        """Build the ``extra`` dict, pre-truncating values for the formatter."""
        if not kwargs:
            return {}
        truncated = {
            k: _truncate(str(v), self._max_value_length)
            if self._max_value_length and len(str(v)) > self._max_value_length
            else v
            for k, v in kwargs.items()
        }
        return {"structured_kv": truncated}

    def _log(self, level: int, msg: str, kwargs: dict[str, Any], *, exc_info: bool = False) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if self._json_output:
            name = logging.getLevelName(level).lower()
            self._logger.log(level, self._format_json(msg, name, kwargs), exc_info=exc_info)
        else:
            self._logger.log(level, msg, extra=self._make_extra(kwargs), exc_info=exc_info)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log a DEBUG level message with optional key=value pairs."""
        self._log(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log an INFO level message with optional key=value pairs."""
        self._log(logging.INFO, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with optional key=value pairs."""
        self._log(logging.ERROR, msg, kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with the active exception's traceback."""
        self._log(logging.ERROR, msg, kwargs, exc_info=True)
