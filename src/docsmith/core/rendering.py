"""
Markdown-to-HTML rendering.

Rendering is a collaborator of the artifact emitter rather than part of
it: anything with a ``render(text) -> str`` method satisfies the
[Renderer][docsmith.core.rendering.Renderer] protocol. The default
[MarkdownRenderer][docsmith.core.rendering.MarkdownRenderer] wraps one
Python-Markdown instance built once per generation run and reset between
documents.

Examples:
    ```python
    renderer = MarkdownRenderer()
    renderer.render("# Hello\\n\\nWorld")
    # '<h1 id="hello">Hello</h1>\\n<p>World</p>'
    ```
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

import markdown


DEFAULT_EXTENSIONS: tuple[str, ...] = ("extra", "toc", "sane_lists", "admonition")


@runtime_checkable
class Renderer(Protocol):
    """Converts a Markdown body into HTML markup."""

    def render(self, text: str) -> str: ...


class MarkdownRenderer:
    """Python-Markdown backed [Renderer][docsmith.core.rendering.Renderer].

    Not thread-safe: the underlying ``markdown.Markdown`` instance keeps
    per-document state until ``reset()``.

    Args:
        extensions: Extension names passed to ``markdown.Markdown``.
        extension_configs: Per-extension settings.
    """

    def __init__(
        self,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        extension_configs: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        self._extensions = list(extensions)
        self._md = markdown.Markdown(
            extensions=self._extensions,
            extension_configs={k: dict(v) for k, v in (extension_configs or {}).items()},
            output_format="html",
        )

    @property
    def extensions(self) -> list[str]:
        return list(self._extensions)

    def render(self, text: str) -> str:
        """Render *text*; surrounding newlines are trimmed from the result."""
        try:
            html = self._md.convert(text)
        finally:
            self._md.reset()
        return html.strip("\r\n")
