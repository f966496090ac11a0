"""
Unit tests for core.rendering module.

Tests:
- MarkdownRenderer output and extension handling
- Per-document reset of renderer state
- Renderer protocol conformance
"""

from docsmith.core.rendering import DEFAULT_EXTENSIONS, MarkdownRenderer, Renderer


class UpperRenderer:
    def render(self, text: str) -> str:
        return text.upper()


# =============================================================================
# MarkdownRenderer Tests
# =============================================================================


class TestMarkdownRenderer:
    """MarkdownRenderer behavior."""

    def test_heading_and_paragraph(self) -> None:
        html = MarkdownRenderer().render("# Hello\n\nWorld")
        assert html == '<h1 id="hello">Hello</h1>\n<p>World</p>'

    def test_empty_body(self) -> None:
        assert MarkdownRenderer().render("") == ""

    def test_emphasis(self) -> None:
        assert MarkdownRenderer().render("*Nothing* yet.") == "<p><em>Nothing</em> yet.</p>"

    def test_tables_from_extra(self) -> None:
        html = MarkdownRenderer().render("| a | b |\n|---|---|\n| 1 | 2 |\n")
        assert "<table>" in html
        assert "<td>1</td>" in html

    def test_state_reset_between_documents(self) -> None:
        renderer = MarkdownRenderer()
        text = "Claim[^1].\n\n[^1]: Source.\n"
        assert renderer.render(text) == renderer.render(text)

    def test_no_extensions(self) -> None:
        assert MarkdownRenderer(extensions=()).render("# Hello") == "<h1>Hello</h1>"

    def test_extension_configs(self) -> None:
        renderer = MarkdownRenderer(extensions=["toc"], extension_configs={"toc": {"permalink": True}})
        assert 'class="headerlink"' in renderer.render("# Hello")

    def test_extensions_property(self) -> None:
        assert MarkdownRenderer().extensions == list(DEFAULT_EXTENSIONS)


# =============================================================================
# Protocol Tests
# =============================================================================


class TestRendererProtocol:
    """Renderer structural typing."""

    def test_markdown_renderer_conforms(self) -> None:
        assert isinstance(MarkdownRenderer(), Renderer)

    def test_custom_renderer_conforms(self) -> None:
        assert isinstance(UpperRenderer(), Renderer)

    def test_non_renderer(self) -> None:
        assert not isinstance(object(), Renderer)
