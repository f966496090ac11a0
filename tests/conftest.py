"""
Pytest configuration and shared fixtures for docsmith tests.

Provides:
- Logging configuration for the test session
- Builders for content-document text and parsed documents
- A small sample project (config + pages) as ``SourceFile`` values
"""

import logging
from collections.abc import Callable
from typing import Any

import pytest
import yaml

from docsmith.core.frontmatter import load_document
from docsmith.models import ConfigDocument, ContentDocument, SourceFile


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Builders
# ============================================================================


def _page_text(title: str, layout: str = "Page", body: str = "", **extra: Any) -> str:
    metadata = {"title": title, "layout": layout, **extra}
    block = yaml.safe_dump(metadata, sort_keys=False, allow_unicode=True)
    return f"---\n{block}---\n{body}"


@pytest.fixture
def page_text() -> Callable[..., str]:
    """Build the raw text of a content document with front matter."""
    return _page_text


@pytest.fixture
def make_document() -> Callable[..., ContentDocument]:
    """Build a ContentDocument from a path and front-matter fields."""

    def _make(path: str, title: str | None = None, layout: str = "Page", body: str = "", **extra: Any) -> ContentDocument:
        return load_document(SourceFile(path, _page_text(title or path, layout, body, **extra)))

    return _make


# ============================================================================
# Sample Project
# ============================================================================


@pytest.fixture
def config_source() -> SourceFile:
    """Project configuration file."""
    return SourceFile("Docs.yaml", "title: Acme Docs\ntheme: Primer\nlogo_path: /img/logo.svg\n")


@pytest.fixture
def config_document(config_source: SourceFile) -> ConfigDocument:
    """Parsed project configuration."""
    return ConfigDocument(
        source_path=config_source.path,
        data={"title": "Acme Docs", "theme": "Primer", "logo_path": "/img/logo.svg"},
    )


@pytest.fixture
def content_sources() -> list[SourceFile]:
    """A project with a home page, one section with a sub-page, and a leaf page."""
    return [
        SourceFile("index.md", _page_text("Acme Docs", "Home", "# Welcome\n")),
        SourceFile("guide/index.md", _page_text("Guide", body="Start here.\n", short_title="Guide")),
        SourceFile("guide/Getting-Started.md", _page_text("Getting Started", body="Install it.\n")),
        SourceFile("faq.md", _page_text("FAQ", body="*Nothing* yet.\n")),
    ]


@pytest.fixture
def project_sources(config_source: SourceFile, content_sources: list[SourceFile]) -> list[SourceFile]:
    """Config and content files mixed with an unrelated file."""
    return [content_sources[0], config_source, SourceFile("img/logo.svg", "<svg/>"), *content_sources[1:]]
