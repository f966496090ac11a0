"""Core layer: extraction, serialization, rendering and shared infrastructure.

Sits above ``docsmith.models`` and below ``docsmith.pipeline``.

Attributes:
    extract: Split a content document into front matter and body.
        See [extract()][docsmith.core.frontmatter.extract].
    parse_config: Parse the project configuration document.
    load_document: Extract a source and attach its derived route.
    to_structured / dumps: camelCase structured data and deterministic JSON.
        See [docsmith.core.serializer][].
    MarkdownRenderer: Python-Markdown backed body renderer.
    Logger: Structured logger supporting key=value and JSON output modes.
    load_yaml: Safe YAML loading with ``yaml.safe_load()``.
    DocsmithError: Root of the exception hierarchy in
        [docsmith.core.exceptions][].
"""

from .exceptions import (
    ConfigurationError,
    DocsmithError,
    DuplicateArtifactError,
    DuplicateRouteError,
    MalformedDocumentError,
    MissingRootError,
    OrphanPageError,
    SerializationError,
    TreeError,
)
from .frontmatter import extract, load_document, parse_config, parse_metadata, split_front_matter
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .rendering import DEFAULT_EXTENSIONS, MarkdownRenderer, Renderer
from .serializer import camel_case, dumps, load_tree, to_structured
from .yaml import load_yaml, parse_yaml_text


__all__ = [
    "DEFAULT_EXTENSIONS",
    "ConfigurationError",
    "DocsmithError",
    "DuplicateArtifactError",
    "DuplicateRouteError",
    "Logger",
    "MalformedDocumentError",
    "MarkdownRenderer",
    "MissingRootError",
    "OrphanPageError",
    "Renderer",
    "SerializationError",
    "StructuredFormatter",
    "TreeError",
    "camel_case",
    "dumps",
    "extract",
    "format_kv_pairs",
    "load_document",
    "load_tree",
    "load_yaml",
    "parse_config",
    "parse_metadata",
    "parse_yaml_text",
    "split_front_matter",
    "to_structured",
]
