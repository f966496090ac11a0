"""Generation option models.

One [GenerationOptions][docsmith.pipeline.configs.GenerationOptions] value
is constructed at the start of a run and handed explicitly to every stage;
there is no module-level state.

Examples:
    ```yaml
    root_namespace: Acme.Docs
    config_artifact_id: AcmeDocsData
    max_workers: 8
    markdown:
      extensions: [extra, toc]
      extension_configs:
        toc:
          permalink: true
    ```

See Also:
    [Generator][docsmith.pipeline.generator.Generator]: Consumes these
        options.
    [load_yaml()][docsmith.core.yaml.load_yaml]: Loads option files.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

from docsmith.core.rendering import DEFAULT_EXTENSIONS
from docsmith.models.constants import DEFAULT_CONFIG_ARTIFACT_ID, DEFAULT_ROOT_NAMESPACE


_NAMESPACE_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class MarkdownConfig(BaseModel):
    """Settings for the Python-Markdown renderer.

    See Also:
        [MarkdownRenderer][docsmith.core.rendering.MarkdownRenderer]: Built
            from these settings once per run.
    """

    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="Python-Markdown extension names",
    )
    extension_configs: dict[str, dict[str, Any]] = Field(
        default_factory=dict, description="Per-extension configuration"
    )


class GenerationOptions(BaseModel):
    """Options for one generation run.

    See Also:
        [MarkdownConfig][docsmith.pipeline.configs.MarkdownConfig]: Embedded
            renderer settings.
    """

    root_namespace: str = Field(
        default=DEFAULT_ROOT_NAMESPACE,
        description="Dotted label prefixed to every page namespace",
    )
    config_artifact_id: str = Field(
        default=DEFAULT_CONFIG_ARTIFACT_ID,
        min_length=1,
        description="Artifact id of the combined config + tree artifact",
    )
    config_filename: str = Field(
        default="Docs.yaml", min_length=1, description="File name suffix of the project config"
    )
    content_suffix: str = Field(default=".md", description="Suffix of content documents")
    max_workers: int = Field(
        default=4, ge=1, le=64, description="Threads used for per-document extraction"
    )
    log_json: bool = Field(default=False, description="Emit JSON log lines")
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)

    @field_validator("root_namespace")
    @classmethod
    def _validate_root_namespace(cls, v: str) -> str:
        if not _NAMESPACE_RE.match(v):
            raise ValueError(f"root_namespace must be a dotted identifier, got {v!r}")
        return v

    @field_validator("content_suffix")
    @classmethod
    def _validate_content_suffix(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"content_suffix must look like '.md', got {v!r}")
        return v
