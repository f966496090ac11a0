"""YAML loading for docsmith.

Provides safe YAML loading using ``yaml.safe_load`` to prevent arbitrary
code execution from untrusted YAML content. Used for generation option
files ([Generator.from_yaml()][docsmith.pipeline.generator.Generator.from_yaml])
and, through [parse_yaml_text()][docsmith.core.yaml.parse_yaml_text], for
front matter and the project configuration document.
[parse_yaml_scalars()][docsmith.core.yaml.parse_yaml_scalars] recovers the
source spelling of scalars.

Examples:
    ```python
    from docsmith.core.yaml import load_yaml

    options = load_yaml("docsmith.yaml")
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(config_path: str) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a nested dictionary. Returns an empty dict
        if the file exists but contains no data.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.

    Warning:
        This function does not validate the structure of the returned
        dictionary. Callers pass the result to
        [GenerationOptions][docsmith.pipeline.configs.GenerationOptions]
        for schema validation.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def parse_yaml_text(text: str) -> Any:
    """Parse an in-memory YAML document with ``yaml.safe_load``.

    Returns ``None`` for an empty document. ``yaml.YAMLError`` propagates
    to the caller, which decides how to report it.
    """
    return yaml.safe_load(text)


def parse_yaml_scalars(text: str) -> Any:
    """Parse *text* with ``yaml.BaseLoader``, keeping every scalar as its source string.

    ``Yes`` stays ``"Yes"`` rather than ``True``, and ``1.0`` stays
    ``"1.0"``. No tags are resolved, so this is as safe as ``yaml.safe_load``.
    """
    return yaml.load(text, Loader=yaml.BaseLoader)  # noqa: S506
