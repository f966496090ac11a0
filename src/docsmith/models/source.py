"""
Raw input files handed over by the host build.

A [SourceFile][docsmith.models.source.SourceFile] is the unit the host
supplies: a stable, project-relative path plus the already-read text. The
core never opens files itself.

See Also:
    [partition_sources()][docsmith.pipeline.generator.partition_sources]:
        Splits a mixed list of inputs into the config file and the content
        files.
    [load_document()][docsmith.core.frontmatter.load_document]: Turns a
        content source into a
        [ContentDocument][docsmith.models.document.ContentDocument].
"""

from __future__ import annotations

from dataclasses import dataclass

from ._validation import validate_str_no_null


def normalize_path(path: str) -> str:
    """Return *path* with ``/`` separators and no leading ``./`` or ``/``."""
    normalized = path.replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized.lstrip("/")


@dataclass(frozen=True, slots=True)
class SourceFile:
    """One input file: project-relative path and raw text.

    Attributes:
        path: Relative path, slash-normalized on construction
            (``guide\\Setup.md`` becomes ``guide/Setup.md``).
        text: Raw file contents.
    """

    path: str
    text: str

    def __post_init__(self) -> None:
        validate_str_no_null(self.path, "path")
        validate_str_no_null(self.text, "text")
        object.__setattr__(self, "path", normalize_path(self.path))

    @classmethod
    def from_absolute(cls, full_path: str, project_dir: str, text: str) -> SourceFile:
        """Build a source from an absolute path by stripping the project directory.

        Paths outside ``project_dir`` are kept as given (minus leading
        separators).
        """
        full = full_path.replace("\\", "/")
        base = project_dir.replace("\\", "/").rstrip("/")
        if base and (full == base or full.startswith(base + "/")):
            full = full[len(base) :]
        return cls(path=full, text=text)

    @property
    def name(self) -> str:
        """File name including extension."""
        return self.path.rpartition("/")[2]
