"""Generation pipeline: options, artifact emission and run orchestration.

Re-exports all public symbols::

    from docsmith.pipeline import Generator, GenerationOptions
"""

from .configs import GenerationOptions, MarkdownConfig
from .emitter import ArtifactEmitter, emit_config, emit_page, full_title
from .generator import Generator, partition_sources


__all__ = [
    "ArtifactEmitter",
    "GenerationOptions",
    "Generator",
    "MarkdownConfig",
    "emit_config",
    "emit_page",
    "full_title",
    "partition_sources",
]
