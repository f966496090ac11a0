"""
Generated output units.

An [EmittedArtifact][docsmith.models.artifact.EmittedArtifact] is write-once
output handed to the host build, which owns its persistence. Keys and
payloads are deterministic, so regenerating an unchanged project produces
byte-identical artifacts.
"""

from __future__ import annotations

from dataclasses import dataclass

from ._validation import validate_instance, validate_str_no_null, validate_str_not_empty
from .constants import ArtifactKind


@dataclass(frozen=True, slots=True)
class EmittedArtifact:
    """A named, serialized output.

    Attributes:
        artifact_id: Globally unique key of the artifact.
        payload: JSON text consumed by the presentation runtime.
        kind: Whether this is the config artifact or a page artifact.
        source: Path of the input the artifact was produced from.
    """

    artifact_id: str
    payload: str
    kind: ArtifactKind = ArtifactKind.PAGE
    source: str = ""

    def __post_init__(self) -> None:
        validate_str_not_empty(self.artifact_id, "artifact_id")
        validate_str_no_null(self.payload, "payload")
        validate_instance(self.kind, ArtifactKind, "kind")
        validate_str_no_null(self.source, "source")
