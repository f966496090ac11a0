"""Unit tests for models.artifact and models.constants."""

import dataclasses

import pytest

from docsmith.models import ArtifactKind, EmittedArtifact


class TestArtifactKind:
    """ArtifactKind enum."""

    def test_values(self) -> None:
        assert ArtifactKind.CONFIG == "config"
        assert ArtifactKind.PAGE == "page"


class TestEmittedArtifact:
    """EmittedArtifact model."""

    def test_defaults(self) -> None:
        artifact = EmittedArtifact("index_md", "{}")
        assert artifact.kind is ArtifactKind.PAGE
        assert artifact.source == ""

    def test_frozen(self) -> None:
        artifact = EmittedArtifact("index_md", "{}")
        with pytest.raises(dataclasses.FrozenInstanceError):
            artifact.payload = "[]"  # type: ignore[misc]

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="artifact_id must not be empty"):
            EmittedArtifact("", "{}")

    def test_kind_must_be_enum(self) -> None:
        with pytest.raises(TypeError, match="kind must be an ArtifactKind"):
            EmittedArtifact("x", "{}", kind="page")  # type: ignore[arg-type]
