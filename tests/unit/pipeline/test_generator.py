"""
Unit tests for pipeline.generator module.

Tests:
- partition_sources() config detection and content filtering
- Generator factories (from_dict, from_yaml)
- Full runs: artifact set, determinism, parallel extraction
- Whole-run failure on every error kind, with logging
"""

import json
import logging
from pathlib import Path

import pytest

from docsmith.core.exceptions import (
    ConfigurationError,
    DuplicateArtifactError,
    DuplicateRouteError,
    MalformedDocumentError,
    MissingRootError,
    OrphanPageError,
)
from docsmith.core.serializer import load_tree
from docsmith.models import ArtifactKind, SourceFile
from docsmith.pipeline.configs import GenerationOptions
from docsmith.pipeline.generator import Generator, partition_sources


class EchoRenderer:
    def __init__(self) -> None:
        self.calls = 0

    def render(self, text: str) -> str:
        self.calls += 1
        return text


# =============================================================================
# partition_sources Tests
# =============================================================================


class TestPartitionSources:
    """partition_sources()."""

    def test_splits_and_filters(self, project_sources: list[SourceFile]) -> None:
        config, contents = partition_sources(project_sources)
        assert config.path == "Docs.yaml"
        assert [s.path for s in contents] == [
            "index.md",
            "guide/index.md",
            "guide/Getting-Started.md",
            "faq.md",
        ]

    def test_case_insensitive(self) -> None:
        config, contents = partition_sources(
            [SourceFile("site/docs.YAML", ""), SourceFile("README.MD", "")]
        )
        assert config.path == "site/docs.YAML"
        assert [s.path for s in contents] == ["README.MD"]

    def test_custom_names(self) -> None:
        config, contents = partition_sources(
            [SourceFile("site.yml", ""), SourceFile("a.markdown", ""), SourceFile("b.md", "")],
            config_name="site.yml",
            content_suffix=".markdown",
        )
        assert config.path == "site.yml"
        assert [s.path for s in contents] == ["a.markdown"]

    def test_missing_config(self) -> None:
        with pytest.raises(ConfigurationError, match="no configuration file"):
            partition_sources([SourceFile("index.md", "")])

    def test_multiple_configs(self) -> None:
        with pytest.raises(ConfigurationError, match="a/Docs.yaml, b/Docs.yaml"):
            partition_sources([SourceFile("a/Docs.yaml", ""), SourceFile("b/Docs.yaml", "")])


# =============================================================================
# Factory Tests
# =============================================================================


class TestGeneratorFactories:
    """Generator construction."""

    def test_default_options(self) -> None:
        assert Generator().options == GenerationOptions()

    def test_from_dict(self) -> None:
        generator = Generator.from_dict({"root_namespace": "Acme.Docs", "max_workers": 2})
        assert generator.options.root_namespace == "Acme.Docs"
        assert generator.options.max_workers == 2

    def test_from_dict_invalid(self) -> None:
        with pytest.raises(ConfigurationError, match="invalid generation options"):
            Generator.from_dict({"max_workers": 0})

    def test_from_dict_unknown_type(self) -> None:
        with pytest.raises(ConfigurationError):
            Generator.from_dict({"log_json": "definitely"})

    def test_from_yaml(self, tmp_path: Path) -> None:
        options_file = tmp_path / "docsmith.yaml"
        options_file.write_text("root_namespace: Acme\nconfig_artifact_id: AcmeData\n")
        generator = Generator.from_yaml(str(options_file))
        assert generator.options.root_namespace == "Acme"
        assert generator.options.config_artifact_id == "AcmeData"

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Generator.from_yaml(str(tmp_path / "missing.yaml"))


# =============================================================================
# Generation Tests
# =============================================================================


class TestGenerate:
    """Successful runs."""

    def test_artifact_set(self, config_source: SourceFile, content_sources: list[SourceFile]) -> None:
        artifacts = Generator().generate(config_source, content_sources)

        assert [a.artifact_id for a in artifacts] == [
            "DocsmithData",
            "index_md",
            "guide_index_md",
            "guide_Getting_Started_md",
            "faq_md",
        ]
        assert artifacts[0].kind is ArtifactKind.CONFIG
        assert all(a.kind is ArtifactKind.PAGE for a in artifacts[1:])

    def test_tree_in_config_artifact(
        self, config_source: SourceFile, content_sources: list[SourceFile]
    ) -> None:
        artifacts = Generator().generate(config_source, content_sources)
        root = load_tree(json.loads(artifacts[0].payload)["rootPage"])

        assert root.route == "/"
        assert [c.route for c in root.children] == ["/guide", "/faq"]
        assert [c.route for c in root.children[0].children] == ["/guide/getting-started"]

    def test_page_payload(self, config_source: SourceFile, content_sources: list[SourceFile]) -> None:
        artifacts = Generator.from_dict({"root_namespace": "Acme.Docs"}).generate(
            config_source, content_sources
        )
        payload = json.loads(artifacts[4].payload)
        assert payload == {
            "route": "/faq",
            "title": "FAQ - Acme Docs",
            "layout": "Page",
            "theme": "Primer",
            "namespace": "Acme.Docs",
            "leafName": "faq",
            "body": "<p><em>Nothing</em> yet.</p>",
        }

    def test_generate_from_sources(self, project_sources: list[SourceFile]) -> None:
        artifacts = Generator().generate_from_sources(project_sources)
        assert len(artifacts) == 5

    def test_byte_identical_reruns(self, project_sources: list[SourceFile]) -> None:
        first = Generator().generate_from_sources(project_sources)
        second = Generator().generate_from_sources(project_sources)
        assert [(a.artifact_id, a.payload) for a in first] == [(a.artifact_id, a.payload) for a in second]

    def test_parallel_matches_sequential(self, project_sources: list[SourceFile]) -> None:
        sequential = Generator.from_dict({"max_workers": 1}).generate_from_sources(project_sources)
        parallel = Generator.from_dict({"max_workers": 8}).generate_from_sources(project_sources)
        assert sequential == parallel

    def test_load_documents_keeps_order(self, content_sources: list[SourceFile]) -> None:
        documents = Generator.from_dict({"max_workers": 4}).load_documents(content_sources)
        assert [d.source_path for d in documents] == [s.path for s in content_sources]

    def test_custom_renderer(self, config_source: SourceFile, content_sources: list[SourceFile]) -> None:
        renderer = EchoRenderer()
        artifacts = Generator(renderer=renderer).generate(config_source, content_sources)
        assert renderer.calls == len(content_sources)
        assert json.loads(artifacts[1].payload)["body"] == "# Welcome\n"

    @pytest.mark.parametrize("title", ["2024", "Yes", "1.0"])
    def test_scalar_titles(self, title: str) -> None:
        config = SourceFile("Docs.yaml", "title: Docs\ntheme: Primer\n")
        pages = [SourceFile("index.md", f"---\ntitle: {title}\nlayout: Home\n---\nHi\n")]
        artifacts = Generator(renderer=EchoRenderer()).generate(config, pages)
        assert json.loads(artifacts[1].payload)["title"] == f"{title} - Docs"
        root = load_tree(json.loads(artifacts[0].payload)["rootPage"])
        assert root.title == title

    def test_logs_run_events(
        self,
        config_source: SourceFile,
        content_sources: list[SourceFile],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="docsmith"):
            Generator().generate(config_source, content_sources)
        messages = [r.getMessage() for r in caplog.records if r.name == "docsmith"]
        assert messages == [
            "generation_started",
            "documents_loaded",
            "tree_assembled",
            "generation_completed",
        ]


# =============================================================================
# Failure Tests
# =============================================================================


class TestGenerateFailures:
    """Every error aborts the run."""

    def test_malformed_config(self, content_sources: list[SourceFile]) -> None:
        with pytest.raises(MalformedDocumentError, match="'theme'"):
            Generator().generate(SourceFile("Docs.yaml", "title: Docs\n"), content_sources)

    def test_malformed_document(self, config_source: SourceFile, content_sources: list[SourceFile]) -> None:
        broken = [*content_sources, SourceFile("broken.md", "# no front matter\n")]
        with pytest.raises(MalformedDocumentError) as exc_info:
            Generator().generate(config_source, broken)
        assert exc_info.value.source == "broken.md"

    def test_missing_root(self, config_source: SourceFile, content_sources: list[SourceFile]) -> None:
        with pytest.raises(MissingRootError):
            Generator().generate(config_source, content_sources[1:])

    def test_duplicate_route(
        self, config_source: SourceFile, content_sources: list[SourceFile], page_text
    ) -> None:
        sources = [*content_sources, SourceFile("Guide.md", page_text("Other guide"))]
        with pytest.raises(DuplicateRouteError):
            Generator().generate(config_source, sources)

    def test_orphan(self, config_source: SourceFile, content_sources: list[SourceFile], page_text) -> None:
        sources = [*content_sources, SourceFile("api/v1/index.md", page_text("API v1"))]
        with pytest.raises(OrphanPageError):
            Generator().generate(config_source, sources)

    def test_duplicate_artifact(self, config_source: SourceFile, page_text) -> None:
        sources = [
            SourceFile("index.md", page_text("Home")),
            SourceFile("a_b.md", page_text("One")),
            SourceFile("a/b.md", page_text("Two")),
            SourceFile("a.md", page_text("A")),
        ]
        with pytest.raises(DuplicateArtifactError):
            Generator().generate(config_source, sources)

    def test_failure_is_logged(
        self,
        config_source: SourceFile,
        content_sources: list[SourceFile],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="docsmith"), pytest.raises(MissingRootError):
            Generator().generate(config_source, content_sources[1:])

        failed = [r for r in caplog.records if r.getMessage() == "generation_failed"]
        assert len(failed) == 1
        assert failed[0].levelno == logging.ERROR
        assert failed[0].structured_kv["error_type"] == "MissingRootError"
        assert "generation_completed" not in [r.getMessage() for r in caplog.records]
