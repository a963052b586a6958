"""Tests for file-based catalog storage."""

import json
from pathlib import Path

import pytest

from src.models.model_server import RemoteOrigin, RepositoryOrigin, ServerRecord
from src.storage.permanent_storage.base import ManifestError
from src.storage.permanent_storage.file_manager import FileManager
from tests.factories import evaluation_document, make_record


@pytest.fixture
def file_manager(temp_dir: Path) -> FileManager:
    """Create a FileManager with temporary directory."""
    return FileManager(data_dir=temp_dir)


class TestManifest:
    """Tests for manifest reading."""

    def test_load_manifest(self, file_manager: FileManager) -> None:
        urls = ["https://github.com/acme/widget", "https://mcp.example.com/sse"]
        file_manager.save_manifest(urls)

        assert file_manager.load_manifest() == urls

    def test_missing_manifest(self, file_manager: FileManager) -> None:
        with pytest.raises(ManifestError):
            file_manager.load_manifest()

    def test_corrupt_manifest(self, file_manager: FileManager, temp_dir: Path) -> None:
        (temp_dir / "mcp-servers.json").write_text("[not json", encoding="utf-8")

        with pytest.raises(ManifestError):
            file_manager.load_manifest()

    def test_manifest_must_be_list_of_strings(self, file_manager: FileManager, temp_dir: Path) -> None:
        (temp_dir / "mcp-servers.json").write_text('{"url": 1}', encoding="utf-8")

        with pytest.raises(ManifestError):
            file_manager.load_manifest()


class TestEvaluations:
    """Tests for evaluation document reading and writing."""

    def test_save_and_load(self, file_manager: FileManager) -> None:
        record = make_record(quality_score=70)
        path = file_manager.save_evaluation(record)

        assert path == file_manager.evaluations_dir / "acme__widget.json"
        result = file_manager.load_evaluation("acme__widget")
        assert result.ok
        assert result.record == record

    def test_load_missing_returns_none(self, file_manager: FileManager) -> None:
        assert file_manager.load_evaluation("nope") is None

    def test_legacy_layout_is_upgraded(self, file_manager: FileManager) -> None:
        """Documents with github_info load into a repository origin."""
        file_manager.evaluations_dir.mkdir(parents=True)
        document = evaluation_document("acme__widget", "acme", "widget", 64, stars=12, path=None)
        (file_manager.evaluations_dir / "acme__widget.json").write_text(json.dumps(document))

        record = file_manager.load_evaluation("acme__widget").record

        assert isinstance(record.origin, RepositoryOrigin)
        assert record.origin.stars == 12
        assert record.origin.ci_cd is True
        assert record.quality_score == 64

    def test_legacy_remote_layout(self, file_manager: FileManager) -> None:
        document = {
            "name": "example__remote-mcp",
            "display_name": "Example",
            "author": {"name": "example"},
            "server": {"type": "remote", "url": "https://mcp.example.com/sse", "docs_url": None},
            "github_info": None,
            "quality_score": 75,
        }
        record = ServerRecord.model_validate(document)

        assert isinstance(record.origin, RemoteOrigin)
        assert record.origin.url == "https://mcp.example.com/sse"
        assert record.is_remote

    def test_invalid_document_reported_not_raised(self, file_manager: FileManager) -> None:
        file_manager.evaluations_dir.mkdir(parents=True)
        (file_manager.evaluations_dir / "broken.json").write_text("{", encoding="utf-8")
        (file_manager.evaluations_dir / "bad-score.json").write_text(
            json.dumps(evaluation_document("bad-score", "a", "b", 250)), encoding="utf-8"
        )
        file_manager.save_evaluation(make_record())

        results = {r.key: r for r in file_manager.load_evaluations()}

        assert results["acme__widget"].ok
        assert not results["broken"].ok
        assert "JSONDecodeError" in results["broken"].error
        assert not results["bad-score"].ok
        assert "ValidationError" in results["bad-score"].error

    def test_load_evaluations_without_directory(self, file_manager: FileManager) -> None:
        assert file_manager.load_evaluations() == []
        assert file_manager.list_evaluation_keys() == []

    def test_list_evaluation_keys(self, file_manager: FileManager) -> None:
        file_manager.save_evaluation(make_record(name="b__b", owner="b", repo="b"))
        file_manager.save_evaluation(make_record(name="a__a", owner="a", repo="a"))

        assert file_manager.list_evaluation_keys() == ["a__a", "b__b"]
