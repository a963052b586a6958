"""Tests for CLI interface."""

import csv
import json
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

from src.api.app import create_app
from src.cli import app
from src.config import Settings

runner = CliRunner()


@pytest.fixture
def invoke(catalog_dir: Path):
    """Invoke the CLI against the sample catalog."""

    def _invoke(*args: str):
        return runner.invoke(app, ["--data-dir", str(catalog_dir), *args])

    return _invoke


class TestSearchCommand:
    """Tests for the search command."""

    def test_search_finds_matches(self, invoke):
        result = invoke("search", "widget")

        assert result.exit_code == 0
        assert "Search Results (1 of 1)" in result.stdout

    def test_search_no_results(self, invoke):
        result = invoke("search", "nonexistent")

        assert result.exit_code == 0
        assert "No results found" in result.stdout

    def test_search_pagination_hint(self, invoke):
        result = invoke("search", "--limit", "2")

        assert result.exit_code == 0
        assert "--offset 2" in result.stdout

    def test_search_unknown_category(self, invoke):
        result = invoke("search", "--category", "Nope")

        assert result.exit_code == 1
        assert "Unknown category" in result.stdout

    def test_search_invalid_limit(self, invoke):
        result = invoke("search", "--limit", "0")
        assert result.exit_code == 1


class TestTopCommand:
    def test_top(self, invoke):
        result = invoke("top")

        assert result.exit_code == 0
        assert "Top 3 Servers" in result.stdout

    def test_top_category(self, invoke):
        result = invoke("top", "--category", "Data")

        assert result.exit_code == 0
        assert "Top 1 Servers in Data" in result.stdout

    def test_top_empty(self, invoke):
        result = invoke("top", "--category", "Finance")

        assert result.exit_code == 0
        assert "No scored servers found" in result.stdout


class TestShowCommand:
    def test_show_scored(self, invoke):
        result = invoke("show", "acme__widget")

        assert result.exit_code == 0
        assert "Score Breakdown" in result.stdout
        assert "https://github.com/acme/widget" in result.stdout

    def test_show_unscored_has_no_breakdown(self, invoke):
        result = invoke("show", "zeta__zulu-server")

        assert result.exit_code == 0
        assert "Score Breakdown" not in result.stdout

    def test_show_not_found(self, invoke):
        result = invoke("show", "nobody__nothing")

        assert result.exit_code == 1
        assert "not found" in result.stdout


class TestBadgeCommand:
    def test_badge_stdout(self, invoke):
        result = invoke("badge", "acme__widget")

        assert result.exit_code == 0
        assert "<svg" in result.stdout
        assert "80/100" in result.stdout

    def test_badge_to_file(self, invoke, temp_dir):
        output = temp_dir / "badge.svg"
        result = invoke("badge", "zeta__zulu-server", "--output", str(output))

        assert result.exit_code == 0
        assert "Pending" in output.read_text(encoding="utf-8")

    def test_badge_unknown_server(self, invoke):
        result = invoke("badge", "nobody__nothing")

        assert result.exit_code == 0
        assert "Calculating..." in result.stdout


class TestEvaluateCommand:
    def test_existing_scores_kept(self, invoke):
        result = invoke("evaluate")

        assert result.exit_code == 0
        assert "Updated 0 servers" in result.stdout

    def test_force_rescores_and_saves(self, invoke, catalog_dir):
        result = invoke("evaluate", "--name", "acme__widget", "--force")

        assert result.exit_code == 0
        assert "Updated 1 servers" in result.stdout
        saved = json.loads((catalog_dir / "mcp-evaluations" / "acme__widget.json").read_text(encoding="utf-8"))
        assert saved["quality_score"] == 59
        assert saved["origin"]["kind"] == "repository"

    def test_unknown_name(self, invoke):
        result = invoke("evaluate", "--name", "nobody__nothing")
        assert result.exit_code == 1

    def test_stored_score_matches_api_breakdown(self, invoke, catalog_dir):
        """alpha shares acme/tools with the unevaluated beta, so both count as siblings."""
        result = invoke("evaluate", "--name", "acme__tools__servers__alpha", "--force")
        assert result.exit_code == 0

        path = catalog_dir / "mcp-evaluations" / "acme__tools__servers__alpha.json"
        stored = json.loads(path.read_text(encoding="utf-8"))["quality_score"]
        client = TestClient(create_app(Settings(data_dir=catalog_dir)))
        detail = client.get("/server/acme__tools__servers__alpha").json()

        # 35 protocol, 200 stars 6, 1.5 contributors 0, CI 5, 15 deps
        assert stored == 61
        assert detail["scoreBreakdown"]["total"] == stored


class TestValidateCommand:
    def test_all_valid(self, invoke):
        result = invoke("validate")

        assert result.exit_code == 0
        assert "All 3 evaluation documents are valid" in result.stdout

    def test_invalid_document(self, invoke, catalog_dir):
        (catalog_dir / "mcp-evaluations" / "broken.json").write_text('{"name": 1}', encoding="utf-8")

        result = invoke("validate")

        assert result.exit_code == 1
        assert "broken" in result.stdout


class TestExportCommand:
    def test_export_json(self, invoke, temp_dir):
        output = temp_dir / "export.json"
        result = invoke("export", "--format", "json", "--output", str(output))

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert len(data) == 5
        assert data[0]["name"] == "acme__tools__servers__alpha"

    def test_export_csv(self, invoke, temp_dir):
        output = temp_dir / "export.csv"
        result = invoke("export", "--format", "csv", "--output", str(output))

        assert result.exit_code == 0
        with output.open(encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[0][0] == "name"
        assert len(rows) == 6

    def test_export_unsupported_format(self, invoke, temp_dir):
        result = invoke("export", "--format", "xml", "--output", str(temp_dir / "x.xml"))
        assert result.exit_code == 1


class TestCategoriesCommand:
    def test_lists_categories(self, invoke):
        result = invoke("categories")

        assert result.exit_code == 0
        assert "Development" in result.stdout


class TestServeCommand:
    def test_passes_settings_to_server(self, invoke, catalog_dir):
        with patch("src.api.app.run") as run:
            result = invoke("serve", "--port", "9000")

        assert result.exit_code == 0
        settings = run.call_args.args[0]
        assert settings.data_dir == catalog_dir
        assert run.call_args.kwargs["port"] == 9000
        assert run.call_args.kwargs["reload"] is False

    def test_reload_rejects_data_dir_option(self, invoke):
        with patch("src.api.app.run") as run:
            result = invoke("serve", "--reload")

        assert result.exit_code == 1
        run.assert_not_called()
