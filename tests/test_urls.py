"""Tests for canonical URL helpers."""

from src.catalog.urls import (
    generate_badge_markdown,
    generate_badge_relative_url,
    generate_badge_url,
    generate_detail_page_url,
    generate_evaluation_file_url,
    get_badge_markdown_for_record,
    get_badge_url_for_record,
    get_latest_commit_url,
    get_repository_url,
)
from tests.factories import make_record, make_remote_record


def test_detail_page_url():
    assert generate_detail_page_url("acme__widget") == "https://archestra.ai/mcp-catalog/acme__widget"


def test_evaluation_file_url():
    """View and edit links point at the evaluation document."""
    view = generate_evaluation_file_url("acme__widget")
    edit = generate_evaluation_file_url("acme__widget", edit=True)

    assert view == (
        "https://github.com/archestra-ai/website/tree/main/"
        "app/app/mcp-catalog/data/mcp-evaluations/acme__widget.json"
    )
    assert edit.startswith("https://github.com/archestra-ai/website/edit/main/")


def test_latest_commit_url():
    record = make_record(latest_commit_hash="abc123")
    assert get_latest_commit_url(record) == "https://github.com/acme/widget/commit/abc123"


def test_latest_commit_url_without_hash():
    assert get_latest_commit_url(make_record()) == "#"
    assert get_latest_commit_url(make_remote_record()) == "#"


def test_repository_url():
    assert get_repository_url(make_record()) == "https://github.com/acme/widget"
    assert (
        get_repository_url(make_record(path="pkg/server"))
        == "https://github.com/acme/widget/tree/main/pkg/server"
    )
    assert get_repository_url(make_remote_record()) is None


def test_badge_relative_url():
    assert generate_badge_relative_url("acme", "widget", "pkg/server") == "/badge/quality/acme/widget/pkg--server"
    assert generate_badge_relative_url("acme", "widget") == "/badge/quality/acme/widget"


def test_badge_absolute_url():
    assert (
        generate_badge_url("acme", "widget")
        == "https://archestra.ai/mcp-catalog/api/badge/quality/acme/widget"
    )


def test_badge_markdown():
    markdown = generate_badge_markdown("acme__widget__pkg", "acme", "widget", "pkg")

    assert markdown == (
        "[![Trust Score](https://archestra.ai/mcp-catalog/api/badge/quality/acme/widget/pkg)]"
        "(https://archestra.ai/mcp-catalog/acme__widget__pkg)"
    )


def test_record_badge_helpers():
    record = make_record(name="acme__widget__pkg__server", path="pkg/server")

    assert get_badge_url_for_record(record).endswith("/badge/quality/acme/widget/pkg--server")
    assert "acme__widget__pkg__server" in get_badge_markdown_for_record(record)
    assert get_badge_url_for_record(make_remote_record()) is None
    assert get_badge_markdown_for_record(make_remote_record()) is None
