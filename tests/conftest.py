"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from src.models.model_server import Category, Dependency, ProtocolFeatures, ServerRecord
from tests.factories import evaluation_document, make_record, make_remote_record, write_catalog


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def full_record() -> ServerRecord:
    """A fully evaluated repository record."""
    return make_record(
        name="acme__widget",
        quality_score=88,
        stars=1500,
        contributors=12,
        issues=30,
        releases=True,
        ci_cd=True,
        latest_commit_hash="abc123",
        category=Category.DEVELOPMENT,
        programming_language="Python",
        readme="# Widget\n\n" + "Widget exposes tools for managing widgets. " * 5 + "Listed on Archestra.",
        protocol_features=ProtocolFeatures(
            implementing_tools=True,
            implementing_resources=True,
            implementing_prompts=True,
            implementing_stdio=True,
        ),
        dependencies=[Dependency(name="httpx", importance=7)],
    )


@pytest.fixture
def remote_record() -> ServerRecord:
    return make_remote_record()


@pytest.fixture
def catalog_dir(temp_dir: Path) -> Path:
    """Data directory with five manifest entries, three of them evaluated."""
    urls = [
        "https://github.com/acme/widget",
        "https://github.com/acme/tools/tree/main/servers/alpha",
        "https://github.com/acme/tools/tree/main/servers/beta",
        "https://github.com/zeta/zulu-server",
        "https://mcp.example.com/sse",
        "https://github.com/acme/widget/",
    ]
    documents = [
        evaluation_document("acme__widget", "acme", "widget", 80, stars=50,
                            category="Development", programming_language="Python"),
        evaluation_document("acme__tools__servers__alpha", "acme", "tools", 80, stars=400,
                            path="servers/alpha", category="Data"),
        {
            "name": "example__remote-mcp",
            "display_name": "Example MCP",
            "description": "Hosted example server",
            "author": {"name": "example"},
            "server": {"type": "remote", "url": "https://old.example.com/sse", "docs_url": None},
            "github_info": None,
            "quality_score": 75,
        },
    ]
    return write_catalog(temp_dir, urls, documents)
