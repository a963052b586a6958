"""Canonical links for catalog entries. Pure string transformations."""

from src.catalog.identity import encode_badge_path
from src.consts import (
    BADGE_LABEL,
    EVALUATIONS_REPO_PATH,
    GITHUB_BASE_URL,
    MCP_CATALOG_API_URL,
    MCP_CATALOG_URL,
    WEBSITE_REPO_URL,
)
from src.models.model_server import ServerRecord


def generate_detail_page_url(identity: str, base_url: str = MCP_CATALOG_URL) -> str:
    """Public detail page of a server."""
    return f"{base_url}/{identity}"


def generate_evaluation_file_url(identity: str, edit: bool = False) -> str:
    """Link to the evaluation document in the website repository.

    Args:
        identity: Server identity.
        edit: Link to the editor instead of the file view.
    """
    mode = "edit" if edit else "tree"
    return f"{WEBSITE_REPO_URL}/{mode}/main/{EVALUATIONS_REPO_PATH}/{identity}.json"


def get_repository_url(record: ServerRecord) -> str | None:
    """Source repository URL, pointing into the sub-path for monorepo servers."""
    repository = record.repository
    if repository is None:
        return None
    url = f"{GITHUB_BASE_URL}/{repository.owner}/{repository.repo}"
    if repository.path:
        url += f"/tree/main/{repository.path}"
    return url


def get_latest_commit_url(record: ServerRecord) -> str:
    """Link to the evaluated commit, or ``#`` when there is nothing to link."""
    repository = record.repository
    if repository is None or not repository.latest_commit_hash:
        return "#"
    return f"{GITHUB_BASE_URL}/{repository.owner}/{repository.repo}/commit/{repository.latest_commit_hash}"


def generate_badge_relative_url(owner: str, repo: str, path: str | None = None) -> str:
    """Badge route relative to the API root.

    >>> generate_badge_relative_url("acme", "widget", "pkg/server")
    '/badge/quality/acme/widget/pkg--server'
    """
    url = f"/badge/quality/{owner}/{repo}"
    encoded = encode_badge_path(path)
    if encoded:
        url += f"/{encoded}"
    return url


def generate_badge_url(
    owner: str, repo: str, path: str | None = None, api_base_url: str = MCP_CATALOG_API_URL
) -> str:
    return f"{api_base_url}{generate_badge_relative_url(owner, repo, path)}"


def generate_badge_markdown(
    identity: str,
    owner: str,
    repo: str,
    path: str | None = None,
    api_base_url: str = MCP_CATALOG_API_URL,
    catalog_url: str = MCP_CATALOG_URL,
) -> str:
    """README snippet embedding the trust badge, linked to the detail page."""
    badge_url = generate_badge_url(owner, repo, path, api_base_url)
    detail_url = generate_detail_page_url(identity, catalog_url)
    return f"[![{BADGE_LABEL}]({badge_url})]({detail_url})"


def get_badge_url_for_record(record: ServerRecord) -> str | None:
    repository = record.repository
    if repository is None:
        return None
    return generate_badge_url(repository.owner, repository.repo, repository.path)


def get_badge_markdown_for_record(record: ServerRecord) -> str | None:
    repository = record.repository
    if repository is None:
        return None
    return generate_badge_markdown(record.name, repository.owner, repository.repo, repository.path)
