"""Identity derivation for catalog entries.

Every manifest URL maps to exactly one identity, which is the join key
between the manifest, the evaluation documents, badge URLs and detail
pages. Examples:

- https://github.com/acme/widget                      -> acme__widget
- https://github.com/acme/widget/tree/main/pkg/server  -> acme__widget__pkg__server
- https://mcp.example.com/sse                         -> example__remote-mcp

Malformed repository URLs degrade to an identity built from the last path
segment and log a warning instead of raising.
"""

import logging
import re
from urllib.parse import urlsplit

from src.consts import REMOTE_HOST_PREFIXES, REPOSITORY_HOSTS
from src.models.model_identity import ServerInfo

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-z0-9_-]")
_PATH_MARKERS = ("tree", "blob")
_REMOTE_REPO = "remote-mcp"
_BADGE_PATH_SEPARATOR = "--"


def normalize_identity(raw: str) -> str:
    """Lowercase and replace characters outside ``[a-z0-9_-]`` with ``-``."""
    return _UNSAFE_CHARS.sub("-", raw.lower())


def build_identity(org: str, repo: str, path: str | None = None) -> str:
    """Join owner, repo and optional sub-path into an identity."""
    parts = [org, repo]
    if path:
        parts.extend(p for p in path.split("/") if p)
    return normalize_identity("__".join(parts))


def _fallback_info(url: str) -> ServerInfo:
    last_segment = url.rstrip("/").split("/")[-1] or "unknown"
    return ServerInfo(
        org="unknown",
        repo=last_segment,
        name=normalize_identity(last_segment),
        repository_path=None,
        is_remote=False,
    )


def _is_repository_url(url: str) -> bool:
    return any(host in url for host in REPOSITORY_HOSTS)


def _repository_info(url: str, clean_url: str) -> ServerInfo:
    # ["https:", "", "github.com", org, repo, ...]
    parts = clean_url.split("/")
    if len(parts) < 5 or not parts[3] or not parts[4]:
        logger.warning(f"Invalid repository URL format: {url}")
        return _fallback_info(url)

    org, repo = parts[3], parts[4]
    repository_path = None
    if len(parts) > 5 and parts[5] in _PATH_MARKERS:
        # Skip the marker and the ref (branch, tag or sha)
        path_parts = [p for p in parts[7:] if p]
        repository_path = "/".join(path_parts) or None

    return ServerInfo(
        org=org,
        repo=repo,
        name=build_identity(org, repo, repository_path),
        repository_path=repository_path,
        is_remote=False,
    )


def _remote_info(url: str, clean_url: str) -> ServerInfo:
    hostname = urlsplit(clean_url).hostname
    if not hostname:
        logger.warning(f"Could not determine host of remote URL: {url}")
        return _fallback_info(url)

    for prefix in REMOTE_HOST_PREFIXES:
        if hostname.startswith(prefix):
            hostname = hostname[len(prefix):]
            break
    main_domain = hostname.split(".")[0]

    return ServerInfo(
        org=main_domain,
        repo=_REMOTE_REPO,
        name=normalize_identity(f"{main_domain}__{_REMOTE_REPO}"),
        repository_path=None,
        is_remote=True,
        remote_url=clean_url,
    )


def extract_server_info(url: str) -> ServerInfo:
    """Parse a manifest URL into its identity and origin parts.

    Args:
        url: Repository or remote endpoint URL from the manifest.

    Returns:
        ServerInfo with a lowercase, slug-safe ``name``. Never raises.
    """
    clean_url = url.strip()
    if clean_url.endswith("/"):
        clean_url = clean_url[:-1]

    try:
        if _is_repository_url(clean_url):
            return _repository_info(url, clean_url)
        return _remote_info(url, clean_url)
    except ValueError as e:
        logger.error(f"Error extracting info from URL {url}: {e}")
        return _fallback_info(url)


def encode_badge_path(path: str | None) -> str | None:
    """Encode a repository sub-path as a single URL path segment."""
    if not path:
        return None
    return path.replace("/", _BADGE_PATH_SEPARATOR)


def decode_badge_path(path_parts: list[str]) -> str | None:
    """Restore a sub-path encoded with :func:`encode_badge_path`."""
    joined = "/".join(p for p in path_parts if p)
    if not joined:
        return None
    return joined.replace(_BADGE_PATH_SEPARATOR, "/")


def identity_from_badge_path(org: str, repo: str, path_parts: list[str] | None = None) -> str:
    """Resolve the identity addressed by a badge URL.

    Produces the same identity the loader derives from
    ``https://github.com/{org}/{repo}/tree/main/{path}``.
    """
    return build_identity(org, repo, decode_badge_path(path_parts or []))
