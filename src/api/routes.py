"""Catalog API routes: search, server detail, categories and badges."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse, Response
from pydantic import ValidationError

from src.api.dependencies import get_loader
from src.api.exceptions import (
    INTERNAL_ERROR,
    INVALID_PARAMETERS,
    NAME_REQUIRED,
    NOT_FOUND,
    error_response,
)
from src.badges.badge import badge_for_record
from src.catalog.identity import identity_from_badge_path
from src.catalog.loader import CatalogLoader
from src.catalog.urls import generate_detail_page_url, get_badge_url_for_record, get_repository_url
from src.evaluators.composite import calculate_quality_score
from src.models.model_search import SearchQuery
from src.models.model_server import Category, ServerRecord
from src.search.service import search_records

logger = logging.getLogger(__name__)

router = APIRouter()

BADGE_FORMAT_ERROR = "Invalid format. Use: /api/badge/quality/github-org/repo-name[/path--to--server]"


def server_detail(record: ServerRecord, all_records: list[ServerRecord]) -> dict[str, Any]:
    """Record JSON plus score breakdown and canonical links."""
    breakdown = None
    if record.quality_score is not None:
        breakdown = calculate_quality_score(record, all_records).model_dump()

    return {
        **record.model_dump(mode="json"),
        "scoreBreakdown": breakdown,
        "githubUrl": get_repository_url(record),
        "badgeUrl": get_badge_url_for_record(record),
        "detailPageUrl": generate_detail_page_url(record.name),
    }


@router.get("/search", tags=["Search"], summary="Search MCP servers")
def search(request: Request, loader: CatalogLoader = Depends(get_loader)):
    """Filter by text, category and language; sort by quality, stars or name."""
    try:
        query = SearchQuery.model_validate(dict(request.query_params))
    except ValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_PARAMETERS, e.errors(include_url=False))

    try:
        result = search_records(loader.load_records(), query)
        return result.model_dump(mode="json", by_alias=True)
    except Exception:
        logger.exception("Error searching servers")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


@router.get("/server", tags=["Servers"], include_in_schema=False)
@router.get("/server/", tags=["Servers"], include_in_schema=False)
def server_name_missing():
    return error_response(status.HTTP_400_BAD_REQUEST, NAME_REQUIRED)


@router.get("/server/{name}", tags=["Servers"], summary="Get server details")
def get_server(name: str, loader: CatalogLoader = Depends(get_loader)):
    """Full record with computed score breakdown, repository, badge and detail links."""
    if not name.strip():
        return error_response(status.HTTP_400_BAD_REQUEST, NAME_REQUIRED)

    try:
        records = loader.load_records(name)
        if not records:
            return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND)
        all_records = loader.load_records() if records[0].quality_score is not None else []
        return server_detail(records[0], all_records)
    except Exception:
        logger.exception(f"Error loading server {name}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


@router.get("/category", tags=["Categories"], summary="List categories")
def list_categories():
    return {"categories": [category.value for category in Category]}


@router.get(
    "/badge/{params:path}",
    tags=["Badges"],
    summary="Get trust score badge",
    response_class=Response,
    responses={200: {"content": {"image/svg+xml": {}}}},
)
def get_badge(params: str, loader: CatalogLoader = Depends(get_loader)):
    """SVG badge for ``quality/{org}/{repo}[/{path--with--dashes}]``.

    Unknown servers still get a badge ("Calculating...") since badges are
    embedded in third-party READMEs.
    """
    parts = [p for p in params.split("/") if p]
    if len(parts) < 3 or parts[0] != "quality":
        return PlainTextResponse(BADGE_FORMAT_ERROR, status_code=status.HTTP_400_BAD_REQUEST)

    _, org, repo, *path_parts = parts
    identity = identity_from_badge_path(org, repo, path_parts)
    records = loader.load_records(identity)
    badge = badge_for_record(records[0] if records else None)

    return Response(
        content=badge.render(),
        media_type="image/svg+xml",
        headers={"Cache-Control": badge.cache_control},
    )


@router.get("/health", tags=["Health"], include_in_schema=False)
def health():
    return {"status": "ok"}
