"""Search, filter, sort and paginate catalog records."""

import logging

from src.models.model_search import SearchQuery, SearchResult, SortBy
from src.models.model_server import ServerRecord

logger = logging.getLogger(__name__)


def matches_text(record: ServerRecord, needle: str) -> bool:
    """Case-insensitive substring match on name, description, owner and repo."""
    needle = needle.lower()
    haystacks = [record.name, record.description]
    repository = record.repository
    if repository is not None:
        haystacks.extend([repository.owner, repository.repo])
    return any(needle in text.lower() for text in haystacks if text)


def filter_records(records: list[ServerRecord], query: SearchQuery) -> list[ServerRecord]:
    """Apply every supplied criterion conjunctively."""
    filtered = []
    for record in records:
        if query.q and not matches_text(record, query.q):
            continue
        if query.category and record.category != query.category:
            continue
        if query.language and record.programming_language != query.language:
            continue
        filtered.append(record)
    return filtered


def sort_records(records: list[ServerRecord], sort_by: SortBy) -> list[ServerRecord]:
    """Sort a copy of ``records``. Stable, so ties keep catalog order.

    - quality: score descending, unscored last
    - stars: star count descending, remote servers count as 0
    - name: identity ascending
    """
    if sort_by == SortBy.STARS:
        return sorted(records, key=lambda r: -r.stars)
    if sort_by == SortBy.NAME:
        return sorted(records, key=lambda r: r.name)
    return sorted(
        records,
        key=lambda r: (r.quality_score is None, -(r.quality_score or 0)),
    )


def search_records(records: list[ServerRecord], query: SearchQuery) -> SearchResult:
    """Filter, sort and paginate ``records``.

    Args:
        records: Records to search, typically every loaded record
        query: Validated search parameters

    Returns:
        SearchResult for the requested page. Pagination applies after
        filtering and sorting.
    """
    filtered = filter_records(records, query)
    ordered = sort_records(filtered, query.sort_by)
    page = ordered[query.offset : query.offset + query.limit]
    logger.debug(
        f"Search q={query.q!r} category={query.category} language={query.language}: "
        f"{len(filtered)} matches, returning {len(page)}"
    )
    return SearchResult(
        servers=page,
        total_count=len(filtered),
        limit=query.limit,
        offset=query.offset,
    )
