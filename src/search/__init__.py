"""Catalog search service."""

from src.search.service import filter_records, matches_text, search_records, sort_records

__all__ = [
    "filter_records",
    "matches_text",
    "search_records",
    "sort_records",
]
