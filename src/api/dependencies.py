"""Request dependencies."""

from fastapi import Request

from src.catalog.loader import CatalogLoader


def get_loader(request: Request) -> CatalogLoader:
    """Catalog loader shared by every request of the application."""
    return request.app.state.loader
