"""FastAPI application serving the catalog API."""

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from src.api.exceptions import global_exception_handler, validation_exception_handler
from src.api.routes import router
from src.catalog.loader import CatalogLoader
from src.config import Settings, get_settings
from src.storage.cache.memory_cache import MemoryCache
from src.storage.permanent_storage.file_manager import FileManager

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, loader: CatalogLoader | None = None) -> FastAPI:
    """Create and configure the API application.

    Args:
        settings: Runtime settings. Defaults to the environment.
        loader: Record loader. Defaults to file storage under ``settings.data_dir``.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if loader is None:
        loader = CatalogLoader(FileManager(settings.data_dir), MemoryCache(), debug=settings.debug)

    app = FastAPI(
        title="MCP Catalog API",
        description="Search MCP servers, inspect quality scores and embed trust badges",
        version="1.0.0",
        docs_url="/docs",
        redoc_url=None,
    )
    app.state.loader = loader
    app.state.settings = settings

    # Public discovery API: any origin may read
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    app.include_router(router)

    logger.info(f"Catalog API ready (data: {settings.data_dir}, debug: {settings.debug})")
    return app


def run(
    settings: Settings | None = None,
    host: str | None = None,
    port: int | None = None,
    reload: bool = False,
) -> None:
    """Serve the API with uvicorn.

    With ``reload`` the worker process builds the app itself, so it reads
    settings from the environment and ``settings`` only supplies host and port.
    """
    import uvicorn

    settings = settings or get_settings()
    options = {
        "host": host or settings.host,
        "port": port or settings.port,
        "log_level": settings.log_level.lower(),
    }
    if reload:
        uvicorn.run("src.api.app:create_app", factory=True, reload=True, **options)
    else:
        uvicorn.run(create_app(settings), **options)
