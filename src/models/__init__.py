"""Pydantic models for the MCP catalog."""

from src.models.model_identity import ServerInfo
from src.models.model_score import EvalContext, ScoreBreakdown
from src.models.model_search import SearchQuery, SearchResult, SortBy
from src.models.model_server import (
    Author,
    Category,
    Dependency,
    LocalServerConfig,
    Origin,
    ProtocolFeatures,
    RemoteOrigin,
    RemoteServerConfig,
    RepositoryOrigin,
    ServerConfig,
    ServerRecord,
)
from src.models.model_storage import EvaluationLoadResult

__all__ = [
    # Record models
    "Author",
    "Category",
    "Dependency",
    "LocalServerConfig",
    "Origin",
    "ProtocolFeatures",
    "RemoteOrigin",
    "RemoteServerConfig",
    "RepositoryOrigin",
    "ServerConfig",
    "ServerRecord",
    # Identity
    "ServerInfo",
    # Scoring
    "EvalContext",
    "ScoreBreakdown",
    # Search
    "SearchQuery",
    "SearchResult",
    "SortBy",
    # Storage
    "EvaluationLoadResult",
]
