from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from src.consts import SEARCH_DEFAULT_LIMIT, SEARCH_MAX_LIMIT
from src.models.model_server import Category, ServerRecord


class SortBy(str, Enum):
    QUALITY = "quality"
    STARS = "stars"
    NAME = "name"


class SearchQuery(BaseModel):
    """Validated search parameters. Empty strings count as absent."""

    model_config = ConfigDict(populate_by_name=True)

    q: str | None = Field(default=None, description="Case-insensitive substring")
    category: Category | None = None
    language: str | None = Field(default=None, description="Exact programming language")
    sort_by: SortBy = Field(default=SortBy.QUALITY, alias="sortBy")
    limit: int = Field(default=SEARCH_DEFAULT_LIMIT, gt=0, le=SEARCH_MAX_LIMIT)
    offset: int = Field(default=0, ge=0)

    @field_validator("q", "category", "language", mode="before")
    @classmethod
    def _empty_as_absent(cls, value):
        if isinstance(value, str) and value == "":
            return None
        return value

    @field_validator("sort_by", mode="before")
    @classmethod
    def _default_sort(cls, value):
        if value is None or value == "":
            return SortBy.QUALITY
        return value


class SearchResult(BaseModel):
    """One page of search results."""

    servers: list[ServerRecord]
    total_count: int = Field(alias="totalCount", ge=0)
    limit: int
    offset: int

    model_config = ConfigDict(populate_by_name=True)

    @computed_field(alias="hasMore")
    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total_count
