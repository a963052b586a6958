from pydantic import BaseModel, Field

from src.consts import (
    MAX_BADGE_SCORE,
    MAX_COMMUNITY_SCORE,
    MAX_DEPENDENCY_SCORE,
    MAX_DEPLOYMENT_SCORE,
    MAX_DOCUMENTATION_SCORE,
    MAX_PROTOCOL_SCORE,
)


class ScoreBreakdown(BaseModel):
    """Quality score broken down into its six sub-scores."""

    mcp_protocol: int = Field(ge=0, le=MAX_PROTOCOL_SCORE)
    github_metrics: int = Field(ge=0, le=MAX_COMMUNITY_SCORE)
    deployment_maturity: int = Field(ge=0, le=MAX_DEPLOYMENT_SCORE)
    documentation: int = Field(ge=0, le=MAX_DOCUMENTATION_SCORE)
    dependencies: int = Field(ge=0, le=MAX_DEPENDENCY_SCORE)
    badge_usage: int = Field(ge=0, le=MAX_BADGE_SCORE)
    total: int = Field(ge=0, le=100)


class EvalContext(BaseModel):
    """Population data for stateless evaluators.

    Evaluators never load records themselves. Everything derived from the
    rest of the catalog comes through this context.
    """

    repo_counts: dict[str, int] = Field(
        default_factory=dict, description="Key: 'owner/repo', value: records sharing it"
    )
    dependency_frequency: dict[str, int] | None = Field(
        default=None,
        description="Records using each significant dependency; None disables the rarity penalty",
    )
    population_size: int = Field(default=0, ge=0)

    @property
    def rarity_enabled(self) -> bool:
        return self.dependency_frequency is not None
