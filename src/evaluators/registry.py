"""Evaluator registry for scoring records and refreshing stored scores."""

import logging

from src.evaluators.badge_usage import BadgeUsageEvaluator
from src.evaluators.community import CommunityEvaluator
from src.evaluators.composite import score_with_context
from src.evaluators.dependencies import DependencyEvaluator
from src.evaluators.deployment import DeploymentEvaluator
from src.evaluators.documentation import DocumentationEvaluator
from src.evaluators.protocol import ProtocolEvaluator
from src.evaluators.stats_generator import build_eval_context
from src.models.model_score import EvalContext, ScoreBreakdown
from src.models.model_server import ServerRecord

logger = logging.getLogger(__name__)


class EvaluatorRegistry:
    """Orchestrates all evaluators to score records.

    Records are immutable, so scoring returns updated copies with
    ``quality_score`` set to the breakdown total.
    """

    def __init__(self) -> None:
        """Initialize registry with all evaluators."""
        self.evaluators = {
            "mcp_protocol": ProtocolEvaluator(),
            "github_metrics": CommunityEvaluator(),
            "deployment_maturity": DeploymentEvaluator(),
            "documentation": DocumentationEvaluator(),
            "dependencies": DependencyEvaluator(),
            "badge_usage": BadgeUsageEvaluator(),
        }

    def breakdown(self, record: ServerRecord, context: EvalContext) -> ScoreBreakdown:
        return score_with_context(record, context, self.evaluators)

    def score_record(self, record: ServerRecord, context: EvalContext) -> ServerRecord:
        """Return a copy of ``record`` with its quality score recomputed."""
        breakdown = self.breakdown(record, context)
        if record.quality_score != breakdown.total:
            logger.debug(f"{record.name}: {record.quality_score} -> {breakdown.total}")
        return record.model_copy(update={"quality_score": breakdown.total})

    def score_batch(
        self,
        records: list[ServerRecord],
        population: list[ServerRecord] | None = None,
        force: bool = False,
    ) -> list[ServerRecord]:
        """Score multiple records against one population.

        Args:
            records: Records to score
            population: Records the scores are relative to (defaults to ``records``)
            force: Rescore records that already carry a score

        Returns:
            Records in input order, rescored where applicable
        """
        context = build_eval_context(population if population is not None else records)
        scored = []
        for record in records:
            if record.quality_score is not None and not force:
                scored.append(record)
                continue
            scored.append(self.score_record(record, context))
        return scored
