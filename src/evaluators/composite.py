"""Composite quality score combining all sub-scores."""

from src.consts import REMOTE_SCORE_BREAKDOWN
from src.evaluators.badge_usage import BadgeUsageEvaluator
from src.evaluators.base import BaseEvaluator
from src.evaluators.community import CommunityEvaluator
from src.evaluators.dependencies import DependencyEvaluator
from src.evaluators.deployment import DeploymentEvaluator
from src.evaluators.documentation import DocumentationEvaluator
from src.evaluators.protocol import ProtocolEvaluator
from src.evaluators.stats_generator import build_eval_context
from src.models.model_score import EvalContext, ScoreBreakdown
from src.models.model_server import ServerRecord

_EVALUATORS = {
    "mcp_protocol": ProtocolEvaluator(),
    "github_metrics": CommunityEvaluator(),
    "deployment_maturity": DeploymentEvaluator(),
    "documentation": DocumentationEvaluator(),
    "dependencies": DependencyEvaluator(),
    "badge_usage": BadgeUsageEvaluator(),
}


def remote_score_breakdown() -> ScoreBreakdown:
    """Fixed breakdown for remote servers without a source repository."""
    return ScoreBreakdown(**REMOTE_SCORE_BREAKDOWN)


def score_with_context(
    record: ServerRecord,
    context: EvalContext,
    evaluators: dict[str, BaseEvaluator] | None = None,
) -> ScoreBreakdown:
    """Score a record against a prebuilt context.

    Args:
        record: The server to score
        context: Population statistics from ``build_eval_context``
        evaluators: Evaluator per breakdown field (defaults to the standard six)

    Returns:
        ScoreBreakdown whose ``total`` is the sum of the six sub-scores
    """
    if record.repository is None:
        return remote_score_breakdown()

    evaluators = evaluators or _EVALUATORS
    scores = {dimension: ev.evaluate(record, context) for dimension, ev in evaluators.items()}
    return ScoreBreakdown(**scores, total=sum(scores.values()))


def calculate_quality_score(
    record: ServerRecord, population: list[ServerRecord] | None = None
) -> ScoreBreakdown:
    """Calculate the quality score breakdown for one record.

    Args:
        record: The server to score
        population: All records, for sibling and rarity adjustments

    Returns:
        ScoreBreakdown with a 0-100 total
    """
    return score_with_context(record, build_eval_context(population))
