"""Evaluators for the catalog quality score.

Servers are scored on six dimensions, summed into a 0-100 total:
- MCP protocol coverage (40)
- Community metrics of the source repository (20)
- Deployment maturity (10)
- Documentation (8)
- Dependency hygiene (20)
- Badge adoption (2)

All evaluators are stateless pure functions: ServerRecord + EvalContext -> score.
"""

from src.evaluators.badge_usage import BadgeUsageEvaluator
from src.evaluators.base import BaseEvaluator
from src.evaluators.community import CommunityEvaluator
from src.evaluators.composite import (
    calculate_quality_score,
    remote_score_breakdown,
    score_with_context,
)
from src.evaluators.dependencies import DependencyEvaluator
from src.evaluators.deployment import DeploymentEvaluator
from src.evaluators.documentation import DocumentationEvaluator
from src.evaluators.protocol import ProtocolEvaluator
from src.evaluators.registry import EvaluatorRegistry
from src.evaluators.stats_generator import (
    build_eval_context,
    compute_dependency_frequency,
    compute_repo_counts,
)

__all__ = [
    # Protocol
    "BaseEvaluator",
    # Individual evaluators
    "ProtocolEvaluator",
    "CommunityEvaluator",
    "DeploymentEvaluator",
    "DocumentationEvaluator",
    "DependencyEvaluator",
    "BadgeUsageEvaluator",
    # Orchestration
    "EvaluatorRegistry",
    # Statistics
    "build_eval_context",
    "compute_dependency_frequency",
    "compute_repo_counts",
    # Composite scoring
    "calculate_quality_score",
    "remote_score_breakdown",
    "score_with_context",
]
