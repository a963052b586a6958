"""Dependency hygiene evaluator."""

import logging

from src.consts import (
    DEPENDENCY_UNANALYZED_SCORE,
    MAX_DEPENDENCY_COUNT_PENALTY,
    MAX_DEPENDENCY_SCORE,
    MAX_RARITY_PENALTY,
    MAX_SIGNIFICANT_DEPENDENCIES,
    RARE_DEPENDENCY_PENALTY,
    RARE_DEPENDENCY_USAGE,
    SIGNIFICANT_IMPORTANCE,
)
from src.evaluators.base import clamp
from src.models.model_score import EvalContext
from src.models.model_server import Dependency, ServerRecord

logger = logging.getLogger(__name__)


def significant_dependencies(dependencies: list[Dependency] | None) -> list[Dependency]:
    """Dependencies with importance of at least 5."""
    return [dep for dep in dependencies or [] if dep.importance >= SIGNIFICANT_IMPORTANCE]


class DependencyEvaluator:
    """Scores how lean and mainstream a server's dependencies are.

    - Not analyzed: 15 (partial credit)
    - No dependencies: 20
    - Otherwise start at 20, lose 1 per significant dependency over 10
      (at most 10), then 2 per significant dependency used by fewer than
      5 records in the population (at most 10).

    The rarity penalty needs a population-wide frequency table. When the
    context carries none, the penalty is skipped.
    """

    max_score = MAX_DEPENDENCY_SCORE

    def evaluate(self, record: ServerRecord, context: EvalContext) -> int:
        if record.dependencies is None:
            return DEPENDENCY_UNANALYZED_SCORE
        if not record.dependencies:
            return self.max_score

        score = self.max_score
        significant = significant_dependencies(record.dependencies)

        excess = len(significant) - MAX_SIGNIFICANT_DEPENDENCIES
        if excess > 0:
            score -= min(MAX_DEPENDENCY_COUNT_PENALTY, excess)

        score -= self._rarity_penalty(record, significant, context)
        return clamp(score, self.max_score)

    def _rarity_penalty(
        self, record: ServerRecord, significant: list[Dependency], context: EvalContext
    ) -> int:
        if context.dependency_frequency is None:
            logger.debug(
                f"Rarity penalty skipped for {record.name}: population of "
                f"{context.population_size} is too small"
            )
            return 0

        penalty = sum(
            RARE_DEPENDENCY_PENALTY
            for dep in significant
            if context.dependency_frequency.get(dep.name, 0) < RARE_DEPENDENCY_USAGE
        )
        return min(MAX_RARITY_PENALTY, penalty)
