"""Base evaluator protocol defining the contract for all evaluators."""

from typing import Protocol

from src.models.model_score import EvalContext
from src.models.model_server import ServerRecord


class BaseEvaluator(Protocol):
    """Protocol defining the evaluator contract.

    Evaluators are pure functions over a ServerRecord and an EvalContext.
    Each returns an integer sub-score between 0 and its ``max_score``.
    Anything population-relative (sibling counts, dependency frequency)
    comes through the context; evaluators never load records themselves.
    """

    max_score: int

    def evaluate(self, record: ServerRecord, context: EvalContext) -> int:
        """Evaluate the record on this dimension.

        Args:
            record: The server to evaluate
            context: Population statistics for relative scoring

        Returns:
            Sub-score between 0 and ``max_score``
        """
        ...


def clamp(value: int, upper: int, lower: int = 0) -> int:
    return max(lower, min(upper, value))


def step_score(value: float, steps: list[tuple[int, int]], inclusive: bool = False) -> int:
    """Points for the first threshold ``value`` exceeds (or reaches, when ``inclusive``)."""
    for threshold, points in steps:
        if value > threshold or (inclusive and value == threshold):
            return points
    return 0
