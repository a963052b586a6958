"""Population statistics for population-relative scoring.

Statistics are computed once per scoring run and passed to evaluators via
EvalContext:

- repo_counts: how many records share each owner/repo (monorepo siblings)
- dependency_frequency: how many records use each significant dependency,
  only when the population is large enough for rarity to be meaningful
"""

from collections import Counter

from src.consts import RARITY_MIN_POPULATION
from src.evaluators.community import repo_key
from src.evaluators.dependencies import significant_dependencies
from src.models.model_score import EvalContext
from src.models.model_server import ServerRecord


def compute_repo_counts(records: list[ServerRecord]) -> dict[str, int]:
    """Count records per owner/repo. Remote records are not counted."""
    counts: Counter[str] = Counter()
    for record in records:
        repository = record.repository
        if repository is not None:
            counts[repo_key(repository.owner, repository.repo)] += 1
    return dict(counts)


def compute_dependency_frequency(records: list[ServerRecord]) -> dict[str, int]:
    """Count how many times each significant dependency is declared."""
    frequency: Counter[str] = Counter()
    for record in records:
        for dep in significant_dependencies(record.dependencies):
            frequency[dep.name] += 1
    return dict(frequency)


def build_eval_context(population: list[ServerRecord] | None = None) -> EvalContext:
    """Build the evaluation context for a population of records.

    Args:
        population: Every record the score should be relative to. None
            scores each record on its own (no siblings, no rarity penalty).

    Returns:
        EvalContext. ``dependency_frequency`` is None unless the population
        holds more than 10 records.
    """
    if not population:
        return EvalContext()

    dependency_frequency = None
    if len(population) > RARITY_MIN_POPULATION:
        dependency_frequency = compute_dependency_frequency(population)

    return EvalContext(
        repo_counts=compute_repo_counts(population),
        dependency_frequency=dependency_frequency,
        population_size=len(population),
    )
