"""Community (repository metrics) evaluator."""

from src.consts import (
    CONTRIBUTOR_STEPS,
    CONTRIBUTOR_TOP_STEP,
    ISSUE_STEPS,
    MAX_COMMUNITY_SCORE,
    STAR_STEPS,
)
from src.evaluators.base import clamp, step_score
from src.models.model_score import EvalContext
from src.models.model_server import ServerRecord


def repo_key(owner: str, repo: str) -> str:
    return f"{owner}/{repo}"


def contributor_score(contributors: float) -> int:
    top_threshold, top_points = CONTRIBUTOR_TOP_STEP
    if contributors > top_threshold:
        return top_points
    return step_score(contributors, CONTRIBUTOR_STEPS, inclusive=True)


class CommunityEvaluator:
    """Scores stars, contributors and open issues of the source repository.

    Repository metrics are shared by every server living in the same
    repository, so each metric is divided by the number of sibling records
    before the step functions apply:

    - stars: >1000: 10, >500: 8, >100: 6, >50: 4, >10: 2
    - contributors: >10: 6, >=4: 4, >=2: 2
    - issues: >20: 4, >5: 2
    """

    max_score = MAX_COMMUNITY_SCORE

    def evaluate(self, record: ServerRecord, context: EvalContext) -> int:
        repository = record.repository
        if repository is None:
            return 0

        siblings = max(1, context.repo_counts.get(repo_key(repository.owner, repository.repo), 1))
        stars = repository.stars / siblings
        contributors = repository.contributors / siblings
        issues = repository.issues / siblings

        score = (
            step_score(stars, STAR_STEPS)
            + contributor_score(contributors)
            + step_score(issues, ISSUE_STEPS)
        )
        return clamp(score, self.max_score)
