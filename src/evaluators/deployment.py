"""Deployment maturity evaluator."""

from src.consts import CI_CD_POINTS, MAX_DEPLOYMENT_SCORE, RELEASES_POINTS
from src.evaluators.base import clamp
from src.models.model_score import EvalContext
from src.models.model_server import ServerRecord


class DeploymentEvaluator:
    """+5 for detected CI/CD, +5 for published releases."""

    max_score = MAX_DEPLOYMENT_SCORE

    def evaluate(self, record: ServerRecord, context: EvalContext) -> int:
        repository = record.repository
        if repository is None:
            return 0

        score = 0
        if repository.ci_cd:
            score += CI_CD_POINTS
        if repository.releases:
            score += RELEASES_POINTS
        return clamp(score, self.max_score)
