"""Badge adoption evaluator."""

from src.consts import BRAND_NAME, MAX_BADGE_SCORE
from src.models.model_score import EvalContext
from src.models.model_server import ServerRecord


class BadgeUsageEvaluator:
    """Rewards readmes that mention the catalog brand.

    A lightweight heuristic: any case-insensitive mention counts, whether
    or not the badge image itself is embedded.
    """

    max_score = MAX_BADGE_SCORE

    def evaluate(self, record: ServerRecord, context: EvalContext) -> int:
        if record.readme and BRAND_NAME in record.readme.lower():
            return self.max_score
        return 0
