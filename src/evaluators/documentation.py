"""Documentation evaluator."""

from src.consts import MAX_DOCUMENTATION_SCORE, README_MIN_LENGTH
from src.models.model_score import EvalContext
from src.models.model_server import ServerRecord


class DocumentationEvaluator:
    """Full points for a readme longer than 100 characters, otherwise none."""

    max_score = MAX_DOCUMENTATION_SCORE

    def evaluate(self, record: ServerRecord, context: EvalContext) -> int:
        if record.readme and len(record.readme) > README_MIN_LENGTH:
            return self.max_score
        return 0
