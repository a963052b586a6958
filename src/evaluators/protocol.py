"""MCP protocol coverage evaluator."""

from src.consts import MAX_PROTOCOL_SCORE, PROTOCOL_FEATURE_WEIGHTS, PROTOCOL_UNANALYZED_SCORE
from src.evaluators.base import clamp
from src.models.model_score import EvalContext
from src.models.model_server import ServerRecord


class ProtocolEvaluator:
    """Scores which MCP capabilities and transports a server implements.

    Weights: tools 8, resources 8, prompts 5, sampling 5, stdio 4,
    streamable HTTP 4, roots 3, logging 3, OAuth2 2.

    Servers that have not been analyzed yet (null or empty features) get
    partial credit so a pending evaluation is not penalized.
    """

    max_score = MAX_PROTOCOL_SCORE

    def evaluate(self, record: ServerRecord, context: EvalContext) -> int:
        features = record.protocol_features
        if features is None:
            return PROTOCOL_UNANALYZED_SCORE

        score = sum(
            weight
            for feature, weight in PROTOCOL_FEATURE_WEIGHTS.items()
            if getattr(features, feature)
        )
        return clamp(score, self.max_score)
