from pydantic import BaseModel, Field

from src.models.model_server import ServerRecord


class EvaluationLoadResult(BaseModel):
    """Outcome of reading one evaluation document.

    Exactly one of ``record`` and ``error`` is set.
    """

    key: str = Field(description="Document file stem")
    record: ServerRecord | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.record is not None
