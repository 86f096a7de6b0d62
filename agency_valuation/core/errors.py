"""Error types raised inside the engine and the envelope attached to fallback results."""
from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Serializable error envelope carried by a fallback ResultsRecord."""
    model_config = ConfigDict(frozen=True)

    error: str
    message: str
    detail: Any = None


class AssessmentError(Exception):
    """Base class for every error raised by the scoring pipeline."""

    code = "assessment_error"

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.code, message=str(self))


class CatalogError(AssessmentError):
    """A static question table is malformed."""

    code = "invalid_catalog"


class UnknownQuestionError(AssessmentError):
    """An answer references a question id that is not in the catalog."""

    code = "unknown_question"

    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(f"Answer references unknown question '{question_id}'")


class InvalidAnswerError(AssessmentError):
    """An answer score is not an integer between 0 and 5."""

    code = "invalid_answer"

    def __init__(self, question_id: str, score: Any):
        self.question_id = question_id
        self.score = score
        super().__init__(
            f"Answer for question '{question_id}' must be an integer 0-5, got {score!r}"
        )


def fallback_error(exc: Exception) -> ErrorResponse:
    """Build the envelope recorded when the pipeline falls back to neutral results."""
    if isinstance(exc, AssessmentError):
        detail: Any = exc.code
    else:
        detail = type(exc).__name__
    return ErrorResponse(
        error="computation_failure",
        message=str(exc) or "Error calculating results",
        detail=detail,
    )
