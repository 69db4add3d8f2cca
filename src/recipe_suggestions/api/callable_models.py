"""Envelopes for the callable-function HTTP protocol."""

from pydantic import BaseModel

from recipe_suggestions.domain.recipes import IngredientsRequest, RecipeSuggestionResponse


class RecipesSuggestionCall(BaseModel):
    """Incoming call payload: ``{"data": {"ingredients": [...]}}``."""

    data: IngredientsRequest


class RecipesSuggestionResult(BaseModel):
    """Successful call payload."""

    result: RecipeSuggestionResponse


class CallableErrorBody(BaseModel):
    """Error details returned to the caller."""

    status: str
    message: str


class CallableError(BaseModel):
    """Failed call payload: ``{"error": {"status": ..., "message": ...}}``."""

    error: CallableErrorBody


def error_payload(status: str, message: str) -> dict[str, object]:
    """Build a serialized error envelope."""
    return CallableError(
        error=CallableErrorBody(status=status, message=message)
    ).model_dump()
