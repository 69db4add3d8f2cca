"""Recipe generation service using an LLM with a nutrition tool."""

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from recipe_suggestions.domain.recipes import RecipeSuggestionResponse
from recipe_suggestions.services.tools import NUTRITION_TOOL_NAME, ToolDefinition

_logger = logging.getLogger(__name__)

_RECIPE_FIELDS = ["title", "ingredients", "instructions", "nutritionInformation"]

RECIPES_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "recipes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {field: {"type": "string"} for field in _RECIPE_FIELDS},
                "required": _RECIPE_FIELDS,
                "additionalProperties": False,
            },
        },
        "healthiestRecommendation": {"type": "string"},
    },
    "required": ["recipes", "healthiestRecommendation"],
    "additionalProperties": False,
}


class RecipeModelClient(Protocol):
    """Interface for tool-assisted structured generation."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        temperature: float | None,
        prompt: str,
        schema: dict[str, object],
        tools: Sequence[ToolDefinition],
        max_turns: int,
    ) -> dict[str, object]:
        """Return the model's final structured output."""


class RecipeGenerationError(RuntimeError):
    """Raised when recipes cannot be generated or validated.

    The message is a JSON document describing the underlying failure.
    """

    def __init__(self, cause: BaseException) -> None:
        self.detail = {"type": type(cause).__name__, "message": str(cause)}
        super().__init__(json.dumps(self.detail))


@dataclass
class RecipeService:
    """Service that prompts the model for recipes and validates the result."""

    client: RecipeModelClient
    tools: Sequence[ToolDefinition]
    model: str
    temperature: float | None = 0.0
    max_tool_turns: int = 5

    async def generate(self, ingredients: list[str]) -> RecipeSuggestionResponse:
        """Generate three recipes and a healthiest recommendation."""
        try:
            raw = await self.client.generate(
                model=self.model,
                temperature=self.temperature,
                prompt=build_prompt(ingredients),
                schema=RECIPES_SCHEMA,
                tools=self.tools,
                max_turns=self.max_tool_turns,
            )
            result = RecipeSuggestionResponse.model_validate(raw)
        except ValidationError as exc:
            _logger.error("Recipe output failed validation: %s", exc)
            raise RecipeGenerationError(exc) from exc
        except Exception as exc:
            _logger.exception("Recipe generation failed")
            raise RecipeGenerationError(exc) from exc
        _logger.info(
            "Generated %s recipes for %s ingredients",
            len(result.recipes),
            len(ingredients),
        )
        return result


def build_prompt(ingredients: list[str]) -> str:
    """Build the chef prompt for the given ingredients."""
    return f"""You are a professional chef and AI assistant. Your task is to generate exactly three recipes based on the provided ingredients: {",".join(ingredients)}.

Return your full response as a valid JSON **object** with two properties:
1. "recipes": an array of exactly 3 recipe objects.
2. "healthiestRecommendation": a string identifying which of the three recipes is the healthiest, with an explanation.

Each recipe object must include the following 4 string properties:
- "title": A concise recipe name.
- "ingredients": A comma-separated list of max 8 ingredients with the quantities for 4 people.
- "instructions": A single string of a maximum 80 words describing how to cook the recipe.
- "nutritionInformation": A string summarizing the key nutrition data for one person (e.g. total fat in grams, sugar, cholesterol, sodium, etc.).

Use the provided tool "{NUTRITION_TOOL_NAME}" to fetch nutritional data for each recipe.
To call the tool, provide an object with key "ingredientsList" containing all the ingredients and quantities for only one person, separated by "and".
Example: {{ "ingredientsList": "150g beef and 200g pumpkin and 50ml heavy cream" }}

For "healthiestRecommendation", compare the recipes based on key metrics like total fat, saturated fat, sodium, sugar, and cholesterol,
and also consider the overall nutritional quality of the ingredients.
Clearly explain why one recipe is healthier than the others."""
