"""Function tools exposed to the generation model."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recipe_suggestions.services.nutrition import NutritionService

NUTRITION_TOOL_NAME = "nutritionFactsTool"

ToolHandler = Callable[[dict[str, object]], Awaitable[str]]


@dataclass(frozen=True)
class ToolDefinition:
    """A named callable the model may invoke with JSON arguments."""

    name: str
    description: str
    parameters: dict[str, object]
    handler: ToolHandler

    def declaration(self) -> dict[str, object]:
        """Return the function tool declaration for the Responses API."""
        return {
            "type": "function",
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters,
            "strict": True,
        }


def nutrition_facts_tool(nutrition_service: "NutritionService") -> ToolDefinition:
    """Expose the nutrition lookup as a model tool."""

    async def handler(arguments: dict[str, object]) -> str:
        return await nutrition_service.lookup(str(arguments["ingredientsList"]))

    return ToolDefinition(
        name=NUTRITION_TOOL_NAME,
        description=(
            "A tool that calls an API which extracts nutrition information from "
            "text using natural language processing. The API returns details like "
            "total combined fat (including saturated and trans fats) in grams or "
            "sodium in milligrams."
        ),
        parameters={
            "type": "object",
            "properties": {
                "ingredientsList": {
                    "type": "string",
                    "description": (
                        "The quantity and name of all the ingredients for one "
                        "person. Each ingredient and its quantity is separated "
                        "by the **and** word."
                    ),
                }
            },
            "required": ["ingredientsList"],
            "additionalProperties": False,
        },
        handler=handler,
    )
