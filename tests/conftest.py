"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from recipe_suggestions.adapters.ninjas_client import NutritionApiClient
from recipe_suggestions.config import Settings
from recipe_suggestions.containers import AppContainer
from recipe_suggestions.services.nutrition import NutritionService
from recipe_suggestions.services.recipes import RecipeModelClient, RecipeService
from recipe_suggestions.services.tools import ToolDefinition, nutrition_facts_tool


def nutrition_item(**overrides: object) -> dict[str, object]:
    """Build a nutrition API item with free-tier placeholder strings."""
    item: dict[str, object] = {
        "name": "beef",
        "calories": "Only available for premium subscribers.",
        "serving_size_g": "Only available for premium subscribers.",
        "fat_total_g": 10,
        "fat_saturated_g": 2,
        "protein_g": "Only available for premium subscribers.",
        "sodium_mg": 100,
        "potassium_mg": 50,
        "cholesterol_mg": 5,
        "carbohydrates_total_g": 20,
        "fiber_g": 0,
        "sugar_g": 3,
    }
    item.update(overrides)
    return item


SAMPLE_RECIPES: dict[str, object] = {
    "recipes": [
        {
            "title": f"Recipe {index}",
            "ingredients": "600g beef, 800g pumpkin",
            "instructions": "Roast everything.",
            "nutritionInformation": "Total fat: 15.0g",
        }
        for index in range(1, 4)
    ],
    "healthiestRecommendation": "Recipe 2 has the least saturated fat.",
}


@dataclass
class FakeNutritionApiClient(NutritionApiClient):
    """Fake nutrition API returning a fixed payload."""

    payload: object = field(
        default_factory=lambda: [
            nutrition_item(),
            nutrition_item(
                name="pumpkin",
                fat_total_g=5,
                fat_saturated_g=1,
                sodium_mg=50,
                potassium_mg=25,
                cholesterol_mg=2,
                carbohydrates_total_g=10,
                sugar_g=1,
            ),
        ]
    )
    error: Exception | None = None
    queries: list[str] = field(default_factory=list)

    async def fetch_nutrition(self, query: str) -> object:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeRecipeModelClient(RecipeModelClient):
    """Fake model that calls each tool once, then returns a fixed payload."""

    payload: object = field(default_factory=lambda: SAMPLE_RECIPES)
    tool_arguments: dict[str, object] = field(
        default_factory=lambda: {"ingredientsList": "150g beef and 200g pumpkin"}
    )
    prompts: list[str] = field(default_factory=list)
    tool_outputs: list[str] = field(default_factory=list)
    temperatures: list[float | None] = field(default_factory=list)

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
        self.prompts.append(prompt)
        self.temperatures.append(temperature)
        for tool in tools:
            self.tool_outputs.append(await tool.handler(self.tool_arguments))
        return self.payload  # type: ignore[return-value]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="openai-key",
        api_ninja_key="ninja-key",
    )


@pytest.fixture
def nutrition_client() -> FakeNutritionApiClient:
    return FakeNutritionApiClient()


@pytest.fixture
def model_client() -> FakeRecipeModelClient:
    return FakeRecipeModelClient()


@pytest.fixture
def container(
    settings: Settings,
    nutrition_client: FakeNutritionApiClient,
    model_client: FakeRecipeModelClient,
) -> AppContainer:
    nutrition_service = NutritionService(client=nutrition_client)
    recipe_service = RecipeService(
        client=model_client,
        tools=[nutrition_facts_tool(nutrition_service)],
        model=settings.openai_model,
        temperature=settings.openai_temperature,
        max_tool_turns=settings.max_tool_turns,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutrition_service=nutrition_service,
        recipe_service=recipe_service,
        close_resources=close_resources,
    )
