"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from recipe_suggestions.adapters.ninjas_client import HttpxNinjasClient
from recipe_suggestions.adapters.openai_recipe_client import OpenAIRecipeClient
from recipe_suggestions.config import Settings
from recipe_suggestions.services.nutrition import NutritionService
from recipe_suggestions.services.recipes import RecipeService
from recipe_suggestions.services.tools import nutrition_facts_tool


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_service: NutritionService
    recipe_service: RecipeService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    ninjas_client = HttpxNinjasClient.create(
        api_key=resolved_settings.api_ninja_key,
        base_url=resolved_settings.ninjas_base_url,
    )
    nutrition_service = NutritionService(client=ninjas_client)
    openai_client = OpenAIRecipeClient.create(resolved_settings.openai_api_key)
    recipe_service = RecipeService(
        client=openai_client,
        tools=[nutrition_facts_tool(nutrition_service)],
        model=resolved_settings.openai_model,
        temperature=resolved_settings.openai_temperature,
        max_tool_turns=resolved_settings.max_tool_turns,
    )

    async def close_resources() -> None:
        await ninjas_client.close()
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        recipe_service=recipe_service,
        close_resources=close_resources,
    )
