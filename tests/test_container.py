"""Tests for container wiring and settings."""

import asyncio

from recipe_suggestions.config import Settings
from recipe_suggestions.containers import build_container
from recipe_suggestions.services.tools import NUTRITION_TOOL_NAME


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.recipe_service.model == settings.openai_model
    assert [tool.name for tool in container.recipe_service.tools] == [
        NUTRITION_TOOL_NAME
    ]
    asyncio.run(container.close_resources())


def test_settings_read_secrets_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "env-openai")
    monkeypatch.setenv("API_NINJA_KEY", "env-ninja")

    settings = Settings()

    assert settings.openai_api_key == "env-openai"
    assert settings.api_ninja_key == "env-ninja"
    assert settings.openai_temperature == 0.0
    assert settings.max_tool_turns == 5
