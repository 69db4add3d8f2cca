"""ASGI entrypoint for the recipe suggestions API."""

from recipe_suggestions.api.app import create_app
from recipe_suggestions.containers import build_container

app = create_app(build_container())
