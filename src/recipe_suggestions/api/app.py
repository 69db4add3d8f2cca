"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from recipe_suggestions.api.callable_models import (
    RecipesSuggestionCall,
    RecipesSuggestionResult,
    error_payload,
)
from recipe_suggestions.app_logging import configure_logging
from recipe_suggestions.containers import AppContainer
from recipe_suggestions.services.recipes import RecipeGenerationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(RequestValidationError)
    async def invalid_argument(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_payload("INVALID_ARGUMENT", "Invalid request payload."),
        )

    @app.exception_handler(RecipeGenerationError)
    async def internal_error(
        request: Request, exc: RecipeGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_payload("INTERNAL", str(exc)),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/recipesSuggestion", response_model=RecipesSuggestionResult)
    async def recipes_suggestion(
        call: RecipesSuggestionCall, request: Request
    ) -> RecipesSuggestionResult:
        """Suggest three recipes for the given ingredients."""
        state_container: AppContainer = request.app.state.container
        recipes = await state_container.recipe_service.generate(
            call.data.ingredients
        )
        return RecipesSuggestionResult(result=recipes)

    return app
