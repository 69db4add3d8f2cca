"""Nutrition lookup backed by the API Ninjas nutrition endpoint."""

import logging
from dataclasses import dataclass

from pydantic import TypeAdapter, ValidationError

from recipe_suggestions.adapters.ninjas_client import NutritionApiClient
from recipe_suggestions.domain.nutrition import NutritionItem, NutritionTotals

_logger = logging.getLogger(__name__)

_ITEMS_ADAPTER = TypeAdapter(list[NutritionItem])


class NutritionUnavailableError(RuntimeError):
    """Raised when nutrition facts cannot be retrieved or processed."""

    def __init__(self) -> None:
        super().__init__("Unable to retrieve or process nutrition information.")


class InvalidNutritionDataError(ValueError):
    """Raised when the nutrition API payload does not match the item schema."""


@dataclass
class NutritionService:
    """Turns a one-serving ingredients list into a nutrition summary."""

    client: NutritionApiClient

    async def lookup(self, ingredients_list: str) -> str:
        """Return summed nutrition facts for ``ingredients_list``.

        ``ingredients_list`` holds quantities for one person joined by "and",
        e.g. ``"150g beef and 200g pumpkin and 50ml heavy cream"``.
        """
        try:
            payload = await self.client.fetch_nutrition(ingredients_list)
            items = _parse_items(payload)
            summary = NutritionTotals.from_items(items).summary()
        except Exception as exc:
            _logger.exception("Nutrition lookup failed for query=%r", ingredients_list)
            raise NutritionUnavailableError() from exc
        _logger.info(
            "Nutrition lookup: query=%r items=%s", ingredients_list, len(items)
        )
        return summary


def _parse_items(payload: object) -> list[NutritionItem]:
    """Validate the raw API payload as a list of nutrition items."""
    try:
        return _ITEMS_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        _logger.error(
            "Nutrition data validation failed: errors=%s payload=%r",
            exc.errors(include_url=False),
            payload,
        )
        raise InvalidNutritionDataError(
            "Invalid nutrition data format received from API."
        ) from exc
