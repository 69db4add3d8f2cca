"""Nutrition domain models."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict


class NutritionItem(BaseModel):
    """One item of the nutrition API response.

    Field types follow the free API tier response shape, which returns
    placeholder text for calories, serving size and protein, so those are
    strings. A premium key returns protein as a number, which this model
    rejects. Everything else must arrive as a JSON number.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    name: str
    calories: str
    serving_size_g: str
    fat_total_g: float
    fat_saturated_g: float
    protein_g: str
    sodium_mg: float
    potassium_mg: float
    cholesterol_mg: float
    carbohydrates_total_g: float
    fiber_g: float
    sugar_g: float


@dataclass(frozen=True)
class NutritionTotals:
    """Summed nutrition values for one serving."""

    fat: float = 0.0
    sat_fat: float = 0.0
    sodium: float = 0.0
    cholesterol: float = 0.0
    carbs: float = 0.0
    sugar: float = 0.0
    potassium: float = 0.0

    @classmethod
    def from_items(cls, items: Iterable[NutritionItem]) -> "NutritionTotals":
        """Sum the tracked fields across all items."""
        totals = cls()
        for item in items:
            totals = totals.add(item)
        return totals

    def add(self, item: NutritionItem) -> "NutritionTotals":
        """Return new totals including ``item``."""
        return NutritionTotals(
            fat=self.fat + item.fat_total_g,
            sat_fat=self.sat_fat + item.fat_saturated_g,
            sodium=self.sodium + item.sodium_mg,
            cholesterol=self.cholesterol + item.cholesterol_mg,
            carbs=self.carbs + item.carbohydrates_total_g,
            sugar=self.sugar + item.sugar_g,
            potassium=self.potassium + item.potassium_mg,
        )

    def summary(self) -> str:
        """Render the totals as a single human-readable sentence."""
        return (
            f"Total fat: {_one_decimal(self.fat)}g, "
            f"saturated fat: {_one_decimal(self.sat_fat)}g, "
            f"sodium: {_plain_number(self.sodium)}mg, "
            f"cholesterol: {_plain_number(self.cholesterol)}mg, "
            f"carbs: {_one_decimal(self.carbs)}g, "
            f"sugars: {_one_decimal(self.sugar)}g, "
            f"potassium: {_plain_number(self.potassium)}mg."
        )


def _one_decimal(value: float) -> str:
    """Round half up on the exact binary value of ``value``."""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _plain_number(value: float) -> str:
    """Format without rounding; integral values drop the decimal part."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
