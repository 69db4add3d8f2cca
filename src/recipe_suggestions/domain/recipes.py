"""Recipe request and response models."""

from pydantic import BaseModel, ConfigDict, Field


class IngredientsRequest(BaseModel):
    """Ingredients entered by the user, bare names without quantities."""

    model_config = ConfigDict(frozen=True)

    ingredients: list[str]


class Recipe(BaseModel):
    """Single generated recipe."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str
    ingredients: str
    instructions: str
    nutrition_information: str = Field(alias="nutritionInformation")


class RecipeSuggestionResponse(BaseModel):
    """Generated recipes plus the healthiest pick."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    recipes: list[Recipe]
    healthiest_recommendation: str = Field(alias="healthiestRecommendation")
