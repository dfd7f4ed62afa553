"""Common data schemas for recipes and the grocery list."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

AisleCategory = Literal[
    "produce",
    "meat-seafood",
    "dairy-eggs",
    "bakery",
    "frozen",
    "pantry",
    "spices-seasonings",
    "condiments-sauces",
    "beverages",
    "other",
]


class Ingredient(BaseModel):
    """A single recipe ingredient as extracted, before aggregation."""

    model_config = ConfigDict(frozen=True)

    name: str
    quantity: str = Field(default="", description="Free text, e.g. '2 cups' or 'to taste'")
    category: str | None = None


class RecipeIngredients(BaseModel):
    """What the grocery list needs to know about a recipe."""

    id: str
    title: str
    ingredients: list[Ingredient] = Field(default_factory=list)


class GrocerySource(BaseModel):
    """Provenance of one recipe's contribution to a grocery item."""

    model_config = ConfigDict(populate_by_name=True)

    recipe_id: str = Field(alias="recipeId")
    recipe_title: str = Field(alias="recipeTitle")
    quantity: str


class GroceryItem(BaseModel):
    """Merged shopping-list entry for one normalized ingredient name."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    display_quantity: str = Field(alias="displayQuantity")
    aisle: AisleCategory
    checked: bool = False
    sources: list[GrocerySource] = Field(min_length=1)
    added_at: datetime = Field(alias="addedAt")


class AisleSection(BaseModel):
    """Items of one aisle, in display order."""

    aisle: AisleCategory
    label: str
    emoji: str
    items: list[GroceryItem]


class GroceryProgress(BaseModel):
    """How far the shopper has got through the list."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    checked: int
    all_done: bool = Field(alias="allDone")
