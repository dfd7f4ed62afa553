"""Recipe lookup used when recipes are added to the grocery list."""

import uuid
from abc import ABC, abstractmethod

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from grocerylist.logging_config import get_logger
from grocerylist.models import Recipe
from grocerylist.schemas import Ingredient, RecipeIngredients

logger = get_logger(__name__)


class RecipeNotFoundError(Exception):
    """Raised when a recipe id is unknown to the recipe source."""

    def __init__(self, recipe_id: str):
        super().__init__(f"Recipe {recipe_id} not found")
        self.recipe_id = recipe_id


class RecipeSource(ABC):
    """Where the grocery list reads recipe titles and ingredients from."""

    @abstractmethod
    async def get_recipe(self, recipe_id: str) -> RecipeIngredients | None:
        """Return the recipe's title and ingredients, or None if unknown."""
        pass


def _to_schema(recipe: Recipe) -> RecipeIngredients:
    return RecipeIngredients(
        id=recipe.id,
        title=recipe.title,
        ingredients=[Ingredient.model_validate(ing) for ing in recipe.ingredients or []],
    )


class SQLRecipeSource(RecipeSource):
    """Recipes stored in the recipes table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_recipe(self, recipe_id: str) -> RecipeIngredients | None:
        recipe = await self.session.get(Recipe, recipe_id)
        return _to_schema(recipe) if recipe else None

    async def list_recipes(self, limit: int = 50, offset: int = 0) -> list[RecipeIngredients]:
        """List recipes, newest first."""
        result = await self.session.execute(
            select(Recipe).order_by(Recipe.created_at.desc()).limit(limit).offset(offset)
        )
        return [_to_schema(recipe) for recipe in result.scalars()]

    async def create_recipe(
        self,
        title: str,
        ingredients: list[Ingredient],
        recipe_id: str | None = None,
    ) -> RecipeIngredients:
        """Save a recipe and return it with its assigned id."""
        recipe = Recipe(
            id=recipe_id or str(uuid.uuid4()),
            title=title,
            ingredients=[ing.model_dump(exclude_none=True) for ing in ingredients],
        )
        self.session.add(recipe)
        await self.session.commit()
        logger.info(f"Saved recipe {recipe.id} with {len(ingredients)} ingredients")
        return _to_schema(recipe)

    async def delete_recipe(self, recipe_id: str) -> bool:
        """Delete a recipe. Returns False if it did not exist."""
        recipe = await self.session.get(Recipe, recipe_id)
        if not recipe:
            return False
        await self.session.delete(recipe)
        await self.session.commit()
        logger.info(f"Deleted recipe {recipe_id}")
        return True
