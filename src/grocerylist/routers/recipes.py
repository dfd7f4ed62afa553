"""API routes for the recipes the grocery list reads from."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from grocerylist.database import get_db
from grocerylist.grocery.recipes import SQLRecipeSource
from grocerylist.logging_config import get_logger
from grocerylist.schemas import Ingredient, RecipeIngredients

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


class RecipeCreateRequest(BaseModel):
    """Recipe to save, typically as extracted from a video or web page."""

    id: str | None = Field(None, description="Recipe id; generated if omitted")
    title: str = Field(min_length=1)
    ingredients: list[Ingredient] = Field(default_factory=list)


class RecipeListResponse(BaseModel):
    """Paginated list of recipes."""

    recipes: list[RecipeIngredients]
    total: int
    offset: int
    limit: int


async def get_recipe_source(db: AsyncSession = Depends(get_db)) -> SQLRecipeSource:
    return SQLRecipeSource(db)


@router.post("/", response_model=RecipeIngredients, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    request: RecipeCreateRequest,
    source: SQLRecipeSource = Depends(get_recipe_source),
) -> RecipeIngredients:
    """Save a recipe with its ingredients."""
    logger.info(f"Creating recipe '{request.title}'")

    try:
        return await source.create_recipe(request.title, request.ingredients, request.id)
    except Exception as e:
        logger.error(f"Failed to create recipe '{request.title}': {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save recipe",
        )


@router.get("/", response_model=RecipeListResponse)
async def list_recipes(
    limit: Annotated[int, Query(ge=1, le=100, description="Max recipes to return")] = 50,
    offset: Annotated[int, Query(ge=0, description="Pagination offset")] = 0,
    source: SQLRecipeSource = Depends(get_recipe_source),
) -> RecipeListResponse:
    """List saved recipes, newest first."""
    try:
        recipes = await source.list_recipes(limit=limit, offset=offset)
    except Exception as e:
        logger.error(f"Failed to list recipes: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch recipes",
        )

    return RecipeListResponse(recipes=recipes, total=len(recipes), offset=offset, limit=limit)


@router.get("/{recipe_id}", response_model=RecipeIngredients)
async def get_recipe(
    recipe_id: str,
    source: SQLRecipeSource = Depends(get_recipe_source),
) -> RecipeIngredients:
    """Get a recipe with its ingredients."""
    try:
        recipe = await source.get_recipe(recipe_id)

        if not recipe:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Recipe {recipe_id} not found",
            )

        return recipe
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch recipe {recipe_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch recipe",
        )


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: str,
    source: SQLRecipeSource = Depends(get_recipe_source),
) -> None:
    """Delete a saved recipe. Its grocery list contributions are left in place."""
    logger.info(f"Deleting recipe: {recipe_id}")

    try:
        deleted = await source.delete_recipe(recipe_id)

        if not deleted:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Recipe {recipe_id} not found",
            )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete recipe {recipe_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete recipe",
        )
