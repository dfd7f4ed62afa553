"""API routes for the aggregated grocery list."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from grocerylist.database import get_db
from grocerylist.grocery.recipes import RecipeNotFoundError, SQLRecipeSource
from grocerylist.grocery.storage import SQLKeyValueStore, StorageWriteError
from grocerylist.grocery.store import GroceryListStore
from grocerylist.grocery.views import group_by_aisle, list_progress
from grocerylist.logging_config import get_logger
from grocerylist.schemas import AisleSection, GroceryItem, GroceryProgress, Ingredient

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/grocery-list", tags=["grocery-list"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class AddRecipeRequest(BaseModel):
    """Optional subset of a recipe's ingredients to add."""

    ingredients: list[Ingredient] | None = Field(
        None, description="Ingredients to add; all of the recipe's if omitted"
    )


class GrocerySectionsResponse(BaseModel):
    """The list grouped by aisle, with completion progress."""

    sections: list[AisleSection]
    progress: GroceryProgress


class RecipeMembershipResponse(BaseModel):
    """Whether a recipe currently contributes to the list."""

    model_config = ConfigDict(populate_by_name=True)

    recipe_id: str = Field(alias="recipeId")
    in_list: bool = Field(alias="inList")


class RecipeIdsResponse(BaseModel):
    """Recipes currently contributing to the list."""

    model_config = ConfigDict(populate_by_name=True)

    recipe_ids: list[str] = Field(alias="recipeIds")


# =============================================================================
# Dependencies
# =============================================================================


async def get_grocery_store(db: AsyncSession = Depends(get_db)) -> GroceryListStore:
    """Grocery list store bound to the request's database session."""
    return GroceryListStore(SQLKeyValueStore(db), SQLRecipeSource(db))


def _write_failed(action: str, e: StorageWriteError) -> HTTPException:
    logger.error(f"Failed to {action}: {e}")
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=f"Failed to {action}; the grocery list was not saved",
    )


def _server_error(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )


# =============================================================================
# List Endpoints
# =============================================================================


@router.get("/", response_model=list[GroceryItem])
async def get_grocery_list(
    store: GroceryListStore = Depends(get_grocery_store),
) -> list[GroceryItem]:
    """Get every item on the grocery list."""
    try:
        return await store.get_list()
    except Exception as e:
        raise _server_error("fetch the grocery list", e)


@router.get("/sections", response_model=GrocerySectionsResponse)
async def get_grocery_sections(
    store: GroceryListStore = Depends(get_grocery_store),
) -> GrocerySectionsResponse:
    """Get the list grouped into aisles in store order, with checked progress."""
    try:
        items = await store.get_list()
        return GrocerySectionsResponse(
            sections=group_by_aisle(items), progress=list_progress(items)
        )
    except Exception as e:
        raise _server_error("fetch grocery sections", e)


@router.get("/export", response_class=PlainTextResponse)
async def export_grocery_list(
    store: GroceryListStore = Depends(get_grocery_store),
) -> str:
    """Export the unchecked items as plain text, one per line."""
    try:
        return await store.export_text()
    except Exception as e:
        raise _server_error("export the grocery list", e)


@router.delete("/checked", response_model=list[GroceryItem])
async def clear_checked_items(
    store: GroceryListStore = Depends(get_grocery_store),
) -> list[GroceryItem]:
    """Remove every checked item."""
    try:
        return await store.clear_checked()
    except StorageWriteError as e:
        raise _write_failed("clear checked items", e)
    except Exception as e:
        raise _server_error("clear checked items", e)


@router.delete("/", response_model=list[GroceryItem])
async def clear_grocery_list(
    store: GroceryListStore = Depends(get_grocery_store),
) -> list[GroceryItem]:
    """Empty the grocery list."""
    try:
        return await store.clear_all()
    except StorageWriteError as e:
        raise _write_failed("clear the grocery list", e)
    except Exception as e:
        raise _server_error("clear the grocery list", e)


# =============================================================================
# Recipe Endpoints
# =============================================================================


@router.get("/recipes", response_model=RecipeIdsResponse)
async def get_grocery_recipe_ids(
    store: GroceryListStore = Depends(get_grocery_store),
) -> RecipeIdsResponse:
    """List the recipes contributing to the grocery list."""
    try:
        recipe_ids = await store.get_recipe_ids()
    except Exception as e:
        raise _server_error("fetch grocery list recipes", e)

    return RecipeIdsResponse(recipe_ids=sorted(recipe_ids))


@router.get("/recipes/{recipe_id}", response_model=RecipeMembershipResponse)
async def is_recipe_in_grocery_list(
    recipe_id: str,
    store: GroceryListStore = Depends(get_grocery_store),
) -> RecipeMembershipResponse:
    """Check whether a recipe contributes to the grocery list."""
    try:
        in_list = await store.is_recipe_in_list(recipe_id)
    except Exception as e:
        raise _server_error(f"check recipe {recipe_id}", e)

    return RecipeMembershipResponse(recipe_id=recipe_id, in_list=in_list)


@router.post("/recipes/{recipe_id}", response_model=list[GroceryItem])
async def add_recipe_to_grocery_list(
    recipe_id: str,
    request: AddRecipeRequest | None = None,
    store: GroceryListStore = Depends(get_grocery_store),
) -> list[GroceryItem]:
    """
    Add a recipe's ingredients to the grocery list.

    Matching ingredients already on the list are merged. Adding a recipe
    that is already on the list replaces its earlier contribution.
    """
    logger.info(f"Adding recipe {recipe_id} to grocery list")

    try:
        return await store.add_recipe(recipe_id, request.ingredients if request else None)
    except RecipeNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Recipe {recipe_id} not found",
        )
    except StorageWriteError as e:
        raise _write_failed(f"add recipe {recipe_id}", e)
    except HTTPException:
        raise
    except Exception as e:
        raise _server_error(f"add recipe {recipe_id}", e)


@router.delete("/recipes/{recipe_id}", response_model=list[GroceryItem])
async def remove_recipe_from_grocery_list(
    recipe_id: str,
    store: GroceryListStore = Depends(get_grocery_store),
) -> list[GroceryItem]:
    """Withdraw a recipe's ingredients from the grocery list."""
    logger.info(f"Removing recipe {recipe_id} from grocery list")

    try:
        return await store.remove_recipe(recipe_id)
    except StorageWriteError as e:
        raise _write_failed(f"remove recipe {recipe_id}", e)
    except Exception as e:
        raise _server_error(f"remove recipe {recipe_id}", e)


# =============================================================================
# Item Endpoints
# =============================================================================


@router.post("/items/{item_id}/toggle", response_model=list[GroceryItem])
async def toggle_grocery_item(
    item_id: str,
    store: GroceryListStore = Depends(get_grocery_store),
) -> list[GroceryItem]:
    """Check or uncheck an item. Unknown ids leave the list unchanged."""
    try:
        return await store.toggle_checked(item_id)
    except StorageWriteError as e:
        raise _write_failed(f"toggle item {item_id}", e)
    except Exception as e:
        raise _server_error(f"toggle item {item_id}", e)


@router.delete("/items/{item_id}", response_model=list[GroceryItem])
async def remove_grocery_item(
    item_id: str,
    store: GroceryListStore = Depends(get_grocery_store),
) -> list[GroceryItem]:
    """Remove a single item. Unknown ids leave the list unchanged."""
    try:
        return await store.remove_item(item_id)
    except StorageWriteError as e:
        raise _write_failed(f"remove item {item_id}", e)
    except Exception as e:
        raise _server_error(f"remove item {item_id}", e)
