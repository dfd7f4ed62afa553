"""Persisted grocery list and the operations that mutate it."""

from pydantic import TypeAdapter, ValidationError

from grocerylist.config import get_settings
from grocerylist.grocery.aggregation import AggregationEntry, aggregate_ingredients
from grocerylist.grocery.recipes import RecipeNotFoundError, RecipeSource
from grocerylist.grocery.storage import KeyValueStore, StorageReadError
from grocerylist.grocery.views import export_text, group_by_aisle, list_progress
from grocerylist.logging_config import LoggingContext, get_logger
from grocerylist.normalize.names import NameNormalizer, normalize_ingredient_name
from grocerylist.schemas import (
    AisleSection,
    GroceryItem,
    GrocerySource,
    GroceryProgress,
    Ingredient,
)

logger = get_logger(__name__)

_LIST_ADAPTER = TypeAdapter(list[GroceryItem])


def _replay(name: str, sources: list[GrocerySource]) -> list[AggregationEntry]:
    """Turn retained sources back into aggregation input."""
    return [
        AggregationEntry(
            ingredient=Ingredient(name=name, quantity=source.quantity),
            recipe_id=source.recipe_id,
            recipe_title=source.recipe_title,
        )
        for source in sources
    ]


class GroceryListStore:
    """
    Owns the persisted grocery list.

    Every mutation is a load-modify-save of the whole list. Calls against the
    same list must not overlap: there is no locking, so interleaved calls
    can lose a write.

    Adding a recipe rebuilds the list from the retained per-recipe
    contributions rather than patching totals, so adding the same recipe
    twice replaces its earlier contributions instead of counting them again.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        recipes: RecipeSource,
        storage_key: str | None = None,
        normalizer: NameNormalizer = normalize_ingredient_name,
    ):
        self.storage = storage
        self.recipes = recipes
        self.storage_key = storage_key or get_settings().grocery_list_key
        self.normalizer = normalizer

    # =========================================================================
    # Persistence
    # =========================================================================

    async def get_list(self) -> list[GroceryItem]:
        """Load the list. A missing, unreadable or corrupt blob reads as empty."""
        try:
            raw = await self.storage.get_item(self.storage_key)
        except StorageReadError as e:
            logger.warning(f"Grocery list unreadable, treating as empty: {e}")
            return []

        if not raw:
            return []

        try:
            return _LIST_ADAPTER.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                f"Grocery list blob is corrupt ({e.error_count()} errors), treating as empty"
            )
            return []

    async def _save(self, items: list[GroceryItem]) -> list[GroceryItem]:
        """Persist the list. StorageWriteError propagates to the caller."""
        payload = _LIST_ADAPTER.dump_json(items, by_alias=True).decode()
        await self.storage.set_item(self.storage_key, payload)
        return items

    async def set_list(self, items: list[GroceryItem]) -> list[GroceryItem]:
        """Replace the whole list."""
        return await self._save(items)

    # =========================================================================
    # Recipe contributions
    # =========================================================================

    async def add_recipe(
        self,
        recipe_id: str,
        selected_ingredients: list[Ingredient] | None = None,
    ) -> list[GroceryItem]:
        """
        Add a recipe's ingredients to the list.

        Args:
            recipe_id: Recipe to add.
            selected_ingredients: Subset of the recipe's ingredients to add.
                Defaults to all of them.

        Returns:
            The rebuilt list as persisted.

        Raises:
            RecipeNotFoundError: If the recipe source does not know the id.
        """
        with LoggingContext(recipe_id=recipe_id):
            recipe = await self.recipes.get_recipe(recipe_id)
            if recipe is None:
                logger.warning(f"Cannot add unknown recipe {recipe_id}")
                raise RecipeNotFoundError(recipe_id)

            ingredients = (
                selected_ingredients if selected_ingredients is not None else recipe.ingredients
            )
            existing = await self.get_list()

            entries: list[AggregationEntry] = []
            for item in existing:
                others = [s for s in item.sources if s.recipe_id != recipe_id]
                entries.extend(_replay(item.name, others))
            entries.extend(
                AggregationEntry(ingredient=ing, recipe_id=recipe_id, recipe_title=recipe.title)
                for ing in ingredients
            )

            new_list = aggregate_ingredients(entries, self.normalizer)

            checked_names = {item.name.lower() for item in existing if item.checked}
            for item in new_list:
                if item.name.lower() in checked_names:
                    item.checked = True

            logger.info(
                f"Added recipe '{recipe.title}' ({len(ingredients)} ingredients), "
                f"list now has {len(new_list)} items"
            )
            return await self._save(new_list)

    async def remove_recipe(self, recipe_id: str) -> list[GroceryItem]:
        """
        Withdraw a recipe's contributions.

        Items only that recipe contributed are deleted. Items it shared with
        other recipes keep their id, addedAt and checked flag, with quantity
        and aisle recomputed from what remains.
        """
        with LoggingContext(recipe_id=recipe_id):
            existing = await self.get_list()
            updated: list[GroceryItem] = []
            removed = 0

            for item in existing:
                remaining = [s for s in item.sources if s.recipe_id != recipe_id]
                if not remaining:
                    removed += 1
                    continue
                if len(remaining) == len(item.sources):
                    updated.append(item)
                    continue

                merged = aggregate_ingredients(_replay(item.name, remaining), self.normalizer)
                if not merged:
                    removed += 1
                    continue
                updated.append(
                    item.model_copy(
                        update={
                            "display_quantity": merged[0].display_quantity,
                            "aisle": merged[0].aisle,
                            "sources": merged[0].sources,
                        }
                    )
                )

            logger.info(
                f"Removed recipe {recipe_id}: {removed} items dropped, {len(updated)} remain"
            )
            return await self._save(updated)

    async def is_recipe_in_list(self, recipe_id: str) -> bool:
        items = await self.get_list()
        return any(s.recipe_id == recipe_id for item in items for s in item.sources)

    async def get_recipe_ids(self) -> set[str]:
        """Ids of every recipe contributing to the list."""
        items = await self.get_list()
        return {s.recipe_id for item in items for s in item.sources}

    # =========================================================================
    # Item operations
    # =========================================================================

    async def toggle_checked(self, item_id: str) -> list[GroceryItem]:
        """Flip an item's checked flag. Unknown ids are ignored."""
        items = await self.get_list()
        for item in items:
            if item.id == item_id:
                item.checked = not item.checked
                return await self._save(items)

        logger.debug(f"toggle_checked: no item {item_id}")
        return items

    async def remove_item(self, item_id: str) -> list[GroceryItem]:
        """Delete one item. Unknown ids are ignored."""
        items = await self.get_list()
        kept = [item for item in items if item.id != item_id]
        if len(kept) == len(items):
            logger.debug(f"remove_item: no item {item_id}")
            return items
        return await self._save(kept)

    async def clear_checked(self) -> list[GroceryItem]:
        items = await self.get_list()
        kept = [item for item in items if not item.checked]
        logger.info(f"Cleared {len(items) - len(kept)} checked items")
        return await self._save(kept)

    async def clear_all(self) -> list[GroceryItem]:
        """Drop the stored list. A missing blob reads as empty."""
        logger.info("Clearing grocery list")
        await self.storage.remove_item(self.storage_key)
        return []

    # =========================================================================
    # Views
    # =========================================================================

    async def get_sections(self) -> list[AisleSection]:
        return group_by_aisle(await self.get_list())

    async def get_progress(self) -> GroceryProgress:
        return list_progress(await self.get_list())

    async def export_text(self) -> str:
        return export_text(await self.get_list())
