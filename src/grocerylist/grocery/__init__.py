"""Grocery list aggregation, aisle assignment and persistence."""

from grocerylist.grocery.aggregation import (
    AggregationEntry,
    aggregate_ingredients,
    merge_quantities,
)
from grocerylist.grocery.aisles import (
    AISLE_EMOJI,
    AISLE_KEYWORDS,
    AISLE_LABELS,
    AISLE_ORDER,
    assign_aisle,
)
from grocerylist.grocery.recipes import RecipeNotFoundError, RecipeSource, SQLRecipeSource
from grocerylist.grocery.storage import (
    KeyValueStore,
    SQLKeyValueStore,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from grocerylist.grocery.store import GroceryListStore

__all__ = [
    "AISLE_EMOJI",
    "AISLE_KEYWORDS",
    "AISLE_LABELS",
    "AISLE_ORDER",
    "AggregationEntry",
    "GroceryListStore",
    "KeyValueStore",
    "RecipeNotFoundError",
    "RecipeSource",
    "SQLKeyValueStore",
    "SQLRecipeSource",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "aggregate_ingredients",
    "assign_aisle",
    "merge_quantities",
]
