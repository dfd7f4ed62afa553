"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import pytest

from grocerylist.grocery.storage import KeyValueStore, StorageReadError, StorageWriteError
from grocerylist.grocery.store import GroceryListStore
from grocerylist.schemas import Ingredient, RecipeIngredients

TEST_LIST_KEY = "test_grocery_list"

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (require external services)"
    )


# =============================================================================
# Storage Fakes
# =============================================================================


class FakeKeyValueStore(KeyValueStore):
    """Dict-backed key-value store that can be told to fail."""

    def __init__(self, data: dict[str, str] | None = None):
        self.data = dict(data or {})
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    async def get_item(self, key: str) -> str | None:
        if self.fail_reads:
            raise StorageReadError("simulated read failure", key=key)
        return self.data.get(key)

    async def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageWriteError("simulated write failure", key=key)
        self.data[key] = value
        self.writes += 1

    async def remove_item(self, key: str) -> None:
        if self.fail_writes:
            raise StorageWriteError("simulated write failure", key=key)
        self.data.pop(key, None)
        self.writes += 1


# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def sample_recipes():
    """Three recipes with overlapping ingredients."""
    return {
        "pasta": RecipeIngredients(
            id="pasta",
            title="Garlic Pasta",
            ingredients=[
                Ingredient(name="garlic", quantity="3 cloves"),
                Ingredient(name="spaghetti", quantity="1 lb"),
                Ingredient(name="olive oil", quantity="2 tbsp"),
                Ingredient(name="parmesan", quantity="1/2 cup"),
                Ingredient(name="salt", quantity="to taste"),
            ],
        ),
        "stir-fry": RecipeIngredients(
            id="stir-fry",
            title="Chicken Stir Fry",
            ingredients=[
                Ingredient(name="garlic", quantity="2 cloves"),
                Ingredient(name="chicken breast", quantity="1 lb"),
                Ingredient(name="soy sauce", quantity="3 tbsp"),
                Ingredient(name="onions", quantity="1"),
            ],
        ),
        "soup": RecipeIngredients(
            id="soup",
            title="French Onion Soup",
            ingredients=[
                Ingredient(name="Onion", quantity="4"),
                Ingredient(name="butter", quantity="2 tbsp"),
                Ingredient(name="beef broth", quantity="4 cups"),
            ],
        ),
        "empty": RecipeIngredients(id="empty", title="Nothing Yet", ingredients=[]),
    }


@pytest.fixture
def recipe_source(sample_recipes):
    """Mock recipe source backed by sample_recipes."""
    source = AsyncMock()
    source.get_recipe.side_effect = lambda recipe_id: sample_recipes.get(recipe_id)
    return source


@pytest.fixture
def storage():
    """Empty in-memory key-value store."""
    return FakeKeyValueStore()


@pytest.fixture
def grocery_store(storage, recipe_source):
    """Grocery list store over the in-memory storage and mock recipes."""
    return GroceryListStore(storage, recipe_source, storage_key=TEST_LIST_KEY)
