"""API routers for the grocery list service."""

from grocerylist.routers.grocery import router as grocery_router
from grocerylist.routers.recipes import router as recipes_router

__all__ = [
    "grocery_router",
    "recipes_router",
]
