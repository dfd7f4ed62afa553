"""Merge ingredient contributions from several recipes into grocery items."""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from grocerylist.grocery.aisles import assign_aisle
from grocerylist.logging_config import get_logger
from grocerylist.normalize.names import NameNormalizer, normalize_ingredient_name
from grocerylist.normalize.units import (
    ParsedQuantity,
    canonical_unit,
    format_quantity,
    parse_quantity,
)
from grocerylist.schemas import GroceryItem, GrocerySource, Ingredient

logger = get_logger(__name__)

UNITLESS = "__unitless__"
QUANTITY_SEPARATOR = " + "


@dataclass(frozen=True)
class AggregationEntry:
    """One ingredient attributed to the recipe that contributes it."""

    ingredient: Ingredient
    recipe_id: str
    recipe_title: str


@dataclass
class _IngredientGroup:
    """Contributions sharing a normalization key."""

    name: str  # first-seen display name
    quantities: list[ParsedQuantity] = field(default_factory=list)
    sources: list[GrocerySource] = field(default_factory=list)


def merge_quantities(quantities: list[ParsedQuantity]) -> str:
    """
    Build the display quantity for a group of contributions.

    A single contribution is shown as written. Otherwise amounts are summed
    per unit, unparseable strings are appended verbatim, and the parts are
    joined with " + ", e.g. "3 cups + 2 tbsp + to taste".
    """
    if len(quantities) == 1:
        return quantities[0].raw

    by_unit: dict[str, float] = {}
    raw_parts: list[str] = []

    for quantity in quantities:
        if quantity.amount is None:
            if quantity.raw:
                raw_parts.append(quantity.raw)
            continue
        unit_key = canonical_unit(quantity.unit) or UNITLESS
        by_unit[unit_key] = by_unit.get(unit_key, 0.0) + quantity.amount

    if not by_unit:
        return raw_parts[0] if raw_parts else ""

    parts = [
        format_quantity(total, "" if unit == UNITLESS else unit)
        for unit, total in by_unit.items()
    ]
    parts.extend(raw_parts)
    return QUANTITY_SEPARATOR.join(parts)


def aggregate_ingredients(
    entries: Iterable[AggregationEntry],
    normalizer: NameNormalizer = normalize_ingredient_name,
) -> list[GroceryItem]:
    """
    Group contributions by normalized name and build one item per group.

    Args:
        entries: Ingredients tagged with their contributing recipe.
        normalizer: Maps a display name to its grouping key.

    Returns:
        Fresh, unchecked GroceryItems in first-seen order. Entries whose
        name normalizes to an empty key are dropped.
    """
    grouped: dict[str, _IngredientGroup] = {}
    dropped = 0

    for entry in entries:
        key = normalizer(entry.ingredient.name)
        if not key:
            dropped += 1
            continue

        group = grouped.get(key)
        if group is None:
            group = _IngredientGroup(name=entry.ingredient.name)
            grouped[key] = group

        group.quantities.append(parse_quantity(entry.ingredient.quantity))
        group.sources.append(
            GrocerySource(
                recipe_id=entry.recipe_id,
                recipe_title=entry.recipe_title,
                quantity=entry.ingredient.quantity,
            )
        )

    if dropped:
        logger.debug(f"Dropped {dropped} ingredients with empty names")

    added_at = datetime.now(timezone.utc)
    items = [
        GroceryItem(
            id=str(uuid.uuid4()),
            name=group.name,
            display_quantity=merge_quantities(group.quantities),
            aisle=assign_aisle(group.name),
            checked=False,
            sources=group.sources,
            added_at=added_at,
        )
        for group in grouped.values()
    ]

    contributions = sum(len(group.sources) for group in grouped.values())
    logger.debug(f"Aggregated {contributions} contributions into {len(items)} items")
    return items
