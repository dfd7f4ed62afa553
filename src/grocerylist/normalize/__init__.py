"""Normalize ingredient names and free-text quantities."""

from grocerylist.normalize.names import NameNormalizer, normalize_ingredient_name
from grocerylist.normalize.units import (
    UNIT_PLURALS,
    ParsedQuantity,
    canonical_unit,
    format_quantity,
    parse_quantity,
)

__all__ = [
    "UNIT_PLURALS",
    "NameNormalizer",
    "ParsedQuantity",
    "canonical_unit",
    "format_quantity",
    "normalize_ingredient_name",
    "parse_quantity",
]
