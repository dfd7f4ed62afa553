"""Free-text quantity parsing and display formatting."""

import math
import re
from dataclasses import dataclass

from grocerylist.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Unit Tables
# =============================================================================

# Singular -> plural. Abbreviations that do not inflect map to themselves.
UNIT_PLURALS: dict[str, str] = {
    "cup": "cups",
    "tbsp": "tbsp",
    "tsp": "tsp",
    "tablespoon": "tablespoons",
    "teaspoon": "teaspoons",
    "lb": "lbs",
    "pound": "pounds",
    "oz": "oz",
    "ounce": "ounces",
    "g": "g",
    "gram": "grams",
    "kg": "kg",
    "ml": "ml",
    "l": "l",
    "liter": "liters",
    "clove": "cloves",
    "can": "cans",
    "bunch": "bunches",
    "head": "heads",
    "stalk": "stalks",
    "piece": "pieces",
    "slice": "slices",
    "sprig": "sprigs",
    "stick": "sticks",
    "pinch": "pinches",
    "dash": "dashes",
    "handful": "handfuls",
}

_PLURAL_TO_SINGULAR: dict[str, str] = {
    plural: singular for singular, plural in UNIT_PLURALS.items() if plural != singular
}

# Unit tokens recognised after the leading number. Size words count as units
# so "2 large" and "3 large" merge but stay apart from a bare "2".
_UNIT_TOKENS = (
    r"cups?|tablespoons?|teaspoons?|tbsp?|tsp?|lbs?|pounds?|oz|ounces?"
    r"|grams?|g|kg|ml|liters?|l"
    r"|cloves?|cans?|bunch(?:es)?|heads?|stalks?|pieces?|slices?|sprigs?"
    r"|pinch(?:es)?|dash(?:es)?|handfuls?|sticks?"
    r"|large|medium|small|whole"
)

_QUANTITY_PATTERN = re.compile(
    rf"^(?P<amount>\d+\s+\d+/\d+|\d+(?:[./]\d+)?)\s*"
    rf"(?:(?P<unit>{_UNIT_TOKENS})(?![a-z]))?"
    rf"(?P<trailing>.*)$",
    re.IGNORECASE | re.DOTALL,
)

# Rounded remainder -> fraction glyph
_FRACTIONS: dict[str, str] = {
    "0.25": "1/4",
    "0.33": "1/3",
    "0.50": "1/2",
    "0.67": "2/3",
    "0.75": "3/4",
}


@dataclass(frozen=True)
class ParsedQuantity:
    """A quantity string split into amount, unit and leftover text."""

    amount: float | None
    unit: str
    raw: str
    trailing: str = ""

    @property
    def is_numeric(self) -> bool:
        """Whether a leading amount was recognised."""
        return self.amount is not None


# =============================================================================
# Parsing
# =============================================================================


def _parse_amount(token: str) -> float | None:
    """
    Evaluate a numeric token.

    Handles "2", "1.5", "1/2" and mixed numbers like "1 1/2". Returns None
    for a zero denominator.
    """
    parts = token.split()
    if len(parts) == 2:
        fraction = _parse_amount(parts[1])
        if fraction is None:
            return None
        return int(parts[0]) + fraction

    if "/" in token:
        numerator, denominator = token.split("/")
        if int(denominator) == 0:
            return None
        return int(numerator) / int(denominator)

    return float(token)


def parse_quantity(quantity: str) -> ParsedQuantity:
    """
    Parse a free-text quantity.

    Examples:
        "2 cups" -> amount=2.0, unit="cups"
        "1/2 tsp" -> amount=0.5, unit="tsp"
        "3 large eggs" -> amount=3.0, unit="large", trailing="eggs"
        "to taste" -> amount=None, unit="", raw="to taste"

    Never raises: anything that does not start with a number comes back with
    amount None and the trimmed input in ``raw``.
    """
    raw = (quantity or "").strip()
    if not raw:
        return ParsedQuantity(amount=None, unit="", raw=raw)

    match = _QUANTITY_PATTERN.match(raw)
    if not match:
        return ParsedQuantity(amount=None, unit="", raw=raw)

    amount = _parse_amount(match.group("amount"))
    if amount is None:
        logger.debug(f"Unusable amount in quantity {raw!r}")
        return ParsedQuantity(amount=None, unit="", raw=raw)

    return ParsedQuantity(
        amount=amount,
        unit=(match.group("unit") or "").lower().strip(),
        raw=raw,
        trailing=match.group("trailing").strip(),
    )


def canonical_unit(unit: str) -> str:
    """
    Bucketing key for a unit.

    Plurals listed in UNIT_PLURALS fold onto their singular ("cups" -> "cup").
    Different spellings ("tbsp" vs "tablespoon") stay distinct.
    """
    unit = unit.lower().strip()
    return _PLURAL_TO_SINGULAR.get(unit, unit)


# =============================================================================
# Formatting
# =============================================================================


def _format_amount(amount: float) -> str:
    if float(amount).is_integer():
        return str(int(amount))

    rounded = round(amount, 2)
    whole = math.floor(rounded)
    fraction = _FRACTIONS.get(f"{rounded - whole:.2f}")

    if fraction and whole == 0:
        return fraction
    if fraction:
        return f"{whole} {fraction}"
    return f"{rounded:.2f}".rstrip("0").rstrip(".")


def format_quantity(amount: float, unit: str) -> str:
    """
    Render an amount and unit for display.

    3 -> "3", 1.5 -> "1 1/2", 0.25 -> "1/4", 1.2 -> "1.2". Units are
    pluralized only when the amount is above one: (3, "cup") -> "3 cups",
    (1, "cup") -> "1 cup".
    """
    amount_str = _format_amount(amount)

    if unit and round(amount, 2) > 1:
        plural = UNIT_PLURALS.get(canonical_unit(unit), unit)
        return f"{amount_str} {plural}"

    return f"{amount_str} {unit}" if unit else amount_str
