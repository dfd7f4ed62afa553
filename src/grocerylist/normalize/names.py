"""Ingredient name normalization for grouping."""

import re
from collections.abc import Callable

# Maps a display name to the key used to group contributions.
NameNormalizer = Callable[[str], str]

_WHITESPACE = re.compile(r"\s+")
_PLURAL_SUFFIX = re.compile(r"e?s$")


def normalize_ingredient_name(name: str) -> str:
    """
    Normalize an ingredient name into a grouping key.

    - Lowercase
    - Trim and collapse internal whitespace
    - Strip a trailing "s" or "es" (naive depluralization)

    "Onions" -> "onion", "tomatoes" -> "tomato". Irregular plurals such as
    "leaves" come out as "leav" and do not fold onto their singular.
    """
    if not name:
        return ""

    key = _WHITESPACE.sub(" ", name.lower().strip())
    return _PLURAL_SUFFIX.sub("", key)
