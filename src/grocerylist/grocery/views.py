"""Read-only views over a grocery list for display and sharing."""

from grocerylist.grocery.aisles import AISLE_EMOJI, AISLE_LABELS, AISLE_ORDER
from grocerylist.schemas import AisleSection, GroceryItem, GroceryProgress


def group_by_aisle(items: list[GroceryItem]) -> list[AisleSection]:
    """Group items into aisle sections in store walking order, skipping empty aisles."""
    sections = []
    for aisle in AISLE_ORDER:
        aisle_items = [item for item in items if item.aisle == aisle]
        if aisle_items:
            sections.append(
                AisleSection(
                    aisle=aisle,
                    label=AISLE_LABELS[aisle],
                    emoji=AISLE_EMOJI[aisle],
                    items=aisle_items,
                )
            )
    return sections


def list_progress(items: list[GroceryItem]) -> GroceryProgress:
    checked = sum(1 for item in items if item.checked)
    return GroceryProgress(
        total=len(items),
        checked=checked,
        all_done=bool(items) and checked == len(items),
    )


def export_text(items: list[GroceryItem]) -> str:
    """
    Plain-text list of what is still to buy.

    One line per unchecked item: "<quantity> <name>", or just the name when
    the item has no quantity.
    """
    lines = [
        f"{item.display_quantity} {item.name}" if item.display_quantity else item.name
        for item in items
        if not item.checked
    ]
    return "\n".join(lines)
