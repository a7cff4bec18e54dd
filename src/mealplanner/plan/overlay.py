"""User edits layered over a generated grocery list."""

from dataclasses import dataclass, field

from mealplanner.plan.aggregate import GroupedResult, QuantityBucket
from mealplanner.plan.formatting import CATEGORY_ORDER


def item_key(category: str, name: str) -> str:
    """Stable key for a grocery list line, e.g. "dairy:milk"."""
    return f"{category}:{name.strip().lower()}"


def split_item_key(key: str) -> tuple[str, str] | None:
    """Inverse of item_key; returns None for keys without a category."""
    category, sep, name = key.partition(":")
    if not sep:
        return None
    return category, name


@dataclass(frozen=True)
class CustomItem:
    """An item the user added by hand."""

    name: str
    category: str = "other"
    purchased: bool = False


@dataclass
class GroceryOverlay:
    """Purchased/removed marks and custom items for one plan's list."""

    purchased_keys: set[str] = field(default_factory=set)
    removed_keys: set[str] = field(default_factory=set)
    custom_items: list[CustomItem] = field(default_factory=list)


@dataclass
class GroceryListEntry:
    """One line of the grocery list as shown to the user."""

    key: str
    name: str
    category: str
    quantities: tuple[QuantityBucket, ...] = ()
    used_in: tuple[str, ...] = ()
    purchased: bool = False
    custom: bool = False


def _category_rank(category: str) -> int:
    try:
        return CATEGORY_ORDER.index(category)
    except ValueError:
        return len(CATEGORY_ORDER)


def apply_overlay(result: GroupedResult, overlay: GroceryOverlay) -> list[GroceryListEntry]:
    """
    Combine an aggregated list with the user's edits.

    Removed items are dropped, purchased items are flagged and custom items
    are appended to their category. Entries come back in display order.
    """
    entries: list[GroceryListEntry] = []

    for category, items in result.items():
        for item in items:
            key = item_key(category, item.name)
            if key in overlay.removed_keys:
                continue
            entries.append(
                GroceryListEntry(
                    key=key,
                    name=item.name,
                    category=category,
                    quantities=item.quantities,
                    used_in=tuple(sorted(item.used_in)),
                    purchased=key in overlay.purchased_keys,
                )
            )

    for custom in overlay.custom_items:
        entries.append(
            GroceryListEntry(
                key=item_key(custom.category, custom.name),
                name=custom.name,
                category=custom.category,
                purchased=custom.purchased,
                custom=True,
            )
        )

    entries.sort(key=lambda entry: (_category_rank(entry.category), entry.name.lower()))
    return entries
