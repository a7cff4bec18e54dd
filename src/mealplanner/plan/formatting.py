"""Render an aggregated grocery list as markdown."""

import math

from mealplanner.logging_config import get_logger
from mealplanner.normalize.units import ITEM_UNIT
from mealplanner.plan.aggregate import AggregatedIngredient, GroupedResult, QuantityBucket

logger = get_logger(__name__)

CATEGORY_ORDER: tuple[str, ...] = (
    "produce",
    "meat",
    "seafood",
    "dairy",
    "pantry",
    "canned",
    "frozen",
    "spices",
    "baking",
    "beverages",
    "other",
)

CATEGORY_DISPLAY_NAMES: dict[str, str] = {
    "produce": "Produce",
    "meat": "Meat & Poultry",
    "seafood": "Seafood",
    "dairy": "Dairy & Eggs",
    "pantry": "Pantry",
    "canned": "Canned Goods",
    "frozen": "Frozen",
    "spices": "Spices & Seasonings",
    "baking": "Baking",
    "beverages": "Beverages",
    "other": "Other",
}

# Checked in order; a fractional part within 0.05 of a value uses its glyph
_COMMON_FRACTIONS: tuple[tuple[float, str], ...] = (
    (0.25, "¼"),
    (0.33, "⅓"),
    (0.5, "½"),
    (0.66, "⅔"),
    (0.75, "¾"),
)
_FRACTION_TOLERANCE = 0.05


def format_quantity(amount: float) -> str:
    """
    Format an amount for display.

    Examples:
        3.0 -> "3"
        1.5 -> "1 ½"
        0.333 -> "⅓"
        1.1 -> "1.1"
    """
    if not math.isfinite(amount):
        return str(amount)

    rounded = round(amount, 2)
    whole = math.floor(rounded)
    fraction = rounded - whole

    for value, glyph in _COMMON_FRACTIONS:
        if abs(fraction - value) < _FRACTION_TOLERANCE:
            return f"{whole} {glyph}" if whole > 0 else glyph

    if rounded == whole:
        return str(whole)
    return f"{rounded:.2f}".rstrip("0").rstrip(".")


def format_bucket(bucket: QuantityBucket) -> str:
    """Render one quantity bucket; the placeholder "item" unit is omitted."""
    amount = format_quantity(bucket.amount)
    if bucket.unit == ITEM_UNIT:
        return amount
    return f"{amount} {bucket.unit}"


def format_item(item: AggregatedIngredient) -> str:
    """Render one grocery list line (without the leading bullet)."""
    parts = []
    if item.quantities:
        parts.append(", ".join(format_bucket(bucket) for bucket in item.quantities))
    parts.append(item.name)

    recipes = sorted(item.used_in)
    if len(recipes) > 1:
        parts.append(f"(used in: {', '.join(recipes)})")
    elif recipes:
        parts.append(f"({recipes[0]})")

    return " ".join(parts)


def format_grocery_list(result: GroupedResult) -> str:
    """
    Render a grouped result as a markdown grocery list.

    Categories are emitted in a fixed order; empty ones are left out.
    """
    skipped = set(result) - set(CATEGORY_ORDER)
    if skipped:
        logger.warning(f"Categories not in display order were left out: {sorted(skipped)}")

    lines = ["# Grocery List", ""]

    for category in CATEGORY_ORDER:
        items = result.get(category)
        if not items:
            continue

        lines.append(f"## {CATEGORY_DISPLAY_NAMES[category]}")
        lines.append("")
        lines.extend(f"- {format_item(item)}" for item in items)
        lines.append("")

    return "\n".join(lines) + "\n"
