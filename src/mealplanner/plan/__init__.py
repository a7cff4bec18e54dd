"""Shopping list aggregation, formatting and overlays."""

from mealplanner.plan.aggregate import (
    AggregatedIngredient,
    GroupedResult,
    IngredientAggregator,
    QuantityBucket,
    RawContribution,
    aggregate,
    contributions_from_lines,
)
from mealplanner.plan.formatting import (
    CATEGORY_DISPLAY_NAMES,
    CATEGORY_ORDER,
    format_grocery_list,
    format_quantity,
)
from mealplanner.plan.overlay import (
    CustomItem,
    GroceryListEntry,
    GroceryOverlay,
    apply_overlay,
    item_key,
)
from mealplanner.plan.shopping_list import ShoppingList, ShoppingListGenerator

__all__ = [
    "AggregatedIngredient",
    "CATEGORY_DISPLAY_NAMES",
    "CATEGORY_ORDER",
    "CustomItem",
    "GroceryListEntry",
    "GroceryOverlay",
    "GroupedResult",
    "IngredientAggregator",
    "QuantityBucket",
    "RawContribution",
    "ShoppingList",
    "ShoppingListGenerator",
    "aggregate",
    "apply_overlay",
    "contributions_from_lines",
    "format_grocery_list",
    "format_quantity",
    "item_key",
]
