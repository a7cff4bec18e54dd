"""Shopping list generation from planned recipes."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from mealplanner.logging_config import LoggingContext, get_logger
from mealplanner.normalize.parser import parse_ingredient
from mealplanner.plan.aggregate import GroupedResult, IngredientAggregator, RawContribution
from mealplanner.plan.formatting import format_grocery_list
from mealplanner.plan.overlay import GroceryListEntry, GroceryOverlay, apply_overlay

logger = get_logger(__name__)


@dataclass
class ShoppingList:
    """Complete shopping list for a set of planned recipes."""

    grouped: GroupedResult = field(default_factory=dict)
    markdown: str = ""
    entries: list[GroceryListEntry] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        """Number of distinct aggregated ingredients."""
        return sum(len(items) for items in self.grouped.values())

    @property
    def is_empty(self) -> bool:
        return self.item_count == 0


class ShoppingListGenerator:
    """
    Generates shopping lists from planned recipes with:
    - Free-text ingredient parsing
    - Quantity aggregation per unit across recipes
    - Category grouping and markdown rendering
    - Optional purchased/removed/custom overlay
    """

    def generate(
        self,
        recipes: Iterable[tuple[str, Sequence[str]]],
        overlay: GroceryOverlay | None = None,
    ) -> ShoppingList:
        """
        Generate a shopping list.

        Args:
            recipes: (recipe_name, ingredient_lines) pairs.
            overlay: Optional user edits applied to the entry view.

        Returns:
            ShoppingList with grouped items, markdown and entries.
        """
        aggregator = IngredientAggregator()
        line_count = 0

        for recipe_name, lines in recipes:
            with LoggingContext(recipe=recipe_name):
                for text in lines:
                    aggregator.add(
                        RawContribution(parsed=parse_ingredient(text), recipe_name=recipe_name)
                    )
                    line_count += 1

        grouped = aggregator.result()
        shopping_list = ShoppingList(
            grouped=grouped,
            markdown=format_grocery_list(grouped),
            entries=apply_overlay(grouped, overlay or GroceryOverlay()),
        )

        logger.info(
            f"Generated shopping list: {shopping_list.item_count} items "
            f"from {line_count} ingredient lines"
        )
        return shopping_list
