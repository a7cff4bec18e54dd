"""Unit tests for shopping list generation."""

from mealplanner.plan.aggregate import QuantityBucket
from mealplanner.plan.overlay import GroceryOverlay
from mealplanner.plan.shopping_list import ShoppingList, ShoppingListGenerator


class TestShoppingList:
    """Tests for ShoppingList dataclass."""

    def test_empty(self):
        """Test an empty list reports no items."""
        shopping_list = ShoppingList()
        assert shopping_list.item_count == 0
        assert shopping_list.is_empty


class TestShoppingListGenerator:
    """Tests for ShoppingListGenerator."""

    def test_generate(self, planned_recipes):
        """Test parsing, aggregation and formatting end to end."""
        shopping_list = ShoppingListGenerator().generate(planned_recipes)

        pantry = {item.name: item for item in shopping_list.grouped["pantry"]}
        assert pantry["flour"].quantities == (QuantityBucket(amount=3.0, unit="cup"),)
        assert pantry["flour"].used_in == {"Pancakes", "Waffles"}
        assert pantry["sugar"].quantities == (QuantityBucket(amount=3.0, unit="tbsp"),)

        dairy = {item.name: item for item in shopping_list.grouped["dairy"]}
        assert dairy["eggs"].quantities == (QuantityBucket(amount=5.0, unit="item"),)
        assert dairy["milk"].quantities == (QuantityBucket(amount=1.5, unit="cup"),)

        spices = {item.name: item for item in shopping_list.grouped["spices"]}
        assert spices["salt"].used_in == {"Pancakes", "Chicken Soup"}

        assert "chicken breasts" in {item.name for item in shopping_list.grouped["meat"]}
        assert {item.name for item in shopping_list.grouped["produce"]} == {"carrots", "onion"}

        assert shopping_list.item_count == 8
        assert not shopping_list.is_empty

    def test_markdown(self, planned_recipes):
        """Test the rendered list contains merged lines."""
        markdown = ShoppingListGenerator().generate(planned_recipes).markdown

        assert markdown.startswith("# Grocery List\n")
        assert "- 3 cup flour (used in: Pancakes, Waffles)" in markdown
        assert "- 1 ½ cup milk (used in: Pancakes, Waffles)" in markdown
        assert "- 5 eggs (used in: Pancakes, Waffles)" in markdown
        assert "- 3 chicken breasts (Chicken Soup)" in markdown

    def test_overlay_applied_to_entries(self, planned_recipes):
        """Test overlay edits show up in the entry view only."""
        overlay = GroceryOverlay(removed_keys={"pantry:flour"}, purchased_keys={"dairy:milk"})
        shopping_list = ShoppingListGenerator().generate(planned_recipes, overlay=overlay)

        names = {entry.name: entry for entry in shopping_list.entries}
        assert "flour" not in names
        assert names["milk"].purchased
        assert "flour" in shopping_list.markdown

    def test_no_recipes(self):
        """Test generating from nothing."""
        shopping_list = ShoppingListGenerator().generate([])
        assert shopping_list.is_empty
        assert shopping_list.markdown == "# Grocery List\n\n"
        assert shopping_list.entries == []
