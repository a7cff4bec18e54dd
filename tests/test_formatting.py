"""Unit tests for grocery list formatting."""

import pytest

from mealplanner.plan.aggregate import AggregatedIngredient, QuantityBucket
from mealplanner.plan.formatting import format_grocery_list, format_item, format_quantity


def _item(name, category="pantry", quantities=(), used_in=("Pancakes",)):
    return AggregatedIngredient(
        name=name,
        quantities=tuple(QuantityBucket(amount=a, unit=u) for a, u in quantities),
        category=category,
        used_in=frozenset(used_in),
    )


class TestFormatQuantity:
    """Tests for format_quantity function."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (3.0, "3"),
            (10, "10"),
            (1.5, "1 ½"),
            (0.5, "½"),
            (0.25, "¼"),
            (0.333, "⅓"),
            (2.66, "2 ⅔"),
            (1.75, "1 ¾"),
            (1.1, "1.1"),
            (0.1, "0.1"),
            (2.96, "2.96"),
        ],
    )
    def test_amounts(self, amount, expected):
        """Test whole numbers, common fractions and plain decimals."""
        assert format_quantity(amount) == expected

    def test_near_fraction_uses_glyph(self):
        """Test values within tolerance of a common fraction use its glyph."""
        assert format_quantity(1.52) == "1 ½"
        assert format_quantity(0.7) == "⅔"


class TestFormatItem:
    """Tests for format_item function."""

    def test_single_recipe(self):
        """Test a single recipe name is shown bare in parentheses."""
        item = _item("flour", quantities=[(2, "cup")])
        assert format_item(item) == "2 cup flour (Pancakes)"

    def test_multiple_recipes(self):
        """Test several recipes are listed as "used in"."""
        item = _item("flour", quantities=[(3, "cup")], used_in=("Waffles", "Pancakes"))
        assert format_item(item) == "3 cup flour (used in: Pancakes, Waffles)"

    def test_multiple_buckets(self):
        """Test buckets in different units are joined with commas."""
        item = _item("butter", "dairy", quantities=[(1, "cup"), (2, "tbsp")], used_in=["Cake"])
        assert format_item(item) == "1 cup, 2 tbsp butter (Cake)"

    def test_item_unit_is_hidden(self):
        """Test the placeholder unit isn't printed."""
        item = _item("eggs", "dairy", quantities=[(5, "item")])
        assert format_item(item) == "5 eggs (Pancakes)"

    def test_no_quantity(self):
        """Test unquantified items show only name and recipe."""
        assert format_item(_item("salt", "spices")) == "salt (Pancakes)"


class TestFormatGroceryList:
    """Tests for format_grocery_list function."""

    def test_full_document(self):
        """Test headings, bullets and spacing."""
        result = {
            "pantry": [
                _item("flour", quantities=[(3, "cup")], used_in=("Pancakes", "Waffles")),
            ],
        }
        assert format_grocery_list(result) == (
            "# Grocery List\n"
            "\n"
            "## Pantry\n"
            "\n"
            "- 3 cup flour (used in: Pancakes, Waffles)\n"
            "\n"
        )

    def test_category_order_and_names(self):
        """Test categories follow the fixed display order."""
        result = {
            "spices": [_item("salt", "spices")],
            "pantry": [_item("flour")],
            "produce": [_item("onion", "produce")],
            "frozen": [_item("peas", "frozen")],
        }
        output = format_grocery_list(result)

        headings = [line for line in output.splitlines() if line.startswith("## ")]
        assert headings == ["## Produce", "## Pantry", "## Frozen", "## Spices & Seasonings"]

    def test_empty_categories_are_skipped(self):
        """Test no heading is emitted for an empty category."""
        output = format_grocery_list({"dairy": [], "meat": [_item("bacon", "meat")]})
        assert "Dairy" not in output
        assert "## Meat & Poultry" in output

    def test_unknown_category_is_left_out(self):
        """Test categories outside the display order are not rendered."""
        output = format_grocery_list({"snacks": [_item("pretzels", "snacks")]})
        assert "pretzels" not in output

    def test_empty_result(self):
        """Test an empty result renders just the title."""
        assert format_grocery_list({}) == "# Grocery List\n\n"
