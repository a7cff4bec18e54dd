"""Turn free-form ingredient text into structured records."""

from mealplanner.normalize.categories import (
    CATEGORIES,
    CATEGORY_KEYWORDS,
    DEFAULT_CATEGORY,
    categorize,
)
from mealplanner.normalize.names import clean_name
from mealplanner.normalize.parser import (
    ParsedIngredient,
    parse_ingredient,
    parse_ingredient_list,
)
from mealplanner.normalize.quantity import (
    QuantityMatch,
    match_quantity,
    replace_number_words,
    resolve_quantity,
)
from mealplanner.normalize.units import ITEM_UNIT, normalize_unit

__all__ = [
    "CATEGORIES",
    "CATEGORY_KEYWORDS",
    "DEFAULT_CATEGORY",
    "ITEM_UNIT",
    "ParsedIngredient",
    "QuantityMatch",
    "categorize",
    "clean_name",
    "match_quantity",
    "normalize_unit",
    "parse_ingredient",
    "parse_ingredient_list",
    "replace_number_words",
    "resolve_quantity",
]
