"""Ingredient phrase parser: "2 cups flour" -> structured record."""

from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any

from mealplanner.logging_config import get_logger
from mealplanner.normalize.categories import categorize
from mealplanner.normalize.names import clean_name
from mealplanner.normalize.quantity import match_quantity

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParsedIngredient:
    """Structured form of one ingredient phrase."""

    quantity: float | None
    unit: str | None
    ingredient_name: str | None
    category: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize for storage (nullable quantity/unit/name, non-null category)."""
        return asdict(self)


def parse_ingredient(text: str) -> ParsedIngredient:
    """
    Parse a free-form ingredient phrase.

    Never raises: text without a quantity or unit yields ``None`` for those
    fields and the category always falls back to a default.

    Examples:
        "2 cups flour" -> ParsedIngredient(2.0, "cup", "flour", "pantry")
        "salt to taste" -> ParsedIngredient(None, None, "salt", "spices")
    """
    match = match_quantity(text)
    name = clean_name(match.text, match.matched_span).strip() or None
    category = categorize(name or "")

    if match.quantity is None and name is not None:
        logger.debug(f"No quantity found in {text!r}")

    return ParsedIngredient(
        quantity=match.quantity,
        unit=match.unit,
        ingredient_name=name,
        category=category,
    )


def parse_ingredient_list(texts: Iterable[str]) -> list[ParsedIngredient]:
    """Parse each phrase independently, preserving order."""
    return [parse_ingredient(text) for text in texts]
