"""Merge parsed ingredients from many recipes into one grocery list."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from mealplanner.logging_config import get_logger
from mealplanner.normalize.parser import ParsedIngredient, parse_ingredient
from mealplanner.normalize.units import ITEM_UNIT, normalize_unit

logger = get_logger(__name__)


@dataclass(frozen=True)
class RawContribution:
    """One parsed ingredient line attributed to the recipe it came from."""

    parsed: ParsedIngredient
    recipe_name: str


@dataclass(frozen=True)
class QuantityBucket:
    """Summed amount for one unit of an aggregated ingredient."""

    amount: float
    unit: str


@dataclass(frozen=True)
class AggregatedIngredient:
    """An ingredient with quantities merged across recipes."""

    name: str
    quantities: tuple[QuantityBucket, ...]
    category: str
    used_in: frozenset[str]


GroupedResult = dict[str, list[AggregatedIngredient]]


@dataclass
class _Entry:
    name: str
    category: str
    amounts: dict[str, list[float]] = field(default_factory=dict)
    used_in: set[str] = field(default_factory=set)


def aggregation_key(name: str) -> str:
    """Key under which ingredient names are merged."""
    return name.strip().lower()


class IngredientAggregator:
    """
    Accumulates contributions keyed by ingredient name.

    - Quantities are bucketed per unit and never converted between units
    - Display name and category come from the first contribution seen
    - Partial aggregators can be combined with merge()
    """

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, contribution: RawContribution) -> None:
        """Add one contribution; nameless contributions are skipped."""
        parsed = contribution.parsed
        if not parsed.ingredient_name or not parsed.ingredient_name.strip():
            logger.debug(f"Skipping nameless ingredient from {contribution.recipe_name!r}")
            return

        key = aggregation_key(parsed.ingredient_name)
        entry = self._entries.get(key)
        if entry is None:
            entry = _Entry(name=parsed.ingredient_name.strip(), category=parsed.category)
            self._entries[key] = entry

        unit = normalize_unit(parsed.unit) if parsed.unit else ITEM_UNIT
        amounts = entry.amounts.setdefault(unit, [])
        if parsed.quantity is not None:
            amounts.append(parsed.quantity)

        entry.used_in.add(contribution.recipe_name)

    def add_all(self, contributions: Iterable[RawContribution]) -> "IngredientAggregator":
        """Add every contribution and return self for chaining."""
        for contribution in contributions:
            self.add(contribution)
        return self

    def merge(self, other: "IngredientAggregator") -> "IngredientAggregator":
        """
        Fold another aggregator into this one.

        Same-unit amounts are combined and recipe sets unioned. For keys
        present in both, this aggregator's name and category are kept.
        """
        for key, theirs in other._entries.items():
            ours = self._entries.get(key)
            if ours is None:
                ours = _Entry(name=theirs.name, category=theirs.category)
                self._entries[key] = ours
            for unit, amounts in theirs.amounts.items():
                ours.amounts.setdefault(unit, []).extend(amounts)
            ours.used_in |= theirs.used_in
        return self

    def entries(self) -> list[AggregatedIngredient]:
        """Aggregated ingredients, ungrouped, in first-seen order."""
        return [self._freeze(entry) for entry in self._entries.values()]

    def result(self) -> GroupedResult:
        """Group aggregated ingredients by category, sorted by name."""
        grouped: GroupedResult = {}
        for item in self.entries():
            grouped.setdefault(item.category, []).append(item)

        for items in grouped.values():
            items.sort(key=lambda item: item.name.lower())

        return grouped

    @staticmethod
    def _freeze(entry: _Entry) -> AggregatedIngredient:
        buckets = []
        for unit in sorted(entry.amounts):
            # fsum is exactly rounded, so the total doesn't depend on input order
            total = math.fsum(entry.amounts[unit])
            if total > 0:
                buckets.append(QuantityBucket(amount=total, unit=unit))

        return AggregatedIngredient(
            name=entry.name,
            quantities=tuple(buckets),
            category=entry.category,
            used_in=frozenset(entry.used_in),
        )


def aggregate(contributions: Iterable[RawContribution]) -> GroupedResult:
    """
    Aggregate contributions from many recipes into a grouped grocery list.

    Args:
        contributions: Parsed ingredients with the recipe they belong to.

    Returns:
        Mapping of category to ingredients sorted by name (case-insensitive).
    """
    aggregator = IngredientAggregator().add_all(contributions)
    logger.debug(f"Aggregated {len(aggregator)} distinct ingredients")
    return aggregator.result()


def contributions_from_lines(lines: Iterable[tuple[str, str]]) -> list[RawContribution]:
    """Parse ``(ingredient_text, recipe_name)`` pairs into contributions."""
    return [
        RawContribution(parsed=parse_ingredient(text), recipe_name=recipe_name)
        for text, recipe_name in lines
    ]
