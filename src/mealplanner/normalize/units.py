"""Unit vocabulary and normalization."""

from types import MappingProxyType

# =============================================================================
# Unit Vocabulary
# =============================================================================

# Canonical unit -> accepted spellings (matched case-insensitively)
_UNIT_VARIANTS: dict[str, tuple[str, ...]] = {
    # Volume
    "cup": ("cup", "cups"),
    "tbsp": ("tbsp", "tbsps", "tbs", "tbl", "tablespoon", "tablespoons", "T"),
    "tsp": ("tsp", "tsps", "teaspoon", "teaspoons"),
    "fl oz": ("fl oz", "fluid ounce", "fluid ounces"),
    "ml": ("ml", "milliliter", "milliliters", "millilitre", "millilitres"),
    "l": ("l", "liter", "liters", "litre", "litres"),
    "pint": ("pint", "pints", "pt"),
    "quart": ("quart", "quarts", "qt"),
    "gallon": ("gallon", "gallons", "gal"),
    # Weight
    "oz": ("oz", "ounce", "ounces"),
    "lb": ("lb", "lbs", "pound", "pounds"),
    "g": ("g", "gram", "grams", "gramme", "grammes"),
    "kg": ("kg", "kilogram", "kilograms"),
    # Small measures
    "pinch": ("pinch", "pinches"),
    "dash": ("dash", "dashes"),
    # Count / container
    "clove": ("clove", "cloves"),
    "can": ("can", "cans"),
    "package": ("package", "packages", "pkg"),
    "bag": ("bag", "bags"),
    "jar": ("jar", "jars"),
    "bottle": ("bottle", "bottles"),
    "box": ("box", "boxes"),
    "slice": ("slice", "slices"),
    "piece": ("piece", "pieces"),
    "stick": ("stick", "sticks"),
    "bunch": ("bunch", "bunches"),
    "head": ("head", "heads"),
    "sprig": ("sprig", "sprigs"),
}

UNIT_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        spelling.lower(): canonical
        for canonical, spellings in _UNIT_VARIANTS.items()
        for spelling in (canonical, *spellings)
    }
)

# Longest first so "tablespoons" is tried before "tablespoon" and "tbs"
UNIT_SPELLINGS: tuple[str, ...] = tuple(
    sorted(UNIT_ALIASES, key=lambda spelling: (-len(spelling), spelling))
)

CANONICAL_UNITS: frozenset[str] = frozenset(_UNIT_VARIANTS)

# Used by the aggregator when a contribution carries no unit
ITEM_UNIT = "item"


def normalize_unit(raw: str) -> str:
    """
    Map a unit spelling to its canonical form.

    Examples:
        "Tablespoons" -> "tbsp"
        "cups" -> "cup"
        "fl  oz" -> "fl oz"
        "handful" -> "handful"  (unknown units pass through lower-cased)
    """
    key = " ".join(raw.split()).lower()
    return UNIT_ALIASES.get(key, key)


def is_known_unit(raw: str) -> bool:
    """Check whether a spelling belongs to the unit vocabulary."""
    return " ".join(raw.split()).lower() in UNIT_ALIASES
