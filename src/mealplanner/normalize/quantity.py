"""Quantity and unit detection in free-form ingredient text."""

import re
from dataclasses import dataclass
from types import MappingProxyType

from mealplanner.normalize.units import UNIT_SPELLINGS, normalize_unit

# =============================================================================
# Lookup Tables
# =============================================================================

NUMBER_WORDS: MappingProxyType[str, str] = MappingProxyType(
    {
        "one": "1",
        "two": "2",
        "three": "3",
        "four": "4",
        "five": "5",
        "six": "6",
        "seven": "7",
        "eight": "8",
        "nine": "9",
        "ten": "10",
        "eleven": "11",
        "twelve": "12",
        "a": "1",
        "an": "1",
        "half": "0.5",
        "quarter": "0.25",
    }
)

FRACTION_GLYPHS: MappingProxyType[str, float] = MappingProxyType(
    {
        "½": 1 / 2,
        "⅓": 1 / 3,
        "⅔": 2 / 3,
        "¼": 1 / 4,
        "¾": 3 / 4,
        "⅕": 1 / 5,
        "⅖": 2 / 5,
        "⅗": 3 / 5,
        "⅘": 4 / 5,
        "⅙": 1 / 6,
        "⅚": 5 / 6,
        "⅛": 1 / 8,
        "⅜": 3 / 8,
        "⅝": 5 / 8,
        "⅞": 7 / 8,
    }
)

# =============================================================================
# Patterns
# =============================================================================

_NUMBER_WORD_RE = re.compile(
    r"\b(" + "|".join(sorted(NUMBER_WORDS, key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)

_DECIMAL = r"\d+(?:\.\d+)?"
_QUANTITY = (
    rf"{_DECIMAL}\s*[-–]\s*{_DECIMAL}"  # range: 2-3
    r"|\d+\s+\d+/\d+"  # mixed number: 1 1/2
    r"|\d+/\d+"  # fraction: 1/2
    rf"|{_DECIMAL}"  # integer or decimal
)
GLYPH_CLASS = "[" + "".join(FRACTION_GLYPHS) + "]"
UNIT_ALTERNATION = "|".join(
    re.escape(spelling).replace(r"\ ", r"\s+") for spelling in UNIT_SPELLINGS
)

QUANTITY_UNIT_RE = re.compile(
    rf"(?P<quantity>{_QUANTITY})?"
    rf"(?:\s*(?P<glyph>{GLYPH_CLASS}))?"
    rf"(?:\s*(?<![A-Za-z])(?P<unit>{UNIT_ALTERNATION})(?![A-Za-z])\.?)?",
    re.IGNORECASE,
)

_LEADING_NUMBER_RE = re.compile(rf"^({_DECIMAL})\s+")
_RANGE_SPLIT_RE = re.compile(r"\s*[-–]\s*")


@dataclass(frozen=True)
class QuantityMatch:
    """Best quantity/unit span found in a piece of ingredient text."""

    quantity: float | None = None
    unit: str | None = None
    matched_span: str | None = None
    text: str = ""


def replace_number_words(text: str) -> str:
    """Replace whole-word number words ("two", "a", "half") with digits."""
    return _NUMBER_WORD_RE.sub(lambda m: NUMBER_WORDS[m.group(1).lower()], text)


def resolve_quantity(quantity_str: str | None, glyph: str | None = None) -> float | None:
    """
    Resolve a quantity string and optional fraction glyph to a number.

    Handles formats like:
    - "2", "1.5"
    - "1/2"
    - "1 1/2" (terms are summed)
    - "2-3" (range, returns average)
    - "1" + "½" (glyph value is added)
    """
    value: float | None = None

    if quantity_str:
        quantity_str = quantity_str.strip()
        if "/" in quantity_str:
            total = 0.0
            for part in quantity_str.split():
                if "/" in part:
                    numerator, denominator = part.split("/", 1)
                    if float(denominator) == 0:
                        continue
                    total += float(numerator) / float(denominator)
                else:
                    total += float(part)
            value = total
        elif _RANGE_SPLIT_RE.search(quantity_str):
            low, high = _RANGE_SPLIT_RE.split(quantity_str, maxsplit=1)
            value = (float(low) + float(high)) / 2
        else:
            value = float(quantity_str)

    if glyph:
        value = (value or 0.0) + FRACTION_GLYPHS[glyph]

    return value


def _score(quantity: float | None, unit: str | None) -> int:
    score = 0
    if quantity is not None:
        score += 2
    if unit:
        score += 1
    return score


def match_quantity(text: str) -> QuantityMatch:
    """
    Find the best quantity+unit span in ingredient text.

    Every quantity/unit candidate in the text is scored (2 for a quantity,
    +1 for a unit). The highest score wins, the leftmost one on ties.

    Examples:
        "2 cups flour" -> (2.0, "cup", "2 cups")
        "flour (1 1/2 cups)" -> (1.5, "cup", "1 1/2 cups")
        "salt to taste" -> (None, None, None)
    """
    text = replace_number_words(text)

    best: QuantityMatch | None = None
    best_score = 0

    for match in QUANTITY_UNIT_RE.finditer(text):
        quantity_str = match.group("quantity")
        glyph = match.group("glyph")
        raw_unit = match.group("unit")
        if not (quantity_str or glyph or raw_unit):
            continue

        quantity = resolve_quantity(quantity_str, glyph)
        score = _score(quantity, raw_unit)
        if score > best_score:
            best_score = score
            best = QuantityMatch(
                quantity=quantity,
                unit=normalize_unit(raw_unit) if raw_unit else None,
                matched_span=match.group(0),
                text=text,
            )

    if best is not None:
        return best

    leading = _LEADING_NUMBER_RE.match(text)
    if leading:
        return QuantityMatch(
            quantity=float(leading.group(1)),
            matched_span=leading.group(0),
            text=text,
        )

    return QuantityMatch(text=text)
