"""Ingredient name cleaning."""

import re

from mealplanner.normalize.quantity import GLYPH_CLASS, UNIT_ALTERNATION
from mealplanner.normalize.units import is_known_unit

# Size/state words dropped from the front of a name ("large eggs" -> "eggs")
LEADING_MODIFIERS: tuple[str, ...] = (
    "whole",
    "extra large",
    "extra-large",
    "large",
    "medium",
    "small",
    "fresh",
    "freshly",
    "dried",
    "frozen",
    "canned",
    "boneless",
    "skinless",
    "ripe",
    "raw",
    "cooked",
    "organic",
    "finely",
    "thinly",
    "roughly",
    "coarsely",
    "chopped",
    "diced",
    "minced",
    "sliced",
    "grated",
    "shredded",
    "crushed",
    "cubed",
    "peeled",
    "softened",
    "melted",
)

# Everything from the first of these onward is preparation, not name
PREPARATION_DESCRIPTORS: tuple[str, ...] = (
    "chopped",
    "diced",
    "minced",
    "sliced",
    "grated",
    "shredded",
    "crushed",
    "cubed",
    "julienned",
    "halved",
    "quartered",
    "peeled",
    "seeded",
    "deseeded",
    "pitted",
    "trimmed",
    "drained",
    "undrained",
    "rinsed",
    "softened",
    "melted",
    "beaten",
    "sifted",
    "divided",
    "finely",
    "thinly",
    "roughly",
    "coarsely",
    "cut into",
    "fresh",
    "dried",
    "frozen",
    "canned",
    "cooked",
    "raw",
    "boneless",
    "skinless",
    "at room temperature",
    "room temperature",
    "for garnish",
    "for serving",
    "to taste",
    "optional",
)


def _word_alternation(words: tuple[str, ...]) -> str:
    ordered = sorted(words, key=len, reverse=True)
    return "|".join(re.escape(word).replace(r"\ ", r"\s+") for word in ordered)


_DIGIT_PAREN_RE = re.compile(r"\([^()]*\d[^()]*\)")
_PARENTHETICAL_RE = re.compile(r"\([^()]*\)")
_QUANTITY_FRAGMENT_RE = re.compile(
    rf"\d+(?:[./]\d+)?\s*(?<![A-Za-z])(?:{UNIT_ALTERNATION})(?![A-Za-z])\.?",
    re.IGNORECASE,
)
_GLYPH_RE = re.compile(GLYPH_CLASS)
_BARE_NUMBER_RE = re.compile(r"(?<!\S)\d+(?:[./]\d+)?(?:\s*[-–]\s*\d+(?:[./]\d+)?)?(?!\S)")
_EMPTY_PARENS_RE = re.compile(r"\(\s*\)")
_LEADING_WORD_RE = re.compile(
    rf"^(?:of|or|to|{_word_alternation(LEADING_MODIFIERS)})(?![A-Za-z\-])[\s,]*",
    re.IGNORECASE,
)
_DESCRIPTOR_RE = re.compile(
    rf",?\s*\b(?:{_word_alternation(PREPARATION_DESCRIPTORS)})\b.*$",
    re.IGNORECASE | re.DOTALL,
)
_DIGITS_RE = re.compile(r"\d+")
_WHITESPACE_RE = re.compile(r"\s+")
_EDGE_PUNCTUATION = " \t\n,;:.-–/()*"


def _tidy(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip(_EDGE_PUNCTUATION)


def _strip_leading_unit(text: str) -> str:
    first, _, rest = text.partition(" ")
    if rest and is_known_unit(first.rstrip(".")):
        return rest
    return text


def _strip_leading_words(text: str) -> str:
    while True:
        stripped = _strip_leading_unit(_LEADING_WORD_RE.sub("", text))
        stripped = stripped.lstrip(_EDGE_PUNCTUATION)
        if stripped == text:
            return text
        text = stripped


def _cut_span(text: str, span: str) -> str:
    """Remove the first occurrence of span, with its parenthetical if it sits in one."""
    start = text.find(span)
    if start < 0:
        return text
    end = start + len(span)
    for paren in _PARENTHETICAL_RE.finditer(text):
        if paren.start() < start and end < paren.end():
            start, end = paren.start(), paren.end()
            break
    return f"{text[:start]} {text[end:]}"


def clean_name(text: str, matched_span: str | None = None) -> str:
    """
    Derive the ingredient name from a phrase.

    The quantity/unit span found by the matcher is removed first, then any
    remaining quantity annotations, leading modifiers and everything from
    the first preparation descriptor onward.

    Examples:
        ("2 cups flour, sifted", "2 cups") -> "flour"
        ("3 boneless skinless chicken breasts", "3") -> "chicken breasts"
        ("flour (2 cups)", "2 cups") -> "flour"
        ("4 chicken thighs (about 2 lbs)", "2 lbs") -> "chicken thighs"
    """
    name = _cut_span(text, matched_span) if matched_span else text

    name = _DIGIT_PAREN_RE.sub(" ", name)
    name = _QUANTITY_FRAGMENT_RE.sub(" ", name)
    name = _GLYPH_RE.sub(" ", name)
    name = _BARE_NUMBER_RE.sub(" ", name)
    name = _EMPTY_PARENS_RE.sub(" ", name)
    name = _tidy(name)

    name = _strip_leading_words(name)
    name = _DESCRIPTOR_RE.sub("", name)
    name = _tidy(name)

    if name:
        return name

    fallback = _tidy(_GLYPH_RE.sub(" ", _DIGITS_RE.sub(" ", text)))
    if fallback:
        return fallback

    return text
