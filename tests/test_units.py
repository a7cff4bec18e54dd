"""Unit tests for the unit vocabulary and normalizer."""

import pytest

from mealplanner.normalize.units import (
    CANONICAL_UNITS,
    UNIT_ALIASES,
    UNIT_SPELLINGS,
    is_known_unit,
    normalize_unit,
)


class TestNormalizeUnit:
    """Tests for normalize_unit function."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("tablespoons", "tbsp"),
            ("Tablespoon", "tbsp"),
            ("tbsp", "tbsp"),
            ("T", "tbsp"),
            ("cups", "cup"),
            (" Cups ", "cup"),
            ("teaspoons", "tsp"),
            ("ounces", "oz"),
            ("lbs", "lb"),
            ("grams", "g"),
            ("Fluid Ounces", "fl oz"),
            ("cloves", "clove"),
            ("fl  oz", "fl oz"),
            ("Fl\noz", "fl oz"),
        ],
    )
    def test_known_spellings(self, raw, expected):
        """Test spellings and abbreviations map to one canonical form."""
        assert normalize_unit(raw) == expected

    def test_unknown_unit_passes_through_lowercased(self):
        """Test unknown units are kept rather than discarded."""
        assert normalize_unit("Handful") == "handful"
        assert normalize_unit("item") == "item"

    @pytest.mark.parametrize(
        "raw", [*UNIT_ALIASES, "Handful", "TBSP", "knob", "", "fl  oz", "FL \t OZ"]
    )
    def test_idempotent(self, raw):
        """Test normalizing twice equals normalizing once."""
        assert normalize_unit(normalize_unit(raw)) == normalize_unit(raw)

    def test_canonical_units_map_to_themselves(self):
        """Test every canonical form is a fixed point."""
        for unit in CANONICAL_UNITS:
            assert normalize_unit(unit) == unit


class TestUnitVocabulary:
    """Tests for the static unit tables."""

    def test_spellings_longest_first(self):
        """Test longer spellings are tried before their prefixes."""
        assert UNIT_SPELLINGS.index("tablespoons") < UNIT_SPELLINGS.index("tablespoon")
        assert UNIT_SPELLINGS.index("tablespoon") < UNIT_SPELLINGS.index("tbsp")
        assert UNIT_SPELLINGS.index("cups") < UNIT_SPELLINGS.index("cup")
        lengths = [len(spelling) for spelling in UNIT_SPELLINGS]
        assert lengths == sorted(lengths, reverse=True)

    def test_aliases_are_read_only(self):
        """Test the alias table can't be modified at runtime."""
        with pytest.raises(TypeError):
            UNIT_ALIASES["cupful"] = "cup"  # type: ignore[index]

    def test_is_known_unit(self):
        """Test vocabulary membership check."""
        assert is_known_unit("Cups")
        assert is_known_unit("can")
        assert is_known_unit("fl  oz")
        assert not is_known_unit("handful")
