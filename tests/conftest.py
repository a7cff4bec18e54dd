"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from mealplanner.config import Settings, get_settings
from mealplanner.main import app
from mealplanner.normalize.parser import ParsedIngredient
from mealplanner.plan.aggregate import RawContribution

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


# =============================================================================
# Ingredient Fixtures
# =============================================================================


def _make_contribution(
    name: str | None,
    recipe: str,
    quantity: float | None = None,
    unit: str | None = None,
    category: str = "pantry",
) -> RawContribution:
    """Build a contribution without going through the parser."""
    return RawContribution(
        parsed=ParsedIngredient(
            quantity=quantity,
            unit=unit,
            ingredient_name=name,
            category=category,
        ),
        recipe_name=recipe,
    )


@pytest.fixture
def planned_recipes():
    """A small week of recipes with overlapping ingredients."""
    return [
        (
            "Pancakes",
            ["2 cups flour", "2 large eggs", "1 cup milk", "1 tbsp sugar", "a pinch of salt"],
        ),
        (
            "Waffles",
            ["1 cup flour", "3 eggs", "2 tablespoons sugar", "1/2 cup milk"],
        ),
        (
            "Chicken Soup",
            [
                "3 boneless skinless chicken breasts",
                "2 carrots, diced",
                "1 onion, finely chopped",
                "salt to taste",
            ],
        ),
    ]


@pytest.fixture
def mixed_unit_contributions():
    """The same ingredient in two units from two recipes."""
    return [
        _make_contribution("butter", "Cake", quantity=1, unit="cup", category="dairy"),
        _make_contribution("butter", "Cookies", quantity=2, unit="tbsp", category="dairy"),
    ]


@pytest.fixture
def make_contribution():
    """Factory for contributions that skip the parser."""
    return _make_contribution


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Test client with no API key configured."""
    app.dependency_overrides[get_settings] = lambda: Settings(grocery_list_api_key="")
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def keyed_client():
    """Test client with a grocery list API key configured."""
    app.dependency_overrides[get_settings] = lambda: Settings(grocery_list_api_key="secret")
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
