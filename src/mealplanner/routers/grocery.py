"""API routes for ingredient parsing and grocery list generation."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Header, HTTPException, status
from pydantic import BaseModel, Field

from mealplanner.config import Settings, get_settings
from mealplanner.logging_config import LoggingContext, get_logger
from mealplanner.normalize.parser import parse_ingredient_list
from mealplanner.plan.aggregate import AggregatedIngredient
from mealplanner.plan.overlay import CustomItem, GroceryListEntry, GroceryOverlay, split_item_key
from mealplanner.plan.shopping_list import ShoppingListGenerator

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["grocery"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class ParseRequest(BaseModel):
    """Ingredient lines to parse."""

    lines: list[str] = Field(default_factory=list)


class ParsedIngredientSchema(BaseModel):
    """Structured ingredient as stored alongside a recipe."""

    quantity: float | None = None
    unit: str | None = None
    ingredient_name: str | None = None
    category: str


class ParseResponse(BaseModel):
    """Parsed ingredients in request order."""

    ingredients: list[ParsedIngredientSchema]


class RecipeIngredients(BaseModel):
    """A planned recipe and its raw ingredient lines."""

    name: str
    ingredients: list[str] = Field(default_factory=list)


class CustomItemSchema(BaseModel):
    """Item added to the list by hand."""

    name: str
    category: str = "other"
    purchased: bool = False


class OverlaySchema(BaseModel):
    """User edits on top of the generated list."""

    purchased_keys: list[str] = Field(default_factory=list)
    removed_keys: list[str] = Field(default_factory=list)
    custom_items: list[CustomItemSchema] = Field(default_factory=list)


class GroceryListRequest(BaseModel):
    """Request to build a grocery list from planned recipes."""

    recipes: list[RecipeIngredients] = Field(default_factory=list)
    overlay: OverlaySchema | None = None


class QuantitySchema(BaseModel):
    """Summed amount in one unit."""

    amount: float
    unit: str


class AggregatedItemSchema(BaseModel):
    """Aggregated ingredient across recipes."""

    name: str
    quantities: list[QuantitySchema]
    category: str
    used_in: list[str]


class GroceryListItemSchema(BaseModel):
    """Grocery list line after the overlay is applied."""

    key: str
    name: str
    category: str
    quantities: list[QuantitySchema] = Field(default_factory=list)
    used_in: list[str] = Field(default_factory=list)
    purchased: bool = False
    custom: bool = False


class GroceryListResponse(BaseModel):
    """Structured and formatted grocery list."""

    grocery_list: str
    aggregated: dict[str, list[AggregatedItemSchema]] = Field(default_factory=dict)
    items: list[GroceryListItemSchema] = Field(default_factory=list)
    message: str | None = None


# =============================================================================
# Helpers
# =============================================================================


def _aggregated_to_schema(item: AggregatedIngredient) -> AggregatedItemSchema:
    return AggregatedItemSchema(
        name=item.name,
        quantities=[QuantitySchema(amount=q.amount, unit=q.unit) for q in item.quantities],
        category=item.category,
        used_in=sorted(item.used_in),
    )


def _entry_to_schema(entry: GroceryListEntry) -> GroceryListItemSchema:
    return GroceryListItemSchema(
        key=entry.key,
        name=entry.name,
        category=entry.category,
        quantities=[QuantitySchema(amount=q.amount, unit=q.unit) for q in entry.quantities],
        used_in=list(entry.used_in),
        purchased=entry.purchased,
        custom=entry.custom,
    )


def _overlay_from_schema(schema: OverlaySchema | None) -> GroceryOverlay:
    if schema is None:
        return GroceryOverlay()

    def valid(keys: list[str]) -> set[str]:
        return {key for key in keys if split_item_key(key) is not None}

    return GroceryOverlay(
        purchased_keys=valid(schema.purchased_keys),
        removed_keys=valid(schema.removed_keys),
        custom_items=[
            CustomItem(name=item.name, category=item.category, purchased=item.purchased)
            for item in schema.custom_items
        ],
    )


def verify_api_key(
    settings: Annotated[Settings, Depends(get_settings)],
    x_api_key: Annotated[str | None, Header()] = None,
) -> None:
    """Reject a supplied API key that doesn't match the configured one."""
    expected = settings.grocery_list_api_key
    if x_api_key and expected and x_api_key != expected:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/ingredients/parse", response_model=ParseResponse)
async def parse_ingredients(request: ParseRequest) -> ParseResponse:
    """Parse raw ingredient lines into structured records."""
    parsed = parse_ingredient_list(request.lines)
    return ParseResponse(
        ingredients=[ParsedIngredientSchema(**ingredient.to_dict()) for ingredient in parsed]
    )


@router.post(
    "/grocery-list",
    response_model=GroceryListResponse,
    dependencies=[Depends(verify_api_key)],
)
async def build_grocery_list(request: GroceryListRequest) -> GroceryListResponse:
    """Aggregate planned recipes into a categorized grocery list."""
    with LoggingContext(request_id=str(uuid.uuid4())):
        if not any(recipe.ingredients for recipe in request.recipes):
            return GroceryListResponse(
                grocery_list="",
                message="No ingredients found. Add some meals to your plan first.",
            )

        generator = ShoppingListGenerator()
        shopping_list = generator.generate(
            [(recipe.name, recipe.ingredients) for recipe in request.recipes],
            overlay=_overlay_from_schema(request.overlay),
        )

        logger.info(f"Built grocery list for {len(request.recipes)} recipes")

        return GroceryListResponse(
            grocery_list=shopping_list.markdown,
            aggregated={
                category: [_aggregated_to_schema(item) for item in items]
                for category, items in shopping_list.grouped.items()
            },
            items=[_entry_to_schema(entry) for entry in shopping_list.entries],
        )
