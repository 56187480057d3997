"""Recipe builder endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, status

from smart_pantry.api.schemas import (
    AmountUpdateRequest,
    ManualIngredientRequest,
    SaveRecipeRequest,
)
from smart_pantry.services.serialization import (
    custom_recipe_to_record,
    ingredient_to_record,
)

if TYPE_CHECKING:
    from smart_pantry.containers import AppContainer
    from smart_pantry.services.recipe_builder import RecipeBuilder

router = APIRouter(prefix="/builder", tags=["builder"])


@router.get("")
async def builder_state(request: Request) -> dict[str, object]:
    """Return the ingredients being composed and their calorie total."""
    container: AppContainer = request.app.state.container
    return _format_builder(container.recipe_builder)


@router.post("/ingredients", status_code=status.HTTP_201_CREATED)
async def add_manual_ingredient(
    body: ManualIngredientRequest, request: Request
) -> dict[str, object]:
    """Add a manually entered ingredient."""
    container: AppContainer = request.app.state.container
    container.recipe_builder.add_manual(
        body.name, body.calories_per_100g, body.amount_grams
    )
    return _format_builder(container.recipe_builder)


@router.post("/products/{barcode}", status_code=status.HTTP_201_CREATED)
async def add_scanned_product(barcode: str, request: Request) -> dict[str, object]:
    """Look up a barcode and add the product as an ingredient."""
    container: AppContainer = request.app.state.container
    product = await container.product_service.lookup(barcode)
    container.recipe_builder.add_from_product(product)
    return _format_builder(container.recipe_builder)


@router.patch("/ingredients/{ingredient_id}")
async def update_ingredient_amount(
    ingredient_id: UUID, body: AmountUpdateRequest, request: Request
) -> dict[str, object]:
    """Change an ingredient amount, clamping negative values to zero."""
    container: AppContainer = request.app.state.container
    container.recipe_builder.update_amount(ingredient_id, max(0.0, body.amount_grams))
    return _format_builder(container.recipe_builder)


@router.delete("/ingredients/{ingredient_id}")
async def remove_ingredient(ingredient_id: UUID, request: Request) -> dict[str, object]:
    """Remove an ingredient from the builder."""
    container: AppContainer = request.app.state.container
    container.recipe_builder.remove(ingredient_id)
    return _format_builder(container.recipe_builder)


@router.post("/save", status_code=status.HTTP_201_CREATED)
async def save_recipe(body: SaveRecipeRequest, request: Request) -> dict[str, object]:
    """Save the composed recipe and clear the builder."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.save_custom_recipe(body.name, body.instructions)
    return {"recipe": custom_recipe_to_record(recipe)}


def _format_builder(builder: RecipeBuilder) -> dict[str, object]:
    return {
        "ingredients": [
            {
                **ingredient_to_record(ingredient),
                "contributedCalories": ingredient.contributed_calories,
            }
            for ingredient in builder.ingredients
        ],
        "totalCalories": builder.total_calories(),
    }
