"""Saved recipes and ideas endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from smart_pantry.api.schemas import SaveIdeaRequest
from smart_pantry.services.serialization import (
    custom_recipe_to_record,
    saved_idea_to_record,
)

if TYPE_CHECKING:
    from smart_pantry.containers import AppContainer

router = APIRouter(tags=["collections"])


@router.get("/recipes")
async def list_recipes(request: Request) -> dict[str, object]:
    """Return saved custom recipes, newest first."""
    container: AppContainer = request.app.state.container
    return {
        "recipes": [
            custom_recipe_to_record(recipe)
            for recipe in container.recipe_service.list_custom_recipes()
        ]
    }


@router.delete("/recipes/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(recipe_id: UUID, request: Request) -> None:
    """Delete a saved custom recipe."""
    container: AppContainer = request.app.state.container
    if not container.recipe_service.delete_custom_recipe(recipe_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/ideas")
async def list_ideas(request: Request) -> dict[str, object]:
    """Return saved product ideas, newest first."""
    container: AppContainer = request.app.state.container
    return {
        "ideas": [
            saved_idea_to_record(idea)
            for idea in container.recipe_service.list_ideas()
        ]
    }


@router.post("/ideas", status_code=status.HTTP_201_CREATED)
async def save_idea(body: SaveIdeaRequest, request: Request) -> dict[str, object]:
    """Save a product together with the enrichment shown for it."""
    container: AppContainer = request.app.state.container
    product = await container.product_service.lookup(body.barcode)
    idea = container.recipe_service.save_idea(product, body.enrichment)
    return {"idea": saved_idea_to_record(idea)}


@router.delete("/ideas/{idea_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_idea(idea_id: UUID, request: Request) -> None:
    """Delete a saved idea."""
    container: AppContainer = request.app.state.container
    if not container.recipe_service.delete_idea(idea_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
