"""Conversion between domain objects and stored JSON records."""

from collections.abc import Mapping
from datetime import datetime
from uuid import UUID

from pydantic import ValidationError

from smart_pantry.domain.errors import MalformedStoredDataError
from smart_pantry.domain.products import CALORIES_UNAVAILABLE, Enrichment, Product
from smart_pantry.domain.recipes import CustomRecipe, RecipeIngredient, SavedIdea

_RECORD_ERRORS = (KeyError, TypeError, ValueError, ValidationError)


def product_to_record(product: Product) -> dict[str, object]:
    return {
        "barcode": product.barcode,
        "name": product.name,
        "brand": product.brand,
        "imageUrl": product.image_url,
        "caloriesPer100g": product.calories_per_100g,
        "storageTip": product.storage_tip,
        "expirationAfterOpening": product.expiration_after_opening,
        "expirationUnopened": product.expiration_unopened,
        "categories": product.categories,
        "ingredientsText": product.ingredients_text,
    }


def ingredient_to_record(ingredient: RecipeIngredient) -> dict[str, object]:
    return {
        "id": str(ingredient.id),
        "name": ingredient.name,
        "caloriesPer100g": ingredient.calories_per_100g,
        "amountGrams": ingredient.amount_grams,
    }


def custom_recipe_to_record(recipe: CustomRecipe) -> dict[str, object]:
    return {
        "id": str(recipe.id),
        "name": recipe.name,
        "instructions": recipe.instructions,
        "ingredients": [ingredient_to_record(item) for item in recipe.ingredients],
        "totalCalories": recipe.total_calories,
        "dateCreated": recipe.date_created.isoformat(),
    }


def saved_idea_to_record(idea: SavedIdea) -> dict[str, object]:
    return {
        "id": str(idea.id),
        "product": product_to_record(idea.product),
        "enrichment": idea.enrichment.model_dump(by_alias=True),
        "dateSaved": idea.date_saved.isoformat(),
    }


def parse_custom_recipe(record: object) -> CustomRecipe:
    """Parse a stored custom recipe record."""
    try:
        row = _mapping(record)
        ingredients = row["ingredients"]
        if not isinstance(ingredients, list) or not ingredients:
            raise ValueError("ingredients must be a non-empty list")
        return CustomRecipe(
            id=UUID(str(row["id"])),
            name=str(row["name"]),
            instructions=str(row.get("instructions") or ""),
            ingredients=tuple(_parse_ingredient(item) for item in ingredients),
            total_calories=float(row["totalCalories"]),
            date_created=datetime.fromisoformat(str(row["dateCreated"])),
        )
    except _RECORD_ERRORS as exc:
        raise MalformedStoredDataError(f"Invalid custom recipe record: {exc}") from exc


def parse_saved_idea(record: object) -> SavedIdea:
    """Parse a stored saved-idea record."""
    try:
        row = _mapping(record)
        return SavedIdea(
            id=UUID(str(row["id"])),
            product=_parse_product(row["product"]),
            enrichment=Enrichment.model_validate(row["enrichment"]),
            date_saved=datetime.fromisoformat(str(row["dateSaved"])),
        )
    except _RECORD_ERRORS as exc:
        raise MalformedStoredDataError(f"Invalid saved idea record: {exc}") from exc


def _parse_ingredient(record: object) -> RecipeIngredient:
    row = _mapping(record)
    return RecipeIngredient(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        calories_per_100g=float(row["caloriesPer100g"]),
        amount_grams=float(row["amountGrams"]),
    )


def _parse_product(record: object) -> Product:
    row = _mapping(record)
    calories = row.get("caloriesPer100g")
    image_url = row.get("imageUrl")
    ingredients_text = row.get("ingredientsText")
    return Product(
        barcode=str(row["barcode"]),
        name=str(row["name"]),
        brand=str(row["brand"]),
        image_url=str(image_url) if image_url else None,
        calories_per_100g=(
            CALORIES_UNAVAILABLE
            if calories is None or calories == CALORIES_UNAVAILABLE
            else int(calories)
        ),
        storage_tip=str(row["storageTip"]),
        expiration_after_opening=str(row["expirationAfterOpening"]),
        expiration_unopened=str(row["expirationUnopened"]),
        categories=str(row.get("categories") or ""),
        ingredients_text=str(ingredients_text) if ingredients_text else None,
    )


def _mapping(record: object) -> Mapping[str, object]:
    if not isinstance(record, Mapping):
        raise TypeError(f"expected an object, got {type(record).__name__}")
    return record
