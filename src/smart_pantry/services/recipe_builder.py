"""In-progress recipe composition."""

import copy
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from uuid import UUID

from smart_pantry.domain.errors import ValidationRejectedError
from smart_pantry.domain.products import Product
from smart_pantry.domain.recipes import DEFAULT_AMOUNT_GRAMS, RecipeIngredient


@dataclass
class RecipeBuilder:
    """Mutable ingredient list for the recipe being composed."""

    _ingredients: list[RecipeIngredient] = field(default_factory=list, init=False)

    @property
    def ingredients(self) -> Sequence[RecipeIngredient]:
        """Current ingredients in insertion order."""
        return tuple(self._ingredients)

    @property
    def is_empty(self) -> bool:
        return not self._ingredients

    def add_from_product(self, product: Product) -> RecipeIngredient:
        """Add a scanned product at the default amount."""
        calories = product.calories_per_100g if product.has_calories else 0
        ingredient = RecipeIngredient(
            name=product.name,
            calories_per_100g=float(calories),
            amount_grams=DEFAULT_AMOUNT_GRAMS,
        )
        self._ingredients.append(ingredient)
        return ingredient

    def add_manual(
        self,
        name: str,
        calories_per_100g: object,
        amount_grams: object = None,
    ) -> RecipeIngredient:
        """Add a manually entered ingredient."""
        cleaned = name.strip() if isinstance(name, str) else ""
        if not cleaned:
            raise ValidationRejectedError("Ingredient name is required.")
        calories = _as_number(calories_per_100g)
        if calories is None:
            raise ValidationRejectedError("Calories per 100 g must be a number.")
        amount = _as_number(amount_grams)
        if amount is None or amount <= 0:
            amount = DEFAULT_AMOUNT_GRAMS
        ingredient = RecipeIngredient(
            name=cleaned, calories_per_100g=calories, amount_grams=amount
        )
        self._ingredients.append(ingredient)
        return ingredient

    def update_amount(self, ingredient_id: UUID, grams: float) -> None:
        """Set the amount of an ingredient; unknown ids are ignored."""
        for ingredient in self._ingredients:
            if ingredient.id == ingredient_id:
                ingredient.amount_grams = float(grams)
                return

    def remove(self, ingredient_id: UUID) -> None:
        """Remove an ingredient; unknown ids are ignored."""
        self._ingredients = [
            ingredient
            for ingredient in self._ingredients
            if ingredient.id != ingredient_id
        ]

    def total_calories(self) -> float:
        """Sum of calories contributed by every ingredient."""
        return sum(
            (ingredient.contributed_calories for ingredient in self._ingredients), 0.0
        )

    def snapshot(self) -> tuple[RecipeIngredient, ...]:
        """Deep copy of the current ingredients."""
        return tuple(copy.deepcopy(self._ingredients))

    def clear(self) -> None:
        self._ingredients.clear()


def _as_number(value: object) -> float | None:
    """Parse a finite number from user input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number
