"""Domain models for recipe composition and saved collections."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from smart_pantry.domain.products import Enrichment, Product

DEFAULT_AMOUNT_GRAMS = 100.0


@dataclass
class RecipeIngredient:
    """Ingredient in the recipe being composed."""

    name: str
    calories_per_100g: float
    amount_grams: float = DEFAULT_AMOUNT_GRAMS
    id: UUID = field(default_factory=uuid4)

    @property
    def contributed_calories(self) -> float:
        """Calories this ingredient adds at its current amount."""
        return self.calories_per_100g * self.amount_grams / 100


@dataclass(frozen=True)
class CustomRecipe:
    """User-composed recipe saved with a snapshot of its ingredients."""

    id: UUID
    name: str
    instructions: str
    ingredients: tuple[RecipeIngredient, ...]
    total_calories: float
    date_created: datetime


@dataclass(frozen=True)
class SavedIdea:
    """Product and its enrichment saved for later."""

    id: UUID
    product: Product
    enrichment: Enrichment
    date_saved: datetime
