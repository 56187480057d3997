"""Saving composed recipes and product ideas to the collections."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

from smart_pantry.domain.errors import ValidationRejectedError
from smart_pantry.domain.products import Enrichment, Product
from smart_pantry.domain.recipes import CustomRecipe, SavedIdea
from smart_pantry.services.collection_store import CollectionStore
from smart_pantry.services.recipe_builder import RecipeBuilder

_logger = logging.getLogger(__name__)


@dataclass
class RecipeService:
    """Application service tying the recipe builder to the collections."""

    builder: RecipeBuilder
    collections: CollectionStore

    def save_custom_recipe(self, name: str, instructions: str = "") -> CustomRecipe:
        """Snapshot the builder into a saved recipe and clear the builder."""
        cleaned_name = name.strip()
        if not cleaned_name:
            raise ValidationRejectedError("Recipe name is required.")
        if self.builder.is_empty:
            raise ValidationRejectedError("Add at least one ingredient before saving.")

        recipe = CustomRecipe(
            id=uuid4(),
            name=cleaned_name,
            instructions=instructions.strip(),
            ingredients=self.builder.snapshot(),
            total_calories=self.builder.total_calories(),
            date_created=datetime.now(tz=UTC),
        )
        self.collections.custom_recipes.append(recipe)
        self.builder.clear()
        _logger.info(
            "Saved custom recipe: id=%s ingredients=%s",
            recipe.id,
            len(recipe.ingredients),
        )
        return recipe

    def delete_custom_recipe(self, recipe_id: UUID) -> bool:
        return self.collections.custom_recipes.delete_by_id(recipe_id)

    def list_custom_recipes(self) -> list[CustomRecipe]:
        return self.collections.custom_recipes.items

    def save_idea(self, product: Product, enrichment: Enrichment) -> SavedIdea:
        """Save a product with its enrichment."""
        idea = SavedIdea(
            id=uuid4(),
            product=product,
            enrichment=enrichment,
            date_saved=datetime.now(tz=UTC),
        )
        self.collections.saved_ideas.append(idea)
        _logger.info("Saved idea: id=%s barcode=%s", idea.id, product.barcode)
        return idea

    def is_idea_saved(self, barcode: str, recipe_idea: str) -> bool:
        """Return whether this barcode and recipe idea were already saved."""
        return any(
            idea.product.barcode == barcode
            and idea.enrichment.recipe_idea == recipe_idea
            for idea in self.collections.saved_ideas.items
        )

    def delete_idea(self, idea_id: UUID) -> bool:
        return self.collections.saved_ideas.delete_by_id(idea_id)

    def list_ideas(self) -> list[SavedIdea]:
        return self.collections.saved_ideas.items
