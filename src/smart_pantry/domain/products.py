"""Product domain models."""

from dataclasses import dataclass
from typing import Final, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

CALORIES_UNAVAILABLE: Final = "N/A"

UNKNOWN_PRODUCT_NAME: Final = "Unknown Product"
UNKNOWN_BRAND: Final = "Unknown Brand"


@dataclass(frozen=True)
class Product:
    """Canonical product built from a lookup record."""

    barcode: str
    name: str
    brand: str
    image_url: str | None
    calories_per_100g: int | Literal["N/A"]
    storage_tip: str
    expiration_after_opening: str
    expiration_unopened: str
    categories: str
    ingredients_text: str | None = None

    @property
    def has_calories(self) -> bool:
        """Return whether the source reported an energy value."""
        return self.calories_per_100g != CALORIES_UNAVAILABLE


class Enrichment(BaseModel):
    """AI-generated supplementary text for a product."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    storage_tip: str
    recipe_idea: str
    fun_fact: str
