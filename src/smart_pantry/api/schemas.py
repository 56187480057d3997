"""Request bodies for the pantry API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from smart_pantry.domain.products import Enrichment


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ManualIngredientRequest(_CamelModel):
    """Manually entered ingredient."""

    name: str
    # to_camel would yield caloriesPer100G
    calories_per_100g: float | str | None = Field(
        default=None, alias="caloriesPer100g"
    )
    amount_grams: float | str | None = None


class AmountUpdateRequest(_CamelModel):
    amount_grams: float


class SaveRecipeRequest(_CamelModel):
    name: str = ""
    instructions: str = ""


class SaveIdeaRequest(_CamelModel):
    """Product barcode and the enrichment shown for it."""

    barcode: str = Field(min_length=1)
    enrichment: Enrichment


class StorageImageRequest(_CamelModel):
    product_name: str
    storage_tip: str
