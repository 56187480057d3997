"""AI enrichment of products with tips, recipe ideas and facts."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from smart_pantry.domain.products import Enrichment, Product

ENRICHMENT_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "storage_tip": {"type": "string"},
        "recipe_idea": {"type": "string"},
        "fun_fact": {"type": "string"},
    },
    "required": ["storage_tip", "recipe_idea", "fun_fact"],
    "additionalProperties": False,
}

ENRICHMENT_SCHEMA_NAME = "product_enrichment"

MISSING_KEY_ENRICHMENT = Enrichment(
    storage_tip="AI key missing.",
    recipe_idea="AI features unavailable.",
    fun_fact="Did you know? This app uses Open Food Facts!",
)

FAILED_ENRICHMENT = Enrichment(
    storage_tip="Could not retrieve AI tips.",
    recipe_idea="Could not retrieve recipe.",
    fun_fact="Could not retrieve fun fact.",
)

_logger = logging.getLogger(__name__)


class EnrichmentClient(Protocol):
    """Interface for the generative AI backend."""

    async def generate_enrichment(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema_name: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured enrichment data."""

    async def generate_image(self, *, model: str, prompt: str) -> str | None:
        """Return a data URL for a generated image, if any."""

    async def close(self) -> None:
        """Release network resources."""


@dataclass
class EnrichmentService:
    """Service that asks the AI backend for enrichment, degrading to placeholders."""

    client: EnrichmentClient | None
    model: str
    image_model: str
    reasoning_effort: str | None
    store: bool

    async def enrich(self, product: Product) -> Enrichment:
        """Return enrichment for a product; never raises."""
        if self.client is None:
            return MISSING_KEY_ENRICHMENT
        try:
            raw = await self.client.generate_enrichment(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                schema_name=ENRICHMENT_SCHEMA_NAME,
                schema=ENRICHMENT_SCHEMA,
                prompt=build_enrichment_prompt(product),
            )
            return Enrichment.model_validate(raw)
        except ValidationError:
            _logger.warning(
                "Enrichment response failed validation: %s", product.barcode
            )
            return FAILED_ENRICHMENT
        except Exception:
            _logger.exception("Enrichment request failed: %s", product.barcode)
            return FAILED_ENRICHMENT

    async def storage_image(self, product_name: str, storage_tip: str) -> str | None:
        """Return a generated image illustrating how to store a product."""
        if self.client is None:
            return None
        prompt = (
            "A photorealistic, clean, bright educational photo showing exactly "
            f"how to store {product_name}. "
            f'The storage instruction is: "{storage_tip}". '
            "Show the food in the correct context (e.g. inside a fridge, on a "
            "shelf, in a jar). Make it look like a high-quality lifestyle stock photo."
        )
        try:
            return await self.client.generate_image(
                model=self.image_model, prompt=prompt
            )
        except Exception:
            _logger.exception("Storage image generation failed: %s", product_name)
            return None

    async def close(self) -> None:
        """Close the AI backend client, if any."""
        if self.client is not None:
            await self.client.close()


def build_enrichment_prompt(product: Product) -> str:
    """Build the enrichment prompt from product details."""
    return (
        "I have a food product with the following details:\n"
        f"Name: {product.name}\n"
        f"Brand: {product.brand}\n"
        f"Categories: {product.categories}\n"
        f"Ingredients: {product.ingredients_text or 'Unknown'}\n\n"
        "Please provide:\n"
        "1. A smart, concise storage tip specifically for this product type "
        "to maximize freshness.\n"
        "2. A simple, creative 1-sentence serving suggestion or mini-recipe idea.\n"
        "3. A short, interesting fun fact about this type of food."
    )
