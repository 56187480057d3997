"""Product lookup and normalization."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, Protocol

from smart_pantry.domain.errors import ProductNotFoundError
from smart_pantry.domain.products import (
    CALORIES_UNAVAILABLE,
    UNKNOWN_BRAND,
    UNKNOWN_PRODUCT_NAME,
    Product,
)
from smart_pantry.services.classifier import (
    classify_expiration_after_opening,
    classify_storage,
)

EXPIRATION_UNOPENED_FALLBACK = "No date known, see packaging."

_logger = logging.getLogger(__name__)


class ProductLookupClient(Protocol):
    """Interface for the remote product database."""

    async def get_product(self, barcode: str) -> dict[str, object]:
        """Return the raw lookup payload for a barcode."""


@dataclass
class ProductService:
    """Service that looks up barcodes and normalizes the results."""

    lookup_client: ProductLookupClient

    async def lookup(self, barcode: str) -> Product:
        """Look up a barcode and return the canonical product."""
        cleaned = barcode.strip()
        if not cleaned:
            raise ProductNotFoundError(barcode)
        payload = await self.lookup_client.get_product(cleaned)
        product = normalize_product(payload, cleaned)
        _logger.info("Product lookup: barcode=%s name=%s", cleaned, product.name)
        return product


def normalize_product(payload: Mapping[str, object], barcode: str) -> Product:
    """Map an Open Food Facts payload to a product, filling in defaults."""
    raw = payload.get("product")
    if payload.get("status") == 0 or not isinstance(raw, Mapping):
        raise ProductNotFoundError(barcode)

    categories = build_category_string(raw)
    conservation = _text(raw.get("conservation_conditions"))
    expiration_date = _text(raw.get("expiration_date"))
    nutriments = raw.get("nutriments")

    return Product(
        barcode=barcode,
        name=_text(raw.get("product_name")) or UNKNOWN_PRODUCT_NAME,
        brand=_text(raw.get("brands")) or UNKNOWN_BRAND,
        image_url=_text(raw.get("image_front_url")) or _text(raw.get("image_url")),
        calories_per_100g=extract_calories(
            nutriments if isinstance(nutriments, Mapping) else {}
        ),
        storage_tip=conservation or classify_storage(categories),
        expiration_after_opening=classify_expiration_after_opening(categories),
        expiration_unopened=expiration_date or EXPIRATION_UNOPENED_FALLBACK,
        categories=categories,
        ingredients_text=_text(raw.get("ingredients_text")),
    )


def build_category_string(raw: Mapping[str, object]) -> str:
    """Join the free-text categories with the category tags."""
    text = _text(raw.get("categories")) or ""
    tags = raw.get("categories_tags")
    tag_text = (
        " ".join(str(tag) for tag in tags) if isinstance(tags, list | tuple) else ""
    )
    return " ".join(part for part in (text, tag_text) if part)


def extract_calories(nutriments: Mapping[str, object]) -> int | Literal["N/A"]:
    """Return kcal per 100 g, preferring the per-100 g field."""
    value = nutriments.get("energy-kcal_100g")
    if value is None:
        value = nutriments.get("energy-kcal")
    if value is None or isinstance(value, bool):
        return CALORIES_UNAVAILABLE
    try:
        number = float(value)
    except (TypeError, ValueError):
        return CALORIES_UNAVAILABLE
    if not math.isfinite(number):
        return CALORIES_UNAVAILABLE
    return math.floor(number + 0.5)


def _text(value: object) -> str | None:
    """Return a stripped string, or None when blank or not a string."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None
