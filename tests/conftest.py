"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from smart_pantry.config import Settings
from smart_pantry.containers import AppContainer
from smart_pantry.domain.errors import ProductNotFoundError
from smart_pantry.domain.products import Product
from smart_pantry.services.collection_store import CollectionStore, KeyValueStore
from smart_pantry.services.enrichment import EnrichmentClient, EnrichmentService
from smart_pantry.services.products import ProductLookupClient, ProductService
from smart_pantry.services.recipe_builder import RecipeBuilder
from smart_pantry.services.recipes import RecipeService


def off_payload(**product: object) -> dict[str, object]:
    """Build an Open Food Facts style payload for a found product."""
    return {"status": 1, "product": product}


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store that records writes."""

    values: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes.append((key, value))


@dataclass
class FailingKeyValueStore(InMemoryKeyValueStore):
    """Key-value store whose writes always fail."""

    def set(self, key: str, value: str) -> None:
        raise OSError("disk full")


@dataclass
class FakeProductLookupClient(ProductLookupClient):
    """Fake lookup client serving payloads by barcode."""

    payloads: dict[str, dict[str, object]] = field(
        default_factory=lambda: {
            "8710398500601": off_payload(
                product_name="Choco Spread",
                brands="Hazel & Co",
                categories="spreads, chocolate",
                nutriments={"energy-kcal_100g": 539.4},
                ingredients_text="sugar, palm oil, hazelnuts, cocoa",
            ),
            "5000112637922": off_payload(
                product_name="Orange Juice",
                brands="Sunny",
                categories="Beverages",
                categories_tags=["en:beverages", "en:juices"],
                nutriments={"energy-kcal_100g": 45},
            ),
        }
    )
    calls: list[str] = field(default_factory=list)

    async def get_product(self, barcode: str) -> dict[str, object]:
        self.calls.append(barcode)
        payload = self.payloads.get(barcode)
        if payload is None:
            raise ProductNotFoundError(barcode)
        return payload


@dataclass
class FakeEnrichmentClient(EnrichmentClient):
    """Fake enrichment client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "storage_tip": "Close the lid tightly after use.",
            "recipe_idea": "Swirl into warm porridge with sliced banana.",
            "fun_fact": "Hazelnut spreads date back to 19th century Turin.",
        }
    )
    image: str | None = "data:image/png;base64,ZmFrZQ=="
    prompts: list[str] = field(default_factory=list)
    closed: bool = False

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
        self.prompts.append(prompt)
        return self.payload

    async def generate_image(self, *, model: str, prompt: str) -> str | None:
        self.prompts.append(prompt)
        return self.image

    async def close(self) -> None:
        self.closed = True


def make_product(**overrides: object) -> Product:
    """Build a product with sensible defaults."""
    values: dict[str, object] = {
        "barcode": "123",
        "name": "Oat Flakes",
        "brand": "Mill",
        "image_url": None,
        "calories_per_100g": 370,
        "storage_tip": "Store in a cool, dry place.",
        "expiration_after_opening": "A few days after opening.",
        "expiration_unopened": "No date known, see packaging.",
        "categories": "cereals",
        "ingredients_text": None,
    }
    values.update(overrides)
    return Product(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        openai_api_key="openai-key",
        storage_backend="file",
        data_dir=str(tmp_path / "data"),
    )


@pytest.fixture
def key_value_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def collections(key_value_store: InMemoryKeyValueStore) -> CollectionStore:
    store = CollectionStore.create(
        key_value_store,
        saved_ideas_key="saved_ideas",
        custom_recipes_key="custom_recipes",
    )
    store.load()
    return store


@pytest.fixture
def lookup_client() -> FakeProductLookupClient:
    return FakeProductLookupClient()


@pytest.fixture
def enrichment_client() -> FakeEnrichmentClient:
    return FakeEnrichmentClient()


@pytest.fixture
def container(
    settings: Settings,
    collections: CollectionStore,
    lookup_client: FakeProductLookupClient,
    enrichment_client: FakeEnrichmentClient,
) -> AppContainer:
    recipe_builder = RecipeBuilder()
    enrichment_service = EnrichmentService(
        client=enrichment_client,
        model=settings.openai_model,
        image_model=settings.openai_image_model,
        reasoning_effort=settings.openai_reasoning_effort,
        store=settings.openai_store,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        product_service=ProductService(lookup_client),
        enrichment_service=enrichment_service,
        recipe_builder=recipe_builder,
        collections=collections,
        recipe_service=RecipeService(recipe_builder, collections),
        close_resources=close_resources,
    )
