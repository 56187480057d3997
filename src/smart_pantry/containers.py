"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from smart_pantry.adapters.file_store import FileKeyValueStore
from smart_pantry.adapters.open_food_facts_client import HttpxOpenFoodFactsClient
from smart_pantry.adapters.openai_enrichment_client import OpenAIEnrichmentClient
from smart_pantry.adapters.supabase_store import SupabaseKeyValueStore
from smart_pantry.config import Settings, parse_storage_backend
from smart_pantry.services.collection_store import CollectionStore, KeyValueStore
from smart_pantry.services.enrichment import EnrichmentService
from smart_pantry.services.products import ProductService
from smart_pantry.services.recipe_builder import RecipeBuilder
from smart_pantry.services.recipes import RecipeService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    product_service: ProductService
    enrichment_service: EnrichmentService
    recipe_builder: RecipeBuilder
    collections: CollectionStore
    recipe_service: RecipeService
    close_resources: Callable[[], Awaitable[None]]


def build_key_value_store(settings: Settings) -> KeyValueStore:
    """Create the durable store selected by the settings."""
    backend = parse_storage_backend(settings.storage_backend)
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required "
                "for the supabase storage backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, table=settings.supabase_table)
    return FileKeyValueStore(Path(settings.data_dir))


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container and load saved collections."""
    resolved_settings = settings or Settings()
    lookup_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.off_base_url,
        user_agent=resolved_settings.off_user_agent,
    )
    enrichment_client = (
        OpenAIEnrichmentClient.create(resolved_settings.openai_api_key)
        if resolved_settings.openai_api_key
        else None
    )
    enrichment_service = EnrichmentService(
        client=enrichment_client,
        model=resolved_settings.openai_model,
        image_model=resolved_settings.openai_image_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    collections = CollectionStore.create(
        build_key_value_store(resolved_settings),
        saved_ideas_key=resolved_settings.saved_ideas_key,
        custom_recipes_key=resolved_settings.custom_recipes_key,
    )
    collections.load()
    recipe_builder = RecipeBuilder()

    async def close_resources() -> None:
        await lookup_client.close()
        await enrichment_service.close()

    return AppContainer(
        settings=resolved_settings,
        product_service=ProductService(lookup_client),
        enrichment_service=enrichment_service,
        recipe_builder=recipe_builder,
        collections=collections,
        recipe_service=RecipeService(recipe_builder, collections),
        close_resources=close_resources,
    )
