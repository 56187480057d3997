"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

STORAGE_BACKENDS = frozenset({"file", "supabase"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_image_model: str = "gpt-image-1"
    openai_reasoning_effort: str | None = "low"
    openai_store: bool = False
    off_base_url: str = "https://world.openfoodfacts.org/api/v0/product"
    off_user_agent: str = "SmartPantry/1.0 (demo@example.com)"
    storage_backend: str = "file"
    data_dir: str = "data"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "pantry_collections"
    saved_ideas_key: str = "saved_ideas"
    custom_recipes_key: str = "custom_recipes"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_storage_backend(raw: str | None) -> str:
    """Normalize the storage backend name, defaulting to local files."""
    if raw is None:
        return "file"
    cleaned = raw.strip().lower()
    if not cleaned:
        return "file"
    if cleaned not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown storage backend: {raw}")
    return cleaned
