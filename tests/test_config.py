"""Tests for configuration helpers."""

import pytest

from smart_pantry.config import Settings, parse_storage_backend


def test_parse_storage_backend_defaults_to_file() -> None:
    assert parse_storage_backend(None) == "file"
    assert parse_storage_backend("  ") == "file"
    assert parse_storage_backend(" Supabase ") == "supabase"


def test_parse_storage_backend_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown storage backend"):
        parse_storage_backend("redis")


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("STORAGE_BACKEND", "supabase")
    monkeypatch.setenv("SAVED_IDEAS_KEY", "ideas_v1")

    settings = Settings()

    assert settings.storage_backend == "supabase"
    assert settings.saved_ideas_key == "ideas_v1"
    assert settings.custom_recipes_key == "custom_recipes"
