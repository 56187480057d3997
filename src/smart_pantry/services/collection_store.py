"""Durable collections of saved ideas and custom recipes.

Each collection lives under one key of a key-value store as a JSON list,
newest first. Every mutation rewrites the whole list.
"""

import json
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar
from uuid import UUID

from smart_pantry.domain.errors import MalformedStoredDataError
from smart_pantry.domain.recipes import CustomRecipe, SavedIdea
from smart_pantry.services.serialization import (
    custom_recipe_to_record,
    parse_custom_recipe,
    parse_saved_idea,
    saved_idea_to_record,
)

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Durable text storage addressed by key."""

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""


class Identified(Protocol):
    @property
    def id(self) -> UUID: ...


ItemT = TypeVar("ItemT", bound=Identified)


@dataclass
class PersistedCollection(Generic[ItemT]):
    """Insertion-ordered collection persisted as a whole on every change."""

    store: KeyValueStore
    key: str
    encode: Callable[[ItemT], dict[str, object]]
    decode: Callable[[object], ItemT]
    _items: list[ItemT] = field(default_factory=list, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    @property
    def items(self) -> list[ItemT]:
        """Snapshot of the items, newest first."""
        with self._lock:
            return list(self._items)

    def load(self) -> list[ItemT]:
        """Load items from storage, starting empty when missing or corrupt."""
        with self._lock:
            raw = self.store.get(self.key)
            try:
                self._items = self._decode_all(raw)
            except MalformedStoredDataError:
                _logger.exception("Failed to parse stored collection: %s", self.key)
                self._items = []
            return list(self._items)

    def get(self, item_id: UUID) -> ItemT | None:
        with self._lock:
            return next((item for item in self._items if item.id == item_id), None)

    def append(self, item: ItemT) -> None:
        """Add an item at the front and persist the collection."""
        with self._lock:
            updated = [item, *self._items]
            self._persist(updated)
            self._items = updated

    def delete_by_id(self, item_id: UUID) -> bool:
        """Remove an item and persist; return whether anything was removed."""
        with self._lock:
            remaining = [item for item in self._items if item.id != item_id]
            if len(remaining) == len(self._items):
                return False
            self._persist(remaining)
            self._items = remaining
            return True

    def _persist(self, items: list[ItemT]) -> None:
        # Memory is only replaced once the write succeeds.
        payload = json.dumps([self.encode(item) for item in items])
        self.store.set(self.key, payload)

    def _decode_all(self, raw: str | None) -> list[ItemT]:
        if raw is None or not raw.strip():
            return []
        try:
            records = json.loads(raw)
        except ValueError as exc:
            raise MalformedStoredDataError(f"Invalid JSON under {self.key}") from exc
        if not isinstance(records, list):
            raise MalformedStoredDataError(f"Expected a list under {self.key}")
        return [self.decode(record) for record in records]


@dataclass
class CollectionStore:
    """Saved ideas and custom recipes for the running process."""

    saved_ideas: PersistedCollection[SavedIdea]
    custom_recipes: PersistedCollection[CustomRecipe]

    @classmethod
    def create(
        cls,
        store: KeyValueStore,
        saved_ideas_key: str,
        custom_recipes_key: str,
    ) -> "CollectionStore":
        """Create both collections over one key-value store."""
        return cls(
            saved_ideas=PersistedCollection(
                store=store,
                key=saved_ideas_key,
                encode=saved_idea_to_record,
                decode=parse_saved_idea,
            ),
            custom_recipes=PersistedCollection(
                store=store,
                key=custom_recipes_key,
                encode=custom_recipe_to_record,
                decode=parse_custom_recipe,
            ),
        )

    def load(self) -> None:
        """Load both collections from storage."""
        ideas = self.saved_ideas.load()
        recipes = self.custom_recipes.load()
        _logger.info(
            "Loaded collections: saved_ideas=%s custom_recipes=%s",
            len(ideas),
            len(recipes),
        )
