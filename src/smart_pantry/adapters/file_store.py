"""Key-value store backed by files in a local directory."""

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from smart_pantry.services.collection_store import KeyValueStore

_logger = logging.getLogger(__name__)


@dataclass
class FileKeyValueStore(KeyValueStore):
    """Stores each key as ``<directory>/<key>.json``."""

    directory: Path

    def get(self, key: str) -> str | None:
        """Return the file contents for a key, if the file exists."""
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            _logger.info("No stored data for %s at %s", key, path)
            return None

    def set(self, key: str, value: str) -> None:
        """Atomically replace the file for a key."""
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, self._path(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"
