"""JSON file-backed key-value store."""

import json
from dataclasses import dataclass
from pathlib import Path

from qr_vault.services.storage import KeyValueStore


@dataclass
class JsonFileStore(KeyValueStore):
    """Stores each key as ``<key>.json`` inside a directory."""

    directory: Path

    @classmethod
    def create(cls, directory: str | Path) -> "JsonFileStore":
        """Create a store, making the directory if needed."""
        path = Path(directory)
        path.mkdir(parents=True, exist_ok=True)
        return cls(directory=path)

    def load(self, key: str) -> object | None:
        """Read and decode a key; corrupt content raises JSONDecodeError."""
        path = self._path(key)
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def save(self, key: str, value: object) -> None:
        """Encode and write a key, replacing any previous value."""
        self._path(key).write_text(
            json.dumps(value, ensure_ascii=False), encoding="utf-8"
        )

    def remove(self, key: str) -> None:
        """Delete a key if it exists."""
        self._path(key).unlink(missing_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"
