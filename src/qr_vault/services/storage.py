"""Key-value storage abstractions."""

import json
from dataclasses import dataclass
from typing import Protocol

USERS_KEY = "users"
CURRENT_USER_KEY = "currentUser"
THEME_KEY = "theme"


class KeyValueStore(Protocol):
    """Storage interface for JSON-compatible values keyed by name."""

    def load(self, key: str) -> object | None:
        """Return the stored value, or None when the key is absent."""

    def save(self, key: str, value: object) -> None:
        """Store a JSON-compatible value under a key."""

    def remove(self, key: str) -> None:
        """Remove a key if present."""


@dataclass
class InMemoryStore(KeyValueStore):
    """In-memory store that keeps values JSON-encoded like the file store."""

    _entries: dict[str, str]

    def __init__(self) -> None:
        self._entries = {}

    def load(self, key: str) -> object | None:
        """Decode and return a stored value."""
        raw = self._entries.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def save(self, key: str, value: object) -> None:
        """Encode and store a value."""
        self._entries[key] = json.dumps(value)

    def remove(self, key: str) -> None:
        """Drop a stored value."""
        self._entries.pop(key, None)
