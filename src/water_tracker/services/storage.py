"""Key-value storage abstractions."""

from dataclasses import dataclass
from typing import Protocol


class KeyValueStore(Protocol):
    """Local key-value storage for serialized records."""

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    def delete(self, key: str) -> None:
        """Remove a key if present."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory store for tests and ephemeral sessions."""

    _values: dict[str, str]

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        """Return the stored value for a key."""
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value for a key."""
        self._values[key] = value

    def delete(self, key: str) -> None:
        """Remove a key."""
        self._values.pop(key, None)
