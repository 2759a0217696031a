"""Key-value storage abstractions."""

from dataclasses import dataclass
from typing import Protocol


class KeyValueStore(Protocol):
    """Persistence interface for string values keyed by string."""

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any existing one."""

    def remove(self, key: str) -> None:
        """Remove a value if present."""

    def list_keys(self) -> list[str]:
        """Return all stored keys."""

    def remove_many(self, keys: list[str]) -> None:
        """Remove several values at once."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Process-local key-value store."""

    _values: dict[str, str]

    def __init__(self) -> None:
        self._values = {}

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        self._values[key] = value

    def remove(self, key: str) -> None:
        """Remove a value if present."""
        self._values.pop(key, None)

    def list_keys(self) -> list[str]:
        """Return all stored keys."""
        return list(self._values)

    def remove_many(self, keys: list[str]) -> None:
        """Remove several values at once."""
        for key in keys:
            self._values.pop(key, None)
