"""Abstract durable key-value storage.

The equivalent of a browser's localStorage: string keys, string values,
scoped to one profile, synchronous from the caller's point of view.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class LocalStorage(ABC):

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored value for *key*, or None if never set."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""
