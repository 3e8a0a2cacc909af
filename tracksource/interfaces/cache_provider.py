"""Abstract base class for small key-value stores.

Used to memoize values that are expensive to obtain and valid for a while,
such as the scraped YouTube Music API key.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ICacheProvider(ABC):
    """Contract for key-value caches with expiry."""

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the value under *key*, or ``None`` if missing or expired."""

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Store *value* under *key* using the cache's expiry policy."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove *key*; a missing key is not an error."""
