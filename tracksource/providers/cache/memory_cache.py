"""In-memory expiring cache backed by ``cachetools.TTLCache``."""

from __future__ import annotations

from typing import Any

import structlog
from cachetools import TTLCache

from tracksource.interfaces.cache_provider import ICacheProvider

logger = structlog.get_logger(logger_name=__name__)


class MemoryCacheProvider(ICacheProvider):
    """Process-local cache; every entry lives for ``ttl`` seconds.

    Parameters
    ----------
    max_size:
        Entries kept before the least recently used one is evicted.
    ttl:
        Lifetime of every entry, in seconds.
    """

    def __init__(self, max_size: int = 64, ttl: int = 86400) -> None:
        self._cache: TTLCache[str, Any] = TTLCache(maxsize=max_size, ttl=ttl)

    async def get(self, key: str) -> Any | None:
        value = self._cache.get(key)
        logger.debug("cache_hit" if value is not None else "cache_miss", key=key)
        return value

    async def set(self, key: str, value: Any) -> None:
        self._cache[key] = value
        logger.debug("cache_set", key=key)

    async def delete(self, key: str) -> None:
        self._cache.pop(key, None)
        logger.debug("cache_delete", key=key)
