"""Cache provider implementations."""

from tracksource.providers.cache.memory_cache import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
