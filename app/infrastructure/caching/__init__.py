"""Response caching.

Short-lived, process-local cache of fully resolved API payloads keyed on the
request shape (entity, language, filters).

Usage:

    from infrastructure.caching import CacheKeyBuilder, ResponseCacheService

    key = CacheKeyBuilder.cities("hi", state="Maharashtra")
    cached = cache.get(key)
    if cached is None:
        cached = await city_service.list_cities(...)
        cache.set(key, cached)
"""

from infrastructure.caching.cache import CacheEntry, ResponseCache
from infrastructure.caching.key_builder import CacheKeyBuilder, build_cache_key
from infrastructure.caching.memory import InMemoryResponseCache
from infrastructure.caching.service import ResponseCacheService

__all__ = [
    "CacheEntry",
    "ResponseCache",
    "InMemoryResponseCache",
    "CacheKeyBuilder",
    "build_cache_key",
    "ResponseCacheService",
]
