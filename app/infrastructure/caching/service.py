"""Response cache service for dependency injection.

Provides a class-based interface to the response cache for easier DI and
testing.
"""

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Optional

from infrastructure.caching.cache import ResponseCache
from infrastructure.caching.memory import InMemoryResponseCache
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


class ResponseCacheService:
    """Class-based response cache service.

    Wraps a ResponseCache with the TTL policy from settings: content
    responses use the short content TTL, the language catalog uses the long
    one.

    Usage:
        # Via dependency injection
        from infrastructure.services import ResponseCacheDep

        @router.get("/cities")
        async def list_cities(cache: ResponseCacheDep, ...):
            key = CacheKeyBuilder.cities(language, state=state)
            return await cache.get_or_set(key, lambda: service.list_cities(...))
    """

    def __init__(
        self, settings: "Settings", cache: Optional[ResponseCache] = None
    ):
        """Initialize response cache service.

        Args:
            settings: Settings instance (required, passed from provider).
            cache: Optional pre-configured ResponseCache. If not provided,
                creates an InMemoryResponseCache from settings.
        """
        self.content_ttl_seconds = settings.cache.CACHE_CONTENT_TTL_SECONDS
        self.languages_ttl_seconds = settings.cache.CACHE_LANGUAGES_TTL_SECONDS
        if cache is None:
            cache = InMemoryResponseCache(
                default_ttl_seconds=self.content_ttl_seconds,
                max_entries=settings.cache.CACHE_MAX_ENTRIES,
            )
        self._cache = cache

    def get(self, key: str) -> Optional[Any]:
        """Get cached payload, None when absent or expired."""
        return self._cache.get(key)

    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        """Cache a payload, defaulting to the content TTL."""
        if ttl_seconds is None:
            ttl_seconds = self.content_ttl_seconds
        self._cache.set(key, value, ttl_seconds)

    async def get_or_set(
        self,
        key: str,
        compute: Callable[[], Awaitable[Any]],
        ttl_seconds: Optional[int] = None,
    ) -> Any:
        """Return the cached payload or compute, cache and return it.

        Concurrent misses for one key both run ``compute``; the last one to
        finish wins. Results are identical so this only costs work.

        A ``None`` result is returned but not cached, so "not found" answers
        are recomputed on every request.

        Args:
            key: Cache key.
            compute: Zero-argument coroutine function producing the payload.
            ttl_seconds: TTL for a freshly computed payload.

        Returns:
            The cached or freshly computed payload.
        """
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        value = await compute()
        if value is not None:
            self.set(key, value, ttl_seconds)
        return value

    def delete(self, key: str) -> bool:
        return self._cache.delete(key)

    def flush(self) -> None:
        """Clear all cached entries. Primarily intended for testing."""
        self._cache.flush()

    def get_stats(self) -> Dict[str, Any]:
        return self._cache.get_stats()

    @property
    def cache(self) -> ResponseCache:
        """Access underlying ResponseCache instance."""
        return self._cache
