"""Process-local response cache with per-entry TTL."""

import fnmatch
import time
from typing import Any, Callable, Dict, List, Optional

from infrastructure.caching.cache import CacheEntry, ResponseCache
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_TTL_SECONDS = 900


class InMemoryResponseCache(ResponseCache):
    """Dictionary-backed response cache.

    The service runs on a single asyncio event loop and every method here is
    synchronous, so reads and writes never interleave with another request's
    partial update. No lock is needed.

    Attributes:
        default_ttl_seconds: TTL applied when set() gets no explicit TTL.
        max_entries: Entry cap, 0 for unbounded. When full, expired entries
            are purged first, then the entry closest to expiry is evicted.
    """

    def __init__(
        self,
        default_ttl_seconds: int = DEFAULT_TTL_SECONDS,
        max_entries: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            default_ttl_seconds: Default time-to-live for entries.
            max_entries: Maximum number of entries, 0 disables the cap.
            clock: Monotonic clock returning seconds, injectable for tests.
        """
        if default_ttl_seconds <= 0:
            raise ValueError("default_ttl_seconds must be positive")
        self.default_ttl_seconds = default_ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0
        self._sets = 0
        self._evictions = 0
        logger.info(
            "initialized_in_memory_response_cache",
            default_ttl_seconds=default_ttl_seconds,
            max_entries=max_entries,
        )

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            logger.debug("response_cache_miss", key=key)
            return None

        if entry.is_expired(self._clock()):
            del self._entries[key]
            self._misses += 1
            logger.debug("response_cache_expired", key=key)
            return None

        self._hits += 1
        logger.debug("response_cache_hit", key=key)
        return entry.value

    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        if ttl_seconds is None:
            ttl_seconds = self.default_ttl_seconds
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")

        if self.max_entries and key not in self._entries:
            self._make_room()

        self._entries[key] = CacheEntry(
            key=key,
            value=value,
            expires_at=self._clock() + ttl_seconds,
        )
        self._sets += 1
        logger.debug("response_cache_set", key=key, ttl_seconds=ttl_seconds)

    def delete(self, key: str) -> bool:
        removed = self._entries.pop(key, None) is not None
        if removed:
            logger.debug("response_cache_deleted", key=key)
        return removed

    def has(self, key: str) -> bool:
        """Check for a live entry without touching hit/miss counters."""
        entry = self._entries.get(key)
        return entry is not None and not entry.is_expired(self._clock())

    def invalidate_pattern(self, pattern: str) -> int:
        """Remove every entry whose key matches a glob pattern.

        Args:
            pattern: Glob pattern, e.g. ``"cities:*"`` or ``"heritage:*:hi"``.

        Returns:
            Number of entries removed.
        """
        matching = [key for key in self._entries if fnmatch.fnmatchcase(key, pattern)]
        for key in matching:
            del self._entries[key]
        if matching:
            logger.info(
                "response_cache_pattern_invalidated",
                pattern=pattern,
                removed=len(matching),
            )
        return len(matching)

    def flush(self) -> None:
        self._entries.clear()
        logger.info("response_cache_flushed")

    def keys(self) -> List[str]:
        now = self._clock()
        return [key for key, entry in self._entries.items() if not entry.is_expired(now)]

    def get_stats(self) -> Dict[str, Any]:
        return {
            "backend": "memory",
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "sets": self._sets,
            "evictions": self._evictions,
            "default_ttl_seconds": self.default_ttl_seconds,
            "max_entries": self.max_entries,
        }

    def _make_room(self) -> None:
        if len(self._entries) < self.max_entries:
            return

        now = self._clock()
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]

        while len(self._entries) >= self.max_entries:
            oldest = min(self._entries.values(), key=lambda entry: entry.expires_at)
            del self._entries[oldest.key]
            self._evictions += 1
            logger.debug("response_cache_evicted", key=oldest.key)
