"""Response cache abstract base class and entry type."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class CacheEntry:
    """A cached response payload with its absolute expiry time.

    Entries are never updated in place; storing a key again replaces the
    entry.

    Attributes:
        key: Cache key the entry is stored under.
        value: Fully resolved response payload.
        expires_at: Clock reading at or after which the entry is dead.
    """

    key: str
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Check whether the entry is dead at clock reading ``now``."""
        return now >= self.expires_at


class ResponseCache(ABC):
    """Abstract base class for response cache implementations.

    Holds payloads exactly as a caller will serve them, so a hit costs no
    translation lookups or store queries. Expiry is passive: an expired entry
    behaves like a miss the next time it is read.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get the cached payload for key.

        Args:
            key: Cache key built by CacheKeyBuilder.

        Returns:
            Cached payload, or None if absent or expired.
        """

    @abstractmethod
    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        """Store a payload under key.

        Args:
            key: Cache key.
            value: Payload to cache.
            ttl_seconds: Time-to-live in seconds, implementation default if None.
        """

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove a single key.

        Returns:
            True if a live or expired entry was removed.
        """

    @abstractmethod
    def flush(self) -> None:
        """Remove every entry."""

    @abstractmethod
    def keys(self) -> List[str]:
        """Keys of all live entries."""

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with cache statistics (implementation-specific).
        """
