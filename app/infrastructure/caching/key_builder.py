"""Deterministic cache key construction.

Keys are readable on purpose: ``invalidate_pattern("cities:*")`` and log
lines depend on being able to see the request shape in the key.
"""

from typing import Any, Optional
from urllib.parse import quote

KEY_SEPARATOR = ":"


def _encode(value: Any) -> str:
    # Percent-encode so ":" and "=" never occur inside a segment.
    return quote(str(value), safe="")


def build_cache_key(namespace: str, *parts: Any, **filters: Any) -> str:
    """Build a cache key from a namespace, positional parts and filters.

    Positional parts keep their order. Filters are sorted by name so that
    logically identical requests produce identical keys whatever order the
    caller collected them in. Filters whose value is None or "" are dropped.
    Every segment is percent-encoded, so free-text values cannot forge
    extra segments.

    Args:
        namespace: Leading key segment, e.g. ``"cities"``.
        *parts: Ordered segments such as entity id and language.
        **filters: Request filters rendered as ``name=value``.

    Returns:
        Key string, e.g. ``"cities:en:region=West:state=Maharashtra"``.

    Raises:
        ValueError: If namespace is empty.
    """
    if not namespace:
        raise ValueError("Cache key namespace must not be empty")

    segments = [_encode(namespace)]
    segments.extend(_encode(part) for part in parts)
    segments.extend(
        f"{_encode(name)}={_encode(value)}"
        for name, value in sorted(filters.items())
        if value is not None and value != ""
    )
    return KEY_SEPARATOR.join(segments)


class CacheKeyBuilder:
    """Named key builders for every cached API response.

    Example:
        >>> CacheKeyBuilder.cities("en", state="Maharashtra")
        'cities:en:state=Maharashtra'
        >>> CacheKeyBuilder.heritage("2f1c...", "hi")
        'heritage:2f1c...:hi'
    """

    @staticmethod
    def cities(
        language: str,
        state: Optional[str] = None,
        region: Optional[str] = None,
        search: Optional[str] = None,
    ) -> str:
        return build_cache_key(
            "cities", language, state=state, region=region, search=search
        )

    @staticmethod
    def city_heritage(
        city_id: Any, language: str, category: Optional[str] = None
    ) -> str:
        return build_cache_key("city", city_id, "heritage", language, category=category)

    @staticmethod
    def heritage(heritage_id: Any, language: str) -> str:
        return build_cache_key("heritage", heritage_id, language)

    @staticmethod
    def heritage_images(heritage_id: Any) -> str:
        return build_cache_key("heritage", heritage_id, "images")

    @staticmethod
    def languages() -> str:
        return build_cache_key("languages", "all")
