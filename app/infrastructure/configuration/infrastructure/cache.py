"""Response cache infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class CacheSettings(InfrastructureSettings):
    """Response cache configuration.

    Content responses change whenever translations are edited, so they get a
    short TTL. The language catalog rarely changes and is kept longer.

    Environment Variables:
        CACHE_CONTENT_TTL_SECONDS: TTL for city/heritage responses (default: 900s = 15min)
        CACHE_LANGUAGES_TTL_SECONDS: TTL for the language list (default: 3600s = 1h)
        CACHE_MAX_ENTRIES: Entry cap, 0 disables the cap (default: 10000)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        ttl = settings.cache.CACHE_CONTENT_TTL_SECONDS
        ```
    """

    CACHE_CONTENT_TTL_SECONDS: int = Field(
        default=900,
        alias="CACHE_CONTENT_TTL_SECONDS",
        gt=0,
    )
    CACHE_LANGUAGES_TTL_SECONDS: int = Field(
        default=3600,
        alias="CACHE_LANGUAGES_TTL_SECONDS",
        gt=0,
    )
    CACHE_MAX_ENTRIES: int = Field(default=10000, alias="CACHE_MAX_ENTRIES", ge=0)
