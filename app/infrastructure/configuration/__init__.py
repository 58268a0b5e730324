"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the content
service using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    dsn = settings.database.dsn
    fallback = settings.i18n.FALLBACK_LANGUAGE
    ttl = settings.cache.CACHE_CONTENT_TTL_SECONDS
    ```
"""

from infrastructure.configuration.settings import Settings

__all__ = ["Settings"]
