"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.cache import CacheSettings
from infrastructure.configuration.infrastructure.database import DatabaseSettings
from infrastructure.configuration.infrastructure.server import ServerSettings

__all__ = [
    "CacheSettings",
    "DatabaseSettings",
    "ServerSettings",
]
