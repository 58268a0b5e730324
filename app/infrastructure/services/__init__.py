"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    CityServiceDep,
    HeritageServiceDep,
    LanguageNegotiatorDep,
    ResponseCacheDep,
    SettingsDep,
    TranslationServiceDep,
)
from infrastructure.services.providers import (
    ContentServices,
    create_services,
    get_services,
    get_settings,
)

__all__ = [
    "SettingsDep",
    "TranslationServiceDep",
    "LanguageNegotiatorDep",
    "ResponseCacheDep",
    "CityServiceDep",
    "HeritageServiceDep",
    "ContentServices",
    "create_services",
    "get_services",
    "get_settings",
]
