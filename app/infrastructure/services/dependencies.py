"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.caching import ResponseCacheService
from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageNegotiator, TranslationService
from infrastructure.services.providers import (
    get_city_service,
    get_heritage_service,
    get_language_negotiator,
    get_response_cache,
    get_settings,
    get_translation_service,
)
from modules.cities import CityService
from modules.heritage import HeritageService

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Content services built by the lifespan
TranslationServiceDep = Annotated[TranslationService, Depends(get_translation_service)]
LanguageNegotiatorDep = Annotated[LanguageNegotiator, Depends(get_language_negotiator)]
ResponseCacheDep = Annotated[ResponseCacheService, Depends(get_response_cache)]
CityServiceDep = Annotated[CityService, Depends(get_city_service)]
HeritageServiceDep = Annotated[HeritageService, Depends(get_heritage_service)]

__all__ = [
    "SettingsDep",
    "TranslationServiceDep",
    "LanguageNegotiatorDep",
    "ResponseCacheDep",
    "CityServiceDep",
    "HeritageServiceDep",
]
