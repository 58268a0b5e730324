"""
Factory functions for dependency injection.

Settings is a process-wide singleton. The content services are built once by
the FastAPI lifespan through create_services() and handed to route handlers
from ``app.state``; tests build their own with fakes.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from fastapi import Request

from infrastructure.caching import ResponseCacheService
from infrastructure.configuration import Settings
from infrastructure.i18n import (
    LanguageCatalog,
    LanguageNegotiator,
    LanguageStore,
    PostgresLanguageStore,
    PostgresTranslationStore,
    TranslationResolver,
    TranslationService,
    TranslationStore,
)
from infrastructure.persistence import Database
from modules.cities import CityService
from modules.heritage import HeritageService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@dataclass
class ContentServices:
    """Every long-lived service the API needs, built once per process."""

    settings: Settings
    database: Database
    translation: TranslationService
    negotiator: LanguageNegotiator
    cache: ResponseCacheService
    cities: CityService
    heritage: HeritageService


def create_services(
    settings: Settings,
    database: Optional[Database] = None,
    translation_store: Optional[TranslationStore] = None,
    language_store: Optional[LanguageStore] = None,
    cache: Optional[ResponseCacheService] = None,
) -> ContentServices:
    """Wire the content services together.

    Args:
        settings: Application settings.
        database: Database to use, created from settings when omitted.
            It is not connected here.
        translation_store: Override for the translation row store.
        language_store: Override for the language list store.
        cache: Override for the response cache service.

    Returns:
        ContentServices with shared instances.
    """
    database = database or Database(settings.database)
    fallback_language = settings.i18n.FALLBACK_LANGUAGE

    resolver = TranslationResolver(
        store=translation_store or PostgresTranslationStore(database),
        fallback_language=fallback_language,
    )
    catalog = LanguageCatalog(
        store=language_store or PostgresLanguageStore(database),
        fallback_language=fallback_language,
    )
    translation = TranslationService(resolver=resolver, catalog=catalog)

    return ContentServices(
        settings=settings,
        database=database,
        translation=translation,
        negotiator=LanguageNegotiator(fallback_language=fallback_language),
        cache=cache or ResponseCacheService(settings),
        cities=CityService(database, translation),
        heritage=HeritageService(
            database,
            translation,
            placeholder_image_url=settings.server.PLACEHOLDER_IMAGE_URL,
        ),
    )


def get_services(request: Request) -> ContentServices:
    """Services stored on the application by the lifespan."""
    return request.app.state.services


def get_translation_service(request: Request) -> TranslationService:
    return get_services(request).translation


def get_language_negotiator(request: Request) -> LanguageNegotiator:
    return get_services(request).negotiator


def get_response_cache(request: Request) -> ResponseCacheService:
    return get_services(request).cache


def get_city_service(request: Request) -> CityService:
    return get_services(request).cities


def get_heritage_service(request: Request) -> HeritageService:
    return get_services(request).heritage
