"""Translation service for dependency injection.

Provides one class-based entry point to the resolution engine for the
aggregation services and the API layer.
"""

from typing import Dict, Hashable, List, Sequence

from infrastructure.i18n.catalog import LanguageCatalog
from infrastructure.i18n.models import LanguageDescriptor, ResolvedFields
from infrastructure.i18n.resolver import TranslationResolver


class TranslationService:
    """Class-based translation service.

    Thin facade over TranslationResolver and LanguageCatalog; all actual
    work is delegated to them.

    Usage:
        # Via dependency injection
        from infrastructure.services import TranslationServiceDep

        @router.get("/languages")
        async def list_languages(translation: TranslationServiceDep):
            languages = await translation.get_supported_languages()
            return {"languages": [language.to_dict() for language in languages]}
    """

    def __init__(self, resolver: TranslationResolver, catalog: LanguageCatalog):
        self._resolver = resolver
        self._catalog = catalog

    async def resolve(
        self,
        entity_type: str,
        entity_id: Hashable,
        language: str,
        fields: Sequence[str],
    ) -> ResolvedFields:
        """Resolve fields for one entity, falling back per field."""
        return await self._resolver.resolve(entity_type, entity_id, language, fields)

    async def resolve_batch(
        self,
        entity_type: str,
        entity_ids: Sequence[Hashable],
        language: str,
        fields: Sequence[str],
    ) -> Dict[Hashable, ResolvedFields]:
        """Resolve fields for many entities, keyed by every requested id."""
        return await self._resolver.resolve_batch(
            entity_type, entity_ids, language, fields
        )

    async def get_supported_languages(self) -> List[LanguageDescriptor]:
        return await self._catalog.get_supported_languages()

    def get_fallback_language(self) -> str:
        return self._catalog.get_fallback_language()

    async def is_language_supported(self, code: str) -> bool:
        return await self._catalog.is_language_supported(code)

    def clear_cache(self) -> None:
        """Forget the memoized language list."""
        self._catalog.clear_cache()

    @property
    def resolver(self) -> TranslationResolver:
        return self._resolver

    @property
    def catalog(self) -> LanguageCatalog:
        return self._catalog
