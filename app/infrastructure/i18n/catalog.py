"""Supported-language catalog, memoized after the first load."""

from typing import List, Optional

from infrastructure.i18n.models import LanguageDescriptor
from infrastructure.i18n.store import LanguageStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LanguageCatalog:
    """Lists supported languages and answers membership questions.

    The list is loaded from the store on first use and the very same list
    object is returned until clear_cache() is called. Callers must treat it
    as read-only.

    Attributes:
        fallback_language: Language code content falls back to.
    """

    def __init__(self, store: LanguageStore, fallback_language: str = "en"):
        self._store = store
        self.fallback_language = fallback_language
        self._languages: Optional[List[LanguageDescriptor]] = None

    async def get_supported_languages(self) -> List[LanguageDescriptor]:
        """Get all active languages ordered by English name.

        Returns:
            The memoized list of LanguageDescriptors.

        Raises:
            StoreError: If the first load fails. Nothing is memoized then.
        """
        if self._languages is not None:
            return self._languages

        languages = list(await self._store.fetch_languages())

        # Another request may have finished loading while this one awaited;
        # keep the first list so every caller shares one instance.
        if self._languages is None:
            self._languages = languages
            logger.info("language_catalog_loaded", language_count=len(languages))
        return self._languages

    def get_fallback_language(self) -> str:
        return self.fallback_language

    async def is_language_supported(self, code: str) -> bool:
        """Check a language code against the memoized list."""
        languages = await self.get_supported_languages()
        return any(language.code == code for language in languages)

    def clear_cache(self) -> None:
        """Forget the memoized list; the next call reloads it."""
        self._languages = None
        logger.info("language_catalog_cache_cleared")
