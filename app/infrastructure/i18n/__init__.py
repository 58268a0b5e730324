"""Multilingual content resolution.

Resolves translated entity fields with per-field fallback to a default
language, and lists the languages content can be served in.

Main components:
- models: TranslationRecord, TranslationRecordKey, LanguageDescriptor, EntityType
- store: TranslationStore / LanguageStore and their PostgreSQL adapters
- resolver: TranslationResolver (single and batch resolution)
- catalog: LanguageCatalog (memoized language list)
- negotiation: LanguageNegotiator for query parameter / Accept-Language
- service: TranslationService facade used through dependency injection
"""

from infrastructure.i18n.catalog import LanguageCatalog
from infrastructure.i18n.models import (
    EntityType,
    LanguageDescriptor,
    ResolvedFields,
    TranslationRecord,
    TranslationRecordKey,
)
from infrastructure.i18n.negotiation import (
    LanguageNegotiator,
    normalize_language_code,
    parse_accept_language,
)
from infrastructure.i18n.resolver import TranslationResolver
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.store import (
    LanguageStore,
    PostgresLanguageStore,
    PostgresTranslationStore,
    TranslationStore,
)

__all__ = [
    "EntityType",
    "LanguageDescriptor",
    "ResolvedFields",
    "TranslationRecord",
    "TranslationRecordKey",
    "TranslationStore",
    "LanguageStore",
    "PostgresTranslationStore",
    "PostgresLanguageStore",
    "TranslationResolver",
    "LanguageCatalog",
    "LanguageNegotiator",
    "normalize_language_code",
    "parse_accept_language",
    "TranslationService",
]
