"""Translation models for the content resolution engine.

Defines the rows read from the translation store, the language catalog
entries, and the shape of a resolved record.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

# One entry per requested field: exact-language content, else fallback
# content, else "".
ResolvedFields = Dict[str, str]


class EntityType(str, Enum):
    """Entity types that carry translated fields."""

    CITY = "city"
    HERITAGE = "heritage"
    IMAGE = "image"


@dataclass(frozen=True)
class TranslationRecordKey:
    """Uniqueness key of a translation row.

    The store holds at most one row per key.

    Attributes:
        entity_type: Kind of entity (e.g., "city", "heritage").
        entity_id: Identifier of the entity, as a string.
        language_code: Language of the content (e.g., "hi").
        field_name: Translated field (e.g., "name", "summary").
    """

    entity_type: str
    entity_id: str
    language_code: str
    field_name: str


@dataclass(frozen=True)
class TranslationRecord:
    """A single translated field value.

    ``content`` is never None. A missing record means "no translation";
    an empty string is a translation that happens to be empty.
    """

    entity_type: str
    entity_id: str
    language_code: str
    field_name: str
    content: str

    @property
    def key(self) -> TranslationRecordKey:
        """Uniqueness key for this record."""
        return TranslationRecordKey(
            entity_type=self.entity_type,
            entity_id=self.entity_id,
            language_code=self.language_code,
            field_name=self.field_name,
        )


@dataclass(frozen=True)
class LanguageDescriptor:
    """A supported language as listed by the catalog.

    Attributes:
        code: Language code (e.g., "hi", "kok").
        name: Native name (e.g., "हिन्दी").
        english_name: English name (e.g., "Hindi").
    """

    code: str
    name: str
    english_name: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the API's field names."""
        return {
            "code": self.code,
            "name": self.name,
            "englishName": self.english_name,
        }
