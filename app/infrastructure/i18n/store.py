"""Translation store adapters.

Defines the two read capabilities the resolution engine needs and their
PostgreSQL implementations. Adapters return raw rows and carry no business
logic: fallback and merging happen in TranslationResolver.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Hashable, List, Sequence
from uuid import UUID

from infrastructure.i18n.models import LanguageDescriptor, TranslationRecord
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.persistence import Database

logger = get_module_logger()


class TranslationStore(ABC):
    """Read access to persisted translation rows."""

    def entity_key(self, entity_id: Hashable) -> str:
        """Return the id string this store reports for ``entity_id``.

        Returned records carry ``entity_id`` in this form, so callers use it
        to match rows back to the ids they asked for.
        """
        return str(entity_id)

    @abstractmethod
    async def query_rows(
        self,
        entity_type: str,
        entity_ids: Sequence[str],
        language_code: str,
        field_names: Sequence[str],
    ) -> List[TranslationRecord]:
        """Fetch rows matching every given constraint.

        Args:
            entity_type: Entity type to match.
            entity_ids: Entity ids to match (any of).
            language_code: Language to match.
            field_names: Field names to match (any of).

        Returns:
            Matching TranslationRecords in no particular order.

        Raises:
            StoreError: If the underlying query fails.
        """


class LanguageStore(ABC):
    """Read access to the persisted language list."""

    @abstractmethod
    async def fetch_languages(self) -> List[LanguageDescriptor]:
        """Fetch all active languages ordered by English name.

        Raises:
            StoreError: If the underlying query fails.
        """


class PostgresTranslationStore(TranslationStore):
    """TranslationStore backed by the ``translations`` table."""

    QUERY = """
        SELECT entity_id, field_name, content
        FROM translations
        WHERE entity_type = $1
          AND entity_id = ANY($2::uuid[])
          AND language_code = $3
          AND field_name = ANY($4::text[])
    """

    def __init__(self, database: "Database"):
        self._database = database

    def entity_key(self, entity_id: Hashable) -> str:
        # Rows come back as canonical lower-case hyphenated UUIDs.
        try:
            return str(UUID(str(entity_id)))
        except ValueError:
            return str(entity_id)

    async def query_rows(
        self,
        entity_type: str,
        entity_ids: Sequence[str],
        language_code: str,
        field_names: Sequence[str],
    ) -> List[TranslationRecord]:
        rows = await self._database.fetch(
            self.QUERY,
            entity_type,
            [self.entity_key(entity_id) for entity_id in entity_ids],
            language_code,
            list(field_names),
        )
        logger.debug(
            "translation_rows_fetched",
            entity_type=entity_type,
            entity_count=len(entity_ids),
            language=language_code,
            row_count=len(rows),
        )
        return [self._to_record(entity_type, language_code, row) for row in rows]

    @staticmethod
    def _to_record(entity_type: str, language_code: str, row: Any) -> TranslationRecord:
        return TranslationRecord(
            entity_type=entity_type,
            entity_id=str(row["entity_id"]),
            language_code=language_code,
            field_name=row["field_name"],
            content=row["content"],
        )


class PostgresLanguageStore(LanguageStore):
    """LanguageStore backed by the ``languages`` table."""

    QUERY = """
        SELECT code, native_name, english_name
        FROM languages
        WHERE is_active = true
        ORDER BY english_name
    """

    def __init__(self, database: "Database"):
        self._database = database

    async def fetch_languages(self) -> List[LanguageDescriptor]:
        rows = await self._database.fetch(self.QUERY)
        return [
            LanguageDescriptor(
                code=row["code"],
                name=row["native_name"],
                english_name=row["english_name"],
            )
            for row in rows
        ]
