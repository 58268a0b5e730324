"""Per-field translation resolution with fallback-language substitution.

For every requested (entity, field) pair the resolver returns the content in
the requested language if a row exists, otherwise the content in the
fallback language, otherwise "". Lookups are batched: one query for the
requested language and at most one more for the fallback language,
whatever the number of entities.
"""

from typing import Dict, Hashable, List, Sequence, Set

from infrastructure.i18n.models import ResolvedFields, TranslationRecord
from infrastructure.i18n.store import TranslationStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# entity key (store form) -> field name -> content
_ContentMap = Dict[str, Dict[str, str]]


def _unique(values: Sequence) -> List:
    """Drop duplicates, keeping first-seen order."""
    return list(dict.fromkeys(values))


class TranslationResolver:
    """Resolves translated fields for one entity or a batch of entities.

    The resolver holds no state besides the fallback language, so one
    instance can serve any number of overlapping requests. It does not check
    whether entities exist or whether the language is supported: unknown
    ids or languages simply resolve to fallback content or "".

    Attributes:
        store: TranslationStore used for lookups.
        fallback_language: Language used to fill fields missing in the
            requested language.
    """

    def __init__(self, store: TranslationStore, fallback_language: str = "en"):
        """Initialize the resolver.

        Args:
            store: TranslationStore to query.
            fallback_language: Fallback language code (default: en).
        """
        self.store = store
        self.fallback_language = fallback_language

    async def resolve(
        self,
        entity_type: str,
        entity_id: Hashable,
        language: str,
        fields: Sequence[str],
    ) -> ResolvedFields:
        """Resolve fields for a single entity.

        Args:
            entity_type: Entity type (e.g., "heritage").
            entity_id: Entity identifier.
            language: Requested language code.
            fields: Field names; duplicates are collapsed.

        Returns:
            Mapping with exactly one entry per distinct field.

        Raises:
            ValueError: If fields is empty.
            StoreError: If a store query fails.
        """
        resolved = await self.resolve_batch(entity_type, [entity_id], language, fields)
        return resolved[entity_id]

    async def resolve_batch(
        self,
        entity_type: str,
        entity_ids: Sequence[Hashable],
        language: str,
        fields: Sequence[str],
    ) -> Dict[Hashable, ResolvedFields]:
        """Resolve fields for many entities with at most two store queries.

        Every id in ``entity_ids`` is a key of the result, including ids
        without any translation rows. The result has no meaningful order.

        Args:
            entity_type: Entity type (e.g., "city").
            entity_ids: Entity identifiers; duplicates are collapsed.
            language: Requested language code.
            fields: Field names; duplicates are collapsed.

        Returns:
            Mapping entity id -> resolved fields.

        Raises:
            ValueError: If fields is empty.
            StoreError: If a store query fails.
        """
        fields = _unique(fields)
        if not fields:
            raise ValueError("At least one field must be requested")

        entity_ids = _unique(entity_ids)
        if not entity_ids:
            return {}

        keys = {
            entity_id: self.store.entity_key(entity_id) for entity_id in entity_ids
        }
        id_keys = _unique(list(keys.values()))

        rows = await self.store.query_rows(entity_type, id_keys, language, fields)
        content = self._group(rows)

        missing = self._find_missing(content, id_keys, fields)
        if missing and language != self.fallback_language:
            missing_ids = _unique([entity_key for entity_key, _ in missing])
            missing_fields = _unique([field for _, field in missing])
            fallback_rows = await self.store.query_rows(
                entity_type, missing_ids, self.fallback_language, missing_fields
            )
            filled = self._fill(content, fallback_rows, missing)
            logger.debug(
                "fallback_translations_applied",
                entity_type=entity_type,
                language=language,
                fallback_language=self.fallback_language,
                missing_count=len(missing),
                filled_count=filled,
            )

        return {
            entity_id: {
                field: content.get(keys[entity_id], {}).get(field, "")
                for field in fields
            }
            for entity_id in entity_ids
        }

    @staticmethod
    def _group(rows: List[TranslationRecord]) -> _ContentMap:
        content: _ContentMap = {}
        for row in rows:
            content.setdefault(row.entity_id, {}).setdefault(row.field_name, row.content)
        return content

    @staticmethod
    def _find_missing(
        content: _ContentMap, id_keys: List[str], fields: List[str]
    ) -> List[tuple]:
        missing = []
        for entity_key in id_keys:
            present = content.get(entity_key, {})
            missing.extend(
                (entity_key, field) for field in fields if field not in present
            )
        return missing

    @staticmethod
    def _fill(
        content: _ContentMap, rows: List[TranslationRecord], missing: List[tuple]
    ) -> int:
        # The fallback query covers missing ids x missing fields, which can
        # include pairs the requested language already answered.
        wanted: Set[tuple] = set(missing)
        filled = 0
        for row in rows:
            pair = (row.entity_id, row.field_name)
            if pair not in wanted:
                continue
            wanted.discard(pair)
            content.setdefault(row.entity_id, {})[row.field_name] = row.content
            filled += 1
        return filled
