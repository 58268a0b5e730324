"""City read-model: structural city rows plus translated fields."""

from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from infrastructure.i18n.models import EntityType
from infrastructure.logging import get_module_logger
from modules.cities.schemas import City, CityFilters
from modules.heritage.schemas import HeritageCategory, HeritageSummary

if TYPE_CHECKING:
    from infrastructure.i18n import TranslationService
    from infrastructure.persistence import Database

logger = get_module_logger()

CITY_FIELDS = ("name", "state")
HERITAGE_SUMMARY_FIELDS = ("name", "summary")

_CITY_COLUMNS = """
    SELECT
        c.id,
        c.slug,
        c.state,
        c.region,
        c.preview_image_url,
        COUNT(h.id) AS heritage_count
    FROM cities c
    LEFT JOIN heritage_items h ON h.city_id = c.id
"""
_CITY_GROUP_BY = " GROUP BY c.id, c.slug, c.state, c.region, c.preview_image_url"


class CityService:
    """Builds city and city-heritage payloads.

    A city's translated name falls back to its slug and its translated state
    to the raw state column when no translation exists in any language.
    """

    def __init__(self, database: "Database", translation: "TranslationService"):
        self._database = database
        self._translation = translation

    async def list_cities(
        self, language: str, filters: Optional[CityFilters] = None
    ) -> List[City]:
        """List cities ordered by slug.

        Args:
            language: Requested language code.
            filters: Optional state/region/search filters.

        Returns:
            Matching cities with translated fields.
        """
        filters = filters or CityFilters()

        conditions = []
        params: list = []
        if filters.state:
            params.append(filters.state)
            conditions.append(f"c.state = ${len(params)}")
        if filters.region:
            params.append(filters.region.value)
            conditions.append(f"c.region = ${len(params)}")

        query = _CITY_COLUMNS
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += _CITY_GROUP_BY + " ORDER BY c.slug"

        rows = await self._database.fetch(query, *params)
        if not rows:
            return []

        translations = await self._translation.resolve_batch(
            EntityType.CITY.value, [row["id"] for row in rows], language, CITY_FIELDS
        )
        cities = [self._to_city(row, translations[row["id"]]) for row in rows]

        if filters.search:
            needle = filters.search.lower()
            cities = [
                city
                for city in cities
                if needle in city.name.lower() or needle in city.state.lower()
            ]

        logger.debug(
            "cities_listed",
            language=language,
            row_count=len(rows),
            result_count=len(cities),
        )
        return cities

    async def get_city(self, city_id: UUID, language: str) -> Optional[City]:
        """Get one city, or None if it does not exist."""
        row = await self._database.fetchrow(
            _CITY_COLUMNS + " WHERE c.id = $1" + _CITY_GROUP_BY,
            city_id,
        )
        if row is None:
            logger.info("city_not_found", city_id=str(city_id))
            return None

        translations = await self._translation.resolve(
            EntityType.CITY.value, row["id"], language, CITY_FIELDS
        )
        return self._to_city(row, translations)

    async def list_city_heritage(
        self,
        city_id: UUID,
        language: str,
        category: Optional[HeritageCategory] = None,
    ) -> List[HeritageSummary]:
        """List a city's heritage items ordered by category, then creation.

        Args:
            city_id: City id. An unknown city yields an empty list.
            language: Requested language code.
            category: Optional category filter.
        """
        query = """
            SELECT h.id, h.category, h.thumbnail_image_url
            FROM heritage_items h
            WHERE h.city_id = $1
        """
        params: list = [city_id]
        if category:
            params.append(category.value)
            query += " AND h.category = $2"
        query += " ORDER BY h.category, h.created_at"

        rows = await self._database.fetch(query, *params)
        if not rows:
            return []

        translations = await self._translation.resolve_batch(
            EntityType.HERITAGE.value,
            [row["id"] for row in rows],
            language,
            HERITAGE_SUMMARY_FIELDS,
        )
        return [
            HeritageSummary(
                id=row["id"],
                name=translations[row["id"]]["name"],
                category=row["category"],
                summary=translations[row["id"]]["summary"],
                thumbnail_image=row["thumbnail_image_url"] or "",
            )
            for row in rows
        ]

    @staticmethod
    def _to_city(row, translations) -> City:
        return City(
            id=row["id"],
            name=translations["name"] or row["slug"],
            state=translations["state"] or row["state"],
            region=row["region"],
            preview_image=row["preview_image_url"] or "",
            heritage_count=int(row["heritage_count"]),
        )
