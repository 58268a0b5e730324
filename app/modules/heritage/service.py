"""Heritage read-model: structural heritage/image rows plus translated fields."""

from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from infrastructure.i18n.models import EntityType
from infrastructure.logging import get_module_logger
from modules.heritage.schemas import HeritageDetail, Image

if TYPE_CHECKING:
    from infrastructure.i18n import TranslationService
    from infrastructure.persistence import Database

logger = get_module_logger()

HERITAGE_DETAIL_FIELDS = ("name", "summary", "detailed_description", "significance")
IMAGE_FIELDS = ("caption", "alt_text")


class HeritageService:
    """Builds heritage detail and image payloads.

    Translated text comes from TranslationService; everything else
    (category, period, URLs, ordering) comes straight from the database.
    """

    def __init__(
        self,
        database: "Database",
        translation: "TranslationService",
        placeholder_image_url: str = "",
    ):
        self._database = database
        self._translation = translation
        self.placeholder_image_url = placeholder_image_url

    async def get_heritage(
        self, heritage_id: UUID, language: str
    ) -> Optional[HeritageDetail]:
        """Get a heritage item with its translated fields and images.

        Args:
            heritage_id: Heritage item id.
            language: Requested language code.

        Returns:
            HeritageDetail, or None if the heritage item does not exist.
        """
        row = await self._database.fetchrow(
            """
            SELECT id, city_id, category, historical_period, thumbnail_image_url
            FROM heritage_items
            WHERE id = $1
            """,
            heritage_id,
        )
        if row is None:
            logger.info("heritage_not_found", heritage_id=str(heritage_id))
            return None

        translations = await self._translation.resolve(
            EntityType.HERITAGE.value, row["id"], language, HERITAGE_DETAIL_FIELDS
        )
        images = await self.list_images(heritage_id)

        return HeritageDetail(
            id=row["id"],
            name=translations["name"],
            category=row["category"],
            summary=translations["summary"],
            detailed_description=translations["detailed_description"],
            historical_period=row["historical_period"] or "",
            significance=translations["significance"],
            images=images,
        )

    async def list_images(self, heritage_id: UUID) -> List[Image]:
        """List a heritage item's images in display order.

        Captions and alt text are resolved in the fallback language, so the
        same image list is served for every requested language.
        """
        rows = await self._database.fetch(
            """
            SELECT id, url, thumbnail_url, display_order
            FROM images
            WHERE heritage_id = $1
            ORDER BY display_order
            """,
            heritage_id,
        )
        if not rows:
            return []

        translations = await self._translation.resolve_batch(
            EntityType.IMAGE.value,
            [row["id"] for row in rows],
            self._translation.get_fallback_language(),
            IMAGE_FIELDS,
        )

        return [
            Image(
                id=row["id"],
                url=row["url"] or self.placeholder_image_url,
                thumbnail_url=row["thumbnail_url"] or self.placeholder_image_url,
                caption=translations[row["id"]]["caption"],
                alt_text=translations[row["id"]]["alt_text"],
            )
            for row in rows
        ]
