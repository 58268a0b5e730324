"""API response schemas for heritage content.

Responses are serialized with camelCase aliases (``thumbnailImage``,
``detailedDescription``) to match what the web client reads.
"""

from enum import Enum
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class HeritageCategory(str, Enum):
    """Categories a heritage item can belong to."""

    MONUMENTS = "monuments"
    TEMPLES = "temples"
    FESTIVALS = "festivals"
    TRADITIONS = "traditions"
    CUISINE = "cuisine"
    ART_FORMS = "art_forms"
    HISTORICAL_EVENTS = "historical_events"
    CUSTOMS = "customs"


class ContentModel(BaseModel):
    """Base for response models: camelCase on the wire, snake_case in code."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_payload(self) -> dict:
        """JSON-ready dict, as served and cached."""
        return self.model_dump(mode="json", by_alias=True)


class HeritageSummary(ContentModel):
    """Heritage item as listed under a city."""

    id: UUID
    name: str
    category: str
    summary: str
    thumbnail_image: str


class Image(ContentModel):
    """Image attached to a heritage item."""

    id: UUID
    url: str
    thumbnail_url: str
    caption: str
    alt_text: str


class HeritageDetail(ContentModel):
    """Full heritage item with translated descriptions and images."""

    id: UUID
    name: str
    category: str
    summary: str
    detailed_description: str
    historical_period: str
    significance: str
    images: List[Image]
