"""API schemas for city listings."""

from enum import Enum
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from modules.heritage.schemas import ContentModel, HeritageSummary


class Region(str, Enum):
    """Regions cities are grouped into."""

    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"
    CENTRAL = "Central"
    NORTHEAST = "Northeast"


class CityFilters(BaseModel):
    """Optional filters for the city list.

    ``state`` and ``region`` are applied in SQL against the raw columns;
    ``search`` is matched against the translated name and state.
    """

    state: Optional[str] = Field(default=None, max_length=100)
    region: Optional[Region] = None
    search: Optional[str] = Field(default=None, max_length=255)


class City(ContentModel):
    """City with translated name and state."""

    id: UUID
    name: str
    state: str
    region: str
    preview_image: str
    heritage_count: int


class CitySummary(ContentModel):
    """City header shown above its heritage list."""

    id: UUID
    name: str
    state: str
    region: str


class CityHeritage(ContentModel):
    """A city together with its heritage items."""

    city: CitySummary
    heritage_items: List[HeritageSummary]
