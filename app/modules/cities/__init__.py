"""City content module."""

from modules.cities.schemas import (
    City,
    CityFilters,
    CityHeritage,
    CitySummary,
    Region,
)
from modules.cities.service import CityService

__all__ = [
    "City",
    "CityFilters",
    "CityHeritage",
    "CitySummary",
    "Region",
    "CityService",
]
