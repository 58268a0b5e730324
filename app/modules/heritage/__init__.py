"""Heritage content module."""

from modules.heritage.schemas import (
    HeritageCategory,
    HeritageDetail,
    HeritageSummary,
    Image,
)
from modules.heritage.service import HeritageService

__all__ = [
    "HeritageCategory",
    "HeritageDetail",
    "HeritageSummary",
    "Image",
    "HeritageService",
]
