"""Test data factories for deterministic test data generation."""

from tests.factories.translations import (
    make_city_row,
    make_heritage_row,
    make_image_row,
    make_language,
    make_languages,
    make_translation_record,
    make_translation_records,
)

__all__ = [
    "make_city_row",
    "make_heritage_row",
    "make_image_row",
    "make_language",
    "make_languages",
    "make_translation_record",
    "make_translation_records",
]
