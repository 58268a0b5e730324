"""In-memory stand-ins for the database-backed adapters."""

from tests.fakes.clock import FakeClock
from tests.fakes.database import FakeDatabase
from tests.fakes.stores import FakeLanguageStore, FakeTranslationStore

__all__ = [
    "FakeClock",
    "FakeDatabase",
    "FakeLanguageStore",
    "FakeTranslationStore",
]
