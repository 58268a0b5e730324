import sys
from pathlib import Path

# Make the application package root importable during collection regardless
# of how pytest was invoked.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from infrastructure.caching import InMemoryResponseCache, ResponseCacheService
from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageCatalog, TranslationResolver, TranslationService
from infrastructure.services import create_services
from tests.factories.translations import make_languages, make_translation_records
from tests.fakes import FakeClock, FakeDatabase, FakeLanguageStore, FakeTranslationStore


@pytest.fixture
def settings():
    """Settings built from defaults, isolated from the developer's .env."""
    return Settings(_env_file=None, PREFIX="test-")


@pytest.fixture
def translation_store():
    """Fake translation store seeded with the standard heritage/city rows."""
    return FakeTranslationStore(make_translation_records())


@pytest.fixture
def language_store():
    return FakeLanguageStore(make_languages())


@pytest.fixture
def resolver(translation_store):
    return TranslationResolver(store=translation_store, fallback_language="en")


@pytest.fixture
def catalog(language_store):
    return LanguageCatalog(store=language_store, fallback_language="en")


@pytest.fixture
def translation_service(resolver, catalog):
    return TranslationService(resolver=resolver, catalog=catalog)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_cache(clock):
    return InMemoryResponseCache(default_ttl_seconds=900, clock=clock)


@pytest.fixture
def cache_service(settings, memory_cache):
    return ResponseCacheService(settings, cache=memory_cache)


@pytest.fixture
def fake_database():
    return FakeDatabase()


@pytest.fixture
def services(settings, fake_database, translation_store, language_store, cache_service):
    """Full service graph wired with fakes, as the lifespan would build it."""
    return create_services(
        settings,
        database=fake_database,
        translation_store=translation_store,
        language_store=language_store,
        cache=cache_service,
    )
