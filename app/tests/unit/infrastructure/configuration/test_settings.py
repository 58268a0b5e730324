"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- Sub-settings defaults and environment overrides
- Settings aggregator initialization
- Integration with Pydantic BaseSettings
"""

import pytest
from pydantic import ValidationError

from infrastructure.configuration import Settings
from infrastructure.configuration.features import I18nSettings
from infrastructure.configuration.infrastructure import (
    CacheSettings,
    DatabaseSettings,
    ServerSettings,
)

pytestmark = pytest.mark.unit


class TestI18nSettings:
    """Test suite for I18nSettings."""

    def test_defaults(self):
        i18n = I18nSettings(_env_file=None)

        assert i18n.FALLBACK_LANGUAGE == "en"
        assert i18n.STRICT_LANGUAGE is False

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("I18N_FALLBACK_LANGUAGE", " HI ")
        monkeypatch.setenv("I18N_STRICT_LANGUAGE", "true")

        i18n = I18nSettings(_env_file=None)

        assert i18n.FALLBACK_LANGUAGE == "hi"
        assert i18n.STRICT_LANGUAGE is True

    def test_empty_fallback_rejected(self, monkeypatch):
        monkeypatch.setenv("I18N_FALLBACK_LANGUAGE", "  ")

        with pytest.raises(ValidationError):
            I18nSettings(_env_file=None)


class TestDatabaseSettings:
    """Test suite for DatabaseSettings."""

    def test_dsn_built_from_parts(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("POSTGRES_HOST", "db")
        monkeypatch.setenv("POSTGRES_PORT", "6543")
        monkeypatch.setenv("POSTGRES_DB", "culture")
        monkeypatch.setenv("POSTGRES_USER", "reader")
        monkeypatch.setenv("POSTGRES_PASSWORD", "pw")

        database = DatabaseSettings(_env_file=None)

        assert database.dsn == "postgresql://reader:pw@db:6543/culture"

    def test_database_url_overrides_parts(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@remote/culture")

        assert DatabaseSettings(_env_file=None).dsn == "postgresql://u:p@remote/culture"

    def test_pool_defaults(self, monkeypatch):
        for name in ("DB_POOL_MIN_SIZE", "DB_POOL_MAX_SIZE", "DB_COMMAND_TIMEOUT_SECONDS"):
            monkeypatch.delenv(name, raising=False)

        database = DatabaseSettings(_env_file=None)

        assert database.DB_POOL_MIN_SIZE == 1
        assert database.DB_POOL_MAX_SIZE == 20
        assert database.DB_COMMAND_TIMEOUT_SECONDS == 30


class TestCacheSettings:
    """Test suite for CacheSettings."""

    def test_defaults(self):
        cache = CacheSettings(_env_file=None)

        assert cache.CACHE_CONTENT_TTL_SECONDS == 900
        assert cache.CACHE_LANGUAGES_TTL_SECONDS == 3600
        assert cache.CACHE_MAX_ENTRIES == 10000

    def test_non_positive_ttl_rejected(self, monkeypatch):
        monkeypatch.setenv("CACHE_CONTENT_TTL_SECONDS", "0")

        with pytest.raises(ValidationError):
            CacheSettings(_env_file=None)


class TestServerSettings:
    """Test suite for ServerSettings."""

    def test_cors_origins_split_and_stripped(self, monkeypatch):
        monkeypatch.setenv(
            "CORS_ALLOWED_ORIGINS", "https://culture.example.com, ,http://localhost:5173"
        )

        server = ServerSettings(_env_file=None)

        assert server.cors_origins == [
            "https://culture.example.com",
            "http://localhost:5173",
        ]


class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_subsettings_instantiated(self):
        settings = Settings()

        assert isinstance(settings.i18n, I18nSettings)
        assert isinstance(settings.database, DatabaseSettings)
        assert isinstance(settings.cache, CacheSettings)
        assert isinstance(settings.server, ServerSettings)

    def test_explicit_subsettings_kept(self):
        cache = CacheSettings(_env_file=None)

        assert Settings(cache=cache).cache is cache

    @pytest.mark.parametrize("prefix,expected", [("", True), ("dev-", False)])
    def test_is_production(self, monkeypatch, prefix, expected):
        monkeypatch.setenv("PREFIX", prefix)

        assert Settings().is_production is expected
