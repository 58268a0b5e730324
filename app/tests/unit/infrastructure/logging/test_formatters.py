"""Unit tests for infrastructure.logging.formatters module.

Tests cover:
- add_app_info processor
- mask_sensitive_data processor
- truncate_large_values processor
- add_environment_info processor
- SENSITIVE_PATTERNS constant
"""

import pytest
from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
    add_environment_info,
    SENSITIVE_PATTERNS,
)


@pytest.mark.unit
class TestAddAppInfo:
    """Test suite for add_app_info processor factory."""

    def test_add_app_info_adds_name_and_version(self):
        """Processor adds app_name and app_version to event dict."""
        processor = add_app_info("culture-content-service", "1.2.3")
        event_dict = {"event": "test_event", "key": "value"}

        result = processor(None, "info", event_dict)

        assert result["app_name"] == "culture-content-service"
        assert result["app_version"] == "1.2.3"
        assert result["key"] == "value"

    def test_add_app_info_with_unknown_version(self):
        """Default version is 'unknown' if not provided."""
        processor = add_app_info("test-app")

        result = processor(None, "info", {"event": "test"})

        assert result["app_version"] == "unknown"

    def test_add_app_info_overwrites_existing_app_info(self):
        """If app_name/app_version exist, they are overwritten."""
        processor = add_app_info("new-app", "3.0")
        event_dict = {"event": "test", "app_name": "old-app", "app_version": "1.0"}

        result = processor(None, "info", event_dict)

        assert result["app_name"] == "new-app"
        assert result["app_version"] == "3.0"


@pytest.mark.unit
class TestMaskSensitiveData:
    """Test suite for mask_sensitive_data processor factory."""

    def test_mask_sensitive_data_masks_password(self):
        """Password fields are masked."""
        processor = mask_sensitive_data()
        event_dict = {"event": "db_connect", "user": "culture", "password": "s3cret"}

        result = processor(None, "info", event_dict)

        assert result["user"] == "culture"
        assert result["password"] == "***REDACTED***"

    def test_mask_sensitive_data_masks_connection_strings(self):
        """DSNs and database URLs carry credentials and are masked."""
        processor = mask_sensitive_data()
        event_dict = {
            "event": "db_connect",
            "dsn": "postgresql://u:p@db/culture",
            "DATABASE_URL": "postgresql://u:p@db/culture",
        }

        result = processor(None, "info", event_dict)

        assert result["dsn"] == "***REDACTED***"
        assert result["DATABASE_URL"] == "***REDACTED***"

    def test_mask_sensitive_data_case_insensitive(self):
        """Masking is case-insensitive."""
        processor = mask_sensitive_data()
        event_dict = {"Password": "secret", "API_KEY": "key123", "Authorization": "x"}

        result = processor(None, "info", event_dict)

        assert result["Password"] == "***REDACTED***"
        assert result["API_KEY"] == "***REDACTED***"
        assert result["Authorization"] == "***REDACTED***"

    def test_mask_sensitive_data_preserves_none_values(self):
        """None values are not masked (kept as None)."""
        processor = mask_sensitive_data()

        result = processor(None, "info", {"event": "test", "password": None})

        assert result["password"] is None

    def test_mask_sensitive_data_custom_mask_value(self):
        """Custom mask value can be specified."""
        processor = mask_sensitive_data(mask_value="[HIDDEN]")

        result = processor(None, "info", {"event": "test", "secret": "x"})

        assert result["secret"] == "[HIDDEN]"

    def test_mask_sensitive_data_additional_patterns(self):
        """Additional patterns can be added."""
        processor = mask_sensitive_data(additional_patterns=frozenset({"ssn"}))

        result = processor(None, "info", {"user_ssn": "123", "password": "p"})

        assert result["user_ssn"] == "***REDACTED***"
        assert result["password"] == "***REDACTED***"

    def test_mask_sensitive_data_preserves_non_sensitive(self):
        """Non-sensitive fields are not masked."""
        processor = mask_sensitive_data()
        event_dict = {
            "event": "resolve_batch",
            "entity_type": "city",
            "language": "hi",
            "entity_count": 12,
        }

        result = processor(None, "info", event_dict)

        assert result == event_dict


@pytest.mark.unit
class TestTruncateLargeValues:
    """Test suite for truncate_large_values processor factory."""

    def test_truncate_large_values_truncates_long_string(self):
        """Strings longer than max_length are truncated."""
        processor = truncate_large_values(max_length=50)

        result = processor(None, "info", {"event": "test", "content": "a" * 100})

        assert result["content"].startswith("a" * 50)
        assert "[truncated, 100 chars total]" in result["content"]

    def test_truncate_large_values_default_length(self):
        """Default max_length is 500 characters."""
        processor = truncate_large_values()
        event_dict = {"event": "test", "medium": "x" * 400, "long": "y" * 600}

        result = processor(None, "info", event_dict)

        assert result["medium"] == "x" * 400
        assert len(result["long"]) < 600

    def test_truncate_large_values_preserves_non_strings(self):
        """Non-string values are not affected."""
        processor = truncate_large_values(max_length=5)
        event_dict = {"event": "test", "number": 123456789, "items": [1, 2, 3], "none": None}

        result = processor(None, "info", event_dict)

        assert result["number"] == 123456789
        assert result["items"] == [1, 2, 3]
        assert result["none"] is None


@pytest.mark.unit
class TestAddEnvironmentInfo:
    """Test suite for add_environment_info processor factory."""

    def test_add_environment_info_adds_environment(self):
        processor = add_environment_info("production")

        result = processor(None, "info", {"event": "test", "environment": "old"})

        assert result["environment"] == "production"


@pytest.mark.unit
class TestSensitivePatterns:
    """Test suite for SENSITIVE_PATTERNS constant."""

    def test_sensitive_patterns_is_frozenset(self):
        assert isinstance(SENSITIVE_PATTERNS, frozenset)

    def test_sensitive_patterns_contains_credentials(self):
        assert {"password", "secret", "token", "dsn", "database_url"} <= SENSITIVE_PATTERNS
