"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger and get_logger
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
    _is_test_environment,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        """configure_logging returns a logger with the standard methods."""
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "debug")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_without_settings(self):
        """configure_logging works before settings are available."""
        assert configure_logging() is not None

    def test_configure_logging_with_overrides(self, mock_settings):
        """log_level and is_production overrides are accepted."""
        assert configure_logging(settings=mock_settings, log_level="DEBUG") is not None
        assert configure_logging(settings=mock_settings, is_production=True) is not None

    def test_configure_logging_idempotent(self, mock_settings):
        """Multiple configure_logging calls are safe."""
        assert configure_logging(settings=mock_settings) is not None
        assert configure_logging(settings=mock_settings) is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)

        assert logging.getLogger().level >= logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_get_module_logger_returns_bound_logger(self, mock_settings):
        """get_module_logger returns a logger with bind support."""
        configure_logging(settings=mock_settings)

        logger = get_module_logger()

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_get_module_logger_binds_module_context(self):
        """Component and module path come from the calling module."""
        logger = get_module_logger()

        context = structlog.get_context(logger)
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]

    def test_get_logger_with_explicit_name(self):
        """An explicit name is bound as logger_name."""
        logger = get_logger("cities")

        assert structlog.get_context(logger)["logger_name"] == "cities"


@pytest.mark.unit
class TestLoggingCalls:
    """Logging calls never raise while output is suppressed."""

    def test_logging_methods_dont_raise(self, mock_settings):
        configure_logging(settings=mock_settings)

        log = structlog.get_logger().bind(component="test")

        log.debug("debug_message", extra="data")
        log.info("info_message", key="value")
        log.warning("warning_message")
        log.error("error_message", error_code="E001")

    def test_exception_logging(self, mock_settings):
        configure_logging(settings=mock_settings)
        logger = structlog.get_logger()

        try:
            raise ValueError("test error")
        except ValueError:
            logger.exception("store_query_failed")
