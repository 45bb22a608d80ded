"""Unit tests for locale_middleware.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest

from locale_middleware.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
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

    def test_returns_bound_logger(self, mock_settings):
        """configure_logging returns a usable logger."""
        result = configure_logging(settings=mock_settings)

        assert hasattr(result, "info")
        assert hasattr(result, "warning")

    def test_suppresses_logging_in_tests(self, mock_settings):
        """Logging is silenced while running under pytest."""
        configure_logging(settings=mock_settings, log_level="DEBUG")

        assert logging.root.level > logging.CRITICAL

    def test_production_mode_override(self, mock_settings):
        """is_production can be passed explicitly."""
        logger = configure_logging(settings=mock_settings, is_production=True)

        assert logger is not None


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_binds_calling_module(self):
        """The logger carries the calling module's name."""
        logger = get_module_logger()

        context = logger._context
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]
