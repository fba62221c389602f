"""
Tests for logging configuration.
"""

import pytest
import structlog

from compressible.config import get_settings
from compressible.logging import _add_app_context, _logging_options, get_logger, get_processors


class TestProcessors:
    """Tests for get_processors."""

    def test_development_renderer(self, monkeypatch):
        """Test console output in development."""
        monkeypatch.setenv("COMPRESSIBLE_ENV", "development")
        get_settings.cache_clear()

        assert isinstance(get_processors()[-1], structlog.dev.ConsoleRenderer)

    def test_production_renderer(self, monkeypatch):
        """Test JSON output outside development."""
        monkeypatch.setenv("COMPRESSIBLE_ENV", "production")
        get_settings.cache_clear()

        assert isinstance(get_processors()[-1], structlog.processors.JSONRenderer)

    def test_app_context(self):
        """Test every entry is tagged with the app name."""
        event = _add_app_context(None, "info", {"event": "x"})

        assert event["app"] == "compressible"


def test_get_logger_configures_structlog():
    """Test asking for a logger leaves structlog configured."""
    logger = get_logger("compressible.tests")

    assert structlog.is_configured()
    assert hasattr(logger, "info")


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_invalid_settings_fall_back(self, monkeypatch, reset_logging):
        """Test bad settings produce a warning instead of an error."""
        monkeypatch.setenv("COMPRESSIBLE_LOG_LEVEL", "verbose")

        with pytest.warns(UserWarning, match="Invalid compressible settings"):
            reset_logging.configure_logging()

        assert structlog.is_configured()

    def test_explicit_level_with_invalid_settings(self, monkeypatch, reset_logging):
        """Test an explicit level is kept when settings cannot be read."""
        monkeypatch.setenv("COMPRESSIBLE_COMPRESSLEVEL", "11")

        with pytest.warns(UserWarning):
            level, development = reset_logging._logging_options("DEBUG")

        assert level == "DEBUG"
        assert development is False

    def test_options_from_settings(self, monkeypatch):
        """Test level and renderer choice come from settings."""
        monkeypatch.setenv("COMPRESSIBLE_LOG_LEVEL", "warning")
        monkeypatch.setenv("COMPRESSIBLE_ENV", "production")
        get_settings.cache_clear()

        assert _logging_options(None) == ("WARNING", False)
