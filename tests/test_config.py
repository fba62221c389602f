"""
Tests for settings.
"""

import pytest
from pydantic import ValidationError

from compressible.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings(_env_file=None)

        assert settings.env == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.minimum_size == 500
        assert settings.compresslevel == 6

    def test_env_overrides(self, monkeypatch):
        """Test COMPRESSIBLE_ variables are read."""
        monkeypatch.setenv("COMPRESSIBLE_ENV", "production")
        monkeypatch.setenv("COMPRESSIBLE_LOG_LEVEL", "debug")
        monkeypatch.setenv("COMPRESSIBLE_MINIMUM_SIZE", "1024")

        settings = Settings(_env_file=None)

        assert settings.env == "production"
        assert settings.log_level == "DEBUG"
        assert settings.minimum_size == 1024

    def test_invalid_log_level(self, monkeypatch):
        """Test unknown log levels are rejected."""
        monkeypatch.setenv("COMPRESSIBLE_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_compresslevel_bounds(self):
        """Test gzip level must be 1-9."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, compresslevel=0)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, compresslevel=10)

    def test_negative_minimum_size(self):
        """Test the threshold cannot be negative."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, minimum_size=-1)

    def test_is_development(self):
        """Test development detection."""
        assert Settings(_env_file=None).is_development
        assert not Settings(_env_file=None, env="production").is_development
        assert Settings(_env_file=None, env="production", debug=True).is_development


def test_get_settings_cached():
    """Test settings are created once."""
    assert get_settings() is get_settings()
