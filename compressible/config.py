"""
Package configuration using Pydantic settings.

Usage:
    from compressible.config import get_settings
    settings = get_settings()

Reference data lives in compressible.constants, not here.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Settings loaded from environment variables and .env file.

    All variables use the COMPRESSIBLE_ prefix, e.g. COMPRESSIBLE_LOG_LEVEL.
    """

    model_config = SettingsConfigDict(
        env_prefix="COMPRESSIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Runtime
    env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Response compression
    minimum_size: int = Field(default=500, ge=0)
    compresslevel: int = Field(default=6, ge=1, le=9)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)} (got '{v}')")
        return level

    @property
    def is_development(self) -> bool:
        return self.debug or self.env.lower() in ("development", "dev")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()


__all__ = ["Settings", "get_settings", "LOG_LEVELS"]
