"""
Configuration module for repokit.

Settings are read from environment variables prefixed with ``REPOKIT_`` or
from a ``.env`` file, and validated on instantiation.
"""

from datetime import datetime, timezone
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the repokit test helpers.

    Attributes:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render log events as JSON instead of console output
        DEFAULT_STRING_LENGTH: Width of strings from generators.string()
        FIXED_CLOCK_INSTANT: Instant returned by the default FixedClock
    """

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Render log events as JSON",
    )

    DEFAULT_STRING_LENGTH: int = Field(
        default=6,
        ge=1,
        le=13,
        description="Number of base-26 digits produced by the string generator",
    )

    FIXED_CLOCK_INSTANT: datetime = Field(
        default=datetime(2000, 6, 15, 12, 30, tzinfo=timezone.utc),
        description="Instant returned by the default fixed clock",
    )

    model_config = SettingsConfigDict(
        env_prefix="REPOKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("FIXED_CLOCK_INSTANT")
    @classmethod
    def validate_instant(cls, v: datetime) -> datetime:
        """Naive instants are taken to be UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


settings = Settings()
