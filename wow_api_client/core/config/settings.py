"""
Client Settings

Configuration classes using Pydantic for validation.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


VALID_REGIONS = frozenset({"us", "eu", "kr", "tw", "cn"})


class APIConfig(BaseSettings):
    """Battle.net API configuration settings."""

    client_id: str = Field(
        ...,
        description="Battle.net application ID"
    )
    client_secret: str = Field(
        ...,
        description="Battle.net application secret"
    )
    region: str = Field(
        default="us",
        description="Battle.net region"
    )
    locale: str = Field(
        default="en_US",
        description="Locale of the returned data"
    )
    api_host: str = Field(
        default="api.blizzard.com",
        description="Resource API host, prefixed with the region"
    )
    oauth_host: str = Field(
        default="battle.net",
        description="OAuth host, prefixed with the region"
    )
    timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds"
    )

    model_config = SettingsConfigDict(
        env_prefix="BLIZZARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        """Lower-case and validate region value."""
        v = v.lower()
        if v not in VALID_REGIONS:
            raise ValueError(
                f"Invalid region: {v}. Must be one of {sorted(VALID_REGIONS)}"
            )
        return v


class Settings(BaseSettings):
    """Main settings."""

    app_name: str = Field(
        default="WoW API Client",
        description="Application name"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )

    api: APIConfig = Field(default_factory=APIConfig)

    model_config = SettingsConfigDict(
        env_prefix="WOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from .env
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise the log level name."""
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown log level: {v}")
        return v

    def get_log_level(self) -> int:
        """Numeric logging level."""
        return logging.DEBUG if self.debug else logging.getLevelName(self.log_level)
