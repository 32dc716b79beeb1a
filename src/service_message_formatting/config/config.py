# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, FORMATTING__PINNED_TEXT_LIMIT.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "service-message-formatting"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/service_messages.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class FormattingSettings(BaseSettings):
    """Classifier and renderer options (from env FORMATTING__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    pinned_text_limit: int = Field(
        default=14,
        ge=1,
        le=4096,
        description="Characters of pinned text kept before the ellipsis.",
    )
    ellipsis: str = Field(default="...", description="Suffix for clipped pinned text.")
    entity_list_separator: str = Field(
        default=", ",
        description="Separator between names in multi-entity lists.",
    )
    time_zone: str = Field(default="UTC", description="IANA time zone for dates and times.")
    use_24_hour_time: bool = True

    @field_validator("time_zone")
    @classmethod
    def _known_time_zone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone {value!r}") from e
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.time_zone)


class StyleSettings(BaseSettings):
    """Theme used by the caller-side style resolver (from env STYLE__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    font_size: float = Field(default=13.0, gt=0.0, le=96.0)
    text_color: str = "#000000"
    link_color: Optional[str] = Field(
        default=None,
        description="Colour for links; falls back to text_color.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, STYLE__FONT_SIZE.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    formatting: FormattingSettings = Field(default_factory=FormattingSettings)
    style: StyleSettings = Field(default_factory=StyleSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides are passed as nested dicts, e.g.
        from_env(formatting={"pinned_text_limit": 20}).
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from service_message_formatting.config import get_settings

        settings = get_settings()
        limit = settings.formatting.pinned_text_limit
    """
    return Settings()
