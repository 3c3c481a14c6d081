"""Application configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pingbot.errors import ConfigError
from pingbot.models import ScheduleConfig
from pingbot.telegram.client import DEFAULT_API_BASE


class Settings(BaseSettings):
    """Environment-driven settings validated at startup."""

    # Empty variables fall back to defaults rather than failing validation.
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
    )

    token: str = Field(..., alias="TOKEN")
    webhook_url: str = Field(..., alias="WEBHOOK_URL")
    telegram_api_base: str = Field(default=DEFAULT_API_BASE, alias="TELEGRAM_API_BASE")
    hour: int = Field(default=12, ge=0, le=23, alias="HOUR")
    minute: int = Field(default=45, ge=0, le=59, alias="MINUTE")
    reset_hour: int = Field(default=1, ge=0, le=23, alias="RESET_HOUR")
    # Comma-separated English weekday names, matched case-sensitively.
    no_ping_days: str = Field(default="Saturday,Sunday", alias="NOPINGDAYS")
    names_file: Path = Field(default=Path("names.yml"), alias="NAMES")
    timezone: str = Field(default="Asia/Kolkata", alias="TIMEZONE")
    tick_interval_seconds: float = Field(default=30.0, gt=0, le=60, alias="TICK_INTERVAL_SECONDS")
    request_timeout_seconds: float = Field(default=10.0, gt=0, alias="REQUEST_TIMEOUT_SECONDS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {value!r}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    def excluded_days(self) -> frozenset[str]:
        return frozenset(day.strip() for day in self.no_ping_days.split(",") if day.strip())

    def schedule(self) -> ScheduleConfig:
        """Build the immutable schedule used by the scheduler."""

        return ScheduleConfig(
            target_hour=self.hour,
            target_minute=self.minute,
            reset_hour=self.reset_hour,
            excluded_days=self.excluded_days(),
            timezone=ZoneInfo(self.timezone),
        )


def load_settings() -> Settings:
    """Load and validate settings."""

    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
