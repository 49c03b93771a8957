# backend/lesson_analytics/core/config.py
"""
Runtime settings for the lesson analytics service.

The aggregation engine never reads these values; the service layer and the
HTTP surface pass them in explicitly.
"""

import logging
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TOP_COACHES_LIMIT, DEFAULT_TOP_HOURS_LIMIT

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    lesson_api_base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the lesson/registration API",
    )
    lesson_api_timeout_seconds: float = Field(default=10.0, gt=0)

    # Calendar used for month filtering, hour-of-day and day-of-month extraction
    local_timezone: str = "UTC"

    top_hours_limit: int = Field(default=DEFAULT_TOP_HOURS_LIMIT, ge=1)
    top_coaches_limit: int = Field(default=DEFAULT_TOP_COACHES_LIMIT, ge=1)

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LESSON_ANALYTICS_",
        env_file=".env" if not os.getenv("CI") else None,
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("lesson_api_base_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().rstrip("/")
        return value

    @field_validator("local_timezone")
    @classmethod
    def _validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"LESSON_ANALYTICS_LOCAL_TIMEZONE is not a known timezone: {value}") from exc
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            normalized = value.strip().upper()
            if normalized not in logging.getLevelNamesMapping():
                raise ValueError(f"Unknown log level: {value}")
            return normalized
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.local_timezone)


settings = Settings()
