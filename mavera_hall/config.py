"""
Configuration for the Mavera Hall application.

Settings are read from environment variables (and an optional ``.env`` file)
and validated with pydantic before the Flask app is built.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _parse_bool(v) -> bool:
    if isinstance(v, str):
        return v.lower() in ("1", "true", "yes", "y")
    return bool(v)


class BookingRules(BaseSettings):
    """Initial booking rules copied into the hall profile on first run."""

    min_guests: int = Field(default=50, alias="MIN_GUESTS")
    max_guests: int = Field(default=500, alias="MAX_GUESTS")
    min_notice_days: int = Field(default=30, alias="MIN_NOTICE_DAYS")
    max_advance_days: int = Field(default=365, alias="MAX_ADVANCE_DAYS")
    cancellation_deadline_days: int = Field(default=14, alias="CANCELLATION_DEADLINE_DAYS")
    deposit_percentage: float = Field(default=0.30, alias="DEPOSIT_PERCENTAGE")
    late_cancellation_fee_percentage: float = Field(
        default=0.10, alias="LATE_CANCELLATION_FEE_PERCENTAGE"
    )

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")


class Settings(BaseSettings):
    """Main application settings."""

    secret_key: str = Field(default="change-me-later-for-production", alias="SECRET_KEY")
    database_url: str = Field(default="sqlite:///mavera_hall.db", alias="DATABASE_URL")
    timezone: str = Field(default="Asia/Riyadh", alias="APP_TIMEZONE")
    default_language: str = Field(default="ar", alias="DEFAULT_LANGUAGE")

    # Staff portal demo account
    demo_email: str = Field(default="admin@mavera.com", alias="DEMO_EMAIL")
    demo_password: str = Field(default="admin123", alias="DEMO_PASSWORD")

    # Comma separated
    cors_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000", alias="CORS_ORIGINS"
    )
    max_booking_hours: int = Field(default=12, alias="MAX_BOOKING_HOURS")

    debug: bool = Field(default=False, alias="DEBUG")
    log_json: bool = Field(default=False, alias="LOG_JSON")

    # Passed through to app.config untouched
    custom_key: str = Field(default="", alias="CUSTOM_KEY")

    booking: BookingRules = Field(default_factory=BookingRules)

    @field_validator("default_language", mode="before")
    @classmethod
    def parse_language(cls, v):
        v = (v or "ar").strip().lower()
        return v if v in ("ar", "en") else "ar"

    @field_validator("debug", "log_json", mode="before")
    @classmethod
    def parse_flags(cls, v):
        return _parse_bool(v)

    @property
    def cors_origin_list(self) -> list:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, applying keyword overrides."""
    return Settings(**overrides)
