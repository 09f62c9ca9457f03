"""
Application settings.

Values are read from ``WATER_REMINDER_*`` environment variables (or a ``.env``
file) and can be overridden by CLI flags. Example::

    WATER_REMINDER_EMAIL=me@example.com
    WATER_REMINDER_LOCATION_ID=CITY:US270013
    WATER_REMINDER_TOKEN=abc123
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from water_reminder.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Runtime configuration for a reminder check."""

    model_config = SettingsConfigDict(
        env_prefix="WATER_REMINDER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "water-reminder"

    # Required for a check; validated by require_credentials() so that
    # `--help` and `--version` work without them.
    email: str | None = None
    location_id: str | None = Field(default=None, description="e.g. CITY:US270013")
    token: str | None = Field(default=None, description="NCDC CDO API token")

    debug: bool = False

    how_often_days: int = Field(default=5, gt=0)
    precip_threshold: float = Field(default=0.1, ge=0)
    days_to_check: int = Field(default=30, gt=0)

    season_start_month: int = Field(default=5, ge=1, le=12)
    season_start_day: int = Field(default=1, ge=1, le=31)
    season_end_month: int = Field(default=11, ge=1, le=12)
    season_end_day: int = Field(default=1, ge=1, le=31)

    mail_command: str = "/usr/bin/mail"
    http_timeout: float = Field(default=30, gt=0)

    @model_validator(mode="after")
    def check_season(self) -> Settings:
        """Season bounds must be real calendar days, start before end.

        Checked against a leap year so Feb 29 is accepted.
        """
        try:
            start = date(2000, self.season_start_month, self.season_start_day)
            end = date(2000, self.season_end_month, self.season_end_day)
        except ValueError as e:
            raise ValueError(f"Invalid watering season date: {e}") from e
        if start >= end:
            raise ValueError(
                f"Watering season start ({start:%m-%d}) must be before its end ({end:%m-%d})"
            )
        return self

    def require_credentials(self) -> None:
        """Raise ConfigurationError unless email, location id and token are all set."""
        if not (self.email and self.location_id and self.token):
            raise ConfigurationError("email, location-id and token must be supplied!")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once.

    Raises:
        ConfigurationError: The environment holds an invalid value.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e
