"""
Domain models for the watering reminder.

Pydantic models for data from the NCDC API and internal processing.
These define the canonical schema - the datasource normalizes API responses to these.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Dates
# =============================================================================


class FetchWindow(BaseModel):
    """Inclusive date range to request observations for."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @property
    def days(self) -> int:
        """Number of days between start and end."""
        return (self.end - self.start).days


class WateringSeason(BaseModel):
    """Period of the year during which reminders are sent (exclusive bounds)."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start < day < self.end


# =============================================================================
# Observations
# =============================================================================


class PrecipitationReading(BaseModel):
    """A single station's daily precipitation observation."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    date: date
    value: float = Field(..., ge=0, description="Precipitation, inches (units=standard)")
    station: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def strip_time(cls, v: Any) -> Any:
        # CDO reports dates as midnight timestamps: 2024-06-15T00:00:00
        if isinstance(v, str):
            return v[:10]
        return v


class CdoPage(BaseModel):
    """One page of results from the CDO ``data`` endpoint."""

    count: int = Field(default=0, ge=0, description="Total results across all pages")
    readings: list[PrecipitationReading] = Field(default_factory=list)

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> CdoPage:
        """Parse a raw response body.

        CDO answers an empty result set with ``{}``, which parses as count 0.
        """
        metadata = payload.get("metadata") or {}
        resultset = metadata.get("resultset") or {}
        return cls(
            count=resultset.get("count", 0),
            readings=payload.get("results", []),
        )


# =============================================================================
# Results
# =============================================================================


class CheckResult(BaseModel):
    """Outcome of one reminder check."""

    in_season: bool
    window: FetchWindow | None = None
    streak: int | None = None
    rained_in_window: bool | None = None
    reminded: bool = False
    message: str
