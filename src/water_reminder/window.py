"""Watering season gate and lookback window (pure date arithmetic)."""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta

from water_reminder.schemas import FetchWindow, WateringSeason

log = logging.getLogger(__name__)

SEASON_START = (5, 1)  # May 1
SEASON_END = (11, 1)  # November 1
DAYS_TO_CHECK = 30


def watering_season(
    today: date,
    start: tuple[int, int] = SEASON_START,
    end: tuple[int, int] = SEASON_END,
) -> WateringSeason:
    """Build the watering season for the year of ``today``.

    Args:
        today: Current date; only its year is used.
        start: (month, day) the season opens.
        end: (month, day) the season closes.
    """
    return WateringSeason(
        start=_day_in_year(today.year, *start),
        end=_day_in_year(today.year, *end),
    )


def _day_in_year(year: int, month: int, day: int) -> date:
    # Feb 29 falls back to Feb 28 outside leap years
    if (month, day) == (2, 29) and not calendar.isleap(year):
        day = 28
    return date(year, month, day)


def is_watering_season(
    today: date,
    season: WateringSeason | None = None,
    logger: logging.Logger | None = None,
) -> bool:
    """True when ``today`` falls strictly between the season's start and end."""
    logger = logger or log
    season = season or watering_season(today)
    active = today in season
    if not active:
        logger.debug("%s is outside the watering season (%s to %s)", today, season.start, season.end)
    return active


def fetch_window(today: date, days: int = DAYS_TO_CHECK) -> FetchWindow:
    """Lookback window of ``days`` days ending today (inclusive)."""
    return FetchWindow(start=today - timedelta(days=days), end=today)
