"""Days since the last significant rain.

Walks the fetched dates from most recent to oldest and counts how many come
before the first date whose station-averaged precipitation is strictly above
the threshold.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from water_reminder.exceptions import NoPrecipitationDataError

if TYPE_CHECKING:
    from water_reminder.datasources.ncdc.models import DailyReadings, DateGroupedReadings

log = logging.getLogger(__name__)

PRECIP_THRESHOLD_INCHES = 0.1


@dataclass(frozen=True)
class RainStreak:
    """Consecutive dry days ending at the most recent date with data.

    When no date in the window had rain, ``rained_in_window`` is False and
    ``days`` is the number of dates checked, a lower bound on the real streak.
    """

    days: int
    rained_in_window: bool
    dates_checked: int


def daily_average(readings: DailyReadings) -> float:
    """Arithmetic mean of one date's readings."""
    return readings.mean


def days_since_rain(
    grouped: DateGroupedReadings,
    threshold: float = PRECIP_THRESHOLD_INCHES,
    logger: logging.Logger | None = None,
) -> int | None:
    """
    Index of the most recent rainy date, with dates sorted newest first.

    A date is rainy when its average precipitation is strictly greater than
    ``threshold``.

    Returns:
        Number of dry dates more recent than the last rainy one, or None if
        no date in ``grouped`` was rainy.

    Raises:
        NoPrecipitationDataError: ``grouped`` is empty.
    """
    logger = logger or log
    if not grouped:
        raise NoPrecipitationDataError("No precipitation readings were returned for the window")

    for index, day in enumerate(sorted(grouped, reverse=True)):
        average = daily_average(grouped[day])
        logger.debug("%s precip: %s", day.isoformat(), average)
        if average > threshold:
            return index
    return None


def rain_streak(
    grouped: DateGroupedReadings,
    threshold: float = PRECIP_THRESHOLD_INCHES,
    logger: logging.Logger | None = None,
) -> RainStreak:
    """Compute the dry streak, treating "no rain in the window" as the whole window."""
    logger = logger or log
    index = days_since_rain(grouped, threshold, logger=logger)
    if index is None:
        logger.debug(
            "No rain above %s in any of the %d dates checked; streak is at least that long",
            threshold,
            len(grouped),
        )
        return RainStreak(days=len(grouped), rained_in_window=False, dates_checked=len(grouped))

    logger.debug("It hasn't rained in %d days", index)
    return RainStreak(days=index, rained_in_window=True, dates_checked=len(grouped))
