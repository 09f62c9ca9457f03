"""Per-date grouping of precipitation readings."""

from __future__ import annotations

import statistics
from collections.abc import Iterable, Iterator
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from water_reminder.schemas import PrecipitationReading


class DailyReadings:
    """All readings reported for one date, possibly by several stations.

    Always holds at least one reading: the constructor takes the first one
    explicitly, so the mean is always defined.
    """

    def __init__(self, first: PrecipitationReading, *rest: PrecipitationReading) -> None:
        self.date = first.date
        self._readings: list[PrecipitationReading] = [first]
        for reading in rest:
            self.append(reading)

    def append(self, reading: PrecipitationReading) -> None:
        if reading.date != self.date:
            raise ValueError(f"Reading for {reading.date} does not belong to {self.date}")
        self._readings.append(reading)

    def extend(self, other: DailyReadings) -> None:
        """Add every reading of another group for the same date."""
        for reading in other:
            self.append(reading)

    @property
    def values(self) -> list[float]:
        return [r.value for r in self._readings]

    @property
    def mean(self) -> float:
        """Average precipitation across stations."""
        return statistics.fmean(self.values)

    def __iter__(self) -> Iterator[PrecipitationReading]:
        return iter(self._readings)

    def __len__(self) -> int:
        return len(self._readings)

    def __repr__(self) -> str:
        return f"DailyReadings({self.date.isoformat()}, values={self.values})"


#: Readings keyed by calendar date.
DateGroupedReadings = dict[date, DailyReadings]


def group_by_date(readings: Iterable[PrecipitationReading]) -> DateGroupedReadings:
    """Partition readings by date, preserving arrival order within each date."""
    grouped: DateGroupedReadings = {}
    for reading in readings:
        if reading.date in grouped:
            grouped[reading.date].append(reading)
        else:
            grouped[reading.date] = DailyReadings(reading)
    return grouped


def merge_readings(
    accumulated: DateGroupedReadings,
    new: DateGroupedReadings,
) -> DateGroupedReadings:
    """Merge ``new`` into ``accumulated`` in place and return it.

    Readings for a date already present are appended, not replaced. Merging
    the same groups twice duplicates them.
    """
    for day, group in new.items():
        if day in accumulated:
            accumulated[day].extend(group)
        else:
            accumulated[day] = group
    return accumulated
