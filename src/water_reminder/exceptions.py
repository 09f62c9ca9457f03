"""Exceptions raised by the watering reminder.

Transport and parse failures from ``requests`` and ``pydantic`` are left to
propagate as-is; only the conditions the app itself detects live here.
"""

from __future__ import annotations


class WaterReminderError(Exception):
    """Base class for errors that abort a reminder run."""


class ConfigurationError(WaterReminderError):
    """A required setting (email, location id, token) is missing."""


class NoPrecipitationDataError(WaterReminderError):
    """The API returned no precipitation readings for the window."""


class DispatchError(WaterReminderError):
    """The outbound notifier reported a failure."""
