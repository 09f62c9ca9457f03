"""Decide whether a reminder is due and send it."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from water_reminder.exceptions import DispatchError

if TYPE_CHECKING:
    from water_reminder.services.mail import Notifier

log = logging.getLogger(__name__)

HOW_OFTEN_DAYS = 5
SUBJECT = "Watering Reminder"


def should_remind(streak: int, how_often_days: int = HOW_OFTEN_DAYS) -> bool:
    """Due on every ``how_often_days``-th dry day (5, 10, 15, ...), never on day 0."""
    return streak > 0 and streak % how_often_days == 0


def reminder_message(streak: int) -> tuple[str, str]:
    """Subject and body for a reminder."""
    return SUBJECT, f"It hasn't rained in {streak} days, you need to water!"


def send_reminder(
    streak: int,
    recipient: str,
    notifier: Notifier,
    how_often_days: int = HOW_OFTEN_DAYS,
    logger: logging.Logger | None = None,
) -> bool:
    """
    Send a reminder if one is due for ``streak``.

    Returns:
        True if a reminder was sent, False if none was due.

    Raises:
        DispatchError: The notifier reported a failure.
    """
    logger = logger or log
    if not should_remind(streak, how_often_days):
        logger.debug("No reminder due for a %d day streak", streak)
        return False

    subject, body = reminder_message(streak)
    logger.debug("Sending %r to %s", subject, recipient)
    if not notifier.send(recipient, subject, body):
        raise DispatchError("remind-me-to-water: sending email failed!")
    return True
