"""
One complete reminder check.

Order of operations: season gate → fetch window → paginated fetch →
dry streak → reminder. Nothing is persisted between runs.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from water_reminder.analysis.rain_streak import rain_streak
from water_reminder.datasources.ncdc import fetch_precipitation
from water_reminder.reminder import send_reminder
from water_reminder.schemas import CheckResult
from water_reminder.services.http import create_session
from water_reminder.services.mail import MailCommandNotifier
from water_reminder.window import fetch_window, is_watering_season, watering_season

if TYPE_CHECKING:
    import requests

    from water_reminder.config import Settings
    from water_reminder.services.mail import Notifier

log = logging.getLogger(__name__)


def run_check(
    settings: Settings,
    *,
    today: date | None = None,
    notifier: Notifier | None = None,
    http: requests.Session | None = None,
    logger: logging.Logger | None = None,
) -> CheckResult:
    """
    Run a single check and send a reminder if one is due.

    Args:
        settings: Settings with email, location id and token present.
        today: Date to check as (default: ``date.today()``).
        notifier: Where reminders go (default: the host ``mail`` command).
        http: Session for API requests (default: one built with
            ``settings.http_timeout``).
        logger: Logger for diagnostics (default: this module's logger).

    Raises:
        ConfigurationError: A required setting is missing.
        NoPrecipitationDataError: The API returned nothing for the window.
        DispatchError: The reminder could not be sent.
    """
    settings.require_credentials()

    logger = logger or log
    today = today or date.today()

    season = watering_season(
        today,
        start=(settings.season_start_month, settings.season_start_day),
        end=(settings.season_end_month, settings.season_end_day),
    )
    if not is_watering_season(today, season, logger=logger):
        logger.debug("Not making any calls since it's not watering season")
        return CheckResult(in_season=False, message="Not watering season")

    window = fetch_window(today, settings.days_to_check)
    grouped = fetch_precipitation(
        settings.location_id,  # type: ignore[arg-type]
        settings.token,  # type: ignore[arg-type]
        window,
        http=http or create_session(timeout=settings.http_timeout),
        logger=logger,
    )

    streak = rain_streak(grouped, settings.precip_threshold, logger=logger)
    logger.debug("It hasn't rained in %d days", streak.days)

    reminded = send_reminder(
        streak.days,
        settings.email,  # type: ignore[arg-type]
        notifier or MailCommandNotifier(settings.mail_command, logger=logger),
        settings.how_often_days,
        logger=logger,
    )
    return CheckResult(
        in_season=True,
        window=window,
        streak=streak.days,
        rained_in_window=streak.rained_in_window,
        reminded=reminded,
        message=f"It hasn't rained in {streak.days} days",
    )
