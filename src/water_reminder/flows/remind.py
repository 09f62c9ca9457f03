"""
Prefect flow for the daily watering check.

Run locally:
    python -m water_reminder.flows.remind

Serve on a daily schedule:
    remind-me-to-water serve --cron "0 7 * * *"
"""

from __future__ import annotations

import logging
from typing import Any

from prefect import flow, get_run_logger

from water_reminder.config import get_settings
from water_reminder.core import run_check

DEFAULT_CRON = "0 7 * * *"  # every morning at 07:00


def run_logger(debug: bool) -> logging.LoggerAdapter:  # type: ignore[type-arg]
    """Prefect's run logger, at the same verbosity the CLI uses.

    Prefect logs at INFO by default; debug mode shows the per-date and paging
    diagnostics, otherwise only warnings and errors come through.
    """
    logger = get_run_logger()
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger  # type: ignore[return-value]


@flow(name="watering-reminder", log_prints=True)
def watering_reminder() -> dict[str, Any]:
    """
    Check recent precipitation and email a reminder if one is due.

    Settings (including the API token) are read from the environment rather
    than passed as flow parameters, so they never show up in run metadata.
    No retries: a failed API call or mail dispatch fails the flow run.
    """
    settings = get_settings()
    result = run_check(settings, logger=run_logger(settings.debug))  # type: ignore[arg-type]
    return result.model_dump(mode="json")


def serve(cron: str = DEFAULT_CRON) -> None:
    """Serve the flow with a cron schedule (blocks until interrupted)."""
    watering_reminder.serve(name="daily", cron=cron)


if __name__ == "__main__":
    outcome = watering_reminder()
    print(f"Flow complete: {outcome}")
