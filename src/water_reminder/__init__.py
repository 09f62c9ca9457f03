"""Water Reminder - email a watering reminder when it hasn't rained for a while.

Architecture::

    window.py      Watering season gate and 30-day lookback window
    datasources/   External APIs (NOAA NCDC Climate Data Online)
    analysis/      Days-since-rain computation over per-date readings
    reminder.py    Interval rule and notifier dispatch
    services/      Shared utilities (HTTP session, outbound mail)
    core.py        One complete check, wiring the pieces above together
    flows/         Prefect orchestration (daily scheduled check)

Data flow: window → datasources (fetch) → analysis (streak) → reminder (notify)
"""

__version__ = "0.1.0"

from water_reminder.config import Settings
from water_reminder.schemas import CheckResult

__all__ = ["CheckResult", "Settings", "__version__"]
