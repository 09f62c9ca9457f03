"""
Prefect flows.

Flows:
- remind: Run the daily watering check (fetch precipitation, compute the
  dry streak, send a reminder when due)

Usage (local, one run):
    python -m water_reminder.flows.remind

Usage (Prefect, scheduled):
    prefect server start  # Optional, for dashboard
    remind-me-to-water serve --cron "0 7 * * *"

Settings come from ``WATER_REMINDER_*`` environment variables.
"""
