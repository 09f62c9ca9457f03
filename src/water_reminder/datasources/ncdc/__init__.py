"""NOAA NCDC Climate Data Online precipitation data source.

Fetches daily GHCND precipitation for a location (requires a free CDO token:
https://www.ncdc.noaa.gov/cdo-web/token).

Public API:
  - precipitation: fetch_page, fetch_precipitation (paginated ``data`` endpoint)
  - models: DailyReadings, group_by_date, merge_readings
  - client: API URLs, shared constants
"""

from water_reminder.datasources.ncdc.client import CDO_DATA_ENDPOINT, PAGE_SIZE
from water_reminder.datasources.ncdc.models import (
    DailyReadings,
    DateGroupedReadings,
    group_by_date,
    merge_readings,
)
from water_reminder.datasources.ncdc.precipitation import fetch_page, fetch_precipitation

__all__ = [
    "CDO_DATA_ENDPOINT",
    "PAGE_SIZE",
    "DailyReadings",
    "DateGroupedReadings",
    "fetch_page",
    "fetch_precipitation",
    "group_by_date",
    "merge_readings",
]
