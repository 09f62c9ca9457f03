"""Daily precipitation observations from the CDO ``data`` endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from water_reminder.datasources.ncdc.client import (
    CDO_DATA_ENDPOINT,
    DATASET_ID,
    FIRST_OFFSET,
    PAGE_SIZE,
    PRECIP_DATATYPE_ID,
    UNITS,
)
from water_reminder.datasources.ncdc.models import (
    DateGroupedReadings,
    group_by_date,
    merge_readings,
)
from water_reminder.schemas import CdoPage
from water_reminder.services.http import session

if TYPE_CHECKING:
    import requests

    from water_reminder.schemas import FetchWindow

log = logging.getLogger(__name__)


def fetch_page(
    location_id: str,
    token: str,
    window: FetchWindow,
    offset: int = FIRST_OFFSET,
    *,
    limit: int = PAGE_SIZE,
    http: requests.Session | None = None,
) -> CdoPage:
    """
    Fetch one page of GHCND precipitation results.

    Args:
        location_id: CDO location id (e.g. ``CITY:US270013``).
        token: CDO API token, sent as the ``token`` header.
        window: Date range to query.
        offset: 1-based index of the first result on this page.
        limit: Page size (CDO maximum is 1000).
        http: Session to use (default: shared session).

    Returns:
        Parsed page with the total result count and this page's readings.
    """
    params: dict[str, Any] = {
        "datasetid": DATASET_ID,
        "locationid": location_id,
        "datatypeid": PRECIP_DATATYPE_ID,
        "startdate": window.start.isoformat(),
        "enddate": window.end.isoformat(),
        "limit": limit,
        "offset": offset,
        "units": UNITS,
    }
    resp = (http or session).get(CDO_DATA_ENDPOINT, params=params, headers={"token": token})
    resp.raise_for_status()
    return CdoPage.from_response(resp.json())


def fetch_precipitation(
    location_id: str,
    token: str,
    window: FetchWindow,
    *,
    page_size: int = PAGE_SIZE,
    http: requests.Session | None = None,
    logger: logging.Logger | None = None,
) -> DateGroupedReadings:
    """
    Fetch every precipitation reading in ``window``, grouped by date.

    Always makes at least one request, then keeps paging until the results
    requested so far cover the total count reported by the latest page, so a
    count of C takes ceil(C / page_size) requests. Each page is requested
    exactly once.

    Returns:
        Readings from all pages, merged by date.
    """
    logger = logger or log
    grouped: DateGroupedReadings = {}
    offset = FIRST_OFFSET

    while True:
        logger.debug("Getting results with offset %d", offset)
        page = fetch_page(location_id, token, window, offset, limit=page_size, http=http)
        merge_readings(grouped, group_by_date(page.readings))
        offset += page_size
        if offset - FIRST_OFFSET >= page.count:
            break

    logger.debug(
        "Fetched %d readings over %d dates",
        sum(len(g) for g in grouped.values()),
        len(grouped),
    )
    return grouped
