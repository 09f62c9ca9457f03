"""
HTTP session for the NCDC CDO API.

A reminder run makes a handful of page requests once a day. When one of them
fails, the run fails and the next scheduled run starts over from scratch, so
the session mounts no retries. Every request gets a timeout, so a stalled
connection can't hang the daily job.

Usage::

    from water_reminder.services.http import session

    resp = session.get(CDO_DATA_ENDPOINT, params=params, headers={"token": token})
    resp.raise_for_status()
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from water_reminder import __version__

#: No retries; bad statuses are left to ``resp.raise_for_status()``.
DEFAULT_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"water-reminder/{__version__}"


class TimeoutSession(requests.Session):
    """``requests.Session`` that fills in ``timeout`` when the caller omits it."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        super().__init__()
        self.timeout = timeout

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        return super().send(request, **kwargs)


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> TimeoutSession:
    """
    Build a session for CDO requests.

    Args:
        retry: Retry strategy to mount (default: ``DEFAULT_RETRY``, none).
        timeout: Seconds to wait on any request that doesn't set its own.
    """
    s = TimeoutSession(timeout)
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session used by the datasources when none is passed in.
session: requests.Session = create_session()
