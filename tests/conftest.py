"""Shared fixtures."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from datetime import date
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

from water_reminder.config import Settings, get_settings
from water_reminder.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep WATER_REMINDER_* and any .env file from the real environment out of tests."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("WATER_REMINDER_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo configure_logging() so caplog sees package records."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        email="gardener@example.com",
        location_id="CITY:US270013",
        token="test-token",
    )


def cdo_result(day: date, value: float, station: str = "GHCND:USW00014922") -> dict[str, Any]:
    """One entry of a CDO ``results`` array."""
    return {
        "date": f"{day.isoformat()}T00:00:00",
        "datatype": "PRCP",
        "station": station,
        "attributes": ",,W,2400",
        "value": value,
    }


def cdo_response(count: int, results: list[dict[str, Any]]) -> Mock:
    """Mock ``requests.Response`` for the CDO data endpoint."""
    resp = Mock()
    resp.raise_for_status = Mock()
    resp.json.return_value = {
        "metadata": {"resultset": {"offset": 1, "count": count, "limit": 1000}},
        "results": results,
    }
    return resp
