"""
Tests for the Prefect reminder flow.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date
from unittest.mock import Mock, patch

import pytest

from water_reminder.flows import remind
from water_reminder.schemas import CheckResult, FetchWindow


class TestWateringReminderFlow:
    @patch("water_reminder.flows.remind.get_run_logger")
    @patch("water_reminder.flows.remind.run_check")
    def test_runs_check_with_environment_settings(
        self, mock_run: Mock, mock_logger: Mock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WATER_REMINDER_EMAIL", "gardener@example.com")
        monkeypatch.setenv("WATER_REMINDER_LOCATION_ID", "CITY:US270013")
        monkeypatch.setenv("WATER_REMINDER_TOKEN", "test-token")
        mock_run.return_value = CheckResult(
            in_season=True,
            window=FetchWindow(start=date(2024, 6, 15), end=date(2024, 7, 15)),
            streak=5,
            rained_in_window=True,
            reminded=True,
            message="It hasn't rained in 5 days",
        )

        result = remind.watering_reminder.fn()

        settings = mock_run.call_args.args[0]
        assert settings.email == "gardener@example.com"
        assert mock_run.call_args.kwargs["logger"] is mock_logger.return_value
        assert result["reminded"] is True
        assert result["streak"] == 5
        assert result["window"] == {"start": "2024-06-15", "end": "2024-07-15"}

    def test_flow_name(self) -> None:
        assert remind.watering_reminder.name == "watering-reminder"


class TestServe:
    def test_serves_with_cron(self) -> None:
        with patch.object(remind.watering_reminder, "serve") as mock_serve:
            remind.serve("0 6 * * *")
            mock_serve.assert_called_once_with(name="daily", cron="0 6 * * *")

    def test_default_cron(self) -> None:
        assert remind.DEFAULT_CRON == "0 7 * * *"


class TestRunLogger:
    """The flow's logger follows the debug setting."""

    @pytest.fixture
    def adapter(self) -> Iterator[logging.LoggerAdapter]:  # type: ignore[type-arg]
        logger = logging.getLogger("water_reminder_tests.flow_runs")
        logger.setLevel(logging.INFO)  # Prefect's default run logger level
        yield logging.LoggerAdapter(logger, {})
        logger.setLevel(logging.NOTSET)

    def test_debug_enables_diagnostics(self, adapter: logging.LoggerAdapter) -> None:  # type: ignore[type-arg]
        with patch("water_reminder.flows.remind.get_run_logger", return_value=adapter):
            logger = remind.run_logger(debug=True)
        assert logger.isEnabledFor(logging.DEBUG)

    def test_quiet_without_debug(self, adapter: logging.LoggerAdapter) -> None:  # type: ignore[type-arg]
        with patch("water_reminder.flows.remind.get_run_logger", return_value=adapter):
            logger = remind.run_logger(debug=False)
        assert not logger.isEnabledFor(logging.INFO)
        assert logger.isEnabledFor(logging.WARNING)

    @pytest.mark.parametrize(("env", "level"), [("true", logging.DEBUG), ("false", logging.WARNING)])
    @patch("water_reminder.flows.remind.get_run_logger")
    @patch("water_reminder.flows.remind.run_check")
    def test_flow_applies_debug_setting(
        self,
        mock_run: Mock,
        mock_logger: Mock,
        env: str,
        level: int,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("WATER_REMINDER_DEBUG", env)
        mock_run.return_value = CheckResult(in_season=False, message="Not watering season")

        remind.watering_reminder.fn()

        mock_logger.return_value.setLevel.assert_called_once_with(level)
