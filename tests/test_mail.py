"""
Tests for the mail command notifier.
"""

from __future__ import annotations

import subprocess
from unittest.mock import Mock, patch

from water_reminder.services.mail import MailCommandNotifier


class TestBuildArgs:
    def test_no_shell_quoting_needed(self) -> None:
        notifier = MailCommandNotifier("/usr/bin/mail")
        args = notifier.build_args("gardener@example.com", "Watering Reminder")
        assert args == ["/usr/bin/mail", "--subject", "Watering Reminder", "gardener@example.com"]


class TestSend:
    """Exit status and failures of the mail command."""

    @patch("water_reminder.services.mail.subprocess.run")
    def test_success(self, mock_run: Mock) -> None:
        mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")
        notifier = MailCommandNotifier("/usr/bin/mail")

        assert notifier.send("gardener@example.com", "Watering Reminder", "water!") is True

        args, kwargs = mock_run.call_args
        assert args[0] == ["/usr/bin/mail", "--subject", "Watering Reminder", "gardener@example.com"]
        assert kwargs["input"] == "water!"
        assert kwargs["text"] is True

    @patch("water_reminder.services.mail.subprocess.run")
    def test_nonzero_exit_is_failure(self, mock_run: Mock) -> None:
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=1, stdout="", stderr="mail: cannot send message"
        )
        notifier = MailCommandNotifier()

        assert notifier.send("gardener@example.com", "s", "b") is False

    @patch("water_reminder.services.mail.subprocess.run", side_effect=FileNotFoundError("mail"))
    def test_missing_command_is_failure(self, _mock_run: Mock) -> None:
        notifier = MailCommandNotifier("/no/such/mail")

        assert notifier.send("gardener@example.com", "s", "b") is False

    @patch(
        "water_reminder.services.mail.subprocess.run",
        side_effect=subprocess.TimeoutExpired(cmd="mail", timeout=60),
    )
    def test_timeout_is_failure(self, _mock_run: Mock) -> None:
        assert MailCommandNotifier().send("gardener@example.com", "s", "b") is False
