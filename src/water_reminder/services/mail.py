"""
Outbound notification.

A notifier takes a recipient, subject and body and reports success. The
default implementation hands the message to the host's ``mail`` command, so
the machine running the check must be able to send outgoing email.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol

log = logging.getLogger(__name__)

DEFAULT_MAIL_COMMAND = "/usr/bin/mail"
DEFAULT_MAIL_TIMEOUT = 60  # seconds


class Notifier(Protocol):
    """Anything that can deliver a message to a recipient."""

    def send(self, recipient: str, subject: str, body: str) -> bool:
        """Deliver the message; return False if delivery failed."""
        ...


class MailCommandNotifier:
    """Send mail by piping the body to ``mail --subject <subject> <recipient>``."""

    def __init__(
        self,
        command: str = DEFAULT_MAIL_COMMAND,
        timeout: float = DEFAULT_MAIL_TIMEOUT,
        logger: logging.Logger | None = None,
    ) -> None:
        self.command = command
        self.timeout = timeout
        self.log = logger or log

    def build_args(self, recipient: str, subject: str) -> list[str]:
        """Argument vector for the mail command (no shell involved)."""
        return [self.command, "--subject", subject, recipient]

    def send(self, recipient: str, subject: str, body: str) -> bool:
        args = self.build_args(recipient, subject)
        self.log.debug("Running %s", " ".join(args))
        try:
            completed = subprocess.run(  # noqa: S603
                args,
                input=body,
                text=True,
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            self.log.error("Could not run %s: %s", self.command, e)
            return False

        if completed.returncode != 0:
            self.log.error(
                "%s exited with status %d: %s",
                self.command,
                completed.returncode,
                completed.stderr.strip(),
            )
            return False
        return True
