"""Logging setup for the CLI.

Components never read a global debug flag; they take a ``logger`` argument
and fall back to their module logger, which is a child of ``water_reminder``.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "water_reminder"
DEBUG_FORMAT = "%(message)s"
DEFAULT_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(debug: bool = False) -> logging.Logger:
    """
    Configure the package logger once at startup.

    Debug mode prints diagnostics to stdout; otherwise only warnings and
    errors are shown, on stderr.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if debug:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        logger.setLevel(logging.DEBUG)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.setLevel(logging.WARNING)

    logger.addHandler(handler)
    logger.propagate = False
    return logger
