"""
Command-line interface for the application.

This module provides the main entry point for the CLI. Designed to be run once
a day from cron::

    remind-me-to-water -e me@example.com -l CITY:US270013 -t $NCDC_TOKEN

or to stay up and run on a schedule with ``serve``.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import TYPE_CHECKING

from water_reminder import __version__
from water_reminder.config import get_settings
from water_reminder.core import run_check
from water_reminder.exceptions import WaterReminderError
from water_reminder.flows.remind import DEFAULT_CRON, serve
from water_reminder.log import configure_logging

if TYPE_CHECKING:
    from water_reminder.config import Settings

ENV_PREFIX = "WATER_REMINDER_"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="remind-me-to-water",
        description=(
            "Email a reminder to water every few days when it has not rained. "
            "Options fall back to WATER_REMINDER_* environment variables."
        ),
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        default=None,
        help="Print debug messages",
    )
    parser.add_argument(
        "-e",
        "--email",
        help="Email to send the message to",
    )
    parser.add_argument(
        "-l",
        "--location-id",
        "--locationid",
        dest="location_id",
        help="Location ID of the location to check for rain (e.g. 'CITY:US270013')",
    )
    parser.add_argument(
        "-t",
        "--token",
        help="Token for the NCDC API",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("check", help="Check for rain once and remind if due (default)")

    serve_parser = subparsers.add_parser("serve", help="Run the check on a schedule with Prefect")
    serve_parser.add_argument(
        "--cron",
        type=str,
        default=DEFAULT_CRON,
        help=f"Cron schedule (default: {DEFAULT_CRON!r})",
    )

    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Environment settings with any CLI flags applied on top."""
    overrides = {
        key: getattr(args, key, None)
        for key in ("email", "location_id", "token", "debug")
        if getattr(args, key, None) is not None
    }
    return get_settings().model_copy(update=overrides)


def cmd_check(args: argparse.Namespace) -> int:
    """Handle the 'check' command."""
    try:
        settings = settings_from_args(args)
        logger = configure_logging(settings.debug)
        settings.require_credentials()
        run_check(settings, logger=logger)
    except WaterReminderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: run the Prefect flow on a cron schedule."""
    try:
        settings = settings_from_args(args)
        configure_logging(settings.debug)
        settings.require_credentials()
    except WaterReminderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Flow runs read settings from the environment; carry the CLI flags over.
    os.environ[f"{ENV_PREFIX}EMAIL"] = settings.email or ""
    os.environ[f"{ENV_PREFIX}LOCATION_ID"] = settings.location_id or ""
    os.environ[f"{ENV_PREFIX}TOKEN"] = settings.token or ""
    os.environ[f"{ENV_PREFIX}DEBUG"] = str(settings.debug).lower()
    get_settings.cache_clear()

    print(f"Serving watering-reminder on schedule {args.cron!r} (Ctrl+C to stop)")
    serve(args.cron)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    commands = {
        "check": cmd_check,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command or "check")
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
