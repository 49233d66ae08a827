#!/usr/bin/env python3
"""Send a test event to Sentry through the logging handler.

Usage::

    # Log a test exception with the default config
    python scripts/send_test_event.py

    # Custom config file, plain message instead of an exception
    python scripts/send_test_event.py --config config/settings.yaml --no-exception

    # Override the message and log level
    python scripts/send_test_event.py --message "hello" --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys

import structlog

from src.core.config import load_settings
from src.core.logging import setup_logging
from src.sink.factory import install_sentry_handler

logger = structlog.get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send a test event to Sentry")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override log level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--message",
        default="Sentry sink test event",
        help="Message to log",
    )
    parser.add_argument(
        "--no-exception",
        action="store_true",
        help="Log a plain error message instead of an exception",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    settings = load_settings(args.config)
    setup_logging(level=args.log_level)

    if settings.sentry is None:
        logger.error("sentry_not_configured", config=args.config)
        return 1

    app_logger = logging.getLogger("sentry_sink.test_event")
    handler = install_sentry_handler(settings.sentry, logger=app_logger, level=logging.ERROR)
    logger.info("sending_test_event", store_url=settings.sentry.dsn.store_url)

    try:
        if args.no_exception:
            app_logger.error(args.message, extra={"source": "send_test_event"})
        else:
            try:
                raise RuntimeError(args.message)
            except RuntimeError:
                app_logger.exception(args.message, extra={"source": "send_test_event"})
    finally:
        app_logger.removeHandler(handler)
        handler.close()

    logger.info("test_event_done")
    return 0


def main() -> None:
    sys.exit(run(parse_args()))


if __name__ == "__main__":
    main()
