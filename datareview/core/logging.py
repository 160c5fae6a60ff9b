"""Logging utilities shared across the datareview package."""
from __future__ import annotations

import logging
import os

# HTTP client chatter from record fetches and Sheets pushes.
NOISY_LOGGERS = ("urllib3", "google.auth", "gspread")


def configure_logging(level: str | None = None) -> None:
    """Initialize basic logging with a shared format and log level.

    The level can be provided directly or via the ``LOG_LEVEL`` environment
    variable (defaults to ``INFO``). The CLI and the dashboard both call this
    once at startup so fetch failures and exports land in the same log stream.
    Third-party HTTP loggers stay at ``WARNING`` unless ``DEBUG`` is requested.
    """

    resolved_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if resolved_level != "DEBUG":
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
