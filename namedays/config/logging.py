"""Logging configuration for the name-day tools."""

from __future__ import annotations

import logging

from namedays.config.settings import load_settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure process logging; diagnostics go to stderr, report output stays on stdout.

    Without an explicit `level`, the validated `LOG_LEVEL` from `Settings` is used.

    Raises:
        RuntimeError: If `level` is omitted and the environment configuration is invalid.
    """

    log_level = (level or load_settings().log_level).upper()
    logging.basicConfig(level=log_level, format=_FORMAT)
