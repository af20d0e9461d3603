from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "MARKETING_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "MARKETING_BROWSER_LOG_LEVEL"

# Dash serves through werkzeug, which logs every request at INFO
NOISY_LOGGERS = ("werkzeug",)


def _build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    return jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure root logger for the app

    Modes:
    - JSON (default) in prod
    - plain text (dev mode)

    Selection Order (format):
        1) force_format argument ("json" or "plain") if provided
        2) env var MARKETING_BROWSER_LOG_FORMAT
        3) default = "json"

    Level comes from `level`, then MARKETING_BROWSER_LOG_LEVEL (e.g. "DEBUG"),
    then INFO.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()

    if level is None:
        level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(format_mode))

    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
