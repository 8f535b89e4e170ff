"""Logging configuration shared by the CLI and the HTTP app.

``STOREFRONT_LOG_LEVEL``
    Minimum level, e.g. ``DEBUG`` or ``WARNING``. Defaults to ``INFO``.
``STOREFRONT_LOG_FORMAT``
    ``console`` (default) for human-readable lines, ``json`` for one JSON
    object per line.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

LOG_LEVEL_ENV = "STOREFRONT_LOG_LEVEL"
LOG_FORMAT_ENV = "STOREFRONT_LOG_FORMAT"


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    level_name = (level or os.environ.get(LOG_LEVEL_ENV, "INFO")).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    fmt = (fmt or os.environ.get(LOG_FORMAT_ENV, "console")).lower()
    if fmt == "json":
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *renderers,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        # sys.stderr is looked up per logger, not captured once.
        logger_factory=lambda *args: structlog.PrintLogger(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # Suppress noisy library loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
