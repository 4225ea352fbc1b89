"""Structured logging configuration.

Every module obtains its logger through ``get_logger`` so that events are
rendered as JSON lines with an ISO timestamp and level.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from .config import get_settings

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Configure structlog once for the process.

    Args:
        level: Log level name; defaults to ``Settings.log_level``.
    """
    global _configured
    level_name = (level or get_settings().log_level).upper()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.
    """
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
