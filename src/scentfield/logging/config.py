"""Logging configuration built on structlog.

Library code only calls get_logger(); applications call configure_logging()
once at startup to choose level and output format.

Usage:
    from scentfield.logging import configure_logging, get_logger

    configure_logging(level="DEBUG")
    configure_logging(settings=FieldSettings())  # SCENTFIELD_LOG_LEVEL, SCENTFIELD_LOG_JSON
    logger = get_logger(__name__)
    logger.debug("tick_completed", tick=3)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from scentfield.config import FieldSettings


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    extra_processors: list[Any] | None = None,
    settings: FieldSettings | None = None,
) -> None:
    """Configure structlog over the standard library logging module.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_json: If True, render JSON lines; otherwise a console format.
        include_timestamp: Include an ISO timestamp in each event.
        extra_processors: Additional structlog processors, run before rendering.
        settings: If given, its log_level and log_json override level and
            format_json.

    Raises:
        ValueError: If level is not a known logging level name.
    """
    if settings is not None:
        level = settings.log_level
        format_json = settings.log_json

    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s")
    logging.getLogger().setLevel(log_level)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to ``name`` (typically ``__name__``)."""
    return structlog.get_logger(name)
