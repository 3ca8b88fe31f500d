"""Structured logging helpers."""

from scentfield.logging.config import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
