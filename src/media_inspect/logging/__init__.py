"""Structured logging module for media_inspect.

Provides configurable logging with JSON format support and file rotation.
"""

from media_inspect.logging.config import configure_logging
from media_inspect.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
