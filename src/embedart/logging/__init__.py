"""Structured logging module for embedart.

Provides configurable logging with JSON format support and file rotation.
"""

from embedart.logging.config import configure_logging
from embedart.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
