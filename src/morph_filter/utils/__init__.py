"""
Utilities for the morphology filter
"""

from .logging_config import LoggingMixin, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "LoggingMixin",
]
