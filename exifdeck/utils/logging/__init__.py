"""Logging utilities package.

Logging setup, factory, and helper functions.
"""

from exifdeck.utils.logging.logger_factory import get_cached_logger

__all__ = [
    "get_cached_logger",
]
