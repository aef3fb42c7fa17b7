"""Module: logger_helper.py

Author: Michael Economou
Date: 2025-05-12

Helpers for named loggers with a UTF-8 safe console handler.

Functions:
    get_logger(name): Returns a logger with a console handler and safe methods.
    safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
    safe_log(logger_func, message): Logs a message, falling back to ASCII if needed.

DevOnlyFilter:
    Hides records tagged with extra={"dev_only": True} from the console,
    while file handlers still receive them.
"""

import contextlib
import logging
import re
import sys
from functools import partial

from exifdeck.config import SHOW_DEV_ONLY_IN_CONSOLE

_REPLACEMENTS = {
    "→": "->",  # right arrow
    "—": "--",  # em dash
    "–": "-",  # en dash
    "…": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replace unsupported Unicode characters with ASCII-safe alternatives."""
    return _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)


def safe_log(logger_func, message, *args, **kwargs):
    """Log through logger_func, retrying with ASCII-safe text on UnicodeEncodeError."""
    try:
        if not isinstance(message, str):
            message = repr(message)
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        logger_func(safe_text(str(message)), *args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    """Replace the logger's logging methods with safe_log-wrapped versions."""
    for method_name in ["debug", "info", "warning", "error", "critical"]:
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


class DevOnlyFilter(logging.Filter):
    """Drop dev-only records unless SHOW_DEV_ONLY_IN_CONSOLE is set."""

    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger with a UTF-8 safe console handler.

    Args:
        name: Logger name, usually the caller's __name__

    Returns:
        Configured and patched logger instance

    """
    logger = logging.getLogger(name or __name__)
    logger.setLevel(logging.DEBUG)

    if not logger.hasHandlers():
        handler = logging.StreamHandler(sys.stdout)
        handler.addFilter(DevOnlyFilter())
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

        with contextlib.suppress(AttributeError, ValueError):
            handler.stream.reconfigure(encoding="utf-8")

        logger.addHandler(handler)

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True  # type: ignore[attr-defined]

    return logger
