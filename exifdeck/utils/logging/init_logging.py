"""Module: init_logging.py

Author: Michael Economou
Date: 2025-05-12

Single entry point to initialize logging with app-specific log file names.
"""

import logging
import os

from exifdeck.config import APP_NAME, LOG_DIR
from exifdeck.utils.logging.logger_file_helper import add_file_handler


def init_logging(app_name: str = APP_NAME, log_dir: str = LOG_DIR) -> logging.Logger:
    """Add rotating activity and error log files for the exifdeck package.

    Args:
        app_name: The base name for log files.
        log_dir: Directory that receives the log files.

    Returns:
        The package logger the handlers were attached to.

    """
    # Module loggers propagate here; console output stays on their own handlers
    logger = logging.getLogger("exifdeck")
    logger.setLevel(logging.DEBUG)

    attached = {getattr(handler, "baseFilename", None) for handler in logger.handlers}
    for suffix, level in (("activity", logging.INFO), ("errors", logging.ERROR)):
        log_path = os.path.join(log_dir, f"{app_name}_{suffix}.log")
        # Calling twice must not duplicate lines
        if os.path.abspath(log_path) not in attached:
            add_file_handler(logger, log_path, level=level)

    return logger
