"""Module: logger_file_helper.py

Author: Michael Economou
Date: 2025-05-31

Attaches rotating file handlers to a logger.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from exifdeck.config import LOG_FILE_BACKUP_COUNT, LOG_FILE_MAX_BYTES


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = LOG_FILE_MAX_BYTES,
    backup_count: int = LOG_FILE_BACKUP_COUNT,
) -> RotatingFileHandler:
    """Attach a rotating file handler to a logger.

    Args:
        logger: The logger to attach the handler to.
        log_path: Path to the log file.
        level: Logging level for this file handler.
        max_bytes: Maximum file size before rotating.
        backup_count: Number of backup files to keep.

    Returns:
        The handler that was added.

    """
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    logger.addHandler(file_handler)
    return file_handler
