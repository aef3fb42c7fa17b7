"""Module: exifdeck.config.app

Author: Michael Economou
Date: 2026-01-01

Application-level configuration: app info, logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "exifdeck"
APP_VERSION = "1.0.0"
APP_AUTHOR = "Michael Economou"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_LEVEL = "INFO"
LOG_DIR = "logs"

# File logging
LOG_FILE_MAX_BYTES = 10_000_000  # 10MB per file
LOG_FILE_BACKUP_COUNT = 5

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
