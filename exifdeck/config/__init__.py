"""Module: exifdeck.config

Author: Michael Economou
Date: 2026-01-01

Configuration package for exifdeck.

- app: Application info, logging
- features: ExifTool arguments, read-only groups, tool search paths

All settings are re-exported from this module:
    from exifdeck.config import APP_NAME, READ_ONLY_GROUPS
"""

from exifdeck.config.app import *  # noqa: F401, F403
from exifdeck.config.features import *  # noqa: F401, F403
