"""exifdeck - metadata exchange core for an ExifTool frontend."""

from exifdeck.config import APP_VERSION

__version__ = APP_VERSION
