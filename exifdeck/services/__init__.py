"""Services exposed to the UI layer."""

from exifdeck.services.exiftool_service import ExifToolService, WriteMode

__all__ = ["ExifToolService", "WriteMode"]
