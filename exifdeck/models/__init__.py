"""Data models for tags, media files and batch outcomes."""

from exifdeck.models.batch_result import BatchResult
from exifdeck.models.media_file import FileType, MediaFile
from exifdeck.models.metadata_item import MetadataGroup, MetadataItem

__all__ = ["BatchResult", "FileType", "MediaFile", "MetadataGroup", "MetadataItem"]
