"""Module: media_file.py

Author: Michael Economou
Date: 2026-01-21

Media files in the working set and their type classification by extension.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FileType(str, Enum):
    """Supported media types."""

    # Images
    JPEG = "jpeg"
    PNG = "png"
    TIFF = "tiff"
    HEIC = "heic"
    RAW = "raw"
    GIF = "gif"
    BMP = "bmp"
    WEBP = "webp"
    # Video
    MP4 = "mp4"
    MOV = "mov"
    AVI = "avi"
    MKV = "mkv"
    # Audio
    MP3 = "mp3"
    AAC = "aac"
    WAV = "wav"
    FLAC = "flac"
    # Documents
    PDF = "pdf"
    UNKNOWN = "unknown"

    @property
    def is_image(self) -> bool:
        return self in _IMAGE_TYPES

    @property
    def is_video(self) -> bool:
        return self in _VIDEO_TYPES

    @property
    def is_audio(self) -> bool:
        return self in _AUDIO_TYPES

    @classmethod
    def from_extension(cls, extension: str) -> "FileType":
        """Classify a file extension, with or without the leading dot."""
        return EXTENSION_MAP.get(extension.lower().lstrip("."), cls.UNKNOWN)


_IMAGE_TYPES = frozenset(
    {
        FileType.JPEG,
        FileType.PNG,
        FileType.TIFF,
        FileType.HEIC,
        FileType.RAW,
        FileType.GIF,
        FileType.BMP,
        FileType.WEBP,
    }
)
_VIDEO_TYPES = frozenset({FileType.MP4, FileType.MOV, FileType.AVI, FileType.MKV})
_AUDIO_TYPES = frozenset({FileType.MP3, FileType.AAC, FileType.WAV, FileType.FLAC})

EXTENSION_MAP: dict[str, FileType] = {
    "jpg": FileType.JPEG,
    "jpeg": FileType.JPEG,
    "png": FileType.PNG,
    "tif": FileType.TIFF,
    "tiff": FileType.TIFF,
    "heic": FileType.HEIC,
    "heif": FileType.HEIC,
    "cr2": FileType.RAW,
    "cr3": FileType.RAW,
    "nef": FileType.RAW,
    "arw": FileType.RAW,
    "dng": FileType.RAW,
    "orf": FileType.RAW,
    "rw2": FileType.RAW,
    "raf": FileType.RAW,
    "gif": FileType.GIF,
    "bmp": FileType.BMP,
    "webp": FileType.WEBP,
    "mp4": FileType.MP4,
    "m4v": FileType.MP4,
    "mov": FileType.MOV,
    "avi": FileType.AVI,
    "mkv": FileType.MKV,
    "mp3": FileType.MP3,
    "aac": FileType.AAC,
    "m4a": FileType.AAC,
    "wav": FileType.WAV,
    "flac": FileType.FLAC,
    "pdf": FileType.PDF,
}

SUPPORTED_EXTENSIONS = frozenset(EXTENSION_MAP)


@dataclass(frozen=True, slots=True)
class MediaFile:
    """A file in the working set."""

    path: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex, compare=False)

    @property
    def name(self) -> str:
        return Path(self.path).name

    @property
    def extension(self) -> str:
        return Path(self.path).suffix.lower().lstrip(".")

    @property
    def file_type(self) -> FileType:
        return FileType.from_extension(self.extension)

    @classmethod
    def is_supported(cls, path: str | Path) -> bool:
        return Path(path).suffix.lower().lstrip(".") in SUPPORTED_EXTENSIONS
