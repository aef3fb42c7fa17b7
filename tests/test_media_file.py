"""
Tests for MediaFile and FileType.

Author: Michael Economou
Date: 2026-01-21
"""

import pytest

from exifdeck.models.batch_result import BatchResult
from exifdeck.models.media_file import FileType, MediaFile


class TestFileType:
    """Tests for extension classification."""

    @pytest.mark.parametrize(
        ("extension", "expected"),
        [
            ("jpg", FileType.JPEG),
            (".JPEG", FileType.JPEG),
            ("cr3", FileType.RAW),
            ("mov", FileType.MOV),
            ("m4a", FileType.AAC),
            ("xyz", FileType.UNKNOWN),
        ],
    )
    def test_from_extension(self, extension: str, expected: FileType) -> None:
        assert FileType.from_extension(extension) is expected

    def test_kinds(self) -> None:
        assert FileType.HEIC.is_image
        assert FileType.MKV.is_video
        assert FileType.FLAC.is_audio
        assert not FileType.PDF.is_image


class TestMediaFile:
    """Tests for MediaFile properties."""

    def test_properties(self) -> None:
        media = MediaFile("/photos/IMG_0001.CR2")

        assert media.name == "IMG_0001.CR2"
        assert media.extension == "cr2"
        assert media.file_type is FileType.RAW

    def test_equality_ignores_id(self) -> None:
        assert MediaFile("/a.jpg") == MediaFile("/a.jpg")

    def test_is_supported(self) -> None:
        assert MediaFile.is_supported("clip.MP4")
        assert not MediaFile.is_supported("notes.txt")
        assert not MediaFile.is_supported("no_extension")


def test_batch_result_str():
    assert str(BatchResult("/p/a.jpg", True, "Tags copied")) == "[OK] a.jpg: Tags copied"
    assert str(BatchResult("/p/b.jpg", False, "boom")) == "[FAILED] b.jpg: boom"
