"""ExifTool metadata service for single files.

Author: Michael Economou
Date: December 18, 2025

Reads tags into MetadataItems and writes edits, strips and restores through
a ToolRunner. Every operation is one tool invocation. The service does not
reload after writing; callers reload (see reload()) to confirm the result.

Usage:
    from exifdeck.services.exiftool_service import ExifToolService

    service = ExifToolService.from_tool_path(location.path)
    items = service.load_metadata("/path/to/image.jpg")
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from pathlib import Path

from exifdeck.app.ports.metadata import ToolRunner
from exifdeck.config import (
    EXIFTOOL_COPY_ARG,
    EXIFTOOL_READ_ARGS,
    EXIFTOOL_READ_TAGS_ARGS,
    EXIFTOOL_RESTORE_ARG,
    EXIFTOOL_STRIP_ALL_ARG,
)
from exifdeck.core.metadata.errors import ExecutionFailed, FileNotFound, WriteProtected
from exifdeck.core.metadata.output_decoder import decode
from exifdeck.core.metadata.session import MetadataSession
from exifdeck.infra.external.exiftool_runner import ExifToolRunner
from exifdeck.models.metadata_item import MetadataItem, is_writable_group
from exifdeck.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class WriteMode(str, Enum):
    """How ExifTool treats the original file when writing."""

    # No flag: ExifTool keeps "<file>_original"
    KEEP_BACKUP = "keep_backup"
    OVERWRITE = "overwrite"
    OVERWRITE_IN_PLACE = "overwrite_in_place"

    @property
    def flag(self) -> str | None:
        return _WRITE_MODE_FLAGS[self]

    @classmethod
    def from_overwrite(cls, overwrite_original: bool) -> WriteMode:
        return cls.OVERWRITE if overwrite_original else cls.KEEP_BACKUP


_WRITE_MODE_FLAGS = {
    WriteMode.KEEP_BACKUP: None,
    WriteMode.OVERWRITE: "-overwrite_original",
    WriteMode.OVERWRITE_IN_PLACE: "-overwrite_original_in_place",
}


def tag_argument(tag_ref: str, value: str) -> str:
    """Build "-Tag=Value"; an empty value deletes the tag ("-Tag=")."""
    return f"-{tag_ref}={value}"


def split_tag_ref(tag_ref: str) -> tuple[str | None, str]:
    """Split an optional "Group:" prefix off a tag reference."""
    group, sep, name = tag_ref.partition(":")
    if not sep:
        return None, tag_ref
    return group, name


def ensure_writable(tag_ref: str) -> None:
    """Reject tag references whose group prefix is read-only."""
    group, _ = split_tag_ref(tag_ref)
    if group is not None and not is_writable_group(group):
        raise WriteProtected(tag_ref)


def check_write_output(output: str) -> str:
    """Fail when ExifTool reports an error on stdout after a write."""
    if "error" in output.lower():
        raise ExecutionFailed(output.strip())
    return output


def named_tags(tags: Mapping[str, str]) -> dict[str, str]:
    """Drop entries whose tag name is blank; names are stripped."""
    return {tag_ref.strip(): value for tag_ref, value in tags.items() if tag_ref.strip()}


def _with_mode(arguments: list[str], mode: WriteMode) -> list[str]:
    if mode.flag:
        arguments.append(mode.flag)
    return arguments


class ExifToolService:
    """Single-file metadata operations over a ToolRunner.

    Errors from the runner and the decoder propagate unchanged.
    """

    def __init__(self, runner: ToolRunner) -> None:
        self.runner = runner

    @classmethod
    def from_tool_path(cls, tool_path: str | None, timeout: float | None = None) -> ExifToolService:
        return cls(ExifToolRunner(tool_path, timeout=timeout))

    def tool_version(self) -> str | None:
        return self.runner.version()

    @staticmethod
    def _require_file(path: str | Path) -> str:
        if not Path(path).is_file():
            logger.warning("[ExifToolService] File not found: %s", path)
            raise FileNotFound(path)
        return str(path)

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    def load_metadata(self, path: str | Path) -> list[MetadataItem]:
        """Read all tags of a file.

        Raises:
            FileNotFound, ToolNotFound, ExecutionFailed, ParsingFailed

        """
        file_path = self._require_file(path)
        output = self.runner.execute([*EXIFTOOL_READ_ARGS, file_path])
        items = decode(output)
        logger.info("[ExifToolService] Loaded %d tags from %s", len(items), Path(file_path).name)
        return items

    def read_tags(self, path: str | Path, tags: Sequence[str]) -> list[MetadataItem]:
        """Read only the given tags (e.g. ["Make", "EXIF:Model"])."""
        file_path = self._require_file(path)
        arguments = [*EXIFTOOL_READ_TAGS_ARGS, *(f"-{tag}" for tag in tags), file_path]
        return decode(self.runner.execute(arguments))

    def reload(self, session: MetadataSession, path: str | Path | None = None) -> MetadataSession:
        """Load a file's tags into a session, replacing what it held."""
        file_path = path if path is not None else session.file_path
        if file_path is None:
            raise ValueError("No file to reload")
        session.load(self.load_metadata(file_path), file_path=str(file_path))
        return session

    # -------------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------------

    def save_metadata(
        self,
        path: str | Path,
        items: Iterable[MetadataItem],
        overwrite_original: bool = False,
    ) -> int:
        """Write the modified items to the file in one invocation.

        Args:
            path: Target file
            items: Items of the file's session; unmodified ones are ignored
            overwrite_original: False keeps ExifTool's backup copy

        Returns:
            Number of tags written; 0 when nothing was modified (no invocation)

        Raises:
            WriteProtected: A modified item belongs to a read-only group
            FileNotFound, ToolNotFound, ExecutionFailed

        """
        modified = [item for item in items if item.is_modified]
        if not modified:
            logger.debug("[ExifToolService] No modified tags, nothing to save")
            return 0

        for item in modified:
            if not item.is_writable:
                raise WriteProtected(item.qualified_name)

        file_path = self._require_file(path)
        arguments = _with_mode([], WriteMode.from_overwrite(overwrite_original))
        arguments.extend(tag_argument(item.qualified_name, item.value) for item in modified)
        arguments.append(file_path)

        check_write_output(self.runner.execute(arguments))
        logger.info(
            "[ExifToolService] Saved %d tags to %s", len(modified), Path(file_path).name
        )
        return len(modified)

    def set_tags(
        self,
        path: str | Path,
        tags: Mapping[str, str],
        overwrite_original: bool = False,
    ) -> bool:
        """Write a tag-name to value mapping to one file; empty values delete.

        Entries with a blank tag name are skipped.

        Returns:
            False if no named tag is left (nothing is written)

        """
        tags = named_tags(tags)
        if not tags:
            logger.warning("[ExifToolService] set_tags called without tag names")
            return False

        for tag_ref in tags:
            ensure_writable(tag_ref)

        file_path = self._require_file(path)
        arguments = _with_mode([], WriteMode.from_overwrite(overwrite_original))
        arguments.extend(tag_argument(tag_ref, value) for tag_ref, value in tags.items())
        arguments.append(file_path)

        check_write_output(self.runner.execute(arguments))
        return True

    def add_tag(
        self,
        path: str | Path,
        tag_ref: str,
        value: str,
        write_mode: WriteMode = WriteMode.OVERWRITE_IN_PLACE,
    ) -> bool:
        """Write one tag, "TagName" or "Group:TagName".

        Unlike save_metadata(), the default mode overwrites in place; pass
        write_mode to choose another.

        Returns:
            False if tag_ref is empty (nothing is written)

        """
        tag_ref = tag_ref.strip()
        if not tag_ref:
            logger.warning("[ExifToolService] add_tag called without a tag name")
            return False

        ensure_writable(tag_ref)
        file_path = self._require_file(path)

        arguments = _with_mode([], write_mode)
        arguments.extend([tag_argument(tag_ref, value), file_path])

        check_write_output(self.runner.execute(arguments))
        logger.info("[ExifToolService] Added %s to %s", tag_ref, Path(file_path).name)
        return True

    def strip_all(self, path: str | Path, overwrite_original: bool = False) -> None:
        """Remove all writable metadata from the file."""
        file_path = self._require_file(path)
        arguments = _with_mode(
            [EXIFTOOL_STRIP_ALL_ARG], WriteMode.from_overwrite(overwrite_original)
        )
        arguments.append(file_path)

        check_write_output(self.runner.execute(arguments))
        logger.info("[ExifToolService] Stripped all metadata from %s", Path(file_path).name)

    def restore_original(self, path: str | Path) -> None:
        """Restore the file from ExifTool's "<file>_original" backup.

        Raises:
            ExecutionFailed: No backup exists (reported by ExifTool)

        """
        file_path = self._require_file(path)
        check_write_output(self.runner.execute([EXIFTOOL_RESTORE_ARG, file_path]))
        logger.info("[ExifToolService] Restored original of %s", Path(file_path).name)

    def copy_tags(
        self,
        source: str | Path,
        destination: str | Path,
        overwrite_original: bool = False,
    ) -> None:
        """Copy all tags of source onto destination."""
        source_path = self._require_file(source)
        destination_path = self._require_file(destination)

        arguments = _with_mode(
            [EXIFTOOL_COPY_ARG, source_path], WriteMode.from_overwrite(overwrite_original)
        )
        arguments.append(destination_path)

        check_write_output(self.runner.execute(arguments))
