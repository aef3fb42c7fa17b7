"""Module: errors.py

Author: Michael Economou
Date: 2026-01-20

Typed errors raised by the ExifTool metadata core.

All failures of tool invocation, output decoding and local validation
derive from ExifToolError. Their str() is the message shown to the user.
"""

from pathlib import Path


class ExifToolError(Exception):
    """Base class for metadata exchange failures."""


class ToolNotFound(ExifToolError):
    """No resolvable ExifTool executable."""

    def __init__(self, tool_path: str | None = None) -> None:
        self.tool_path = tool_path
        super().__init__(
            "exiftool was not found. Please install it or set the path in Settings."
        )


class ExecutionFailed(ExifToolError):
    """ExifTool reported an error condition."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"exiftool failed: {detail}")


class ParsingFailed(ExifToolError):
    """ExifTool output could not be decoded."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to parse exiftool output: {detail}")


class FileNotFound(ExifToolError):
    """Target file does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"File not found: {Path(path).name}")


class WriteProtected(ExifToolError):
    """Attempted write to a read-only tag."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Tag '{tag}' is not writable.")
