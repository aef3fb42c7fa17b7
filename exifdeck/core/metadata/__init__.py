"""Metadata exchange core: decoding, sessions and errors."""

from exifdeck.core.metadata.errors import (
    ExecutionFailed,
    ExifToolError,
    FileNotFound,
    ParsingFailed,
    ToolNotFound,
    WriteProtected,
)

__all__ = [
    "ExecutionFailed",
    "ExifToolError",
    "FileNotFound",
    "ParsingFailed",
    "ToolNotFound",
    "WriteProtected",
]
