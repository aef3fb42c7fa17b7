"""Metadata tool ports.

Protocol interfaces for invoking the external metadata tool, so services can
be tested with fakes instead of a real process.

Author: Michael Economou
Date: 2026-01-22
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class ToolRunner(Protocol):
    """Protocol for running the metadata tool with an argument vector.

    Implementations:
    - ExifToolRunner (infra/external/exiftool_runner.py)
    """

    def execute(self, arguments: Sequence[str], tool_path: str | None = None) -> str:
        """Run the tool and return its standard output.

        Raises:
            ToolNotFound: No executable to run
            ExecutionFailed: The tool reported an error
        """
        ...

    def version(self) -> str | None:
        """Return the tool's version string, or None if it cannot be read."""
        ...
