"""Module: exiftool_runner.py

Author: Michael Economou
Date: 2026-01-22

One-shot ExifTool process invocation.

Each call spawns a fresh exiftool process, waits for it and captures both
output streams. No process is reused between calls and no lock is held:
callers serialize their own requests.

ExifTool exits non-zero for warnings as well as for hard errors, so the exit
code alone does not decide failure. A call fails only when the exit code is
non-zero, stderr is not empty and stderr contains "error" (any casing).
This substring test depends on ExifTool's English wording.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from exifdeck.config import EXIFTOOL_VERSION_ARG
from exifdeck.core.metadata.errors import ExecutionFailed, ParsingFailed, ToolNotFound
from exifdeck.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def is_error_result(returncode: int, stderr: str) -> bool:
    """Decide whether a finished exiftool process signalled a real error."""
    if returncode == 0 or not stderr:
        return False
    return "error" in stderr.lower()


class ExifToolRunner:
    """Runs exiftool as a child process with a resolved executable path.

    The path comes from a discovery collaborator (see
    exifdeck.utils.shared.external_tools); the runner never searches for it.

    Attributes:
        tool_path: Executable used when execute() gets no explicit path
        timeout: Optional limit in seconds, None waits indefinitely

    """

    def __init__(self, tool_path: str | None, timeout: float | None = None) -> None:
        self.tool_path = tool_path
        self.timeout = timeout

    def execute(self, arguments: Sequence[str], tool_path: str | None = None) -> str:
        """Run exiftool with the given arguments.

        Args:
            arguments: Argument vector, without the executable
            tool_path: Overrides the configured executable for this call

        Returns:
            Standard output as text, also when exiftool exited non-zero
            with a warning only

        Raises:
            ToolNotFound: No executable configured or it cannot be spawned
            ExecutionFailed: exiftool reported an error, or the process
                could not be run
            ParsingFailed: Standard output is not valid UTF-8

        """
        path = tool_path or self.tool_path
        if not path:
            raise ToolNotFound()

        cmd = [path, *arguments]
        logger.debug("[ExifToolRunner] Running: %s", " ".join(cmd), extra={"dev_only": True})

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                check=False,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            logger.error("[ExifToolRunner] Executable not found: %s", path)
            raise ToolNotFound(path) from e
        except subprocess.TimeoutExpired as e:
            logger.error("[ExifToolRunner] Timeout after %ss: %s", self.timeout, " ".join(cmd))
            raise ExecutionFailed(f"timed out after {self.timeout}s") from e
        except OSError as e:
            logger.error("[ExifToolRunner] Could not start exiftool: %s", e)
            raise ExecutionFailed(str(e)) from e

        # stderr is only inspected for the error marker; stdout must be valid UTF-8
        stderr = (result.stderr or b"").decode("utf-8", errors="replace")

        if result.returncode != 0:
            logger.warning(
                "[ExifToolRunner] exiftool returned code %d: %s",
                result.returncode,
                stderr.strip(),
            )

        if is_error_result(result.returncode, stderr):
            raise ExecutionFailed(stderr.strip())

        try:
            return (result.stdout or b"").decode("utf-8")
        except UnicodeDecodeError as e:
            logger.error("[ExifToolRunner] Output is not valid UTF-8: %s", e)
            raise ParsingFailed("Invalid UTF-8 data") from e

    def version(self) -> str | None:
        """Return the output of "exiftool -ver", or None if it fails."""
        try:
            output = self.execute([EXIFTOOL_VERSION_ARG])
        except (ToolNotFound, ExecutionFailed, ParsingFailed) as e:
            logger.debug("[ExifToolRunner] Could not read version: %s", e)
            return None
        return output.strip() or None
