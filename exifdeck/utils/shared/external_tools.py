"""Module: external_tools.py

Author: Michael Economou
Date: 2025-12-23

ExifTool discovery.

Search order:
1. Bundled binary (bin/<platform>/exiftool, or inside a PyInstaller bundle)
2. User-configured custom path
3. System PATH
4. Well-known install locations (Homebrew, MacPorts, /usr/bin)

The first executable candidate wins. The resolved path is handed to
ExifToolRunner; nothing else in the package searches for the tool.

Usage:
    from exifdeck.utils.shared.external_tools import locate_exiftool

    location = locate_exiftool(custom_path=settings.get("custom_path"))
    if location:
        runner = ExifToolRunner(location.path)
"""

from __future__ import annotations

import os
import platform
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

from exifdeck.config import EXIFTOOL_SYSTEM_PATHS, EXIFTOOL_VERSION_ARG, EXIFTOOL_VERSION_TIMEOUT
from exifdeck.core.metadata.errors import ExecutionFailed, ToolNotFound
from exifdeck.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

TOOL_NAME = "exiftool"


@dataclass(frozen=True)
class ToolLocation:
    """Resolved executable path and the version it reports."""

    path: str
    version: str | None = None


def get_bundled_tools_dir() -> Path:
    """Directory holding bundled binaries (bin/ next to the package)."""
    base = getattr(sys, "_MEIPASS", None)
    if base:
        return Path(base) / "bin"
    return Path(__file__).resolve().parents[3] / "bin"


def get_bundled_tool_path() -> Path | None:
    """Get path to the bundled exiftool for this platform, if present."""
    system = platform.system()

    if system == "Windows":
        os_dir, executable = "windows", f"{TOOL_NAME}.exe"
    elif system == "Darwin":
        os_dir, executable = "macos", TOOL_NAME
    elif system == "Linux":
        os_dir, executable = "linux", TOOL_NAME
    else:
        logger.warning("[ExternalTools] Unknown OS: %s", system)
        return None

    tool_path = get_bundled_tools_dir() / os_dir / executable
    if tool_path.exists():
        logger.debug("[ExternalTools] Found bundled exiftool at: %s", tool_path)
        return tool_path

    logger.debug(
        "[ExternalTools] Bundled exiftool not found at: %s", tool_path, extra={"dev_only": True}
    )
    return None


def is_executable(path: str | Path) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def candidate_paths(custom_path: str | None = None) -> list[str]:
    """Candidate executables in search order, without duplicates."""
    candidates: list[str] = []

    bundled = get_bundled_tool_path()
    if bundled:
        candidates.append(str(bundled))

    if custom_path:
        candidates.append(custom_path)

    system_path = shutil.which(TOOL_NAME)
    if system_path:
        candidates.append(system_path)

    candidates.extend(EXIFTOOL_SYSTEM_PATHS)

    return list(dict.fromkeys(candidates))


def fetch_version(path: str) -> str | None:
    """Run "<path> -ver" and return the trimmed output, or None."""
    try:
        result = subprocess.run(
            [path, EXIFTOOL_VERSION_ARG],
            capture_output=True,
            text=True,
            timeout=EXIFTOOL_VERSION_TIMEOUT,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("[ExternalTools] Could not get exiftool version: %s", e)
        return None

    if result.returncode != 0:
        logger.warning("[ExternalTools] exiftool -ver returned code %d", result.returncode)
        return None
    return result.stdout.strip() or None


def locate_exiftool(custom_path: str | None = None) -> ToolLocation | None:
    """Find the first executable exiftool candidate.

    Args:
        custom_path: User-configured path, tried after the bundled binary

    Returns:
        ToolLocation, or None when no candidate is executable

    """
    for path in candidate_paths(custom_path):
        if is_executable(path):
            location = ToolLocation(path=path, version=fetch_version(path))
            logger.info("[ExternalTools] Using exiftool %s at %s", location.version, path)
            return location

    logger.warning("[ExternalTools] exiftool not found")
    return None


def get_tool_path(custom_path: str | None = None) -> str:
    """Like locate_exiftool(), but raises ToolNotFound instead of returning None."""
    location = locate_exiftool(custom_path)
    if location is None:
        raise ToolNotFound()
    return location.path


def validate_custom_path(path: str) -> ToolLocation:
    """Check a user-supplied exiftool path before it is stored.

    Raises:
        ExecutionFailed: The file is missing or not executable

    """
    if not is_executable(path):
        raise ExecutionFailed(f"File at {path} is not executable.")
    return ToolLocation(path=path, version=fetch_version(path))
