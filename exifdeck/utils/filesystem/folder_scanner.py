"""Module: folder_scanner.py

Author: Michael Economou
Date: 2026-01-21

Resolves a mix of files and folders (e.g. a drop) into supported media files.

- Folders are scanned recursively
- Hidden files and folders are skipped
- Unsupported extensions are dropped
- Duplicates are removed; the result is sorted by file name, numbers in
  names compared by value
"""

import os
import re
from collections.abc import Iterable
from pathlib import Path

from exifdeck.models.media_file import MediaFile
from exifdeck.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_DIGITS = re.compile(r"(\d+)")


def natural_key(name: str) -> list:
    """Sort key comparing digit runs numerically ("img2" before "img10")."""
    return [int(part) if part.isdigit() else part.lower() for part in _DIGITS.split(name)]


def scan_folder(folder: Path) -> list[Path]:
    """Supported files below folder, hidden entries excluded."""
    found: list[Path] = []
    for root, dirs, files in os.walk(folder):
        dirs[:] = [d for d in dirs if not d.startswith(".")]
        for name in files:
            if name.startswith("."):
                continue
            if MediaFile.is_supported(name):
                found.append(Path(root) / name)
    return found


def resolve_paths(paths: Iterable[str | Path]) -> list[str]:
    """Expand folders and filter files into a sorted list of media paths."""
    seen: set[str] = set()
    result: list[str] = []

    for raw in paths:
        path = Path(raw)
        if not path.exists():
            logger.debug("[FolderScanner] Skipping missing path: %s", path)
            continue

        candidates = scan_folder(path) if path.is_dir() else [path]
        for candidate in candidates:
            if path.is_file() and not MediaFile.is_supported(candidate):
                continue
            key = str(candidate)
            if key not in seen:
                seen.add(key)
                result.append(key)

    result.sort(key=lambda p: natural_key(Path(p).name))
    logger.debug("[FolderScanner] Resolved %d files", len(result), extra={"dev_only": True})
    return result
