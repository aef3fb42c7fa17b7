"""
Tests for exiftool discovery.

Author: Michael Economou
Date: 2025-12-23
"""

from unittest.mock import MagicMock, patch

import pytest

from exifdeck.config import EXIFTOOL_SYSTEM_PATHS
from exifdeck.core.metadata.errors import ExecutionFailed, ToolNotFound
from exifdeck.utils.shared import external_tools
from exifdeck.utils.shared.external_tools import (
    ToolLocation,
    candidate_paths,
    fetch_version,
    get_tool_path,
    locate_exiftool,
    validate_custom_path,
)

MODULE = "exifdeck.utils.shared.external_tools"


@pytest.fixture
def fake_exiftool(tmp_path):
    path = tmp_path / "exiftool"
    path.write_text("#!/bin/sh\necho 12.76\n")
    path.chmod(0o755)
    return path


class TestCandidatePaths:
    """Tests for search order."""

    def test_order(self) -> None:
        with (
            patch(f"{MODULE}.get_bundled_tool_path", return_value=None),
            patch(f"{MODULE}.shutil.which", return_value="/usr/bin/exiftool"),
        ):
            paths = candidate_paths("/custom/exiftool")

        assert paths[0] == "/custom/exiftool"
        assert paths[1] == "/usr/bin/exiftool"
        # PATH hit is not listed twice
        assert paths.count("/usr/bin/exiftool") == 1
        assert set(EXIFTOOL_SYSTEM_PATHS) <= set(paths)

    def test_bundled_first(self, tmp_path) -> None:
        bundled = tmp_path / "bin" / "linux" / "exiftool"
        with (
            patch(f"{MODULE}.get_bundled_tool_path", return_value=bundled),
            patch(f"{MODULE}.shutil.which", return_value=None),
        ):
            paths = candidate_paths("/custom/exiftool")

        assert paths[:2] == [str(bundled), "/custom/exiftool"]


class TestLocate:
    """Tests for locate_exiftool() and get_tool_path()."""

    def test_custom_path_wins(self, fake_exiftool) -> None:
        with (
            patch(f"{MODULE}.get_bundled_tool_path", return_value=None),
            patch(f"{MODULE}.fetch_version", return_value="12.76"),
        ):
            location = locate_exiftool(str(fake_exiftool))

        assert location == ToolLocation(path=str(fake_exiftool), version="12.76")

    def test_nothing_found(self) -> None:
        with patch(f"{MODULE}.candidate_paths", return_value=["/nowhere/exiftool"]):
            assert locate_exiftool() is None
            with pytest.raises(ToolNotFound):
                get_tool_path()


class TestVersionAndValidation:
    """Tests for fetch_version() and validate_custom_path()."""

    def test_fetch_version(self) -> None:
        completed = MagicMock(returncode=0, stdout="12.76\n")
        with patch(f"{MODULE}.subprocess.run", return_value=completed) as run:
            assert fetch_version("/usr/bin/exiftool") == "12.76"

        assert run.call_args.args[0] == ["/usr/bin/exiftool", "-ver"]

    def test_fetch_version_failure(self) -> None:
        with patch(f"{MODULE}.subprocess.run", side_effect=FileNotFoundError()):
            assert fetch_version("/missing") is None

    def test_validate_rejects_non_executable(self, tmp_path) -> None:
        plain = tmp_path / "exiftool"
        plain.write_text("")
        plain.chmod(0o644)

        with pytest.raises(ExecutionFailed, match="not executable"):
            validate_custom_path(str(plain))

    def test_validate_accepts_executable(self, fake_exiftool) -> None:
        with patch.object(external_tools, "fetch_version", return_value="12.76"):
            location = validate_custom_path(str(fake_exiftool))
        assert location.version == "12.76"
