"""
Module: conftest.py

Author: Michael Economou
Date: 2025-05-31

Global pytest configuration and fixtures for the exifdeck test suite.
"""

import json
import os
import sys
from unittest.mock import MagicMock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from exifdeck.infra.external.exiftool_runner import ExifToolRunner


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "exiftool: test requires a real ExifTool binary")


@pytest.fixture(scope="session")
def qcore_app():
    """QCoreApplication for tests that need a Qt event loop (no display)."""
    from PyQt5.QtCore import QCoreApplication

    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def fake_runner():
    """Runner double recording argument vectors; returns "" by default."""
    runner = MagicMock(spec=ExifToolRunner)
    runner.execute.return_value = ""
    runner.version.return_value = "12.76"
    return runner


@pytest.fixture
def sample_exiftool_output():
    """ExifTool "-json -G1 -a -s -D" style output for one JPEG."""
    return json.dumps(
        [
            {
                "SourceFile": "/photos/img_0001.jpg",
                "System:FileName": {"id": 0, "val": "img_0001.jpg"},
                "IFD0:Make": {"id": 271, "val": "Canon"},
                "IFD0:Model": {"id": 272, "val": "Canon EOS R5"},
                "ExifIFD:ISO": {"id": 34855, "val": 100},
                "ExifIFD:DateTimeOriginal": {"id": 36867, "val": "2024:01:01 12:00:00"},
                "IPTC:Keywords": "holiday",
                "Composite:ImageSize": "8192x5464",
                "File:FileType": "JPEG",
            }
        ]
    )


@pytest.fixture
def media_file(tmp_path):
    """An existing (empty) JPEG path; tools are mocked in unit tests."""
    path = tmp_path / "img_0001.jpg"
    path.write_bytes(b"\xff\xd8\xff\xd9")
    return path
