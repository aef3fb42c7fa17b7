"""Module: batch_result.py

Author: Michael Economou
Date: 2026-01-20

Outcome of one file in a batch operation.
"""

import uuid
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Per-file outcome of a batch operation."""

    path: str
    success: bool
    message: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def file_name(self) -> str:
        return Path(self.path).name

    def __str__(self) -> str:
        status = "OK" if self.success else "FAILED"
        return f"[{status}] {self.file_name}: {self.message}"
