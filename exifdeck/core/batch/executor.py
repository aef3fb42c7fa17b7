"""Module: executor.py

Author: Michael Economou
Date: 2026-01-25

Batch Executor - applies one operation to many files, one file at a time.

Every file gets its own tool invocation and its own BatchResult. A failure
on one file is recorded and the batch moves on; run_batch() only raises for
invalid options, before any file is touched. Files are never combined into
a single invocation, so each result maps to exactly one process.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

from exifdeck.core.metadata.errors import ExifToolError
from exifdeck.models.batch_result import BatchResult
from exifdeck.services.exiftool_service import ExifToolService, named_tags
from exifdeck.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# (done, total, result of the file just processed)
ProgressCallback = Callable[[int, int, BatchResult], None]


class BatchOperation(str, Enum):
    """Operations the batch executor can apply."""

    SET_TAGS = "set_tags"
    STRIP_ALL = "strip_all"
    COPY_TAGS = "copy_tags"

    @property
    def success_message(self) -> str:
        return _SUCCESS_MESSAGES[self]


_SUCCESS_MESSAGES = {
    BatchOperation.SET_TAGS: "Updated successfully",
    BatchOperation.STRIP_ALL: "Stripped all metadata",
    BatchOperation.COPY_TAGS: "Tags copied",
}


@dataclass
class BatchOptions:
    """Parameters of a batch run.

    Attributes:
        tags: Tag reference to value, for SET_TAGS; empty values delete,
            blank names are skipped
        source_file: File whose tags are copied, for COPY_TAGS
        overwrite_original: False keeps ExifTool's backup copies

    """

    tags: dict[str, str] = field(default_factory=dict)
    source_file: str | None = None
    overwrite_original: bool = False


class BatchExecutor:
    """Runs batch operations sequentially through an ExifToolService."""

    def __init__(self, service: ExifToolService) -> None:
        self.service = service

    def destinations(
        self, operation: BatchOperation, files: Sequence[str | Path], options: BatchOptions
    ) -> list[str]:
        """Files a batch will touch, in input order (copy excludes its source)."""
        paths = [str(path) for path in files]
        if operation is BatchOperation.COPY_TAGS:
            if not options.source_file:
                raise ValueError("Copying tags requires a source file")
            source = str(options.source_file)
            paths = [path for path in paths if path != source]
        return paths

    def run_batch(
        self,
        operation: BatchOperation,
        files: Sequence[str | Path],
        options: BatchOptions | None = None,
        progress_callback: ProgressCallback | None = None,
        is_cancelled: Callable[[], bool] | None = None,
    ) -> list[BatchResult]:
        """Apply an operation to each file and collect one result per file.

        Args:
            operation: What to do to every file
            files: Target files, processed in this order
            options: Tags, copy source and backup flag
            progress_callback: Called after each file
            is_cancelled: Checked before each file; True stops the batch

        Returns:
            Results in input order (destination order for COPY_TAGS). Empty
            when there are no files, or no named tags for SET_TAGS.

        Raises:
            ValueError: COPY_TAGS without a source file

        """
        options = options or BatchOptions()

        if not files:
            return []

        if operation is BatchOperation.SET_TAGS:
            tags = named_tags(options.tags)
            if not tags:
                return []
            options = replace(options, tags=tags)

        targets = self.destinations(operation, files, options)
        if not targets:
            return []

        logger.info(
            "[BatchExecutor] %s on %d files started", operation.value, len(targets)
        )
        start_time = time.time()

        results: list[BatchResult] = []
        total = len(targets)

        for path in targets:
            if is_cancelled is not None and is_cancelled():
                logger.info("[BatchExecutor] Cancelled after %d of %d files", len(results), total)
                break

            result = self._run_one(operation, path, options)
            results.append(result)

            if progress_callback is not None:
                progress_callback(len(results), total, result)

        failures = sum(1 for result in results if not result.success)
        logger.info(
            "[BatchExecutor] %s finished in %.2fs: %d succeeded, %d failed",
            operation.value,
            time.time() - start_time,
            len(results) - failures,
            failures,
        )
        return results

    def _run_one(self, operation: BatchOperation, path: str, options: BatchOptions) -> BatchResult:
        try:
            if operation is BatchOperation.SET_TAGS:
                self.service.set_tags(path, options.tags, options.overwrite_original)
            elif operation is BatchOperation.STRIP_ALL:
                self.service.strip_all(path, options.overwrite_original)
            else:
                self.service.copy_tags(
                    str(options.source_file), path, options.overwrite_original
                )
        except (ExifToolError, OSError) as e:
            logger.warning("[BatchExecutor] %s failed for %s: %s", operation.value, path, e)
            return BatchResult(path=path, success=False, message=str(e))
        except Exception as e:
            logger.exception("[BatchExecutor] Unexpected error on %s", path)
            return BatchResult(path=path, success=False, message=str(e) or type(e).__name__)

        return BatchResult(path=path, success=True, message=operation.success_message)
