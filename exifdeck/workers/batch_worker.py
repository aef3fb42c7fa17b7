"""Module: batch_worker.py

Author: Michael Economou
Date: 2026-01-26

Worker object that runs a batch operation away from the UI thread.

Move it to a QThread and connect QThread.started to run(). It reports
progress per file and emits the full result list when done. cancel() takes
effect before the next file; a running exiftool call is never interrupted.
"""

from pathlib import Path

from PyQt5.QtCore import QObject, pyqtSignal

from exifdeck.core.batch.executor import BatchExecutor, BatchOperation, BatchOptions
from exifdeck.models.batch_result import BatchResult
from exifdeck.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class BatchWorker(QObject):
    progress = pyqtSignal(int, int)  # (done, total)
    file_done = pyqtSignal(object)  # BatchResult
    finished = pyqtSignal(list)  # list[BatchResult]

    def __init__(
        self,
        executor: BatchExecutor,
        operation: BatchOperation,
        files: list[str | Path],
        options: BatchOptions | None = None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self.executor = executor
        self.operation = operation
        self.files = list(files)
        self.options = options or BatchOptions()
        self._cancelled = False

    def cancel(self) -> None:
        logger.info("[BatchWorker] Cancellation requested")
        self._cancelled = True

    def is_cancelled(self) -> bool:
        return self._cancelled

    def _on_file_done(self, done: int, total: int, result: BatchResult) -> None:
        self.file_done.emit(result)
        self.progress.emit(done, total)

    def run(self) -> None:
        """Run the batch and emit finished with its results."""
        logger.debug(
            "[BatchWorker] Starting %s for %d files",
            self.operation.value,
            len(self.files),
            extra={"dev_only": True},
        )
        results = self.executor.run_batch(
            self.operation,
            self.files,
            self.options,
            progress_callback=self._on_file_done,
            is_cancelled=self.is_cancelled,
        )
        self.finished.emit(results)
