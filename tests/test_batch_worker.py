"""
Tests for BatchWorker signal reporting.

Author: Michael Economou
Date: 2026-01-26
"""

from unittest.mock import MagicMock

import pytest

from exifdeck.core.batch.executor import BatchExecutor, BatchOperation, BatchOptions
from exifdeck.services.exiftool_service import ExifToolService
from exifdeck.workers.batch_worker import BatchWorker


@pytest.fixture
def executor():
    return BatchExecutor(MagicMock(spec=ExifToolService))


class TestBatchWorker:
    """Tests for BatchWorker.run() run synchronously."""

    def test_emits_progress_and_finished(self, qcore_app, executor) -> None:
        worker = BatchWorker(executor, BatchOperation.STRIP_ALL, ["/a.jpg", "/b.jpg"])
        progress = MagicMock()
        file_done = MagicMock()
        finished = MagicMock()
        worker.progress.connect(progress)
        worker.file_done.connect(file_done)
        worker.finished.connect(finished)

        worker.run()

        assert [c.args for c in progress.call_args_list] == [(1, 2), (2, 2)]
        assert file_done.call_count == 2
        results = finished.call_args.args[0]
        assert [result.path for result in results] == ["/a.jpg", "/b.jpg"]

    def test_cancel_before_run(self, qcore_app, executor) -> None:
        worker = BatchWorker(
            executor,
            BatchOperation.SET_TAGS,
            ["/a.jpg", "/b.jpg"],
            BatchOptions(tags={"Artist": "Me"}),
        )
        finished = MagicMock()
        worker.finished.connect(finished)

        worker.cancel()
        worker.run()

        assert worker.is_cancelled() is True
        finished.assert_called_once_with([])
        executor.service.set_tags.assert_not_called()
