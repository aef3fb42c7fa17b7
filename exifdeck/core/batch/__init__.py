"""Batch operations across many files."""

from exifdeck.core.batch.executor import BatchExecutor, BatchOperation, BatchOptions

__all__ = ["BatchExecutor", "BatchOperation", "BatchOptions"]
