"""Module: bootstrap.py

Author: Michael Economou
Date: 2026-01-28

Application wiring for the metadata core.

bootstrap() attaches the log files, loads the persisted settings, locates
exiftool (bundled, then the configured custom path, then PATH and system
locations) and builds the service and batch executor around the resolved
path. The returned AppContext applies the user's backup preference to
every write it performs.

Usage:
    from exifdeck.app.bootstrap import bootstrap

    context = bootstrap()
    if not context.tool_available:
        ...  # ask the user for a custom path
    items = context.service.load_metadata(path)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from exifdeck.config import APP_NAME, LOG_DIR
from exifdeck.core.batch.executor import BatchExecutor, BatchOperation, BatchOptions
from exifdeck.core.metadata.session import MetadataSession
from exifdeck.services.exiftool_service import ExifToolService
from exifdeck.utils.logging.init_logging import init_logging
from exifdeck.utils.logging.logger_factory import get_cached_logger
from exifdeck.utils.shared.external_tools import (
    ToolLocation,
    locate_exiftool,
    validate_custom_path,
)
from exifdeck.utils.shared.json_config_manager import ExifToolConfig, JSONConfigManager
from exifdeck.workers.batch_worker import BatchWorker

logger = get_cached_logger(__name__)


@dataclass
class AppContext:
    """Settings, resolved tool and the services built on it."""

    config_manager: JSONConfigManager
    exiftool_config: ExifToolConfig
    location: ToolLocation | None
    service: ExifToolService
    batch_executor: BatchExecutor
    timeout: float | None = None

    @property
    def tool_available(self) -> bool:
        return self.location is not None

    @property
    def overwrite_original(self) -> bool:
        return self.exiftool_config.overwrite_original

    def save_session(self, session: MetadataSession) -> int:
        """Write a session's modified tags using the configured backup mode."""
        if session.file_path is None:
            raise ValueError("Session has no file")
        return self.service.save_metadata(
            session.file_path, session.entries, overwrite_original=self.overwrite_original
        )

    def strip_all(self, path: str | Path) -> None:
        self.service.strip_all(path, overwrite_original=self.overwrite_original)

    def batch_options(
        self, tags: Mapping[str, str] | None = None, source_file: str | None = None
    ) -> BatchOptions:
        return BatchOptions(
            tags=dict(tags or {}),
            source_file=source_file,
            overwrite_original=self.overwrite_original,
        )

    def create_batch_worker(
        self,
        operation: BatchOperation,
        files: Sequence[str | Path],
        tags: Mapping[str, str] | None = None,
        source_file: str | None = None,
    ) -> BatchWorker:
        """Worker for a batch run; move it to a QThread before starting."""
        return BatchWorker(
            self.batch_executor, operation, list(files), self.batch_options(tags, source_file)
        )

    def set_custom_tool_path(self, path: str | None) -> ToolLocation | None:
        """Store a user-chosen exiftool path and rebuild the services.

        An empty path clears the override and falls back to discovery.

        Raises:
            ExecutionFailed: The path is not an executable file

        """
        if path:
            validate_custom_path(path)

        self.exiftool_config.set("custom_path", path or "")
        self.config_manager.save()

        self.location = locate_exiftool(self.exiftool_config.custom_path)
        self.service = _build_service(self.location, self.timeout)
        self.batch_executor = BatchExecutor(self.service)
        return self.location


def _build_service(location: ToolLocation | None, timeout: float | None) -> ExifToolService:
    return ExifToolService.from_tool_path(location.path if location else None, timeout=timeout)


def bootstrap(
    config_dir: str | None = None,
    log_dir: str | None = LOG_DIR,
    timeout: float | None = None,
) -> AppContext:
    """Build the metadata core from persisted settings.

    Args:
        config_dir: Settings directory; the per-user default when None
        log_dir: Directory for the log files; None leaves file logging off
        timeout: Optional limit in seconds for every exiftool call

    Returns:
        AppContext. When no exiftool is found the service is still built and
        its calls raise ToolNotFound.

    """
    if log_dir is not None:
        init_logging(APP_NAME, log_dir)

    config_manager = JSONConfigManager(APP_NAME, config_dir)
    exiftool_config = ExifToolConfig()
    config_manager.register_category(exiftool_config)
    if not config_manager.load():
        logger.warning("[Bootstrap] Settings could not be read, using defaults")

    location = locate_exiftool(exiftool_config.custom_path)
    service = _build_service(location, timeout)

    logger.info(
        "[Bootstrap] exiftool %s, overwrite original: %s",
        location.path if location else "not found",
        exiftool_config.overwrite_original,
    )
    return AppContext(
        config_manager=config_manager,
        exiftool_config=exiftool_config,
        location=location,
        service=service,
        batch_executor=BatchExecutor(service),
        timeout=timeout,
    )
