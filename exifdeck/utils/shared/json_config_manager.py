"""Module: json_config_manager.py

Author: Michael Economou
Date: 2025-06-10

JSON-based configuration manager.
Persists settings grouped in categories, keeps a backup of the previous
file and serializes access with a lock.
"""

from __future__ import annotations

import json
import os
import shutil
import threading
from datetime import datetime
from pathlib import Path
from typing import Any

from exifdeck.config import APP_NAME, APP_VERSION, DEFAULT_OVERWRITE_ORIGINAL
from exifdeck.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ConfigCategory:
    """Named group of settings with defaults."""

    def __init__(self, name: str, defaults: dict[str, Any]):
        self.name = name
        self.defaults = defaults
        self._data = defaults.copy()

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value with fallback to default."""
        return self._data.get(key, default if default is not None else self.defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def update(self, data: dict[str, Any]) -> None:
        self._data.update(data)

    def reset(self) -> None:
        """Reset all values to defaults."""
        self._data = self.defaults.copy()

    def to_dict(self) -> dict[str, Any]:
        return self._data.copy()

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load from dictionary, applying defaults for missing keys."""
        self._data = self.defaults.copy()
        self._data.update(data)


class ExifToolConfig(ConfigCategory):
    """ExifTool preferences: custom executable path and backup behaviour."""

    def __init__(self) -> None:
        defaults = {
            "custom_path": "",
            "overwrite_original": DEFAULT_OVERWRITE_ORIGINAL,
        }
        super().__init__("exiftool", defaults)

    @property
    def custom_path(self) -> str | None:
        return self.get("custom_path") or None

    @property
    def overwrite_original(self) -> bool:
        return bool(self.get("overwrite_original"))


class JSONConfigManager:
    """Loads and saves registered categories to config.json."""

    def __init__(self, app_name: str = APP_NAME, config_dir: str | None = None):
        self.app_name = app_name
        self.config_dir = Path(config_dir or self._get_default_config_dir())
        self.config_file = self.config_dir / "config.json"
        self.backup_file = self.config_dir / "config.json.bak"

        self._lock = threading.RLock()
        self._categories: dict[str, ConfigCategory] = {}

        self.config_dir.mkdir(parents=True, exist_ok=True)

        logger.info(
            "[JSONConfigManager] Initialized for '%s' with dir: %s",
            app_name,
            self.config_dir,
            extra={"dev_only": True},
        )

    def _get_default_config_dir(self) -> str:
        """Get default configuration directory based on OS."""
        if os.name == "nt":
            base_dir = os.environ.get("APPDATA", os.path.expanduser("~"))
        else:
            base_dir = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
        return os.path.join(base_dir, self.app_name)

    def register_category(self, category: ConfigCategory) -> None:
        with self._lock:
            self._categories[category.name] = category

    def get_category(self, category_name: str) -> ConfigCategory | None:
        return self._categories.get(category_name)

    def load(self) -> bool:
        """Load configuration from JSON file. Missing file means defaults."""
        with self._lock:
            if not self.config_file.exists():
                logger.info(
                    "[JSONConfigManager] No config file found, using defaults",
                    extra={"dev_only": True},
                )
                return True

            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error("[JSONConfigManager] Failed to load configuration: %s", e)
                return False

            for category_name, category in self._categories.items():
                if category_name in data:
                    category.from_dict(data[category_name])

            logger.info(
                "[JSONConfigManager] Configuration loaded successfully",
                extra={"dev_only": True},
            )
            return True

    def save(self, create_backup: bool = True) -> bool:
        """Save configuration to JSON file."""
        with self._lock:
            data: dict[str, Any] = {
                name: category.to_dict() for name, category in self._categories.items()
            }
            data["_metadata"] = {
                "last_saved": datetime.now().isoformat(),
                "version": f"v{APP_VERSION}",
                "app_name": self.app_name,
            }

            try:
                if create_backup and self.config_file.exists():
                    shutil.copy2(self.config_file, self.backup_file)

                with open(self.config_file, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
            except OSError as e:
                logger.error("[JSONConfigManager] Failed to save configuration: %s", e)
                return False

            logger.debug("[JSONConfigManager] Configuration saved successfully")
            return True
