"""Module: session.py

Author: Michael Economou
Date: 2026-01-24

Per-file metadata session.

Holds the MetadataItems of exactly one file and tracks edits against the
values loaded from disk. load() is the only way original values are set;
every load replaces the whole set. Edits change item.value only.

Sessions are not locked. The owner must not run two operations on the same
session at once.
"""

from __future__ import annotations

from collections.abc import Iterable

from PyQt5.QtCore import QObject, pyqtSignal

from exifdeck.models.metadata_item import MetadataGroup, MetadataItem
from exifdeck.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class MetadataSession(QObject):
    """In-memory tag set of one file with modification tracking."""

    # Emitted after load(): (item count)
    entries_loaded = pyqtSignal(int)
    # Emitted when an item's value changes: (item id, new value)
    value_changed = pyqtSignal(str, str)
    # Emitted when the session is emptied
    cleared = pyqtSignal()

    def __init__(self, file_path: str | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.file_path = file_path
        self._items: list[MetadataItem] = []
        self._index: dict[str, MetadataItem] = {}

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load(self, items: Iterable[MetadataItem], file_path: str | None = None) -> None:
        """Replace the whole set; loaded values become the originals."""
        if file_path is not None:
            self.file_path = file_path

        self._items = list(items)
        for item in self._items:
            item.original_value = item.value
        self._index = {item.id: item for item in self._items}

        logger.debug(
            "[MetadataSession] Loaded %d tags for %s",
            len(self._items),
            self.file_path,
            extra={"dev_only": True},
        )
        self.entries_loaded.emit(len(self._items))

    def clear(self) -> None:
        self._items = []
        self._index = {}
        self.file_path = None
        self.cleared.emit()

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def set_value(self, entry_id: str, new_value: str) -> bool:
        """Change the current value of one item.

        Returns:
            False if no item has this id (nothing changes)

        """
        item = self._index.get(entry_id)
        if item is None:
            logger.debug("[MetadataSession] set_value: unknown id %s", entry_id)
            return False

        if item.value != new_value:
            item.value = new_value
            self.value_changed.emit(entry_id, new_value)
        return True

    def revert(self, entry_id: str) -> bool:
        """Restore one item's loaded value. False if the id is unknown."""
        item = self._index.get(entry_id)
        if item is None:
            return False
        return self.set_value(entry_id, item.original_value or "")

    def revert_all(self) -> int:
        """Restore every modified item. Returns how many were reverted."""
        modified = self.modified_entries()
        for item in modified:
            self.set_value(item.id, item.original_value or "")
        return len(modified)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def entries(self) -> list[MetadataItem]:
        return list(self._items)

    def get(self, entry_id: str) -> MetadataItem | None:
        return self._index.get(entry_id)

    def modified_entries(self) -> list[MetadataItem]:
        """Modified items in set order."""
        return [item for item in self._items if item.is_modified]

    @property
    def has_unsaved_changes(self) -> bool:
        return any(item.is_modified for item in self._items)

    @property
    def modified_count(self) -> int:
        return len(self.modified_entries())

    def filter(
        self, search_text: str = "", group: MetadataGroup | str = MetadataGroup.ALL
    ) -> list[MetadataItem]:
        """Return the items matching a group filter and a search text.

        Args:
            search_text: Case-insensitive substring looked up in tag name,
                description, value and group. Empty matches everything.
            group: A display category, or "All" for every group. A string
                that names no category is compared with the raw group.

        Returns:
            New list; the session is not modified

        """
        result = self._items

        category = group if isinstance(group, MetadataGroup) else MetadataGroup.lookup(group)
        if category is not None:
            if category is not MetadataGroup.ALL:
                result = [item for item in result if MetadataGroup.from_raw(item.group) is category]
        else:
            raw_group = str(group).lower()
            result = [item for item in result if item.group.lower() == raw_group]

        if search_text:
            query = search_text.lower()
            result = [
                item
                for item in result
                if query in item.tag_name.lower()
                or query in item.description.lower()
                or query in item.value.lower()
                or query in item.group.lower()
            ]

        return list(result)
