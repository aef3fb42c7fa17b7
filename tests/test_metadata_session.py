"""
Tests for MetadataSession edit tracking.

Author: Michael Economou
Date: 2026-01-24
"""

from unittest.mock import MagicMock

import pytest

from exifdeck.core.metadata.output_decoder import decode
from exifdeck.core.metadata.session import MetadataSession
from exifdeck.models.metadata_item import MetadataGroup, MetadataItem


@pytest.fixture
def session(qcore_app, sample_exiftool_output):
    session = MetadataSession()
    session.load(decode(sample_exiftool_output), file_path="/photos/img_0001.jpg")
    return session


def find(session: MetadataSession, qualified_name: str) -> MetadataItem:
    return next(item for item in session.entries if item.qualified_name == qualified_name)


class TestLoad:
    """Tests for loading items into a session."""

    def test_load_sets_originals(self, qcore_app) -> None:
        item = MetadataItem.create("EXIF", "Make", "Canon")
        item.value = "Nikon"

        session = MetadataSession()
        session.load([item])

        assert item.original_value == "Nikon"
        assert session.has_unsaved_changes is False

    def test_load_replaces_previous_set(self, session) -> None:
        session.load([MetadataItem.create("EXIF", "Make", "Canon")])
        assert len(session.entries) == 1

    def test_load_emits_count(self, qcore_app) -> None:
        session = MetadataSession()
        slot = MagicMock()
        session.entries_loaded.connect(slot)

        session.load([MetadataItem.create("EXIF", "Make", "Canon")], file_path="/a.jpg")

        slot.assert_called_once_with(1)
        assert session.file_path == "/a.jpg"

    def test_clear(self, session) -> None:
        slot = MagicMock()
        session.cleared.connect(slot)

        session.clear()

        assert session.entries == []
        assert session.file_path is None
        slot.assert_called_once_with()


class TestEditing:
    """Tests for set_value, revert and modification queries."""

    def test_set_value_marks_modified(self, session) -> None:
        make = find(session, "IFD0:Make")

        assert session.set_value(make.id, "Nikon") is True
        assert make.value == "Nikon"
        assert make.original_value == "Canon"
        assert session.has_unsaved_changes is True
        assert session.modified_count == 1

    def test_set_back_to_original_clears_modified(self, session) -> None:
        make = find(session, "IFD0:Make")
        session.set_value(make.id, "Nikon")
        session.set_value(make.id, "Canon")

        assert make.is_modified is False
        assert session.has_unsaved_changes is False

    def test_unknown_id_changes_nothing(self, session) -> None:
        before = [(item.id, item.value) for item in session.entries]

        assert session.set_value("no-such-id", "x") is False
        assert [(item.id, item.value) for item in session.entries] == before

    def test_value_changed_only_on_real_change(self, session) -> None:
        make = find(session, "IFD0:Make")
        slot = MagicMock()
        session.value_changed.connect(slot)

        session.set_value(make.id, "Canon")
        slot.assert_not_called()

        session.set_value(make.id, "Nikon")
        slot.assert_called_once_with(make.id, "Nikon")

    def test_read_only_items_can_be_edited_in_memory(self, session) -> None:
        file_type = find(session, "File:FileType")
        assert session.set_value(file_type.id, "PNG") is True
        assert file_type.is_modified is True

    def test_modified_entries_keep_set_order(self, session) -> None:
        model = find(session, "IFD0:Model")
        iso = find(session, "ExifIFD:ISO")
        session.set_value(model.id, "R6")
        session.set_value(iso.id, "200")

        assert session.modified_entries() == [iso, model]

    @pytest.mark.parametrize("new_value", ["Nikon", "", "Canon", "Ελληνικά ✓"])
    def test_revert(self, session, new_value: str) -> None:
        """Revert restores the loaded value whatever was set."""
        make = find(session, "IFD0:Make")
        session.set_value(make.id, new_value)

        assert session.revert(make.id) is True
        assert make.value == "Canon"
        assert make.is_modified is False
        assert session.revert("no-such-id") is False

    def test_revert_all(self, session) -> None:
        session.set_value(find(session, "IFD0:Make").id, "Nikon")
        session.set_value(find(session, "IPTC:Keywords").id, "")

        assert session.revert_all() == 2
        assert session.has_unsaved_changes is False

    def test_entries_is_a_copy(self, session) -> None:
        session.entries.clear()
        assert len(session.entries) == 8


class TestFilter:
    """Tests for search and group filtering."""

    def test_no_filter_returns_everything(self, session) -> None:
        assert session.filter() == session.entries

    def test_search_is_case_insensitive(self, session) -> None:
        names = {item.qualified_name for item in session.filter("canon")}
        assert names == {"IFD0:Make", "IFD0:Model"}

    def test_search_matches_description(self, session) -> None:
        names = [item.tag_name for item in session.filter("time original")]
        assert names == ["DateTimeOriginal"]

    def test_filter_by_category(self, session) -> None:
        names = [item.qualified_name for item in session.filter(group=MetadataGroup.EXIF)]
        assert names == ["ExifIFD:DateTimeOriginal", "ExifIFD:ISO"]

    def test_filter_by_category_name(self, session) -> None:
        assert [item.group for item in session.filter(group="composite")] == ["Composite"]

    def test_filter_by_raw_group(self, session) -> None:
        names = [item.tag_name for item in session.filter(group="IFD0")]
        assert names == ["Make", "Model"]

    def test_search_and_group_combined(self, session) -> None:
        assert session.filter("canon", group=MetadataGroup.IPTC) == []

    def test_filter_does_not_modify_session(self, session) -> None:
        session.filter("nothing matches this")
        assert len(session.entries) == 8
