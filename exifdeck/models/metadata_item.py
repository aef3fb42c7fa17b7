"""Module: metadata_item.py

Author: Michael Economou
Date: 2026-01-20

Tag model: one metadata entry as reported by ExifTool.

A MetadataItem keeps the value loaded from the file (original_value) next to
the value currently being edited (value). Only value changes between loads;
a reload replaces the whole set of items.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum

from exifdeck.config import READ_ONLY_GROUPS


def human_readable(tag_name: str) -> str:
    """Split a CamelCase tag name into words.

    A space goes before each uppercase letter that follows a lowercase letter
    or a digit, so runs of capitals stay together:

        >>> human_readable("DateTimeOriginal")
        'Date Time Original'
        >>> human_readable("GPSVersionID")
        'GPSVersion ID'
    """
    chars: list[str] = []
    prev = ""
    for char in tag_name:
        if char.isupper() and prev and (prev.islower() or prev.isdigit()):
            chars.append(" ")
        chars.append(char)
        prev = char
    return "".join(chars)


def is_writable_group(group: str) -> bool:
    """Return False for system, file and composite groups (any casing)."""
    return group.lower() not in READ_ONLY_GROUPS


@dataclass(slots=True)
class MetadataItem:
    """Single metadata tag with edit tracking.

    Attributes:
        group: Namespace reported by ExifTool (e.g. "ExifIFD", "IPTC", "File")
        tag_name: Tag identifier within the group
        description: Human-readable label derived from tag_name
        value: Current, possibly edited, value as text
        is_writable: False for read-only groups
        original_value: Value as loaded; set once per load
        id: Opaque identity for per-row operations

    """

    group: str
    tag_name: str
    description: str
    value: str
    is_writable: bool = True
    original_value: str | None = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        if self.original_value is None:
            self.original_value = self.value

    @classmethod
    def create(cls, group: str, tag_name: str, value: str) -> "MetadataItem":
        """Build an item with description and writability derived from its names."""
        return cls(
            group=group,
            tag_name=tag_name,
            description=human_readable(tag_name),
            value=value,
            is_writable=is_writable_group(group),
        )

    @property
    def is_modified(self) -> bool:
        return self.value != self.original_value

    @property
    def qualified_name(self) -> str:
        """Group-qualified tag name as ExifTool expects it ("Group:TagName")."""
        return f"{self.group}:{self.tag_name}"

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.group, self.tag_name)

    def __str__(self) -> str:
        return f"{self.qualified_name}={self.value!r}"


class MetadataGroup(str, Enum):
    """Well-known metadata groups for filtering and display."""

    ALL = "All"
    EXIF = "EXIF"
    IPTC = "IPTC"
    XMP = "XMP"
    FILE = "File"
    SYSTEM = "System"
    COMPOSITE = "Composite"
    MAKERNOTES = "MakerNotes"
    QUICKTIME = "QuickTime"
    OTHER = "Other"

    @classmethod
    def from_raw(cls, raw_group: str) -> "MetadataGroup":
        """Map a raw ExifTool group name to a display category."""
        normalized = raw_group.lower()
        if "exif" in normalized:
            return cls.EXIF
        if "iptc" in normalized:
            return cls.IPTC
        if "xmp" in normalized:
            return cls.XMP
        if normalized == "file":
            return cls.FILE
        if normalized == "system":
            return cls.SYSTEM
        if "composite" in normalized:
            return cls.COMPOSITE
        if "maker" in normalized:
            return cls.MAKERNOTES
        if "quicktime" in normalized:
            return cls.QUICKTIME
        return cls.OTHER

    @classmethod
    def lookup(cls, name: str) -> "MetadataGroup | None":
        """Find a category by its display name, ignoring case."""
        for member in cls:
            if member.value.lower() == name.lower():
                return member
        return None
