"""Module: output_decoder.py

Author: Michael Economou
Date: 2026-01-23

Decodes ExifTool JSON output ("-json -G1 -a -s -D") into MetadataItems.

ExifTool prints a JSON array with one object per file. Keys are qualified
as "Group:TagName" and values come in several shapes: strings, numbers,
and, with -D, objects such as {"id": 271, "val": "Canon"}. Each raw value
is first decoded into one of the TagValue variants and only then projected
to text, so the shape rules live in one place.

Objects are read as ordered key/value pairs so that duplicate keys emitted
with -a are kept, each as its own item.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

from exifdeck.config import EXIFTOOL_SOURCE_FILE_KEY, FALLBACK_GROUP
from exifdeck.core.metadata.errors import ParsingFailed
from exifdeck.models.metadata_item import MetadataItem
from exifdeck.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# Lookup order for the value inside an object-shaped tag
NESTED_VALUE_KEYS = ("val", "value")


class JsonPairs(list):
    """Key/value pairs of one JSON object in source order, duplicates kept."""

    def lookup(self, key: str) -> tuple[bool, Any]:
        for pair_key, pair_value in self:
            if pair_key == key:
                return True, pair_value
        return False, None


def _plain(raw: Any) -> Any:
    """Convert decoded JSON back to plain containers for rendering."""
    if isinstance(raw, JsonPairs):
        return {key: _plain(value) for key, value in raw}
    if isinstance(raw, list):
        return [_plain(item) for item in raw]
    if isinstance(raw, Decimal):
        return float(raw)
    return raw


def render_generic(raw: Any) -> str:
    """Textual fallback for values that are neither text nor numbers."""
    return json.dumps(_plain(raw), ensure_ascii=False)


# -----------------------------------------------------------------------------
# Tag value variants
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TextValue:
    text: str

    def to_text(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class NumberValue:
    number: int | Decimal

    def to_text(self) -> str:
        # Positional notation keeps the digits as printed: 2.80 stays "2.80",
        # exponent input such as 1.5E+10 becomes "15000000000"
        if isinstance(self.number, Decimal):
            return format(self.number, "f")
        return str(self.number)


@dataclass(frozen=True, slots=True)
class OtherValue:
    """Lists, booleans, null and objects without a value field."""

    raw: Any

    def to_text(self) -> str:
        return render_generic(self.raw)


@dataclass(frozen=True, slots=True)
class NestedValue:
    """Object-shaped tag; inner holds its "val" or "value" field."""

    inner: TextValue | NumberValue | OtherValue | None
    raw: JsonPairs

    def to_text(self) -> str:
        if self.inner is None:
            return render_generic(self.raw)
        return self.inner.to_text()


TagValue = Union[TextValue, NumberValue, NestedValue, OtherValue]


def _decode_scalar(raw: Any) -> TextValue | NumberValue | OtherValue:
    if isinstance(raw, str):
        return TextValue(raw)
    # bool is an int subclass but is not a number here
    if isinstance(raw, (int, Decimal)) and not isinstance(raw, bool):
        return NumberValue(raw)
    return OtherValue(raw)


def decode_value(raw: Any) -> TagValue:
    """Classify one raw JSON value into a TagValue variant."""
    if isinstance(raw, JsonPairs):
        for key in NESTED_VALUE_KEYS:
            found, inner = raw.lookup(key)
            if found:
                return NestedValue(inner=_decode_scalar(inner), raw=raw)
        return NestedValue(inner=None, raw=raw)
    return _decode_scalar(raw)


# -----------------------------------------------------------------------------
# Keys and documents
# -----------------------------------------------------------------------------


def split_qualified_key(key: str) -> tuple[str, str]:
    """Split "Group:TagName" on the first colon.

    Keys without a colon belong to the fallback group "Other".
    """
    group, sep, tag_name = key.partition(":")
    if not sep:
        return FALLBACK_GROUP, key
    return group, tag_name


def _load_document(json_text: str | bytes) -> Any:
    if isinstance(json_text, (bytes, bytearray)):
        try:
            json_text = bytes(json_text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParsingFailed("Invalid UTF-8 data") from e

    try:
        return json.loads(json_text, object_pairs_hook=JsonPairs, parse_float=Decimal)
    except json.JSONDecodeError as e:
        logger.debug("[OutputDecoder] Raw output was: %r", json_text, extra={"dev_only": True})
        raise ParsingFailed(f"Invalid JSON: {e}") from e


def decode(json_text: str | bytes) -> list[MetadataItem]:
    """Decode ExifTool JSON output for one file into sorted MetadataItems.

    Args:
        json_text: ExifTool standard output, as text or UTF-8 bytes

    Returns:
        Items sorted by (group, tag_name); duplicates keep their source order

    Raises:
        ParsingFailed: Output is not UTF-8, not JSON, or not an array whose
            first element is an object

    """
    document = _load_document(json_text)

    if not isinstance(document, list) or not document or not isinstance(document[0], JsonPairs):
        raise ParsingFailed("Expected JSON array with file object")

    items: list[MetadataItem] = []
    for key, raw in document[0]:
        if key == EXIFTOOL_SOURCE_FILE_KEY:
            continue

        group, tag_name = split_qualified_key(key)
        value = decode_value(raw).to_text()
        items.append(MetadataItem.create(group, tag_name, value))

    items.sort(key=lambda item: item.sort_key)

    logger.debug(
        "[OutputDecoder] Decoded %d tags (%d objects in output)",
        len(items),
        len(document),
        extra={"dev_only": True},
    )
    return items
