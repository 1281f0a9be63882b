# Thai QR TLV (Tag-Length-Value) codec

import logging
from typing import List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, computed_field

from .checksum import checksum_hex
from .errors import (
    IncompleteHeaderError,
    IncompleteValueError,
    InvalidConfigError,
    InvalidLengthError,
    InvalidValueError,
)

logger = logging.getLogger(__name__)

HEADER_SIZE = 4  # 2 for id, 2 for length
MAX_LENGTH = 99  # two decimal digits


class ValueTag(BaseModel):
    """A leaf tag carrying a literal value."""

    model_config = ConfigDict(frozen=True)

    id: str
    length: int
    value: str

    @property
    def sub_tags(self):
        return ()


class NestedTag(BaseModel):
    """A tag whose value is itself a TLV stream of sub-tags."""

    model_config = ConfigDict(frozen=True)

    id: str
    length: int
    sub_tags: Tuple["TLVTag", ...]

    @computed_field
    @property
    def value(self) -> str:
        return encode(self.sub_tags)


TLVTag = Union[ValueTag, NestedTag]

NestedTag.model_rebuild()


def _byte_length(tag_id, value):
    length = len(value.encode("utf-8"))
    if length > MAX_LENGTH:
        raise InvalidConfigError(f"tag {tag_id}", value)
    return length


def tag(tag_id, value):
    """Build a leaf tag, computing its length in UTF-8 bytes.

    Raises ``InvalidConfigError`` when the value does not fit in 99 bytes.
    """
    return ValueTag(id=tag_id, length=_byte_length(tag_id, value), value=value)


def nested(tag_id, sub_tags):
    """Build a parent tag, computing its length from the encoded sub-tags."""
    sub_tags = tuple(sub_tags)
    return NestedTag(id=tag_id, length=_byte_length(tag_id, encode(sub_tags)), sub_tags=sub_tags)


def _text(data, position):
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidValueError(position) from exc


def decode(payload: str) -> List[ValueTag]:
    """Decode a flat TLV stream into leaf tags.

    Lengths and error positions are in UTF-8 bytes. Nested values are left
    as-is; see ``thaiqr.emvco.parse`` for sub-tag expansion. Raises a
    ``TLVDecodeError`` subclass on malformed input.
    """
    data = payload.encode("utf-8")
    result = []
    i = 0
    while i < len(data):
        if i + HEADER_SIZE > len(data):
            raise IncompleteHeaderError(i)

        tag_id = _text(data[i:i+2], i)
        raw_length = data[i+2:i+4]
        if not raw_length.isdigit():
            raise InvalidLengthError(i + 2, raw_length.decode("utf-8", "replace"))
        length = int(raw_length)

        start = i + HEADER_SIZE
        if start + length > len(data):
            raise IncompleteValueError(start, length, len(data) - start)

        value = _text(data[start:start+length], start)
        result.append(ValueTag(id=tag_id, length=length, value=value))
        i = start + length
    return result


def encode(tags: Sequence[TLVTag]) -> str:
    """Encode tags back into a TLV stream.

    Declared lengths are emitted as given; keeping them consistent with the
    values is up to whoever built the tags.
    """
    parts = []
    for t in tags:
        parts.append(f"{t.id}{t.length:02d}")
        if t.sub_tags:
            parts.append(encode(t.sub_tags))
        else:
            parts.append(t.value)
    return "".join(parts)


def get(tags: Sequence[TLVTag], tag_id, sub_tag_id=None) -> Optional[TLVTag]:
    """First tag with ``tag_id``, or its sub-tag ``sub_tag_id`` when given."""
    found = next((t for t in tags if t.id == tag_id), None)
    if found is None or not sub_tag_id:
        return found
    return next((s for s in found.sub_tags if s.id == sub_tag_id), None)


def with_crc_tag(payload, crc_tag_id, upper_case=True):
    """Append the checksum tag (id, length ``04``, CRC of everything before it)."""
    payload += f"{crc_tag_id:0>2}04"
    return payload + checksum_hex(payload, upper_case)
