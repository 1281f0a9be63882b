# EMVCo QR payload parser (PromptPay and friends)

import logging
import re
from typing import List

from .barcode import BOTBarcode
from .checksum import checksum_hex
from .constants import CRC_TAG_ID
from .errors import (
    ChecksumMismatchError,
    EmptyPayloadError,
    MalformedHeaderError,
    MalformedTLVError,
    TLVDecodeError,
)
from .tlv import HEADER_SIZE, NestedTag, TLVTag, decode, encode, get, with_crc_tag

logger = logging.getLogger(__name__)

TLV_PATTERN = re.compile(r"^\d{4}", re.ASCII)


class EMVCoQR:
    """A parsed EMVCo payload: the original string plus its top-level tags."""

    def __init__(self, payload, tags):
        self._payload = payload
        self._tags = tuple(tags)

    def __repr__(self):
        return f"EMVCoQR({self._payload!r})"

    @property
    def payload(self) -> str:
        return self._payload

    @property
    def tags(self) -> List[TLVTag]:
        return list(self._tags)

    def get_tag(self, tag_id, sub_tag_id=None):
        return get(self._tags, tag_id, sub_tag_id)

    def get_tag_value(self, tag_id, sub_tag_id=None):
        """Value of a tag or sub-tag, ``""`` when it is absent."""
        found = self.get_tag(tag_id, sub_tag_id)
        return found.value if found is not None else ""

    def validate(self, crc_tag_id=CRC_TAG_ID, upper_case=True):
        """Rebuild the payload with a fresh checksum and compare it to the original.

        Every tag with ``crc_tag_id`` is dropped, the rest re-encoded and a new
        checksum tag appended. ``upper_case`` selects the checksum case, which
        is lowercase only for TrueMoney Slip Verify.
        """
        without_crc = [t for t in self._tags if t.id != crc_tag_id]
        expected = with_crc_tag(encode(without_crc), crc_tag_id, upper_case)
        return expected == self._payload


def _expand(tag):
    """Try to read a tag's value as sub-tags; return the tag unchanged if it doesn't fit."""
    value = tag.value
    if len(value) < HEADER_SIZE or not TLV_PATTERN.match(value):
        return tag
    try:
        sub = decode(value)
    except TLVDecodeError:
        return tag

    if not sub:
        return tag
    return NestedTag(id=tag.id, length=tag.length, sub_tags=tuple(sub))


def parse(payload, strict=False, sub_tags=True):
    """Parse an EMVCo-compatible QR code data string.

    payload: QR code data as read by the scanner
    strict: verify the trailing CRC before parsing
    sub_tags: expand tag values that look like TLV streams into sub-tags
    """
    if not TLV_PATTERN.match(payload):
        raise MalformedHeaderError()

    if strict:
        # the header check above guarantees at least 4 characters
        expected = payload[-4:].upper()
        calculated = checksum_hex(payload[:-4], upper_case=True)
        if expected != calculated:
            logger.debug("checksum mismatch: expected %s, got %s", expected, calculated)
            raise ChecksumMismatchError(expected, calculated)

    try:
        tags = decode(payload)
    except TLVDecodeError as exc:
        raise MalformedTLVError(exc) from exc

    if not tags:
        raise EmptyPayloadError()

    if sub_tags:
        tags = [_expand(t) for t in tags]

    logger.debug(
        "parsed %d tags (%d nested)",
        len(tags), sum(1 for t in tags if isinstance(t, NestedTag)),
    )
    return EMVCoQR(payload, tags)


def parse_barcode(payload):
    """Parse a BOT barcode string."""
    return BOTBarcode.from_string(payload)
