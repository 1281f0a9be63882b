# Tag 81 (personal message) text codec used by TrueMoney QR codes

import logging
import string

logger = logging.getLogger(__name__)


def encode_tag81(message):
    """Each character's code point as 4 uppercase hex digits, e.g. "Hi" -> "00480069".

    Only Basic Multilingual Plane characters round-trip.
    """
    return "".join(f"{ord(c):04X}" for c in message)


def decode_tag81(hex_str):
    """Reverse of ``encode_tag81``. Invalid groups are skipped, a trailing partial group ignored."""
    chars = []
    for i in range(0, len(hex_str) - 3, 4):
        group = hex_str[i:i+4]
        if all(c in string.hexdigits for c in group):
            chars.append(chr(int(group, 16)))
        else:
            logger.debug("skipping invalid Tag 81 group %r at %d", group, i)
    return "".join(chars)
