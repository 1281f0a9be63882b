# Exceptions raised by the Thai QR codec, parser and generators


class ThaiQRError(Exception):
    """Base class for every error raised by thaiqr."""


# ---------------------------------------------------------------------------
# TLV structure
# ---------------------------------------------------------------------------


class TLVDecodeError(ThaiQRError):
    """A TLV stream could not be decoded. ``position`` is the offending byte offset."""

    def __init__(self, message, position):
        super().__init__(f"invalid TLV format: {message} at position {position}")
        self.position = position


class IncompleteHeaderError(TLVDecodeError):
    def __init__(self, position):
        super().__init__("incomplete tag header", position)


class InvalidLengthError(TLVDecodeError):
    def __init__(self, position, raw):
        super().__init__(f"invalid length {raw!r}", position)
        self.raw = raw


class IncompleteValueError(TLVDecodeError):
    def __init__(self, position, expected, actual):
        super().__init__(
            f"incomplete tag value (expected {expected} bytes, got {actual})",
            position,
        )
        self.expected = expected
        self.actual = actual


class InvalidValueError(TLVDecodeError):
    def __init__(self, position):
        super().__init__("tag value is not valid UTF-8", position)


# ---------------------------------------------------------------------------
# EMVCo payload
# ---------------------------------------------------------------------------


class ParseError(ThaiQRError):
    """An EMVCo payload was rejected by ``thaiqr.emvco.parse``."""


class MalformedHeaderError(ParseError):
    def __init__(self):
        super().__init__("invalid QR code format: payload must start with 4 digits")


class MalformedTLVError(ParseError):
    def __init__(self, cause):
        super().__init__(f"failed to decode TLV: {cause}")
        self.position = getattr(cause, "position", None)


class EmptyPayloadError(ParseError):
    def __init__(self):
        super().__init__("no tags found in payload")


class ChecksumMismatchError(ParseError):
    def __init__(self, expected, calculated):
        super().__init__(f"invalid CRC checksum: expected {expected}, got {calculated}")
        self.expected = expected
        self.calculated = calculated


# ---------------------------------------------------------------------------
# Generators / extractors
# ---------------------------------------------------------------------------


class InvalidConfigError(ThaiQRError, ValueError):
    def __init__(self, field, value):
        super().__init__(f"invalid config: {field} = {value}")
        self.field = field
        self.value = value


class InvalidFormatError(ThaiQRError):
    """A payload parsed cleanly but is not the requested QR flavor."""


class BarcodeFormatError(ThaiQRError):
    """A BOT barcode string is malformed."""
