# Thai QR Code payload codec: EMVCo TLV, CRC16, PromptPay / TrueMoney /
# Slip Verify generators and BOT barcodes

__version__ = "1.0.0"

from .barcode import BOTBarcode
from .checksum import checksum_hex, crc16
from .emvco import EMVCoQR, parse, parse_barcode
from .errors import (
    BarcodeFormatError,
    ChecksumMismatchError,
    EmptyPayloadError,
    IncompleteHeaderError,
    IncompleteValueError,
    InvalidConfigError,
    InvalidFormatError,
    InvalidLengthError,
    InvalidValueError,
    MalformedHeaderError,
    MalformedTLVError,
    ParseError,
    ThaiQRError,
    TLVDecodeError,
)
from .tlv import NestedTag, TLVTag, ValueTag, decode, encode, get, nested, tag, with_crc_tag
