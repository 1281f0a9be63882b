# CRC16 checksum for Thai QR payloads

import crcmod.predefined

# CRC-16/XMODEM: poly 0x1021, no reflection, no final xor. Payloads seed it
# with 0xFFFF, which is the same as CRC-16/CCITT-FALSE.
_xmodem = crcmod.predefined.mkCrcFun("xmodem")

DEFAULT_SEED = 0xFFFF


def crc16(data, initial=DEFAULT_SEED):
    """Return the CRC-16/XMODEM of ``data`` starting from ``initial``."""
    return _xmodem(bytes(data), initial & 0xFFFF)


def checksum_hex(data, upper_case=True):
    """Checksum of a payload as 4 zero-padded hex digits.

    ``data`` may be ``bytes`` or ``str`` (encoded as UTF-8).
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    crc = crc16(data, DEFAULT_SEED)
    return f"{crc:04X}" if upper_case else f"{crc:04x}"
