"""Base64 the way the Java MongoDB shell helpers spell a 16-byte UUID.

Encoding always yields 24 characters: five full 3-byte groups, then the last
byte on its own as two symbols plus a literal "==". Decoding is the exact
reverse and treats "=" as "no byte here" in the third or fourth slot of a
group.
"""

import logging

from bindata.constants import BASE64_DIGITS, HEX_DIGITS, PADDING_CHAR, SEPARATORS_RE
from bindata.errors import FormatError, LengthError


logger = logging.getLogger(__name__)


def _hex_byte(value: int) -> str:
    return HEX_DIGITS[(value >> 4) & 15] + HEX_DIGITS[value & 15]


def to_base64(hex: str) -> str:
    """Encode 32 hex digits (16 bytes) into the 24-char Java variant."""
    hex = SEPARATORS_RE.sub("", hex)
    base64 = []
    for i in range(0, 30, 6):
        n = int(hex[i:i + 6], 16)
        base64.append(BASE64_DIGITS[(n >> 18) & 0x3F])
        base64.append(BASE64_DIGITS[(n >> 12) & 0x3F])
        base64.append(BASE64_DIGITS[(n >> 6) & 0x3F])
        base64.append(BASE64_DIGITS[n & 0x3F])

    last_byte = int(hex[30:32], 16)
    base64.append(BASE64_DIGITS[(last_byte >> 2) & 0x3F])
    base64.append(BASE64_DIGITS[(last_byte << 4) & 0x3F])
    base64.append(PADDING_CHAR * 2)
    return "".join(base64)


def _index(symbol: str) -> int:
    index = BASE64_DIGITS.find(symbol)
    if index < 0:
        raise FormatError(f"Invalid base64 symbol {symbol!r}")
    return index


def to_hex(base64: str) -> str:
    """Decode a Java-variant base64 payload into lowercase hex.

    The caller checks the resulting length. A trailing group of two or three
    symbols is read as if padded with "="; a lone trailing symbol raises
    LengthError.
    """
    hex = []
    for i in range(0, len(base64), 4):
        if len(base64) - i == 1:
            # A lone symbol carries only 6 bits, not a whole byte
            raise LengthError("Invalid UUID binary length")
        group = base64[i:i + 4].ljust(4, PADDING_CHAR)
        if PADDING_CHAR in group[:2]:
            raise FormatError(f"Unexpected padding in base64 group {group!r}")

        e1, e2, e3, e4 = (_index(symbol) for symbol in group)
        c1 = ((e1 << 2) | (e2 >> 4)) & 0xFF
        c2 = (((e2 & 15) << 4) | (e3 >> 2)) & 0xFF
        c3 = (((e3 & 3) << 6) | e4) & 0xFF

        hex.append(_hex_byte(c1))
        if group[2] != PADDING_CHAR:
            hex.append(_hex_byte(c2))
        if group[3] != PADDING_CHAR:
            hex.append(_hex_byte(c3))

    result = "".join(hex)
    logger.debug("Decoded %d base64 symbols into %d hex digits", len(base64), len(result))
    return result
