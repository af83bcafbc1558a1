"""Subtype 3 / subtype 4 BinData codecs and the dispatcher in front of them."""

import base64
import binascii
import logging
from abc import ABC, abstractmethod
from typing import Dict, Union

from bindata.byte_order import java_hex
from bindata.constants import (
    BINDATA_PATTERNS,
    HEX_RE,
    SEPARATORS_RE,
    SUPPORTED_SUBTYPES,
    UNSUPPORTED_SUBTYPE_MESSAGE,
    UUID_BYTE_LENGTH,
    UUID_GROUP_BOUNDS,
    UUID_HEX_LENGTH,
    strict_uuid_input,
)
from bindata.errors import FormatError, InvalidUuidError, LengthError, UnsupportedSubtypeError
from bindata.java_base64 import to_base64, to_hex


logger = logging.getLogger(__name__)

# (field, byte width) in RFC 4122 order
UUID_FIELDS = (
    ("time_low", 4),
    ("time_mid", 2),
    ("time_hi_and_version", 2),
    ("clock_seq", 2),
    ("node", 6),
)


def normalize_uuid(uuid: str) -> str:
    """Strip braces and hyphens and lowercase a UUID string.

    With BINDATA_STRICT_UUID enabled (the default) anything that is not then
    exactly 32 hex digits raises InvalidUuidError. When disabled the string
    is passed through and malformed input gives garbled output.
    """
    clean = SEPARATORS_RE.sub("", uuid.strip()).lower()
    if strict_uuid_input() and (len(clean) != UUID_HEX_LENGTH or not HEX_RE.fullmatch(clean)):
        raise InvalidUuidError(f"Invalid UUID format '{uuid}'")
    return clean


def format_uuid(hex: str) -> str:
    """Insert hyphens into 32 hex digits at the 8-4-4-4-12 boundaries."""
    hex = hex.lower()
    return "-".join(hex[start:end] for start, end in zip(UUID_GROUP_BOUNDS, UUID_GROUP_BOUNDS[1:]))


def uuid_field_bytes(uuid: str) -> bytes:
    """Convert a UUID string to 16 raw bytes field by field, big-endian."""
    clean = SEPARATORS_RE.sub("", uuid)
    raw = b""
    offset = 0
    for _name, width in UUID_FIELDS:
        chunk = clean[offset:offset + width * 2]
        raw += int(chunk, 16).to_bytes(width, "big")
        offset += width * 2
    return raw


def _extract_payload(subtype: str, bindata: str) -> str:
    match = BINDATA_PATTERNS[subtype].search(bindata)
    if not match:
        raise FormatError("Invalid BinData format")
    return match.group(1)


class _SubtypeCodec(ABC):
    """Common surface of the two BinData variants."""

    subtype = ""

    @abstractmethod
    def encode(self, uuid: str) -> str:
        pass

    @abstractmethod
    def decode(self, bindata: str) -> str:
        pass

    def wrap(self, payload: str) -> str:
        return f'BinData({self.subtype}, "{payload}")'


class Subtype3Codec(_SubtypeCodec):
    """Java legacy layout: each 8-byte half reversed, Java-variant base64."""

    subtype = "3"

    def encode(self, uuid: str) -> str:
        hex = java_hex(normalize_uuid(uuid))
        return self.wrap(to_base64(hex))

    def decode(self, bindata: str) -> str:
        hex = to_hex(_extract_payload(self.subtype, bindata))
        if len(hex) != UUID_HEX_LENGTH:
            raise LengthError("Invalid UUID binary length")
        return format_uuid(java_hex(hex))


class Subtype4Codec(_SubtypeCodec):
    """RFC 4122 byte order, standard base64."""

    subtype = "4"

    def encode(self, uuid: str) -> str:
        raw = uuid_field_bytes(normalize_uuid(uuid))
        return self.wrap(base64.b64encode(raw).decode("ascii"))

    def decode(self, bindata: str) -> str:
        payload = _extract_payload(self.subtype, bindata)
        # Tolerate missing padding the way the shell does
        payload += "=" * (-len(payload) % 4)
        try:
            raw = base64.b64decode(payload, validate=True)
        except binascii.Error as exc:
            raise FormatError(f"Invalid base64 payload: {exc}") from exc
        if len(raw) != UUID_BYTE_LENGTH:
            raise LengthError("Invalid UUID binary length")
        return format_uuid(raw.hex())


_CODECS: Dict[str, _SubtypeCodec] = {
    "3": Subtype3Codec(),
    "4": Subtype4Codec(),
}


def _codec_for(subtype: Union[str, int]) -> _SubtypeCodec:
    key = str(subtype)
    if key not in SUPPORTED_SUBTYPES:
        raise UnsupportedSubtypeError(UNSUPPORTED_SUBTYPE_MESSAGE)
    return _CODECS[key]


def encode_bindata(subtype: Union[str, int], uuid: str) -> str:
    """Encode a UUID string as ``BinData(<subtype>, "<base64>")``."""
    codec = _codec_for(subtype)
    result = codec.encode(uuid)
    logger.debug("Encoded %s as %s", uuid, result)
    return result


def decode_bindata(subtype: Union[str, int], bindata: str) -> str:
    """Decode ``BinData(<subtype>, "...")`` into a lowercase hyphenated UUID."""
    codec = _codec_for(subtype)
    result = codec.decode(bindata)
    logger.debug("Decoded %s as %s", bindata, result)
    return result
