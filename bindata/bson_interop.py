"""Bridge between BinData strings and pymongo's ``bson.binary.Binary``.

Subtype 3 values go through ``UuidRepresentation.JAVA_LEGACY`` and subtype 4
through ``UuidRepresentation.STANDARD`` so the bytes match what the Java
driver and the string codecs in ``bindata.codecs`` produce.
"""

import base64
import binascii
import logging
import uuid
from typing import Tuple, Union

from bson.binary import Binary, UuidRepresentation

from bindata.codecs import decode_bindata, format_uuid, normalize_uuid
from bindata.constants import (
    ANY_BINDATA_PATTERN,
    SHELL_BINARY_PATTERN,
    SUPPORTED_SUBTYPES,
    UNSUPPORTED_SUBTYPE_MESSAGE,
    UUID_BYTE_LENGTH,
)
from bindata.errors import FormatError, LengthError, UnsupportedSubtypeError


logger = logging.getLogger(__name__)

_REPRESENTATIONS = {
    "3": UuidRepresentation.JAVA_LEGACY,
    "4": UuidRepresentation.STANDARD,
}


def _subtype_key(subtype: Union[str, int]) -> str:
    key = str(subtype)
    if key not in SUPPORTED_SUBTYPES:
        raise UnsupportedSubtypeError(UNSUPPORTED_SUBTYPE_MESSAGE)
    return key


def to_binary(subtype: Union[str, int], uuid_str: str) -> Binary:
    """Convert a UUID string to a Binary suitable for equality matches in queries.

    e.g. ``{"business._id": to_binary("3", business_uuid)}``
    """
    key = _subtype_key(subtype)
    u = uuid.UUID(hex=normalize_uuid(uuid_str))
    return Binary.from_uuid(u, uuid_representation=_REPRESENTATIONS[key])


def from_binary(binary: Binary) -> str:
    """Convert a subtype 3 or 4 Binary back to a hyphenated UUID string."""
    key = _subtype_key(binary.subtype)
    if len(binary) != UUID_BYTE_LENGTH:
        raise LengthError("Invalid UUID binary length")
    u = binary.as_uuid(uuid_representation=_REPRESENTATIONS[key])
    return format_uuid(u.hex)


def to_shell_literal(subtype: Union[str, int], uuid_str: str) -> str:
    """Render a UUID the way mongosh prints it: ``Binary.createFromBase64('...', 3)``."""
    binary = to_binary(subtype, uuid_str)
    encoded = base64.b64encode(binary).decode()
    return f"Binary.createFromBase64('{encoded}', {binary.subtype})"


def _from_shell_literal(subtype: str, payload: str) -> str:
    try:
        raw = base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise FormatError(f"Invalid base64 payload: {exc}") from exc
    if len(raw) != UUID_BYTE_LENGTH:
        raise LengthError("Invalid UUID binary length")
    return from_binary(Binary(raw, subtype=int(subtype)))


def parse_literal(text: str) -> Tuple[str, str]:
    """Decode a ``BinData(n, "...")`` or ``Binary.createFromBase64('...', n)`` literal.

    Returns ``(subtype, uuid)``.
    """
    text = text.strip()

    match = SHELL_BINARY_PATTERN.search(text)
    if match:
        payload, subtype = match.group(1), _subtype_key(match.group(2))
        return subtype, _from_shell_literal(subtype, payload)

    match = ANY_BINDATA_PATTERN.search(text)
    if match:
        subtype = _subtype_key(match.group(1))
        return subtype, decode_bindata(subtype, text)

    raise FormatError("Invalid BinData format")


def looks_like_literal(text: str) -> bool:
    return bool(SHELL_BINARY_PATTERN.search(text) or ANY_BINDATA_PATTERN.search(text))
