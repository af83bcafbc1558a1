"""Convert UUID strings to and from MongoDB legacy BinData(3/4) notation."""

from bindata.byte_order import java_hex
from bindata.codecs import (
    decode_bindata,
    encode_bindata,
    format_uuid,
    normalize_uuid,
    uuid_field_bytes,
)
from bindata.errors import (
    BinDataError,
    FormatError,
    InvalidUuidError,
    LengthError,
    UnsupportedSubtypeError,
)
from bindata.java_base64 import to_base64, to_hex

__all__ = [
    "BinDataError",
    "FormatError",
    "InvalidUuidError",
    "LengthError",
    "UnsupportedSubtypeError",
    "decode_bindata",
    "encode_bindata",
    "format_uuid",
    "java_hex",
    "normalize_uuid",
    "to_base64",
    "to_hex",
    "uuid_field_bytes",
]
