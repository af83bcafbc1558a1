import os
import re
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Configure logging
logger = logging.getLogger(__name__)

# Lookup tables. "=" is the 65th symbol: padding on encode, "absent" on decode.
BASE64_DIGITS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/="
PADDING_CHAR = "="
HEX_DIGITS = "0123456789abcdef"

UUID_BYTE_LENGTH = 16
UUID_HEX_LENGTH = UUID_BYTE_LENGTH * 2
# Hyphen positions in the canonical 8-4-4-4-12 layout
UUID_GROUP_BOUNDS = (0, 8, 12, 16, 20, 32)

SUPPORTED_SUBTYPES = ("3", "4")
UNSUPPORTED_SUBTYPE_MESSAGE = "Invalid subtype, we only support subtype 3 and 4"

SEPARATORS_RE = re.compile(r"[{}-]")
HEX_RE = re.compile(r"[0-9a-f]*")

# BinData(3, "...") with single or double quotes, optional whitespace after the comma
BINDATA_PATTERNS = {
    subtype: re.compile(r"BinData\(" + subtype + r""",\s*["']([^"']+)["']\)""")
    for subtype in SUPPORTED_SUBTYPES
}
# Binary.createFromBase64('...', 3) as printed by mongosh
SHELL_BINARY_PATTERN = re.compile(r"""Binary\.createFromBase64\(\s*["']([^"']+)["'],\s*(\d+)\s*\)""")
ANY_BINDATA_PATTERN = re.compile(r"""BinData\((\d+),\s*["']([^"']+)["']\)""")

_FALSY = {"0", "false", "no", "off"}


def strict_uuid_input() -> bool:
    """Whether UUID input must be exactly 32 hex digits (BINDATA_STRICT_UUID).

    Read on every call so it can be flipped at runtime.
    """
    value = os.getenv("BINDATA_STRICT_UUID", "true")
    return value.strip().lower() not in _FALSY


def _resolve_default_subtype() -> str:
    """Resolve the CLI's default subtype with a sane fallback."""
    candidate = os.getenv("BINDATA_DEFAULT_SUBTYPE", "3").strip()
    if candidate in SUPPORTED_SUBTYPES:
        return candidate
    logger.warning("BINDATA_DEFAULT_SUBTYPE=%r is not supported; falling back to subtype 3.", candidate)
    return "3"


DEFAULT_SUBTYPE = _resolve_default_subtype()
LOG_LEVEL = os.getenv("BINDATA_LOG_LEVEL", "WARNING").upper()
