"""Errors raised by the BinData converters.

Everything derives from ValueError so existing ``except ValueError`` handlers
around UUID parsing keep catching conversion failures.
"""


class BinDataError(ValueError):
    """Base class for all BinData conversion failures."""


class FormatError(BinDataError):
    """The BinData envelope or its payload symbols are malformed."""


class LengthError(BinDataError):
    """The decoded payload is not exactly 16 bytes."""


class UnsupportedSubtypeError(BinDataError):
    """The subtype is neither 3 nor 4."""


class InvalidUuidError(BinDataError):
    """A UUID string is not 32 hex digits once braces and hyphens are removed."""
