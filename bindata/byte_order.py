"""Reorder UUID bytes between RFC 4122 and the Java driver's legacy layout."""

from bindata.constants import SEPARATORS_RE


def java_hex(uuid: str) -> str:
    """Reverse bytes 0-7 and bytes 8-15 of a UUID independently.

    The legacy Java driver wrote ``UUID.getMostSignificantBits()`` and
    ``getLeastSignificantBits()`` little-endian, so each 8-byte half comes out
    reversed. Applying the transform twice gives back the input.

    Braces and hyphens are stripped first. Input that is not 32 hex digits is
    not rejected here; the codecs validate before calling.
    """
    clean = SEPARATORS_RE.sub("", uuid)
    pairs = [clean[i:i + 2] for i in range(0, 32, 2)]
    msb = "".join(reversed(pairs[:8]))
    lsb = "".join(reversed(pairs[8:]))
    return msb + lsb
