#!/usr/bin/env python3
"""
BinData codec tests

Covers the subtype 3 / subtype 4 codecs through the public dispatcher.
"""

import os
import sys
import uuid

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bindata import (
    FormatError,
    InvalidUuidError,
    LengthError,
    UnsupportedSubtypeError,
    decode_bindata,
    encode_bindata,
    format_uuid,
    normalize_uuid,
    uuid_field_bytes,
)


SUBTYPE3_UUID = "00112233-4455-6677-8899-aabbccddeeff"
SUBTYPE3_BINDATA = 'BinData(3, "d2ZVRDMiEQD/7t3Mu6qZiA==")'
SUBTYPE4_UUID = "550e8400-e29b-41d4-a716-446655440000"
SUBTYPE4_BINDATA = 'BinData(4, "VQ6EAOKbQdSnFkRmVUQAAA==")'


class TestSubtype3:
    """Java legacy byte order"""

    def test_encode_known_vector(self):
        assert encode_bindata("3", SUBTYPE3_UUID) == SUBTYPE3_BINDATA

    def test_decode_known_vector(self):
        assert decode_bindata("3", SUBTYPE3_BINDATA) == SUBTYPE3_UUID

    def test_decode_accepts_single_quotes_and_no_space(self):
        assert decode_bindata("3", "BinData(3,'d2ZVRDMiEQD/7t3Mu6qZiA==')") == SUBTYPE3_UUID

    def test_decode_finds_envelope_inside_text(self):
        doc = '{ "_id" : BinData(3, "d2ZVRDMiEQD/7t3Mu6qZiA==") }'
        assert decode_bindata("3", doc) == SUBTYPE3_UUID

    def test_invalid_format(self):
        with pytest.raises(FormatError, match="Invalid BinData format"):
            decode_bindata("3", "InvalidFormat")

    def test_wrong_embedded_subtype_is_format_error(self):
        with pytest.raises(FormatError):
            decode_bindata("3", SUBTYPE4_BINDATA)

    def test_invalid_length(self):
        with pytest.raises(LengthError, match="Invalid UUID binary length"):
            decode_bindata("3", 'BinData(3, "invalid")')

    @pytest.mark.parametrize("payload", ["abcde", "d2ZVRDMiEQD/7t3Mu6qZiA==A"])
    def test_one_symbol_over_is_length_error(self, payload):
        with pytest.raises(LengthError):
            decode_bindata("3", f'BinData(3, "{payload}")')


class TestSubtype4:
    """RFC 4122 byte order"""

    def test_encode_known_vector(self):
        assert encode_bindata("4", SUBTYPE4_UUID) == SUBTYPE4_BINDATA

    def test_decode_known_vector(self):
        assert decode_bindata("4", SUBTYPE4_BINDATA) == SUBTYPE4_UUID

    def test_invalid_format(self):
        with pytest.raises(FormatError):
            decode_bindata("4", "InvalidFormat")

    def test_invalid_length(self):
        with pytest.raises(LengthError, match="Invalid UUID binary length"):
            decode_bindata("4", 'BinData(4, "invalid")')

    def test_non_base64_payload(self):
        with pytest.raises(FormatError):
            decode_bindata("4", 'BinData(4, "VQ6EAOKbQdSnFkRm*UQAAA==")')

    def test_matches_stdlib_uuid_bytes(self):
        u = uuid.UUID(SUBTYPE4_UUID)
        assert uuid_field_bytes(SUBTYPE4_UUID) == u.bytes


class TestDispatcher:
    """Subtype routing and shared behaviour"""

    def test_encode_unsupported_subtype(self):
        with pytest.raises(UnsupportedSubtypeError, match="we only support subtype 3 and 4"):
            encode_bindata("5", SUBTYPE3_UUID)

    def test_decode_unsupported_subtype(self):
        with pytest.raises(UnsupportedSubtypeError, match="we only support subtype 3 and 4"):
            decode_bindata("5", 'BinData(5, "d2ZVRDMiEQD/7t3Mu6qZiA==")')

    def test_int_subtype_is_accepted(self):
        assert encode_bindata(3, SUBTYPE3_UUID) == SUBTYPE3_BINDATA

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            decode_bindata("3", "InvalidFormat")

    @pytest.mark.parametrize("subtype", ["3", "4"])
    def test_round_trip(self, subtype):
        for _ in range(20):
            u = str(uuid.uuid4())
            assert decode_bindata(subtype, encode_bindata(subtype, u)) == u

    @pytest.mark.parametrize("subtype", ["3", "4"])
    def test_output_is_lowercase(self, subtype):
        upper = "{" + SUBTYPE3_UUID.upper() + "}"
        assert decode_bindata(subtype, encode_bindata(subtype, upper)) == SUBTYPE3_UUID

    def test_subtypes_differ(self):
        u = str(uuid.uuid4())
        payload3 = encode_bindata("3", u).split('"')[1]
        payload4 = encode_bindata("4", u).split('"')[1]
        assert payload3 != payload4


class TestUuidInput:
    """Normalisation and strict validation of UUID strings"""

    def test_normalize_strips_and_lowercases(self):
        assert normalize_uuid("{550E8400-E29B-41D4-A716-446655440000}") == "550e8400e29b41d4a716446655440000"

    def test_format_uuid(self):
        assert format_uuid("550E8400E29B41D4A716446655440000") == SUBTYPE4_UUID

    @pytest.mark.parametrize(
        "bad",
        [
            "1234",
            "00112233-4455-6677-8899-aabbccddeeffaa",
            "zz112233-4455-6677-8899-aabbccddeeff",
            "{00112233-4455-6677-8899-aabbccddeef\n}",
        ],
    )
    @pytest.mark.parametrize("subtype", ["3", "4"])
    def test_strict_mode_rejects_malformed(self, subtype, bad):
        with pytest.raises(InvalidUuidError):
            encode_bindata(subtype, bad)

    def test_permissive_mode_passes_through(self, monkeypatch):
        monkeypatch.setenv("BINDATA_STRICT_UUID", "false")
        assert normalize_uuid("ABC") == "abc"

    @pytest.mark.parametrize("subtype", ["3", "4"])
    def test_permissive_mode_encodes_short_input(self, subtype, monkeypatch):
        monkeypatch.setenv("BINDATA_STRICT_UUID", "false")
        # 31 hex digits: garbled output, no InvalidUuidError
        encoded = encode_bindata(subtype, "00112233-4455-6677-8899-aabbccddeef")
        assert encoded.startswith(f'BinData({subtype}, "')
        assert len(encoded.split('"')[1]) == 24


def test_subtype_codec_base_is_abstract():
    from bindata.codecs import _SubtypeCodec

    with pytest.raises(TypeError):
        _SubtypeCodec()
