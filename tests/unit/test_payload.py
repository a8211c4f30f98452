"""Unit-Tests fuer die Payload-Normalisierung."""

from __future__ import annotations

import base64

import pytest

from guards.payload import (
    classify_payload,
    detect_text_encoding,
    extract_raw_payload,
    normalize_payload,
)
from guards.schemas import BinaryPayload, SerializedBufferPayload, TextPayload
from models.errors import PayloadDecodeError, UnsupportedPayloadFormat


def test_hex_is_preferred_over_base64() -> None:
    assert detect_text_encoding("0a0b") == "hex"
    assert normalize_payload("0a0b") == bytes([0x0A, 0x0B])


@pytest.mark.parametrize("text", ["00", "deadBEEF", "0123456789abcdef"])
def test_even_length_hex_matches_standard_decoding(text: str) -> None:
    assert normalize_payload(text) == bytes.fromhex(text)


def test_odd_length_hex_falls_through_to_base64() -> None:
    assert detect_text_encoding("abc") == "base64"
    assert normalize_payload("abc") == base64.b64decode("abc=")


def test_base64_text_is_decoded() -> None:
    assert normalize_payload("SGVsbG8=") == b"Hello"


def test_base64_without_padding_is_decoded() -> None:
    assert normalize_payload("SGVsbG8") == b"Hello"


@pytest.mark.parametrize("text", ["hello world", "Grüße!", "a-b_c", "{\"on\": true}"])
def test_other_text_is_utf8(text: str) -> None:
    assert detect_text_encoding(text) == "utf-8"
    assert normalize_payload(text) == text.encode("utf-8")


def test_base64_alphabet_with_impossible_length_is_utf8() -> None:
    assert normalize_payload("hello") == b"hello"


def test_binary_input_is_identity() -> None:
    data = b"\x00\x01\xfe\xff"
    assert normalize_payload(data) == data
    assert normalize_payload(bytearray(data)) == data
    assert normalize_payload(memoryview(data)) == data


def test_serialized_buffer_is_reconstructed() -> None:
    assert normalize_payload({"type": "Buffer", "data": [1, 2, 255]}) == b"\x01\x02\xff"


def test_serialized_buffer_inside_data_field() -> None:
    payload = {"data": {"type": "Buffer", "data": [104, 105]}, "fPort": 3}
    assert normalize_payload(payload) == b"hi"


def test_data_field_is_extracted() -> None:
    assert extract_raw_payload({"data": "0a0b", "multicastGroupId": "g"}) == "0a0b"
    assert extract_raw_payload("0a0b") == "0a0b"


def test_top_level_serialized_buffer_is_not_unwrapped() -> None:
    buffer = {"type": "Buffer", "data": [1]}
    assert extract_raw_payload(buffer) is buffer


def test_classify_returns_tagged_variants() -> None:
    assert isinstance(classify_payload(b"x"), BinaryPayload)
    assert isinstance(classify_payload("x"), TextPayload)
    assert isinstance(classify_payload({"type": "Buffer", "data": []}), SerializedBufferPayload)


@pytest.mark.parametrize("raw", [42, 1.5, None, ["0a"], {"foo": "bar"}, {"type": "Other", "data": [1]}])
def test_unsupported_formats_are_rejected(raw: object) -> None:
    with pytest.raises(UnsupportedPayloadFormat):
        normalize_payload(raw)


def test_serialized_buffer_out_of_range_raises_decode_error() -> None:
    with pytest.raises(PayloadDecodeError) as excinfo:
        normalize_payload({"type": "Buffer", "data": [1, 256]})
    assert "range" in excinfo.value.message


def test_serialized_buffer_with_non_integers_raises_decode_error() -> None:
    with pytest.raises(PayloadDecodeError):
        normalize_payload({"type": "Buffer", "data": ["a"]})


def test_unencodable_text_raises_decode_error() -> None:
    with pytest.raises(PayloadDecodeError):
        normalize_payload("bad \ud800 surrogate")


@pytest.mark.parametrize("text", ["ab=c", "====", "SGVsbG8===", "=abc"])
def test_misplaced_padding_is_not_base64(text: str) -> None:
    assert detect_text_encoding(text) == "utf-8"
    assert normalize_payload(text) == text.encode("utf-8")
