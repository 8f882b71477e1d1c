"""Tests for the Base64 codec."""

import pytest

from vault.core.exceptions import InvalidBase64Error, ValidationError
from vault.encoders import base64_codec


def test_encode_decode():
    assert base64_codec.encode("HELLO") == "SEVMTE8="
    assert base64_codec.decode("SEVMTE8=") == "HELLO"
    assert base64_codec.encode("") == ""


def test_unicode_round_trip():
    text = "héllo wörld ✓"
    assert base64_codec.decode(base64_codec.encode(text)) == text


@pytest.mark.parametrize("bad", ["not base64!!", "SEVMTE8", "SGVsbG8=extra"])
def test_decode_rejects_invalid_input(bad):
    with pytest.raises(InvalidBase64Error, match="Decoding failed"):
        base64_codec.decode(bad)


def test_decode_rejects_non_utf8_payload():
    with pytest.raises(ValidationError):
        base64_codec.decode("/w==")


def test_decode_type_error():
    with pytest.raises(TypeError):
        base64_codec.decode(b"SEVMTE8=")


def test_is_base64():
    assert base64_codec.is_base64("SEVMTE8=")
    assert base64_codec.is_base64("")
    assert not base64_codec.is_base64("SEVMTE8")
    assert not base64_codec.is_base64("hello world")
    assert not base64_codec.is_base64(123)
    assert not base64_codec.is_base64(None)


def test_analyze():
    result = base64_codec.analyze("HELLO")
    assert result.encoded == "SEVMTE8="
    assert result.original_bytes == 5
    assert result.encoded_length == 8
    assert result.padding == 1
