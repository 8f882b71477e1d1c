"""
Base64 Codec
=============

Text-level wrapper around :mod:`base64` using the standard alphabet with
``=`` padding. Text is always encoded as UTF-8 before conversion, and
decoded payloads must be valid UTF-8.

Base64 is a transport encoding. It provides no confidentiality.

References:
    - RFC 4648 (2006). The Base16, Base32, and Base64 Data Encodings.
"""

from __future__ import annotations

import base64
import binascii

from vault.core.exceptions import InvalidBase64Error, require_text
from vault.core.models import Base64Analysis


def encode(text: str) -> str:
    """Encode *text* (as UTF-8) to a Base64 string.

    >>> encode("HELLO")
    'SEVMTE8='
    """
    require_text(text, "Text")
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode(encoded: str) -> str:
    """Decode a Base64 string back to text.

    Raises:
        TypeError: If *encoded* is not a string.
        InvalidBase64Error: If *encoded* is not valid Base64 or the payload
            is not UTF-8.
    """
    require_text(encoded, "Encoded text")
    try:
        raw = base64.b64decode(encoded, validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, ValueError) as exc:
        raise InvalidBase64Error(f"Decoding failed: {exc}") from exc


def is_base64(text: object) -> bool:
    """Return ``True`` if *text* is canonical Base64.

    Never raises; non-string input simply yields ``False``.
    """
    if not isinstance(text, str):
        return False
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return False
    return base64.b64encode(raw).decode("ascii") == text


def analyze(text: str) -> Base64Analysis:
    """Encode *text* and report size and padding details."""
    require_text(text, "Text")
    encoded = encode(text)
    return Base64Analysis(
        original=text,
        encoded=encoded,
        original_length=len(text),
        encoded_length=len(encoded),
        original_bytes=len(text.encode("utf-8")),
        padding=encoded.count("="),
        is_valid_base64=is_base64(encoded),
    )
