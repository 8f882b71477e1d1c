"""Tests for QR content analysis (strings only)."""

import pytest

from vault.analyzers import qr_content as qr
from vault.core.exceptions import CapacityExceededError, ValidationError
from vault.core.models import EncodingMode


# ── Versions / capacity ───────────────────────────────────────────────────────
def test_detect_version():
    assert qr.detect_version(21).version == 1
    assert qr.detect_version(57).version == 10
    with pytest.raises(ValidationError):
        qr.detect_version(22)
    with pytest.raises(TypeError):
        qr.detect_version("21")


def test_capacities_grow_with_version():
    numeric = [qr.QR_VERSIONS[v].capacity for v in range(1, qr.MAX_VERSION + 1)]
    assert numeric == sorted(numeric)
    assert len(set(numeric)) == len(numeric)


def test_error_correction_level():
    assert qr.error_correction_level("m").percentage == 15
    assert qr.error_correction_level("H").percentage == 30
    with pytest.raises(ValidationError):
        qr.error_correction_level("X")


def test_calculate_capacity():
    cap = qr.calculate_capacity(1, "L")
    assert (cap.numeric, cap.alphanumeric, cap.byte, cap.kanji) == (38, 23, 19, 14)
    assert cap.level == "L"
    with pytest.raises(ValidationError):
        qr.calculate_capacity(11)
    with pytest.raises(ValidationError):
        qr.calculate_capacity(1, "Z")


@pytest.mark.parametrize(
    "content, mode",
    [
        ("12345", EncodingMode.NUMERIC),
        ("HELLO WORLD", EncodingMode.ALPHANUMERIC),
        ("hello", EncodingMode.BYTE),
        ("你好", EncodingMode.KANJI),
    ],
)
def test_analyze_content_modes(content, mode):
    assert qr.analyze_content(content).mode is mode


def test_analyze_content_bits():
    assert qr.analyze_content("12345").estimated_data_bits == 17


def test_estimate_version():
    estimate = qr.estimate_version("https://example.com")
    assert estimate.version == 2
    assert estimate.available_capacity == 32
    assert estimate.efficiency == 59.38
    assert estimate.fits


def test_estimate_version_overflow():
    with pytest.raises(CapacityExceededError):
        qr.estimate_version("x" * 300)


# ── Extraction ────────────────────────────────────────────────────────────────
def test_extract_url():
    result = qr.extract_url("Visit https://example.com/path now")
    assert result.found
    assert result.url == "https://example.com/path"
    assert result.scheme == "https"
    assert result.domain == "example.com"
    assert not qr.extract_url("no link here").found


def test_extract_email():
    result = qr.extract_email("mailto:alice@example.com")
    assert result.kind == "mailto"
    assert result.local_part == "alice"
    assert result.domain == "example.com"
    assert qr.extract_email("bob@example.org").kind == "email"


def test_extract_phone():
    result = qr.extract_phone("tel:+1 555 123 4567")
    assert result.phone == "+1 555 123 4567"
    assert result.kind == "tel"
    assert result.has_country_code
    assert result.digits_only == "15551234567"
    assert not qr.extract_phone("call me").found


def test_extract_wifi():
    result = qr.extract_wifi("WIFI:T:WPA;S:MyNetwork;P:Password123;;")
    assert result.found
    assert result.ssid == "MyNetwork"
    assert result.password == "Password123"
    assert result.security == "WPA"
    assert not result.is_hidden


def test_extract_wifi_escapes_and_defaults():
    result = qr.extract_wifi(r"WIFI:S:My\;Net;P:pa\:ss;H:true;;")
    assert result.ssid == "My;Net"
    assert result.password == "pa:ss"
    assert result.security == "OPEN"
    assert result.is_hidden
    assert not qr.extract_wifi("hello").found


def test_extract_contact():
    card = "BEGIN:VCARD\nFN:John Doe\nTEL:+123456789\nEMAIL:john@example.com\nORG:Acme\nEND:VCARD"
    result = qr.extract_contact(card)
    assert result.found
    assert result.name == "John Doe"
    assert result.phone == "+123456789"
    assert result.email == "john@example.com"
    assert result.organization == "Acme"
    assert not qr.extract_contact("plain text").found


# ── Classification ────────────────────────────────────────────────────────────
def test_payload_stats():
    stats = qr.payload_stats("SGVsbG8=")
    assert stats.length == 8
    assert stats.is_base64
    assert not stats.is_hex
    assert stats.has_base64_padding
    assert stats.estimated_bytes == 6
    assert stats.estimated_kb == 0.0059


def test_is_valid_qr_data():
    assert qr.is_valid_qr_data("SGVsbG8=")
    assert not qr.is_valid_qr_data("")
    assert not qr.is_valid_qr_data("hello world")


@pytest.mark.parametrize(
    "content, kind",
    [
        ("WIFI:T:WPA;S:x;;", "wifi"),
        ("BEGIN:VCARD\nFN:A\nEND:VCARD", "contact"),
        ("https://example.com", "url"),
        ("alice@example.com", "email"),
        ("+1 555 123 4567", "phone"),
        ("hello world", "text"),
    ],
)
def test_detect_content_type(content, kind):
    assert qr.detect_content_type(content).primary_type == kind


def test_detect_content_type_truncates_content():
    assert len(qr.detect_content_type("a" * 80).content) == 50


def test_supported_features():
    features = qr.supported_features()
    assert features.max_version == 10
    assert features.total_modules == 57
    assert features.error_correction_levels == ["L", "M", "Q", "H"]
