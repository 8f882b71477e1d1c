"""
QR Content Analyzer
====================

Text-level analysis of QR code payloads. No image decoding happens here;
every function works on the string a scanner already produced, or on the
string that is about to be encoded.

Features:

1. Version and error-correction lookups for versions 1-10
2. Approximate per-mode capacity and smallest-fitting version estimate
3. Encoding-mode detection (numeric, alphanumeric, byte, kanji)
4. Structured payload extraction: URL, e-mail, phone, WiFi, vCard
5. Content-type classification with confidence scores

A version *v* symbol is ``17 + 4v`` modules wide. Capacities are the
numeric-mode, level-L figures of the standard, and the other modes and
levels are derived from them by fixed ratios, so all capacity numbers
are estimates.

References:
    - ISO/IEC 18004:2015. QR Code bar code symbology specification.
    - ZXing Project. Barcode Contents: WiFi Network config and MECARD
      formats. https://github.com/zxing/zxing/wiki/Barcode-Contents
    - RFC 6350 (2011). vCard Format Specification.
"""

from __future__ import annotations

import math
import re
from types import MappingProxyType
from typing import Mapping, Optional

from vault.core.exceptions import CapacityExceededError, ValidationError, require_text
from vault.core.models import (
    ContactExtraction,
    ContentTypeDetection,
    ContentTypeMatch,
    EmailExtraction,
    EncodingMode,
    ErrorCorrectionInfo,
    PhoneExtraction,
    QRCapacity,
    QRContentAnalysis,
    QRFeatures,
    QRPayloadStats,
    QRVersionEstimate,
    QRVersionInfo,
    UrlExtraction,
    WifiExtraction,
)


# ===================================================================== #
#  Reference Tables
# ===================================================================== #

MAX_VERSION: int = 10

# Numeric-mode capacity at error correction level L
_BASE_CAPACITY = (41, 77, 127, 187, 255, 322, 370, 461, 552, 652)

QR_VERSIONS: Mapping[int, QRVersionInfo] = MappingProxyType({
    v: QRVersionInfo(version=v, modules=17 + 4 * v, capacity=_BASE_CAPACITY[v - 1])
    for v in range(1, MAX_VERSION + 1)
})

ERROR_CORRECTION_LEVELS: Mapping[str, ErrorCorrectionInfo] = MappingProxyType({
    "L": ErrorCorrectionInfo(level="L", percentage=7, capacity="HIGH"),
    "M": ErrorCorrectionInfo(level="M", percentage=15, capacity="MEDIUM"),
    "Q": ErrorCorrectionInfo(level="Q", percentage=25, capacity="MEDIUM-HIGH"),
    "H": ErrorCorrectionInfo(level="H", percentage=30, capacity="LOW"),
})

# Bits per character
MODE_CHAR_BITS: Mapping[EncodingMode, float] = MappingProxyType({
    EncodingMode.NUMERIC: 3.3,
    EncodingMode.ALPHANUMERIC: 5.5,
    EncodingMode.BYTE: 8,
    EncodingMode.KANJI: 13,
})

# Capacity relative to numeric mode
_MODE_RATIO = (
    (EncodingMode.NUMERIC, 1.0),
    (EncodingMode.ALPHANUMERIC, 0.61),
    (EncodingMode.BYTE, 0.50),
    (EncodingMode.KANJI, 0.38),
)

_MODE_CONFIDENCE = {
    EncodingMode.NUMERIC: 0.99,
    EncodingMode.ALPHANUMERIC: 0.95,
    EncodingMode.KANJI: 0.90,
    EncodingMode.BYTE: 0.5,
}

_NUMERIC_RE = re.compile(r"[0-9]+")
_ALPHANUMERIC_RE = re.compile(r"[A-Z0-9 $%*+\-./:]+")
_KANJI_RE = re.compile(r"[\u4e00-\u9fff]")

_QR_DATA_RE = re.compile(r"[A-Za-z0-9+/=]+")
_BASE64_RE = re.compile(r"[A-Za-z0-9+/]*={0,2}")
_HEX_RE = re.compile(r"[0-9A-Fa-f]*")

_URL_RE = re.compile(r"(https?://\S+)", re.IGNORECASE)
_EMAIL_RE = re.compile(r"([a-zA-Z0-9._%-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})")
_PHONE_RE = re.compile(r"(?:tel:|call:)?(\+?[\d\s\-()]{7,})", re.IGNORECASE)
_PHONE_ONLY_RE = re.compile(r"[\d\s+\-()]+")

_VCARD_FIELDS = {
    "name": re.compile(r"FN:(.*?)(?:\r?\n|;|$)"),
    "phone": re.compile(r"TEL:(.*?)(?:\r?\n|;|$)"),
    "email": re.compile(r"EMAIL:(.*?)(?:\r?\n|;|$)"),
    "organization": re.compile(r"ORG:(.*?)(?:\r?\n|;|$)"),
}

# (pattern, type, confidence) checked by detect_content_type
_CONTENT_RULES = (
    (re.compile(r"^WIFI:", re.IGNORECASE), "wifi", 0.98),
    (re.compile(r"^BEGIN:VCARD", re.IGNORECASE), "contact", 0.99),
    (re.compile(r"^BEGIN:VCALENDAR", re.IGNORECASE), "calendar", 0.99),
    (re.compile(r"https?://|www\.", re.IGNORECASE), "url", 0.95),
)


# ===================================================================== #
#  Version / Capacity
# ===================================================================== #


def is_valid_qr_data(data: str) -> bool:
    """Return ``True`` for non-empty Base64- or hex-alphabet data."""
    require_text(data, "Data")
    return _QR_DATA_RE.fullmatch(data) is not None


def detect_version(dimension: int) -> QRVersionInfo:
    """Return the version whose symbol is *dimension* modules wide.

    >>> detect_version(21).version
    1

    Raises:
        TypeError: If *dimension* is not an integer.
        ValidationError: If no version 1-10 has that width.
    """
    if isinstance(dimension, bool) or not isinstance(dimension, int):
        raise TypeError("Dimension must be an integer")
    for info in QR_VERSIONS.values():
        if info.modules == dimension:
            return info
    raise ValidationError(f"No QR version found for dimension {dimension}")


def error_correction_level(level: str) -> ErrorCorrectionInfo:
    """Look up an error-correction level (``L``, ``M``, ``Q`` or ``H``, any case)."""
    require_text(level, "Level")
    info = ERROR_CORRECTION_LEVELS.get(level.upper())
    if info is None:
        raise ValidationError(f"Invalid error correction level: {level}")
    return info


def calculate_capacity(version: int, ec_level: str = "M") -> QRCapacity:
    """Approximate character capacity of *version* at *ec_level* per mode.

    The numeric capacity is the level-L figure reduced by the level's
    recovery percentage; other modes scale that by a fixed ratio.
    """
    if isinstance(version, bool) or not isinstance(version, int) \
            or not 1 <= version <= MAX_VERSION:
        raise ValidationError(f"Version must be between 1 and {MAX_VERSION}")
    ec = error_correction_level(ec_level)

    usable = QR_VERSIONS[version].capacity * (100 - ec.percentage) / 100
    per_mode = {mode.value: math.floor(usable * ratio) for mode, ratio in _MODE_RATIO}

    return QRCapacity(version=version, level=ec.level, **per_mode)


def analyze_content(content: str) -> QRContentAnalysis:
    """Pick the most compact encoding mode for *content*.

    Numeric beats alphanumeric beats kanji; anything else is byte mode.
    """
    require_text(content, "Content")

    if _NUMERIC_RE.fullmatch(content):
        mode = EncodingMode.NUMERIC
    elif _ALPHANUMERIC_RE.fullmatch(content):
        mode = EncodingMode.ALPHANUMERIC
    elif _KANJI_RE.search(content):
        mode = EncodingMode.KANJI
    else:
        mode = EncodingMode.BYTE

    return QRContentAnalysis(
        content=content,
        mode=mode,
        confidence=_MODE_CONFIDENCE[mode],
        length=len(content),
        estimated_data_bits=math.ceil(len(content) * MODE_CHAR_BITS[mode]),
    )


def estimate_version(content: str, ec_level: str = "M") -> QRVersionEstimate:
    """Find the smallest version whose byte capacity holds *content*.

    Raises:
        CapacityExceededError: If even version 10 is too small.
    """
    analysis = analyze_content(content)
    required = analysis.estimated_data_bits / 8

    for version in QR_VERSIONS:
        capacity = calculate_capacity(version, ec_level)
        if capacity.byte >= required:
            return QRVersionEstimate(
                version=version,
                content=content,
                ec_level=capacity.level,
                mode=analysis.mode,
                estimated_size=required,
                available_capacity=capacity.byte,
                fits=True,
                efficiency=round(required / capacity.byte * 100, 2),
            )

    raise CapacityExceededError("Content exceeds maximum QR code capacity")


# ===================================================================== #
#  Payload Extraction
# ===================================================================== #


def extract_url(content: str) -> UrlExtraction:
    """Return the first ``http://`` or ``https://`` URL in *content*."""
    require_text(content, "Content")
    match = _URL_RE.search(content)
    if match is None:
        return UrlExtraction(found=False)

    url = match.group(1)
    parts = url.split("/")
    return UrlExtraction(
        found=True,
        url=url,
        scheme="https" if url.lower().startswith("https") else "http",
        length=len(url),
        domain=parts[2] if len(parts) > 2 and parts[2] else None,
    )


def extract_email(content: str) -> EmailExtraction:
    require_text(content, "Content")
    match = _EMAIL_RE.search(content)
    if match is None:
        return EmailExtraction(found=False)

    email = match.group(1)
    local_part, _, domain = email.partition("@")
    return EmailExtraction(
        found=True,
        email=email,
        kind="mailto" if "mailto" in content.lower() else "email",
        local_part=local_part,
        domain=domain,
    )


def extract_phone(content: str) -> PhoneExtraction:
    """Find a phone number of at least seven digits/separators.

    ``tel:`` and ``call:`` prefixes are stripped.
    """
    require_text(content, "Content")
    match = _PHONE_RE.search(content)
    if match is None:
        return PhoneExtraction(found=False)

    phone = match.group(1).strip()
    return PhoneExtraction(
        found=True,
        phone=phone,
        kind="tel" if "tel" in content.lower() else "phone",
        has_country_code=phone.startswith("+"),
        digits_only="".join(ch for ch in phone if ch.isdigit()),
    )


def _wifi_fields(body: str) -> dict[str, str]:
    """Tokenize ``K:value;`` pairs, honouring backslash escapes."""
    fields: dict[str, str] = {}
    key: Optional[str] = None
    current: list[str] = []
    escaped = False

    for ch in body:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == ":" and key is None:
            key = "".join(current).upper()
            current = []
        elif ch == ";":
            if key is not None:
                fields[key] = "".join(current)
            key = None
            current = []
        else:
            current.append(ch)

    if key is not None:
        fields[key] = "".join(current)
    return fields


def extract_wifi(content: str) -> WifiExtraction:
    r"""Parse a ``WIFI:T:<auth>;S:<ssid>;P:<password>;H:<hidden>;;`` payload.

    Special characters in values are backslash-escaped (``\;``, ``\:``,
    ``\\``). Security defaults to ``OPEN`` when ``T`` is absent.

    >>> extract_wifi("WIFI:T:WPA;S:MyNetwork;P:Password123;;").ssid
    'MyNetwork'
    """
    require_text(content, "Content")
    if not content.upper().startswith("WIFI:"):
        return WifiExtraction(found=False)

    fields = _wifi_fields(content[5:])
    ssid = fields.get("S") or None
    return WifiExtraction(
        found=ssid is not None,
        ssid=ssid,
        password=fields.get("P") or None,
        security=fields.get("T") or "OPEN",
        is_hidden=fields.get("H", "").lower() == "true",
    )


def extract_contact(content: str) -> ContactExtraction:
    """Pull name, phone, e-mail and organisation out of a vCard."""
    require_text(content, "Content")
    if "VCARD" not in content.upper():
        return ContactExtraction(found=False)

    values: dict[str, Optional[str]] = {}
    for name, pattern in _VCARD_FIELDS.items():
        match = pattern.search(content)
        values[name] = (match.group(1).strip() or None) if match else None

    return ContactExtraction(found=values["name"] is not None, **values)


# ===================================================================== #
#  Statistics / Classification
# ===================================================================== #


def payload_stats(data: str) -> QRPayloadStats:
    """Describe a raw payload string, assuming six bits per character."""
    require_text(data, "Data")
    estimated_bytes = math.ceil(len(data) * 6 / 8)
    return QRPayloadStats(
        length=len(data),
        is_base64=_BASE64_RE.fullmatch(data) is not None,
        is_hex=_HEX_RE.fullmatch(data) is not None,
        has_base64_padding=data.endswith("="),
        estimated_bytes=estimated_bytes,
        estimated_kb=round(estimated_bytes / 1024, 4),
    )


def detect_content_type(content: str) -> ContentTypeDetection:
    """Classify *content*; plain ``text`` at 0.5 when nothing else matches.

    Matches are ordered by confidence, highest first.
    """
    require_text(content, "Content")

    matches: list[ContentTypeMatch] = [
        ContentTypeMatch(type=kind, confidence=confidence)
        for pattern, kind, confidence in _CONTENT_RULES
        if pattern.search(content)
    ]
    if "@" in content and "." in content:
        matches.append(ContentTypeMatch(type="email", confidence=0.9))
    if len(content) >= 7 and _PHONE_ONLY_RE.fullmatch(content):
        matches.append(ContentTypeMatch(type="phone", confidence=0.85))
    if not matches:
        matches.append(ContentTypeMatch(type="text", confidence=0.5))

    matches.sort(key=lambda m: m.confidence, reverse=True)
    return ContentTypeDetection(
        content=content[:50],
        detected_types=matches,
        primary_type=matches[0].type,
        confidence=matches[0].confidence,
    )


def supported_features() -> QRFeatures:
    largest = QR_VERSIONS[MAX_VERSION]
    return QRFeatures(
        versions=list(QR_VERSIONS),
        error_correction_levels=list(ERROR_CORRECTION_LEVELS),
        encoding_modes=[mode.value for mode, _ in _MODE_RATIO],
        max_version=MAX_VERSION,
        max_data_capacity=largest.capacity,
        total_modules=largest.modules,
    )
