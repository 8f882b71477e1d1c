"""
Vault Data Models
==================

Pydantic models for every structured value the Encryption Vault returns.
Library results are frozen records: they are created once by a pure
function and never mutated. :class:`OperationResult` is the envelope the
engine facade emits for the CLI and demo layers.

All models serialise to plain JSON through ``model_dump(mode="json")``.

References:
    - Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
    - ISO/IEC 18004:2015. QR Code bar code symbology specification.
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    """Immutable base for library result records."""

    model_config = ConfigDict(frozen=True, extra="ignore")


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class HashAlgorithm(str, enum.Enum):
    """Key-derivation function used by the password hasher."""

    PBKDF2 = "pbkdf2"
    SCRYPT = "scrypt"


class ObfuscationTechnique(str, enum.Enum):
    """Named steps accepted by :func:`multi_obfuscate`."""

    REVERSE = "reverse"
    VOWELS = "vowels"
    LEET = "leet"
    SHIFT = "shift"
    RANDOM = "random"


class EncodingMode(str, enum.Enum):
    """QR data encoding mode."""

    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"
    BYTE = "byte"
    KANJI = "kanji"


# ===================================================================== #
#  Vigenere Models
# ===================================================================== #


class BruteForceResult(_Record):
    """One candidate decryption from a dictionary attack.

    Attributes:
        key: Candidate key that produced the plaintext.
        plaintext: Ciphertext decrypted with *key*.
        score: Sum of English letter-frequency weights of *plaintext*.
    """

    key: str
    plaintext: str
    score: float


class KasiskiAnalysis(_Record):
    """Result of a Kasiski examination.

    Attributes:
        key_lengths: Up to five divisors ranked by how many repeat
            distances they divide (ties broken by smaller divisor first).
        distances: The first ten raw distances between repeated n-grams.
        likely_key_length: Highest ranked divisor, ``None`` when no
            repeated n-gram was found.
        repetition_count: Total number of distances observed.
    """

    key_lengths: list[int] = Field(default_factory=list)
    distances: list[int] = Field(default_factory=list)
    likely_key_length: Optional[int] = None
    repetition_count: int = 0


# ===================================================================== #
#  Caesar / ROT13 / Base64 Models
# ===================================================================== #


class CaesarAnalysis(_Record):
    """Character-class counts for a piece of text."""

    total_chars: int
    letters: int
    vowels: int
    consonants: int
    uppercase: int
    lowercase: int
    non_alphabetic: int


class Rot13Analysis(_Record):
    """ROT13 view of a piece of text."""

    original: str
    encoded: str
    is_symmetric: bool
    length: int
    letters: int


class Base64Analysis(_Record):
    """Size and padding details of a Base64 encoding."""

    original: str
    encoded: str
    original_length: int
    encoded_length: int
    original_bytes: int
    padding: int
    is_valid_base64: bool


# ===================================================================== #
#  Morse Models
# ===================================================================== #


class MorseElement(_Record):
    """A single tone: ``dit`` (short) or ``dah`` (long)."""

    kind: str
    duration: float


class MorseSegment(_Record):
    """One character (a run of tones) or a word gap (silence)."""

    kind: str
    duration: Optional[float] = None
    elements: list[MorseElement] = Field(default_factory=list)
    gap: Optional[float] = None


class MorseAudioConfig(_Record):
    """Playback plan for a Morse string."""

    frequency: float
    duration: float
    pattern: list[MorseSegment] = Field(default_factory=list)


class MorseValidation(_Record):
    """Outcome of :func:`validate_morse`."""

    valid: bool
    corrected: str
    errors: list[str] = Field(default_factory=list)


class MorseStats(_Record):
    """Symbol counts of a Morse string."""

    dots: int
    dashes: int
    characters: int
    words: int
    total_length: int
    dot_dash_ratio: float


# ===================================================================== #
#  Braille Models
# ===================================================================== #


class BrailleStats(_Record):
    """Cell counts of a Braille string."""

    length: int
    words: int
    valid_chars: int
    invalid_chars: int


class TextStats(_Record):
    """Character-class counts of text destined for Braille."""

    length: int
    words: int
    letters: int
    numbers: int
    punctuation: int
    spaces: int


class ValidationReport(_Record):
    """Input with unsupported characters replaced by ``?``.

    Attributes:
        fixed: Copy of the input with each unsupported character as ``?``.
        errors: Indices of the unsupported characters.
        is_valid: ``True`` when *errors* is empty.
    """

    fixed: str
    errors: list[int] = Field(default_factory=list)
    is_valid: bool


class SupportedCharacters(_Record):
    """Characters the Braille table can encode."""

    letters: list[str]
    numbers: list[str]
    punctuation: list[str]


# ===================================================================== #
#  Password Models
# ===================================================================== #


class HashedPassword(_Record):
    """A derived password hash with everything needed to verify it.

    Attributes:
        hash: Base64 encoded 32-byte derived key.
        salt: Base64 encoded salt.
        algorithm: KDF used.
        iterations: PBKDF2 iteration count (PBKDF2 only).
        cost: scrypt cost exponent, ``N = 2**cost`` (scrypt only).
    """

    hash: str
    salt: str
    algorithm: HashAlgorithm
    iterations: Optional[int] = None
    cost: Optional[int] = None

    def to_storage(self) -> str:
        """Return the ``hash:salt:work_factor`` string accepted by the verifiers."""
        work = self.iterations if self.algorithm is HashAlgorithm.PBKDF2 else self.cost
        return f"{self.hash}:{self.salt}:{work}"


class BatchHashEntry(_Record):
    """One entry of :func:`hash_many`; the password itself is never kept."""

    password: str = "***masked***"
    algorithm: HashAlgorithm
    hash: Optional[str] = None
    salt: Optional[str] = None
    error: Optional[str] = None


class StrengthReport(_Record):
    """Password policy check outcome with a 0-100 score."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
    score: int = Field(default=0, ge=0, le=100)


# ===================================================================== #
#  QR Models
# ===================================================================== #


class ErrorCorrectionInfo(_Record):
    level: str
    percentage: int
    capacity: str


class QRVersionInfo(_Record):
    version: int
    modules: int
    capacity: int


class QRCapacity(_Record):
    """Approximate character capacity per encoding mode."""

    version: int
    level: str
    numeric: int
    alphanumeric: int
    byte: int
    kanji: int


class QRContentAnalysis(_Record):
    content: str
    mode: EncodingMode
    confidence: float
    length: int
    estimated_data_bits: int


class QRVersionEstimate(_Record):
    """Smallest QR version whose byte capacity fits the content."""

    version: int
    content: str
    ec_level: str
    mode: EncodingMode
    estimated_size: float
    available_capacity: int
    fits: bool = True
    efficiency: float


class UrlExtraction(_Record):
    found: bool
    url: Optional[str] = None
    scheme: Optional[str] = None
    length: int = 0
    domain: Optional[str] = None


class EmailExtraction(_Record):
    found: bool
    email: Optional[str] = None
    kind: Optional[str] = None
    local_part: Optional[str] = None
    domain: Optional[str] = None


class PhoneExtraction(_Record):
    found: bool
    phone: Optional[str] = None
    kind: Optional[str] = None
    has_country_code: bool = False
    digits_only: str = ""


class WifiExtraction(_Record):
    found: bool
    ssid: Optional[str] = None
    password: Optional[str] = None
    security: Optional[str] = None
    is_hidden: bool = False


class ContactExtraction(_Record):
    found: bool
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    organization: Optional[str] = None


class QRPayloadStats(_Record):
    length: int
    is_base64: bool
    is_hex: bool
    has_base64_padding: bool
    estimated_bytes: int
    estimated_kb: float


class ContentTypeMatch(_Record):
    type: str
    confidence: float


class ContentTypeDetection(_Record):
    """Ranked guesses at what a QR payload represents."""

    content: str
    detected_types: list[ContentTypeMatch]
    primary_type: str
    confidence: float


class QRFeatures(_Record):
    versions: list[int]
    error_correction_levels: list[str]
    encoding_modes: list[str]
    max_version: int
    max_data_capacity: int
    total_modules: int


# ===================================================================== #
#  Engine Envelope
# ===================================================================== #


class OperationResult(BaseModel):
    """Envelope for one engine operation, consumed by the CLI.

    Attributes:
        tool: Name of the vault tool (``caesar``, ``vigenere``, ...).
        operation: Operation performed (``encrypt``, ``analyze``, ...).
        input_length: Length of the primary text argument.
        output: Plain-data result (``str``, ``bool``, ``dict`` or ``list``).
        metadata: Extra values shown alongside the output.
        started_at: UTC timestamp when the operation began.
        duration_ms: Wall-clock duration of the operation.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    tool: str = Field(..., min_length=1)
    operation: str = Field(..., min_length=1)
    input_length: int = 0
    output: Any = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    started_at: _dt.datetime = Field(
        default_factory=lambda: _dt.datetime.now(_dt.timezone.utc)
    )
    duration_ms: float = 0.0
