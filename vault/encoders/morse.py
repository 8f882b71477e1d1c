"""
Morse Code
===========

International Morse code encoder and decoder with timing helpers.

Notation:
    - ``.`` dit, ``-`` dah
    - characters separated by a single space
    - word gap written as ``/``

Timing follows the PARIS convention: one dit lasts one *unit*, a dah
three units, the gap inside a character one unit, between characters
three units and between words seven units. At ``wpm`` words per minute
a unit lasts ``1200 / wpm`` milliseconds.

References:
    - ITU-R M.1677-1 (2009). International Morse code.
"""

from __future__ import annotations

import math
import re
from types import MappingProxyType
from typing import Mapping

from vault.core.exceptions import ValidationError, require_text
from vault.core.models import (
    MorseAudioConfig,
    MorseElement,
    MorseSegment,
    MorseStats,
    MorseValidation,
)


MORSE_CODE: Mapping[str, str] = MappingProxyType({
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".",
    "F": "..-.", "G": "--.", "H": "....", "I": "..", "J": ".---",
    "K": "-.-", "L": ".-..", "M": "--", "N": "-.", "O": "---",
    "P": ".--.", "Q": "--.-", "R": ".-.", "S": "...", "T": "-",
    "U": "..-", "V": "...-", "W": ".--", "X": "-..-", "Y": "-.--",
    "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
    ".": ".-.-.-", ",": "--..--", "?": "..--..", "'": ".----.",
    "!": "-.-.--", "/": "-..-.", "(": "-.--.", ")": "-.--.-",
    "&": ".-...", ":": "---...", ";": "-.-.-.", "=": "-...-",
    "+": ".-.-.", "-": "-....-", "_": "..--.-", '"': ".-..-.",
    "$": "...-..-", "@": ".--.-.",
    " ": "/",
})

REVERSE_MORSE_CODE: Mapping[str, str] = MappingProxyType(
    {code: char for char, code in MORSE_CODE.items()}
)

UNKNOWN: str = "?"

WORD_SEPARATOR: str = " / "

MIN_WPM, MAX_WPM = 5, 100
MIN_FREQUENCY, MAX_FREQUENCY = 100, 2000
MIN_DURATION, MAX_DURATION = 10, 1000

_VALID_MORSE_RE = re.compile(r"^[\s./-]*$")
_INVALID_CHAR_RE = re.compile(r"[^.\s/-]")
_MULTI_SPACE_RE = re.compile(r" {2,}")


def _require_separator(separator: object) -> str:
    value = require_text(separator, "Separator")
    if not value:
        raise ValidationError("Separator cannot be empty")
    return value


def _require_range(value: object, low: float, high: float, message: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(message)
    if not low <= value <= high:
        raise ValidationError(message)
    return value


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


# ===================================================================== #
#  Encoding / Decoding
# ===================================================================== #


def text_to_morse(text: str, separator: str = " ") -> str:
    """Convert *text* to Morse, one code per character.

    Letters are case-insensitive, spaces become ``/`` and characters
    without a code become ``?``.

    >>> text_to_morse("SOS")
    '... --- ...'
    """
    require_text(text, "Text")
    _require_separator(separator)
    return separator.join(MORSE_CODE.get(ch, UNKNOWN) for ch in text.upper())


def morse_to_text(morse: str, separator: str = " ") -> str:
    """Decode *morse* split on *separator*; ``/`` becomes a space.

    Empty tokens (runs of separators) are skipped, unknown codes decode
    to ``?``. Output is uppercase.
    """
    require_text(morse, "Morse")
    _require_separator(separator)
    return "".join(
        REVERSE_MORSE_CODE.get(code, UNKNOWN)
        for code in morse.split(separator)
        if code
    )


def char_to_morse(char: str) -> str:
    """Return the Morse code for a single character, ``?`` if unknown."""
    require_text(char, "Character")
    if len(char) != 1:
        raise ValidationError("Input must be a single character")
    return MORSE_CODE.get(char.upper(), UNKNOWN)


def morse_to_char(code: str) -> str:
    """Return the character for one Morse *code*, ``?`` if unknown."""
    require_text(code, "Morse")
    return REVERSE_MORSE_CODE.get(code, UNKNOWN)


def text_to_morse_words(text: str) -> str:
    """Encode word by word, joining words with ``" / "``."""
    require_text(text, "Text")
    return WORD_SEPARATOR.join(text_to_morse(word) for word in text.split(" "))


def morse_words_to_text(morse: str) -> str:
    """Inverse of :func:`text_to_morse_words`."""
    require_text(morse, "Morse")
    return " ".join(morse_to_text(word) for word in morse.split(WORD_SEPARATOR))


def is_valid_morse(morse: str) -> bool:
    """Return ``True`` if *morse* holds only dots, dashes, slashes and whitespace."""
    require_text(morse, "Morse")
    return _VALID_MORSE_RE.match(morse) is not None


def to_alternative_symbols(morse: str, short: str = "·", long: str = "−") -> str:
    """Replace ``.`` and ``-`` with display-friendly symbols."""
    require_text(morse, "Morse")
    require_text(short, "Short symbol")
    require_text(long, "Long symbol")
    return morse.translate(str.maketrans({".": short, "-": long}))


# ===================================================================== #
#  Timing / Audio
# ===================================================================== #


def audio_timing(text: str, wpm: float = 20) -> str:
    """Describe the sound duration of each encoded character.

    Each code is followed by its duration in milliseconds (elements,
    intra-character gaps and the trailing three-unit character gap); a
    word gap is written as ``(7 units)``::

        >>> audio_timing("E", 20)
        '.(240)'

    Raises:
        ValidationError: If *wpm* is not a number between 5 and 100.
    """
    require_text(text, "Text")
    _require_range(wpm, MIN_WPM, MAX_WPM, "Speed must be a number between 5 and 100 WPM")

    unit = 1200 / wpm
    parts: list[str] = []

    for code in text_to_morse(text).split(" "):
        if code == "/":
            parts.append(f"({_round_half_up(unit * 7)})")
            continue
        if not code:
            continue

        total = sum(unit if symbol == "." else unit * 3 for symbol in code)
        total += unit * (len(code) - 1)
        total += unit * 3
        parts.append(f"{code}({_round_half_up(total)})")

    return "".join(parts)


def audio_config(
    morse: str,
    frequency: float = 800,
    duration: float = 100,
) -> MorseAudioConfig:
    """Build a playback plan for *morse*.

    *duration* is the length of one dit in milliseconds. Every
    space-separated code becomes a ``character`` segment of ``dit`` /
    ``dah`` elements, and every ``/`` a ``silence`` of seven dits.

    Raises:
        ValidationError: If *frequency* is outside 100-2000 Hz or
            *duration* outside 10-1000 ms.
    """
    require_text(morse, "Morse")
    _require_range(
        frequency, MIN_FREQUENCY, MAX_FREQUENCY,
        "Frequency must be between 100 and 2000 Hz",
    )
    _require_range(
        duration, MIN_DURATION, MAX_DURATION,
        "Duration must be between 10 and 1000 ms",
    )

    pattern: list[MorseSegment] = []
    for code in morse.split(" "):
        if code == "/":
            pattern.append(MorseSegment(kind="silence", duration=duration * 7))
            continue
        elements = [
            MorseElement(kind="dit", duration=duration)
            if symbol == "."
            else MorseElement(kind="dah", duration=duration * 3)
            for symbol in code
        ]
        pattern.append(MorseSegment(kind="character", elements=elements, gap=duration))

    return MorseAudioConfig(frequency=frequency, duration=duration, pattern=pattern)


# ===================================================================== #
#  Validation / Statistics
# ===================================================================== #


def validate_morse(morse: str) -> MorseValidation:
    """Report problems in *morse* and return a normalised copy.

    Invalid symbols are reported but kept; runs of spaces are collapsed
    and surrounding whitespace trimmed.
    """
    require_text(morse, "Morse")

    errors: list[str] = []
    corrected = morse

    invalid = _INVALID_CHAR_RE.findall(corrected)
    if invalid:
        unique = ", ".join(dict.fromkeys(invalid))
        errors.append(f"Invalid characters found: {unique}")

    if _MULTI_SPACE_RE.search(corrected):
        errors.append("Multiple spaces detected - normalizing")
        corrected = _MULTI_SPACE_RE.sub(" ", corrected)

    if corrected.startswith(" ") or corrected.endswith(" "):
        errors.append("Leading/trailing spaces detected - trimming")
        corrected = corrected.strip()

    return MorseValidation(valid=not errors, corrected=corrected, errors=errors)


def morse_stats(morse: str) -> MorseStats:
    """Count symbols in *morse*.

    ``characters`` is the number of dit/dah symbols and ``words`` the
    number of ``/`` word gaps.
    """
    require_text(morse, "Morse")

    dots = morse.count(".")
    dashes = morse.count("-")
    return MorseStats(
        dots=dots,
        dashes=dashes,
        characters=dots + dashes,
        words=morse.count("/"),
        total_length=len("".join(morse.split())),
        dot_dash_ratio=round(dashes / dots, 2) if dots else 0.0,
    )
