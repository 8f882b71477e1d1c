"""
Braille Converter
==================

Grade 1 (uncontracted) Braille using the Unicode Braille Patterns block
U+2800-U+28FF. Each six-dot cell is numbered::

    1 4
    2 5
    3 6

and dot *n* is bit ``n - 1`` of the offset from U+2800.

Digits are written as the number sign ``⠼`` followed by the letter cell
for A-J, so decoding matches the longest known pattern first to keep
two-cell sequences intact.

References:
    - Unicode Standard, Chapter 21.7: Braille Patterns (U+2800-U+28FF).
    - Braille Authority of North America (2016). Rules of Unified English
      Braille, 2nd ed.
"""

from __future__ import annotations

import re
import string
from types import MappingProxyType
from typing import Mapping

from vault.core.exceptions import ValidationError, require_text
from vault.core.models import (
    BrailleStats,
    SupportedCharacters,
    TextStats,
    ValidationReport,
)


BRAILLE_BASE: int = 0x2800
BRAILLE_LAST: int = 0x28FF

BLANK_CELL: str = "⠀"
NUMBER_SIGN: str = "⠼"
UNKNOWN: str = "?"

BRAILLE: Mapping[str, str] = MappingProxyType({
    "A": "⠁", "B": "⠃", "C": "⠉", "D": "⠙", "E": "⠑", "F": "⠋",
    "G": "⠛", "H": "⠓", "I": "⠊", "J": "⠚", "K": "⠅", "L": "⠇",
    "M": "⠍", "N": "⠝", "O": "⠕", "P": "⠏", "Q": "⠟", "R": "⠗",
    "S": "⠎", "T": "⠞", "U": "⠥", "V": "⠧", "W": "⠺", "X": "⠭",
    "Y": "⠽", "Z": "⠵",
    "0": "⠼⠴", "1": "⠼⠁", "2": "⠼⠃", "3": "⠼⠉", "4": "⠼⠙",
    "5": "⠼⠑", "6": "⠼⠋", "7": "⠼⠛", "8": "⠼⠓", "9": "⠼⠚",
    ".": "⠸", ",": "⠐", ";": "⠰", ":": "⠱", "!": "⠮", "?": "⠹",
    "'": "⠄", '"': "⠂", "(": "⠶", ")": "⠾", "-": "⠤", "/": "⠸⠌",
    "&": "⠯", "@": "⠜", "#": "⠼", "$": "⠲", "%": "⠪", "*": "⠻",
    "+": "⠬", "=": "⠿",
    " ": BLANK_CELL,
    "_": "⠠",
})

REVERSE_BRAILLE: Mapping[str, str] = MappingProxyType(
    {cells: char for char, cells in BRAILLE.items()}
)

# Every cell that appears in some pattern
KNOWN_CELLS: frozenset[str] = frozenset("".join(BRAILLE.values()))

_LONGEST_PATTERN = max(len(cells) for cells in REVERSE_BRAILLE)

_PUNCTUATION = (
    ".", ",", ";", ":", "!", "?", "'", '"', "(", ")",
    "-", "/", "&", "@", "#", "$", "%", "*", "+", "=",
)

_PUNCTUATION_RE = re.compile(r"[.,:;!?\"'()\-/@&#$%*+=]")

# Dot number -> bit mask
_DOT_BITS = ((1, 0x01), (2, 0x02), (3, 0x04), (4, 0x08), (5, 0x10), (6, 0x20))


# ===================================================================== #
#  Conversion
# ===================================================================== #


def text_to_braille(text: str) -> str:
    """Convert *text* to Unicode Braille; unsupported characters become ``?``.

    >>> text_to_braille("HELLO")
    '⠓⠑⠇⠇⠕'
    """
    require_text(text, "Text")
    return "".join(BRAILLE.get(ch, UNKNOWN) for ch in text.upper())


def braille_to_text(braille: str) -> str:
    """Decode Braille by longest pattern match; unknown cells become ``?``."""
    require_text(braille, "Braille")

    out: list[str] = []
    i = 0
    while i < len(braille):
        for width in range(min(_LONGEST_PATTERN, len(braille) - i), 0, -1):
            char = REVERSE_BRAILLE.get(braille[i : i + width])
            if char is not None:
                out.append(char)
                i += width
                break
        else:
            out.append(UNKNOWN)
            i += 1

    return "".join(out)


def char_to_braille(char: str) -> str:
    require_text(char, "Character")
    if len(char) != 1:
        raise ValidationError("Must provide a single character")
    return BRAILLE.get(char.upper(), UNKNOWN)


def braille_to_char(cells: str) -> str:
    """Return the character whose pattern is exactly *cells*, ``?`` otherwise."""
    require_text(cells, "Braille character")
    return REVERSE_BRAILLE.get(cells, UNKNOWN)


def text_to_braille_words(text: str) -> str:
    """Convert word by word, separating words with the blank cell."""
    require_text(text, "Text")
    return BLANK_CELL.join(text_to_braille(word) for word in text.split(" "))


def braille_words_to_text(braille: str) -> str:
    require_text(braille, "Braille")
    return " ".join(braille_to_text(word) for word in braille.split(BLANK_CELL))


# ===================================================================== #
#  Validation / Statistics
# ===================================================================== #


def is_valid_braille_text(text: str) -> bool:
    """Return ``True`` if every character of *text* has a Braille pattern."""
    require_text(text, "Text")
    return all(ch in BRAILLE for ch in text.upper())


def is_valid_braille(braille: str) -> bool:
    """Return ``True`` if every cell of *braille* belongs to a known pattern."""
    require_text(braille, "Braille")
    return all(cell in KNOWN_CELLS for cell in braille)


def braille_stats(braille: str) -> BrailleStats:
    require_text(braille, "Braille")
    valid = sum(1 for cell in braille if cell in KNOWN_CELLS)
    return BrailleStats(
        length=len(braille),
        words=len([word for word in braille.split(BLANK_CELL) if word]),
        valid_chars=valid,
        invalid_chars=len(braille) - valid,
    )


def text_stats(text: str) -> TextStats:
    """Count letters, digits, punctuation and spaces in *text*."""
    require_text(text, "Text")
    return TextStats(
        length=len(text),
        words=len(text.split()),
        letters=sum(1 for ch in text if ch in string.ascii_letters),
        numbers=sum(1 for ch in text if ch in string.digits),
        punctuation=len(_PUNCTUATION_RE.findall(text)),
        spaces=text.count(" "),
    )


def validate_braille(braille: str) -> ValidationReport:
    """Replace each unknown cell with ``?`` and record its index."""
    require_text(braille, "Braille")
    errors = [i for i, cell in enumerate(braille) if cell not in KNOWN_CELLS]
    fixed = "".join(UNKNOWN if i in errors else cell for i, cell in enumerate(braille))
    return ValidationReport(fixed=fixed, errors=errors, is_valid=not errors)


def validate_text(text: str) -> ValidationReport:
    """Uppercase *text* and replace each unsupported character with ``?``."""
    require_text(text, "Text")
    upper = text.upper()
    errors = [i for i, ch in enumerate(upper) if ch not in BRAILLE]
    fixed = "".join(UNKNOWN if i in errors else ch for i, ch in enumerate(upper))
    return ValidationReport(fixed=fixed, errors=errors, is_valid=not errors)


def supported_characters() -> SupportedCharacters:
    return SupportedCharacters(
        letters=list(string.ascii_uppercase),
        numbers=list(string.digits),
        punctuation=list(_PUNCTUATION),
    )


# ===================================================================== #
#  Cell Inspection
# ===================================================================== #


def _cell_offset(cell: object) -> int:
    if not isinstance(cell, str) or len(cell) != 1:
        raise TypeError("Input must be a single Braille character")
    code = ord(cell)
    if not BRAILLE_BASE <= code <= BRAILLE_LAST:
        raise ValidationError("Character is not in the Braille Patterns block")
    return code - BRAILLE_BASE


def dot_pattern(cell: str) -> list[int]:
    """Return the raised dots (1-6) of a single Braille *cell*.

    >>> dot_pattern("⠃")
    [1, 2]

    Raises:
        TypeError: If *cell* is not a one-character string.
        ValidationError: If *cell* is outside U+2800-U+28FF.
    """
    offset = _cell_offset(cell)
    return [dot for dot, bit in _DOT_BITS if offset & bit]


def braille_to_ascii(cell: str, raised: str = "●", flat: str = "○") -> str:
    """Draw a Braille *cell* as a three-row, two-column dot grid.

    >>> print(braille_to_ascii("⠁"))
    ●○
    ○○
    ○○
    """
    dots = set(dot_pattern(cell))
    rows = ((1, 4), (2, 5), (3, 6))
    return "\n".join(
        "".join(raised if dot in dots else flat for dot in row) for row in rows
    )
