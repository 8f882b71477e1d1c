"""
Text Obfuscator
================

Reversible and irreversible text scrambling for demonstrations:

1. Reversal, character shifting and interleaving
2. Leetspeak, vowel substitution and Unicode homoglyphs
3. Random noise insertion
4. Chaining several techniques with :func:`multi_obfuscate`

None of these transformations provides secrecy. Homoglyph output in
particular is the raw material of IDN spoofing and phishing lookalikes,
which is exactly why it is worth recognising.

References:
    - Unicode Technical Standard #39 (2023). Unicode Security Mechanisms,
      Section 4: Confusable Detection.
    - Blashki, K. & Nichol, S. (2005). Game Geek's Goss: Linguistic
      Creativity in Young Males within an Online University Forum.
      Australian Journal of Emerging Technologies and Society, 3(2).
"""

from __future__ import annotations

import random
import re
import string
from typing import Sequence, Union

from vault.core.exceptions import ValidationError, require_int, require_text
from vault.core.models import ObfuscationTechnique


# ===================================================================== #
#  Substitution Tables
# ===================================================================== #

_LEET_BASIC = {
    "A": "4", "E": "3", "I": "1", "O": "0", "S": "5",
    "T": "7", "L": "1", "G": "9", "B": "8",
}
_LEET_ADVANCED = {**_LEET_BASIC, "Z": "2", "X": "}{"}
_LEET_EXTREME = {**_LEET_ADVANCED, "H": "#", "M": "|//|", "W": "///"}


def _both_cases(table: dict[str, str]) -> dict[int, str]:
    mapping = {}
    for letter, replacement in table.items():
        mapping[ord(letter)] = replacement
        mapping[ord(letter.lower())] = replacement
    return mapping


# Intensity -> translate table
_LEET_TABLES = {
    1: _both_cases(_LEET_BASIC),
    2: _both_cases(_LEET_ADVANCED),
    3: _both_cases(_LEET_EXTREME),
}

_FROM_LEET = str.maketrans({
    "4": "A", "3": "E", "1": "I", "0": "O", "5": "S",
    "7": "T", "9": "G", "8": "B", "2": "Z", "#": "H",
})

_VOWELS = str.maketrans({
    "a": "4", "A": "4", "e": "3", "E": "3", "i": "1", "I": "1",
    "o": "0", "O": "0", "u": "@", "U": "@",
})
_RESTORE_VOWELS = str.maketrans({"4": "a", "3": "e", "1": "i", "0": "o", "@": "u"})

# Latin -> Cyrillic lookalikes
_HOMOGLYPHS = str.maketrans({
    "A": "А", "B": "В", "C": "С", "E": "Е", "H": "Н", "K": "К",
    "M": "М", "O": "О", "P": "Р", "T": "Т", "X": "Х", "Y": "У",
    "a": "а", "c": "с", "e": "е", "h": "һ", "o": "о", "p": "р",
    "x": "х",
})

NOISE_CHARACTERS: str = "!@#$%^&*()_+-=[]{}|;:,.<>?"

_SYMBOL_OR_DIGIT_RE = re.compile(r"[0-9!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")

DEFAULT_TECHNIQUES: tuple[ObfuscationTechnique, ...] = (
    ObfuscationTechnique.REVERSE,
    ObfuscationTechnique.VOWELS,
    ObfuscationTechnique.LEET,
)


# ===================================================================== #
#  Single Techniques
# ===================================================================== #


def reverse_text(text: str) -> str:
    require_text(text, "Text")
    return text[::-1]


def shift_characters(text: str, shift: int = 5) -> str:
    """Rotate letters modulo 26 and digits modulo 10; other characters stay.

    Negative shifts rotate backwards, so ``shift_characters(s, -n)`` undoes
    ``shift_characters(s, n)``.
    """
    require_text(text, "Text")
    require_int(shift, "Shift")

    out: list[str] = []
    for ch in text:
        if "A" <= ch <= "Z":
            out.append(chr((ord(ch) - 65 + shift) % 26 + 65))
        elif "a" <= ch <= "z":
            out.append(chr((ord(ch) - 97 + shift) % 26 + 97))
        elif "0" <= ch <= "9":
            out.append(chr((ord(ch) - 48 + shift) % 10 + 48))
        else:
            out.append(ch)
    return "".join(out)


def to_leetspeak(text: str, intensity: int = 1) -> str:
    """Replace letters with lookalike digits and symbols.

    Intensity 1 covers the common vowels and consonants, 2 adds Z and X,
    3 adds H, M and W with multi-character glyphs.

    >>> to_leetspeak("Hello World")
    'H3110 W0r1d'
    """
    require_text(text, "Text")
    if isinstance(intensity, bool) or intensity not in _LEET_TABLES:
        raise ValidationError("Intensity must be an integer between 1 and 3")
    return text.translate(_LEET_TABLES[intensity])


def from_leetspeak(text: str) -> str:
    """Best-effort reversal of leetspeak; output is uppercase.

    Ambiguous glyphs resolve to one letter (``1`` always becomes ``I``).
    """
    require_text(text, "Text")
    return text.upper().translate(_FROM_LEET)


def insert_random_characters(text: str, density: float = 0.2) -> str:
    """Insert ``floor(len(text) * density)`` random noise characters.

    The original characters keep their relative order. Output is random.

    Raises:
        ValidationError: If *density* is not a number between 0 and 1.
    """
    require_text(text, "Text")
    if isinstance(density, bool) or not isinstance(density, (int, float)) \
            or not 0 <= density <= 1:
        raise ValidationError("Density must be a number between 0 and 1")

    count = int(len(text) * density)
    total = len(text) + count
    noise_slots = set(random.sample(range(total), count))

    out: list[str] = []
    remaining = iter(text)
    for slot in range(total):
        if slot in noise_slots:
            out.append(random.choice(NOISE_CHARACTERS))
        else:
            out.append(next(remaining))
    return "".join(out)


def replace_vowels(text: str) -> str:
    """Swap vowels for digits (``u`` becomes ``@``)."""
    require_text(text, "Text")
    return text.translate(_VOWELS)


def restore_vowels(text: str) -> str:
    """Reverse :func:`replace_vowels`; restored vowels are lowercase."""
    require_text(text, "Text")
    return text.translate(_RESTORE_VOWELS)


def interleave_characters(text: str, separator: str = " ") -> str:
    """Put *separator* between every pair of characters: ``H-e-l-l-o``."""
    require_text(text, "Text")
    require_text(separator, "Separator")
    return separator.join(text)


def deinterleave_characters(text: str, separator: str = " ") -> str:
    """Remove every occurrence of *separator* from *text*."""
    require_text(text, "Text")
    require_text(separator, "Separator")
    if not separator:
        return text
    return text.replace(separator, "")


def to_homoglyph(text: str) -> str:
    """Replace Latin letters with visually identical Cyrillic letters."""
    require_text(text, "Text")
    return text.translate(_HOMOGLYPHS)


# ===================================================================== #
#  Combined
# ===================================================================== #


def _parse_technique(technique: object) -> ObfuscationTechnique:
    try:
        return ObfuscationTechnique(technique)
    except ValueError:
        valid = ", ".join(t.value for t in ObfuscationTechnique)
        raise ValidationError(
            f"Invalid technique: {technique}. Must be one of: {valid}"
        ) from None


def multi_obfuscate(
    text: str,
    techniques: Sequence[Union[str, ObfuscationTechnique]] = DEFAULT_TECHNIQUES,
) -> str:
    """Apply several techniques in order.

    Leetspeak runs at intensity 2, shifting by 3 and noise insertion at
    density 0.15. Every technique name is checked before any is applied.

    Example::

        >>> multi_obfuscate("Hello", ["reverse", "shift"])
        'roohK'

    Raises:
        TypeError: If *techniques* is not a list or tuple.
        ValidationError: If a technique name is unknown.
    """
    require_text(text, "Text")
    if not isinstance(techniques, (list, tuple)):
        raise TypeError("Techniques must be a list")

    steps = [_parse_technique(t) for t in techniques]

    result = text
    for step in steps:
        if step is ObfuscationTechnique.REVERSE:
            result = reverse_text(result)
        elif step is ObfuscationTechnique.VOWELS:
            result = replace_vowels(result)
        elif step is ObfuscationTechnique.LEET:
            result = to_leetspeak(result, 2)
        elif step is ObfuscationTechnique.SHIFT:
            result = shift_characters(result, 3)
        elif step is ObfuscationTechnique.RANDOM:
            result = insert_random_characters(result, 0.15)
    return result


def obfuscation_strength(original: str, obfuscated: str) -> int:
    """Heuristic 0-100 score of how different *obfuscated* looks.

    Points: 20 for equal length or 30 for added characters, 25 for a
    larger character set, 15 for a changed use of uppercase, 25 for
    digits or symbols present, and 15 when the texts differ ignoring case.
    """
    require_text(original, "Original")
    require_text(obfuscated, "Obfuscated")

    score = 0
    if len(obfuscated) == len(original):
        score += 20
    elif len(obfuscated) > len(original):
        score += 30

    if len(set(obfuscated)) > len(set(original)):
        score += 25

    has_upper = any(ch in string.ascii_uppercase for ch in original)
    obf_has_upper = any(ch in string.ascii_uppercase for ch in obfuscated)
    if has_upper != obf_has_upper:
        score += 15

    if _SYMBOL_OR_DIGIT_RE.search(obfuscated):
        score += 25

    if original.lower() != obfuscated.lower():
        score += 15

    return min(score, 100)
