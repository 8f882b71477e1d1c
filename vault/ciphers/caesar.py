"""
Caesar Cipher
==============

Fixed-shift monoalphabetic substitution. Each ASCII letter is rotated
``shift`` places within its own case; everything else is copied.

With only 25 useful keys the cipher falls to exhaustive search, which
:func:`brute_force` performs.

References:
    - Suetonius. De Vita Caesarum, Divus Iulius 56.
    - Singh, S. (1999). The Code Book. Doubleday. Chapter 1.
"""

from __future__ import annotations

import string

from vault.core.exceptions import InvalidShiftError, require_text
from vault.core.models import CaesarAnalysis


DEFAULT_SHIFT: int = 3

_VOWELS = frozenset("aeiouAEIOU")


def _validate_shift(shift: object) -> int:
    if isinstance(shift, bool) or not isinstance(shift, int):
        raise InvalidShiftError("Shift must be an integer")
    if not 1 <= shift <= 25:
        raise InvalidShiftError()
    return shift


def _table(shift: int) -> dict[int, int]:
    lower, upper = string.ascii_lowercase, string.ascii_uppercase
    return str.maketrans(
        lower + upper,
        lower[shift:] + lower[:shift] + upper[shift:] + upper[:shift],
    )


def encrypt(plaintext: str, shift: int = DEFAULT_SHIFT) -> str:
    """Encrypt *plaintext* by rotating each letter *shift* places.

    Example::

        >>> encrypt("Hello", 3)
        'Khoor'

    Raises:
        TypeError: If *plaintext* is not a string.
        InvalidShiftError: If *shift* is not an integer in 1-25.
    """
    require_text(plaintext, "Plaintext")
    return plaintext.translate(_table(_validate_shift(shift)))


def decrypt(ciphertext: str, shift: int = DEFAULT_SHIFT) -> str:
    """Decrypt Caesar *ciphertext*; equivalent to encrypting with ``26 - shift``."""
    require_text(ciphertext, "Ciphertext")
    return encrypt(ciphertext, 26 - _validate_shift(shift))


def brute_force(ciphertext: str) -> dict[int, str]:
    """Decrypt *ciphertext* under every shift from 1 to 25.

    Returns:
        Mapping of shift to candidate plaintext.
    """
    require_text(ciphertext, "Ciphertext")
    return {shift: decrypt(ciphertext, shift) for shift in range(1, 26)}


def analyze(text: str) -> CaesarAnalysis:
    """Count the character classes of *text*."""
    require_text(text, "Text")

    letters = [ch for ch in text if ch in string.ascii_letters]
    vowels = sum(1 for ch in letters if ch in _VOWELS)

    return CaesarAnalysis(
        total_chars=len(text),
        letters=len(letters),
        vowels=vowels,
        consonants=len(letters) - vowels,
        uppercase=sum(1 for ch in letters if ch.isupper()),
        lowercase=sum(1 for ch in letters if ch.islower()),
        non_alphabetic=len(text) - len(letters),
    )
