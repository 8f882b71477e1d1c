"""
Vigenere Cipher
================

Polyalphabetic substitution cipher with the classic cryptanalysis helpers
that break it:

1. Encryption / decryption with a repeating alphabetic key
2. Pair verification and random key generation
3. Dictionary attack ranked by English letter-frequency score
4. Kasiski examination for key-length estimation

Only ASCII letters are transformed. Every other character is copied and
does not advance the key, so the key stays aligned to letters rather than
to absolute string positions::

    >>> encrypt("HELLO, WORLD!", "KEY")
    'RIJVS, UYVJN!'

All functions are pure; :func:`generate_key` is the only one that is not
deterministic.

References:
    - de Vigenere, B. (1586). Traicte des Chiffres.
    - Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
    - Singh, S. (1999). The Code Book. Doubleday. Chapter 2.
"""

from __future__ import annotations

import random
import string
from collections import Counter, defaultdict
from typing import Iterable, Optional

from vault.analyzers.frequency import find_factors, letters_only, score_text
from vault.core.exceptions import (
    InvalidKeyError,
    ValidationError,
    require_int,
    require_text,
)
from vault.core.models import BruteForceResult, KasiskiAnalysis


ALPHABET_SIZE: int = 26

DEFAULT_KEY_LENGTH: int = 8

DEFAULT_SEQUENCE_LENGTH: int = 3

# Candidate keys tried when the caller supplies no word list
DEFAULT_WORDS: tuple[str, ...] = (
    "PASSWORD", "SECRET", "KEY", "CIPHER", "ENCRYPT", "SECURITY",
    "COMPUTER", "ALGORITHM", "CRYPTOGRAPHY", "HASH", "SYMMETRIC",
    "ASYMMETRIC", "MESSAGE", "HELLO", "WORLD", "PYTHON",
    "HACKTOBERFEST", "CONTRIBUTE", "GITHUB", "VAULT", "CRYPTO",
)

_MAX_KEY_LENGTHS = 5
_MAX_DISTANCES = 10


# ===================================================================== #
#  Encryption / Decryption
# ===================================================================== #


def _key_shifts(key: object) -> list[int]:
    """Validate *key* and convert it to shift values (A=0 ... Z=25)."""
    if not isinstance(key, str) or not key:
        raise InvalidKeyError()
    if not all(ch in string.ascii_letters for ch in key):
        raise InvalidKeyError("Key must contain only letters A-Z")
    return [ord(ch) - ord("A") for ch in key.upper()]


def _transform(text: str, shifts: list[int], direction: int) -> str:
    """Shift every ASCII letter of *text* by the next key value.

    The cursor into *shifts* advances only when a letter is consumed.
    """
    out: list[str] = []
    cursor = 0
    period = len(shifts)

    for ch in text:
        if "A" <= ch <= "Z":
            base = ord("A")
        elif "a" <= ch <= "z":
            base = ord("a")
        else:
            out.append(ch)
            continue

        shift = shifts[cursor % period] * direction
        out.append(chr((ord(ch) - base + shift) % ALPHABET_SIZE + base))
        cursor += 1

    return "".join(out)


def encrypt(plaintext: str, key: str) -> str:
    """Encrypt *plaintext* with the Vigenere cipher.

    Letter case of the plaintext is preserved; the key is case-insensitive.

    Args:
        plaintext: Text to encrypt.
        key: Non-empty alphabetic key, repeated as needed.

    Returns:
        Ciphertext of the same length as *plaintext*.

    Raises:
        TypeError: If *plaintext* is not a string.
        InvalidKeyError: If *key* is not a non-empty alphabetic string.

    Example::

        >>> encrypt("ATTACK", "LIME")
        'LBFENS'
    """
    require_text(plaintext, "Plaintext")
    shifts = _key_shifts(key)
    return _transform(plaintext, shifts, 1)


def decrypt(ciphertext: str, key: str) -> str:
    """Decrypt Vigenere *ciphertext*; the inverse of :func:`encrypt`.

    Raises:
        TypeError: If *ciphertext* is not a string.
        InvalidKeyError: If *key* is not a non-empty alphabetic string.
    """
    require_text(ciphertext, "Ciphertext")
    shifts = _key_shifts(key)
    return _transform(ciphertext, shifts, -1)


def verify(plaintext: str, ciphertext: str, key: str) -> bool:
    """Check that *ciphertext* is *plaintext* encrypted with *key*.

    The comparison ignores case.

    Raises:
        TypeError: If any argument is not a string.
    """
    require_text(plaintext, "Plaintext")
    require_text(ciphertext, "Ciphertext")
    require_text(key, "Key")
    return encrypt(plaintext, key).upper() == ciphertext.upper()


def generate_key(length: int = DEFAULT_KEY_LENGTH) -> str:
    """Generate a random uppercase key of exactly *length* letters.

    Uses :mod:`random`; the result is fine for exercises and demos but is
    not cryptographically strong.

    Raises:
        ValidationError: If *length* is not a positive integer.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ValidationError("Key length must be a positive number")
    return "".join(random.choices(string.ascii_uppercase, k=length))


# ===================================================================== #
#  Cryptanalysis
# ===================================================================== #


def brute_force(
    ciphertext: str,
    words: Optional[Iterable[str]] = None,
) -> list[BruteForceResult]:
    """Dictionary attack: try every candidate key and rank the results.

    Each candidate decryption is scored by its English letter-frequency
    weight (:func:`score_text`). The ranking is a heuristic; the top entry
    is the most English-looking decryption among the keys tried, not a
    guaranteed plaintext.

    Args:
        ciphertext: Non-empty text to attack.
        words: Candidate keys. ``None`` or empty falls back to
            :data:`DEFAULT_WORDS`.

    Returns:
        Results sorted by score, highest first. Equal scores keep the
        order of *words*.

    Raises:
        TypeError: If *ciphertext* is not a string.
        ValidationError: If *ciphertext* is empty.
    """
    require_text(ciphertext, "Ciphertext")
    if not ciphertext:
        raise ValidationError("Ciphertext cannot be empty")

    candidates = list(words) if words else list(DEFAULT_WORDS)
    results: list[BruteForceResult] = []

    for word in candidates:
        try:
            plaintext = decrypt(ciphertext, word)
        except InvalidKeyError:
            # One unusable dictionary entry must not abort the batch
            continue
        results.append(BruteForceResult(
            key=word,
            plaintext=plaintext,
            score=score_text(plaintext),
        ))

    # sorted() is stable, ties keep dictionary order
    return sorted(results, key=lambda r: r.score, reverse=True)


def analyze(
    ciphertext: str,
    sequence_length: int = DEFAULT_SEQUENCE_LENGTH,
) -> KasiskiAnalysis:
    """Perform Kasiski examination to estimate the key length.

    Repeated n-grams in Vigenere ciphertext are usually the same plaintext
    fragment enciphered under the same key alignment, so their distance is
    a multiple of the key length. Tallying the divisors of all such
    distances surfaces the likely key lengths.

    Steps:
        1. Strip the ciphertext to uppercase letters.
        2. Record every start offset of each n-gram of width
           *sequence_length*.
        3. Take the distance between consecutive occurrences of each
           repeated n-gram.
        4. Count every divisor of every distance.

    Args:
        ciphertext: Text to examine; at least *sequence_length* characters.
        sequence_length: Width of the n-gram window.

    Returns:
        KasiskiAnalysis with the top five divisors, the first ten
        distances, the most likely key length (``None`` when nothing
        repeats) and the total number of distances.

    Raises:
        TypeError: If *ciphertext* is not a string.
        ValidationError: If *sequence_length* is not a positive integer or
            the ciphertext is shorter than it.
    """
    require_text(ciphertext, "Ciphertext")
    require_int(sequence_length, "Sequence length")
    if sequence_length < 1:
        raise ValidationError("Sequence length must be a positive number")
    if len(ciphertext) < sequence_length:
        raise ValidationError("Ciphertext too short for analysis")

    letters = letters_only(ciphertext)

    positions: dict[str, list[int]] = defaultdict(list)
    for i in range(len(letters) - sequence_length + 1):
        positions[letters[i : i + sequence_length]].append(i)

    distances: list[int] = []
    for offsets in positions.values():
        distances.extend(b - a for a, b in zip(offsets, offsets[1:]))

    factor_counts: Counter[int] = Counter()
    for distance in distances:
        factor_counts.update(find_factors(distance))

    ranked = sorted(factor_counts.items(), key=lambda item: (-item[1], item[0]))
    key_lengths = [factor for factor, _ in ranked[:_MAX_KEY_LENGTHS]]

    return KasiskiAnalysis(
        key_lengths=key_lengths,
        distances=distances[:_MAX_DISTANCES],
        likely_key_length=key_lengths[0] if key_lengths else None,
        repetition_count=len(distances),
    )
