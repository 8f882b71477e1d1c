"""
Letter Frequency Helpers
=========================

English letter-frequency data and the small numeric helpers used by the
classical-cipher cryptanalysis routines:

1. Frequency scoring of candidate plaintexts (dictionary attacks)
2. Letter extraction for Kasiski examination
3. Divisor enumeration of repeat distances
4. Index of Coincidence over the 26-letter alphabet

The frequency table is a fixed approximation of English letter usage in
percent. Scoring simply sums the weight of every letter, so longer and
more English-like text scores higher.

References:
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis. Riverbank Publication No. 22.
    - Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America.
"""

from __future__ import annotations

import math
import string
from collections import Counter
from types import MappingProxyType
from typing import Mapping


# Approximate English letter frequencies (percent)
ENGLISH_LETTER_FREQUENCY: Mapping[str, float] = MappingProxyType({
    "E": 11, "T": 9, "A": 8, "O": 7.5, "I": 7, "N": 6.7, "S": 6.3,
    "H": 6.1, "R": 6, "D": 4.3, "L": 4, "C": 2.8, "U": 2.8, "M": 2.4,
    "W": 2.4, "F": 2.2, "G": 2, "Y": 2, "P": 1.9, "B": 1.5, "V": 0.98,
    "K": 0.77, "J": 0.15, "X": 0.15, "Q": 0.1, "Z": 0.07,
})

# IC for English text over A-Z
IC_ENGLISH: float = 0.0667

# IC for uniformly random letters
IC_RANDOM_26: float = 1.0 / 26.0


def letters_only(text: str) -> str:
    """Return the ASCII letters of *text*, uppercased, in order."""
    return "".join(ch for ch in text if ch in string.ascii_letters).upper()


def score_text(text: str) -> float:
    """Score *text* by summing English frequency weights of its letters.

    Non-letters contribute nothing; case is ignored.
    """
    return sum(ENGLISH_LETTER_FREQUENCY[ch] for ch in letters_only(text))


def index_of_coincidence(text: str) -> float:
    """Compute the Index of Coincidence over the letters of *text*.

    The IC is the probability that two letters drawn at random are equal:

        IC = sum_{i=A}^{Z} f_i * (f_i - 1) / (N * (N - 1))

    English prose sits near 0.0667, polyalphabetic ciphertext drifts
    towards 1/26 as the key grows.

    Returns:
        IC value, or 0.0 for fewer than two letters.
    """
    letters = letters_only(text)
    n = len(letters)
    if n < 2:
        return 0.0

    counts = Counter(letters)
    numerator = sum(f * (f - 1) for f in counts.values())
    return numerator / (n * (n - 1))


def find_factors(n: int) -> list[int]:
    """Find all factors of a positive integer by trial division up to sqrt(n).

    Args:
        n: Positive integer.

    Returns:
        Sorted list of factors (including 1 and *n*); empty for n <= 0.
    """
    if n <= 0:
        return []

    factors: set[int] = set()
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            factors.add(i)
            factors.add(n // i)

    return sorted(factors)
