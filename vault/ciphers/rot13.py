"""
ROT13
======

Caesar rotation by 13, the one shift that is its own inverse:
``encode(encode(x)) == x`` for every string. Useful for hiding spoilers,
useless for secrecy.
"""

from __future__ import annotations

import string

from vault.core.exceptions import require_text
from vault.core.models import Rot13Analysis


_ROT13 = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_lowercase[13:] + string.ascii_lowercase[:13]
    + string.ascii_uppercase[13:] + string.ascii_uppercase[:13],
)


def encode(text: str) -> str:
    """Apply ROT13 to the ASCII letters of *text*.

    >>> encode("HELLO")
    'URYYB'
    """
    require_text(text, "Text")
    return text.translate(_ROT13)


def decode(text: str) -> str:
    """Undo ROT13; identical to :func:`encode`."""
    return encode(text)


def is_symmetric(text: str) -> bool:
    """Return ``True`` when applying ROT13 twice gives back *text*."""
    return encode(encode(text)) == text


def analyze(text: str) -> Rot13Analysis:
    require_text(text, "Text")
    return Rot13Analysis(
        original=text,
        encoded=encode(text),
        is_symmetric=is_symmetric(text),
        length=len(text),
        letters=sum(1 for ch in text if ch in string.ascii_letters),
    )
