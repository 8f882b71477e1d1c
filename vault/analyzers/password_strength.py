"""
Password Strength Checker
==========================

Composition-rule policy check with a simple additive score.

Scoring (capped at 100):

    ==========================  ======
    Rule                        Points
    ==========================  ======
    meets minimum length        25
    contains uppercase          25
    contains lowercase          25
    contains digit              15
    contains special character  10
    16 or more characters       +10
    ==========================  ======

A character class earns its points whenever it is present, required or
not; a required class that is missing adds an error instead.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines, Section 5.1.1.
    - OWASP Authentication Cheat Sheet. Implement Proper Password
      Strength Controls.
"""

from __future__ import annotations

import re

from vault.core.exceptions import require_text
from vault.core.models import StrengthReport


_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"\d")
_SPECIAL_RE = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
_REPEAT_RE = re.compile(r"(.)\1{2,}")
_SINGLE_CLASS_RE = re.compile(r"[0-9]+|[A-Za-z]+")

LONG_PASSWORD: int = 16


def check_password_strength(
    password: str,
    *,
    min_length: int = 8,
    require_uppercase: bool = True,
    require_lowercase: bool = True,
    require_numbers: bool = True,
    require_special: bool = True,
) -> StrengthReport:
    """Check *password* against a composition policy and score it 0-100.

    Example::

        >>> check_password_strength("Pass123!").score
        100
        >>> check_password_strength("weak").valid
        False

    Raises:
        TypeError: If *password* is not a string.
    """
    require_text(password, "Password")

    errors: list[str] = []
    score = 0

    if len(password) < min_length:
        errors.append(f"Password must be at least {min_length} characters long")
    else:
        score += 25

    rules = (
        (_UPPER_RE, require_uppercase, 25,
         "Password must contain at least one uppercase letter"),
        (_LOWER_RE, require_lowercase, 25,
         "Password must contain at least one lowercase letter"),
        (_DIGIT_RE, require_numbers, 15,
         "Password must contain at least one number"),
        (_SPECIAL_RE, require_special, 10,
         "Password must contain at least one special character (!@#$%^&*...)"),
    )
    for pattern, required, points, message in rules:
        if pattern.search(password):
            score += points
        elif required:
            errors.append(message)

    if len(password) >= LONG_PASSWORD:
        score += 10

    return StrengthReport(valid=not errors, errors=errors, score=min(score, 100))


def suggest_improvements(password: str) -> list[str]:
    """Return human-readable suggestions for strengthening *password*."""
    require_text(password, "Password")

    suggestions: list[str] = []

    if len(password) < 8:
        suggestions.append(
            f"Increase length to at least 8 characters (currently {len(password)})"
        )
    if not _UPPER_RE.search(password):
        suggestions.append("Add uppercase letters (A-Z)")
    if not _LOWER_RE.search(password):
        suggestions.append("Add lowercase letters (a-z)")
    if not _DIGIT_RE.search(password):
        suggestions.append("Add numbers (0-9)")
    if not _SPECIAL_RE.search(password):
        suggestions.append("Add special characters (!@#$%^&*...)")
    if _REPEAT_RE.search(password):
        suggestions.append("Avoid repeating characters (aaa, 111, etc.)")
    if _SINGLE_CLASS_RE.fullmatch(password):
        suggestions.append("Mix different types of characters")

    return suggestions
