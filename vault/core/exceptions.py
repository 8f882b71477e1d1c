"""
Vault Exceptions
=================

Exception hierarchy for the Encryption Vault library.

Two failure categories exist:

1. Type errors -- a required text argument is not a ``str``. These use
   the built-in :class:`TypeError` so callers can rely on the standard
   Python contract.
2. Validation errors -- a domain constraint is violated (empty key,
   out-of-range shift, malformed Base64, oversized QR payload, ...).
   These derive from :class:`ValidationError`, which is also a
   :class:`ValueError`.

Every check happens before any transformation work starts.
"""

from __future__ import annotations


# ========================== Base ===========================================


class VaultError(Exception):
    """Root of every error raised deliberately by the vault library."""

    pass


class ValidationError(VaultError, ValueError):
    """A domain constraint on an argument was violated."""

    pass


# ========================== Specific Errors ================================


class InvalidKeyError(ValidationError):
    """A cipher key is missing, empty, or contains non-letter characters."""

    def __init__(self, message: str = "Key must be a non-empty string") -> None:
        super().__init__(message)


class InvalidShiftError(ValidationError):
    """A Caesar shift is not an integer in the range 1-25."""

    def __init__(self, message: str = "Shift must be between 1 and 25") -> None:
        super().__init__(message)


class InvalidBase64Error(ValidationError):
    """Input could not be decoded as Base64 text."""

    def __init__(self, message: str = "Invalid Base64 string") -> None:
        super().__init__(message)


class CapacityExceededError(ValidationError):
    """Content does not fit in any supported QR code version."""

    pass


# ========================== Helpers ========================================


def require_text(value: object, name: str) -> str:
    """Return *value* unchanged if it is a ``str``, else raise ``TypeError``.

    Args:
        value: Argument to check.
        name: Human-readable argument name used in the message.
    """
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string")
    return value


def require_int(value: object, name: str) -> int:
    """Return *value* if it is a real ``int`` (``bool`` excluded).

    Raises:
        ValidationError: If *value* is not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer")
    return value
