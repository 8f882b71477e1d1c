"""
Password Hasher
================

Salted password hashing with two memory/CPU-hard key-derivation
functions from :mod:`hashlib`:

1. PBKDF2-HMAC-SHA256 with a configurable iteration count
2. scrypt with ``N = 2**cost``, ``r = 8``, ``p = 1``

Both derive a 32-byte key. Hashes and salts are Base64 text and a stored
credential is the colon-joined triple ``hash:salt:work_factor`` (see
:meth:`HashedPassword.to_storage`). Verification recomputes the key and
compares in constant time with :func:`hmac.compare_digest`.

References:
    - RFC 8018 (2017). PKCS #5: Password-Based Cryptography Specification
      Version 2.1, Section 5.2 (PBKDF2).
    - RFC 7914 (2016). The scrypt Password-Based Key Derivation Function.
    - NIST SP 800-63B (2017). Digital Identity Guidelines, Section 5.1.1.2.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import secrets
from typing import Optional, Sequence, Union

from vault.core.exceptions import ValidationError, VaultError, require_int, require_text
from vault.core.models import BatchHashEntry, HashAlgorithm, HashedPassword


DERIVED_KEY_LENGTH: int = 32

DEFAULT_SALT_LENGTH: int = 16

DEFAULT_ITERATIONS: int = 100_000
MIN_ITERATIONS: int = 1_000

DEFAULT_COST: int = 15
MIN_COST, MAX_COST = 4, 20

SCRYPT_R: int = 8
SCRYPT_P: int = 1


# ===================================================================== #
#  Helpers
# ===================================================================== #


def generate_salt(length: int = DEFAULT_SALT_LENGTH) -> str:
    """Return *length* cryptographically secure random bytes as Base64.

    Raises:
        ValidationError: If *length* is not a positive integer.
    """
    require_int(length, "Salt length")
    if length < 1:
        raise ValidationError("Salt length must be a positive number")
    return base64.b64encode(secrets.token_bytes(length)).decode("ascii")


def _require_password(password: object) -> str:
    value = require_text(password, "Password")
    if not value:
        raise ValidationError("Password must be a non-empty string")
    return value


def _salt_bytes(salt: str) -> bytes:
    try:
        return base64.b64decode(salt, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError("Salt must be valid Base64") from exc


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def _split_stored(stored: str, work_name: str) -> tuple[str, str, int]:
    """Split ``hash:salt:work`` and parse the work factor."""
    parts = stored.split(":")
    if len(parts) != 3:
        raise ValidationError(
            f"Invalid stored hash format. Expected: hash:salt:{work_name}"
        )
    hash_part, salt_part, work_part = parts
    try:
        work = int(work_part)
    except ValueError as exc:
        raise ValidationError(f"Invalid {work_name} value in stored hash") from exc
    return hash_part, salt_part, work


def _matches(stored_hash: str, derived_hash: str) -> bool:
    try:
        expected = base64.b64decode(stored_hash, validate=True)
    except (binascii.Error, ValueError):
        return False
    return hmac.compare_digest(expected, base64.b64decode(derived_hash))


# ===================================================================== #
#  PBKDF2
# ===================================================================== #


def hash_password(
    password: str,
    salt: Optional[str] = None,
    iterations: int = DEFAULT_ITERATIONS,
) -> HashedPassword:
    """Hash *password* with PBKDF2-HMAC-SHA256.

    Args:
        password: Non-empty password.
        salt: Base64 salt; a fresh 16-byte salt is generated when omitted.
        iterations: PBKDF2 iteration count, at least 1000.

    Raises:
        TypeError: If *password* is not a string.
        ValidationError: On an empty password, too few iterations or a
            salt that is not Base64.
    """
    _require_password(password)
    require_int(iterations, "Iterations")
    if iterations < MIN_ITERATIONS:
        raise ValidationError(f"Iterations must be a number >= {MIN_ITERATIONS}")

    use_salt = salt or generate_salt()
    derived = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        _salt_bytes(use_salt),
        iterations,
        dklen=DERIVED_KEY_LENGTH,
    )
    return HashedPassword(
        hash=_b64(derived),
        salt=use_salt,
        algorithm=HashAlgorithm.PBKDF2,
        iterations=iterations,
    )


def verify_password(password: str, stored: str) -> bool:
    """Check *password* against a ``hash:salt:iterations`` string.

    Returns ``False`` on mismatch or when the stored values cannot be
    used to rehash.

    Raises:
        TypeError: If either argument is not a string.
        ValidationError: If *stored* is not three colon-separated fields
            with an integer iteration count.
    """
    require_text(password, "Password")
    require_text(stored, "Stored hash")
    hash_part, salt_part, iterations = _split_stored(stored, "iterations")

    try:
        rehashed = hash_password(password, salt_part, iterations)
    except ValidationError:
        return False
    return _matches(hash_part, rehashed.hash)


# ===================================================================== #
#  scrypt
# ===================================================================== #


def hash_password_scrypt(
    password: str,
    salt: Optional[str] = None,
    cost: int = DEFAULT_COST,
) -> HashedPassword:
    """Hash *password* with scrypt, ``N = 2**cost``.

    Memory use grows as ``128 * r * N`` bytes, about 16 MiB at the
    default cost of 15.

    Raises:
        TypeError: If *password* is not a string.
        ValidationError: On an empty password, a cost outside 4-20 or a
            salt that is not Base64.
    """
    _require_password(password)
    require_int(cost, "Cost")
    if not MIN_COST <= cost <= MAX_COST:
        raise ValidationError(f"Cost must be a number between {MIN_COST} and {MAX_COST}")

    use_salt = salt or generate_salt()
    n = 2 ** cost
    derived = hashlib.scrypt(
        password.encode("utf-8"),
        salt=_salt_bytes(use_salt),
        n=n,
        r=SCRYPT_R,
        p=SCRYPT_P,
        maxmem=128 * SCRYPT_R * (n + SCRYPT_P + 2) + 1024 * 1024,
        dklen=DERIVED_KEY_LENGTH,
    )
    return HashedPassword(
        hash=_b64(derived),
        salt=use_salt,
        algorithm=HashAlgorithm.SCRYPT,
        cost=cost,
    )


def verify_password_scrypt(password: str, stored: str) -> bool:
    """Check *password* against a ``hash:salt:cost`` string."""
    require_text(password, "Password")
    require_text(stored, "Stored hash")
    hash_part, salt_part, cost = _split_stored(stored, "cost")

    try:
        rehashed = hash_password_scrypt(password, salt_part, cost)
    except ValidationError:
        return False
    return _matches(hash_part, rehashed.hash)


# ===================================================================== #
#  Batch
# ===================================================================== #


def hash_many(
    passwords: Sequence[str],
    algorithm: Union[str, HashAlgorithm] = HashAlgorithm.PBKDF2,
    *,
    iterations: int = DEFAULT_ITERATIONS,
    cost: int = DEFAULT_COST,
) -> list[BatchHashEntry]:
    """Hash every password in *passwords* with one algorithm.

    A password that cannot be hashed produces an entry carrying the error
    message instead of aborting the batch. Passwords are never echoed
    back.

    Raises:
        TypeError: If *passwords* is not a list or tuple.
        ValidationError: If *algorithm* is unknown.
    """
    if not isinstance(passwords, (list, tuple)):
        raise TypeError("Passwords must be a list")
    try:
        algo = HashAlgorithm(algorithm)
    except ValueError as exc:
        raise ValidationError('Algorithm must be "pbkdf2" or "scrypt"') from exc

    entries: list[BatchHashEntry] = []
    for password in passwords:
        try:
            if algo is HashAlgorithm.PBKDF2:
                hashed = hash_password(password, iterations=iterations)
            else:
                hashed = hash_password_scrypt(password, cost=cost)
        except (VaultError, TypeError) as exc:
            entries.append(BatchHashEntry(algorithm=algo, error=str(exc)))
            continue
        entries.append(BatchHashEntry(algorithm=algo, hash=hashed.hash, salt=hashed.salt))

    return entries
