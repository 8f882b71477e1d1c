"""
Vault Core Module
==================

Result records and the exception hierarchy shared by every vault tool.
The engine facade lives in :mod:`vault.core.engine`.
"""

from vault.core.exceptions import (
    CapacityExceededError,
    InvalidBase64Error,
    InvalidKeyError,
    InvalidShiftError,
    ValidationError,
    VaultError,
)
from vault.core.models import (
    BruteForceResult,
    HashAlgorithm,
    HashedPassword,
    KasiskiAnalysis,
    ObfuscationTechnique,
    OperationResult,
    StrengthReport,
)

__all__ = [
    "BruteForceResult",
    "CapacityExceededError",
    "HashAlgorithm",
    "HashedPassword",
    "InvalidBase64Error",
    "InvalidKeyError",
    "InvalidShiftError",
    "KasiskiAnalysis",
    "ObfuscationTechnique",
    "OperationResult",
    "StrengthReport",
    "ValidationError",
    "VaultError",
]
