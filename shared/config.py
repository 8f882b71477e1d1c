"""
Vault Configuration Management
===============================

Centralized configuration for the Encryption Vault tools using Python
dataclasses and TOML-based persistence.

Each tool section holds the defaults the engine applies when a caller
does not pass a value explicitly (Caesar shift, Vigenere key length,
Morse speed, KDF work factors, ...). Settings live in ``config.toml`` at
the project root; every key is optional.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - PEP 681 -- Data Class Transforms (2022).
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class CaesarConfig:
    """Defaults for the Caesar and ROT13 tools."""

    shift: int = 3


@dataclass(frozen=False, slots=True)
class VigenereConfig:
    """Defaults for the Vigenere cipher and its cryptanalysis helpers.

    ``wordlist`` replaces the built-in dictionary used by ``crack`` when
    non-empty.

    Reference:
        Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
    """

    key_length: int = 8
    sequence_length: int = 3
    wordlist: list[str] = field(default_factory=list)
    max_results: int = 5


@dataclass(frozen=False, slots=True)
class MorseConfig:
    """Timing and tone defaults for Morse audio helpers.

    Reference:
        ITU-R M.1677-1 (2009). International Morse code.
    """

    wpm: int = 20
    frequency: int = 800
    dot_duration: int = 100


@dataclass(frozen=False, slots=True)
class HasherConfig:
    """Key-derivation work factors for the password hasher.

    Reference:
        NIST SP 800-63B (2017). Digital Identity Guidelines.
    """

    algorithm: str = "pbkdf2"
    iterations: int = 100_000
    scrypt_cost: int = 15
    salt_length: int = 16
    min_length: int = 8


@dataclass(frozen=False, slots=True)
class ObfuscatorConfig:
    """Defaults for the text obfuscator."""

    techniques: list[str] = field(
        default_factory=lambda: ["reverse", "vowels", "leet"]
    )


@dataclass(frozen=False, slots=True)
class QRConfig:
    """Defaults for QR content analysis."""

    ec_level: str = "M"


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across all vault tools.

    Controls logging verbosity and destination. Logging stays at WARNING
    by default so command output is not interleaved with operation
    traces.
    """

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class VaultConfig:
    """Master configuration aggregating all tool-specific and global settings.

    Usage:
        >>> config = VaultConfig.load()                  # from default path
        >>> config = VaultConfig.load("custom.toml")     # from custom path
        >>> print(config.caesar.shift)
        3
        >>> print(config.global_settings.log_level)
        WARNING
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    caesar: CaesarConfig = field(default_factory=CaesarConfig)
    vigenere: VigenereConfig = field(default_factory=VigenereConfig)
    morse: MorseConfig = field(default_factory=MorseConfig)
    hasher: HasherConfig = field(default_factory=HasherConfig)
    obfuscator: ObfuscatorConfig = field(default_factory=ObfuscatorConfig)
    qr: QRConfig = field(default_factory=QRConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> VaultConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`VaultConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            # Fall back to pure defaults when the default file is absent.
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            caesar=cls._build_section(CaesarConfig, raw.get("caesar", {})),
            vigenere=cls._build_section(VigenereConfig, raw.get("vigenere", {})),
            morse=cls._build_section(MorseConfig, raw.get("morse", {})),
            hasher=cls._build_section(HasherConfig, raw.get("hasher", {})),
            obfuscator=cls._build_section(ObfuscatorConfig, raw.get("obfuscator", {})),
            qr=cls._build_section(QRConfig, raw.get("qr", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> VaultConfig:
    """Module-level convenience wrapper around :meth:`VaultConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = VaultConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
