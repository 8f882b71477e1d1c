"""
Vault Engine
=============

Central orchestrator for the Encryption Vault. :class:`VaultEngine`
exposes one method per command-line operation, fills in defaults from
:class:`~shared.config.VaultConfig`, logs each call with its timing and
returns a uniform :class:`~vault.core.models.OperationResult`.

The library functions stay pure; the engine is the only layer that logs.
Failures are logged and re-raised unchanged.

Architecture follows the Facade pattern (Gamma et al., 1994), providing
a simplified interface over the individual cipher, encoder, hashing and
analyzer modules.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Optional, Sequence

from pydantic import BaseModel

from shared.config import VaultConfig
from shared.logger import VaultLogger

from vault.analyzers import password_strength, qr_content
from vault.analyzers.frequency import index_of_coincidence
from vault.ciphers import caesar, rot13, vigenere
from vault.core.exceptions import CapacityExceededError, ValidationError
from vault.core.models import HashAlgorithm, OperationResult
from vault.encoders import base64_codec, braille, morse
from vault.hashing import password_hasher
from vault.transforms import obfuscator


_Action = Callable[[], tuple[Any, dict[str, Any]]]

_MODES = ("encode", "decode")
_CIPHER_MODES = ("encrypt", "decrypt")


def _plain(value: Any) -> Any:
    """Convert models (and lists of models) to JSON-compatible data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def _require_mode(mode: str, allowed: Sequence[str]) -> str:
    """Return *mode* if it is one of *allowed*, else raise ValidationError."""
    if mode not in allowed:
        raise ValidationError(f"Mode must be one of: {', '.join(allowed)}")
    return mode


class VaultEngine:
    """Runs every vault operation with logging, timing and config defaults.

    Usage::

        engine = VaultEngine()
        result = engine.vigenere_encrypt("ATTACK AT DAWN", "LEMON")
        result.output          # 'LXFOPV EF RNHR'
        result.duration_ms     # wall-clock time of the call

    Attributes:
        config: Vault configuration instance.
        logger: Logger for the engine (``vault.engine``).
    """

    def __init__(
        self,
        config: Optional[VaultConfig] = None,
        *,
        console_logging: bool = True,
    ) -> None:
        self.config = config or VaultConfig()
        settings = self.config.global_settings
        self.logger = VaultLogger(
            "engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
            console_output=console_logging,
        )

    # ------------------------------------------------------------------ #
    #  Dispatch
    # ------------------------------------------------------------------ #

    def _run(
        self,
        tool: str,
        operation: str,
        input_length: int,
        action: _Action,
    ) -> OperationResult:
        """Execute *action* inside an operation scope and wrap its result."""
        label = f"{tool}.{operation}"
        started_at = datetime.now(timezone.utc)

        with self.logger.operation(label):
            try:
                with self.logger.timed(label) as timer:
                    output, metadata = action()
            except Exception:
                self.logger.exception(
                    "Operation failed: %s", label, input_length=input_length,
                )
                raise

        return OperationResult(
            tool=tool,
            operation=operation,
            input_length=input_length,
            output=_plain(output),
            metadata={k: _plain(v) for k, v in metadata.items()},
            started_at=started_at,
            duration_ms=round(timer.elapsed_ms, 3),
        )

    # ------------------------------------------------------------------ #
    #  Caesar / ROT13 / Base64
    # ------------------------------------------------------------------ #

    def caesar(self, mode: str, text: str, shift: Optional[int] = None) -> OperationResult:
        """Encrypt or decrypt with the Caesar cipher."""
        _require_mode(mode, _CIPHER_MODES)
        use_shift = self.config.caesar.shift if shift is None else shift

        def action() -> tuple[Any, dict[str, Any]]:
            fn = caesar.encrypt if mode == "encrypt" else caesar.decrypt
            return fn(text, use_shift), {"shift": use_shift}

        return self._run("caesar", mode, len(text), action)

    def caesar_brute_force(self, ciphertext: str) -> OperationResult:
        """Decrypt under all 25 shifts."""
        def action() -> tuple[Any, dict[str, Any]]:
            candidates = caesar.brute_force(ciphertext)
            rows = [{"shift": s, "plaintext": p} for s, p in candidates.items()]
            return rows, {"candidates": len(rows)}

        return self._run("caesar", "brute-force", len(ciphertext), action)

    def rot13(self, text: str) -> OperationResult:
        """Apply ROT13 to *text*; the same call decodes."""
        def action() -> tuple[Any, dict[str, Any]]:
            analysis = rot13.analyze(text)
            return analysis.encoded, {"letters": analysis.letters}

        return self._run("rot13", "encode", len(text), action)

    def base64(self, mode: str, text: str) -> OperationResult:
        """Encode *text* to Base64 or decode it back to UTF-8."""
        _require_mode(mode, _MODES)

        def action() -> tuple[Any, dict[str, Any]]:
            if mode == "encode":
                analysis = base64_codec.analyze(text)
                return analysis.encoded, {
                    "original_bytes": analysis.original_bytes,
                    "padding": analysis.padding,
                }
            decoded = base64_codec.decode(text)
            return decoded, {"decoded_length": len(decoded)}

        return self._run("base64", mode, len(text), action)

    # ------------------------------------------------------------------ #
    #  Vigenere
    # ------------------------------------------------------------------ #

    def vigenere_encrypt(self, plaintext: str, key: str) -> OperationResult:
        """Encrypt *plaintext* with the Vigenere *key*."""
        def action() -> tuple[Any, dict[str, Any]]:
            return vigenere.encrypt(plaintext, key), {"key_length": len(key)}

        return self._run("vigenere", "encrypt", len(plaintext), action)

    def vigenere_decrypt(self, ciphertext: str, key: str) -> OperationResult:
        """Decrypt Vigenere *ciphertext* with *key*."""
        def action() -> tuple[Any, dict[str, Any]]:
            return vigenere.decrypt(ciphertext, key), {"key_length": len(key)}

        return self._run("vigenere", "decrypt", len(ciphertext), action)

    def vigenere_verify(self, plaintext: str, ciphertext: str, key: str) -> OperationResult:
        """Check that *ciphertext* is *plaintext* encrypted with *key*."""
        def action() -> tuple[Any, dict[str, Any]]:
            return vigenere.verify(plaintext, ciphertext, key), {}

        return self._run("vigenere", "verify", len(plaintext), action)

    def vigenere_keygen(self, length: Optional[int] = None) -> OperationResult:
        """Generate a random key (config length when omitted)."""
        use_length = self.config.vigenere.key_length if length is None else length

        def action() -> tuple[Any, dict[str, Any]]:
            return vigenere.generate_key(use_length), {"length": use_length}

        return self._run("vigenere", "keygen", 0, action)

    def vigenere_crack(
        self,
        ciphertext: str,
        words: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
    ) -> OperationResult:
        """Dictionary attack; returns the best *limit* candidates."""
        candidates = list(words) if words else list(self.config.vigenere.wordlist)
        use_limit = self.config.vigenere.max_results if limit is None else limit

        def action() -> tuple[Any, dict[str, Any]]:
            ranked = vigenere.brute_force(ciphertext, candidates or None)
            return ranked[:use_limit], {
                "candidates_tried": len(ranked),
                "best_key": ranked[0].key if ranked else None,
            }

        return self._run("vigenere", "crack", len(ciphertext), action)

    def vigenere_analyze(
        self,
        ciphertext: str,
        sequence_length: Optional[int] = None,
    ) -> OperationResult:
        """Kasiski examination plus the Index of Coincidence of the text."""
        use_length = (
            self.config.vigenere.sequence_length
            if sequence_length is None
            else sequence_length
        )

        def action() -> tuple[Any, dict[str, Any]]:
            analysis = vigenere.analyze(ciphertext, use_length)
            return analysis, {
                "sequence_length": use_length,
                "index_of_coincidence": round(index_of_coincidence(ciphertext), 4),
            }

        return self._run("vigenere", "analyze", len(ciphertext), action)

    # ------------------------------------------------------------------ #
    #  Morse / Braille
    # ------------------------------------------------------------------ #

    def morse_encode(self, text: str, wpm: Optional[int] = None) -> OperationResult:
        """Encode *text* as Morse with timing and symbol counts."""
        use_wpm = self.config.morse.wpm if wpm is None else wpm

        def action() -> tuple[Any, dict[str, Any]]:
            encoded = morse.text_to_morse(text)
            return encoded, {
                "wpm": use_wpm,
                "timing": morse.audio_timing(text, use_wpm),
                "stats": morse.morse_stats(encoded),
            }

        return self._run("morse", "encode", len(text), action)

    def morse_decode(self, code: str) -> OperationResult:
        """Normalise and decode Morse *code*, reporting any warnings."""
        def action() -> tuple[Any, dict[str, Any]]:
            report = morse.validate_morse(code)
            return morse.morse_to_text(report.corrected), {
                "valid": report.valid,
                "warnings": report.errors,
            }

        return self._run("morse", "decode", len(code), action)

    def morse_audio(
        self,
        text: str,
        frequency: Optional[float] = None,
        dot_duration: Optional[float] = None,
    ) -> OperationResult:
        """Playback plan (tone, dits, dahs, silences) for *text*."""
        settings = self.config.morse
        use_frequency = settings.frequency if frequency is None else frequency
        use_duration = settings.dot_duration if dot_duration is None else dot_duration

        def action() -> tuple[Any, dict[str, Any]]:
            encoded = morse.text_to_morse(text)
            plan = morse.audio_config(encoded, use_frequency, use_duration)
            return plan, {"morse": encoded}

        return self._run("morse", "audio", len(text), action)

    def braille_encode(self, text: str) -> OperationResult:
        """Encode *text* as Braille, noting unsupported positions."""
        def action() -> tuple[Any, dict[str, Any]]:
            report = braille.validate_text(text)
            return braille.text_to_braille(text), {
                "unsupported_positions": report.errors,
                "stats": braille.text_stats(text),
            }

        return self._run("braille", "encode", len(text), action)

    def braille_decode(self, cells: str) -> OperationResult:
        """Decode Braille *cells* to text."""
        def action() -> tuple[Any, dict[str, Any]]:
            return braille.braille_to_text(cells), {"stats": braille.braille_stats(cells)}

        return self._run("braille", "decode", len(cells), action)

    # ------------------------------------------------------------------ #
    #  Passwords
    # ------------------------------------------------------------------ #

    def _algorithm(self, algorithm: Optional[str]) -> HashAlgorithm:
        name = algorithm or self.config.hasher.algorithm
        try:
            return HashAlgorithm(name)
        except ValueError as exc:
            raise ValidationError('Algorithm must be "pbkdf2" or "scrypt"') from exc

    def password_hash(self, password: str, algorithm: Optional[str] = None) -> OperationResult:
        """Hash a password with the configured KDF and work factor."""
        algo = self._algorithm(algorithm)
        hasher = self.config.hasher

        def action() -> tuple[Any, dict[str, Any]]:
            salt = password_hasher.generate_salt(hasher.salt_length)
            if algo is HashAlgorithm.PBKDF2:
                hashed = password_hasher.hash_password(password, salt, hasher.iterations)
            else:
                hashed = password_hasher.hash_password_scrypt(password, salt, hasher.scrypt_cost)
            return hashed.to_storage(), {"record": hashed}

        return self._run("password", "hash", len(password), action)

    def password_verify(
        self,
        password: str,
        stored: str,
        algorithm: Optional[str] = None,
    ) -> OperationResult:
        """Check *password* against a stored ``hash:salt:work`` string."""
        algo = self._algorithm(algorithm)

        def action() -> tuple[Any, dict[str, Any]]:
            verify = (
                password_hasher.verify_password
                if algo is HashAlgorithm.PBKDF2
                else password_hasher.verify_password_scrypt
            )
            return verify(password, stored), {"algorithm": algo.value}

        return self._run("password", "verify", len(password), action)

    def password_strength(self, password: str) -> OperationResult:
        """Score *password* against the configured composition rules."""
        def action() -> tuple[Any, dict[str, Any]]:
            report = password_strength.check_password_strength(
                password, min_length=self.config.hasher.min_length,
            )
            return report, {"suggestions": password_strength.suggest_improvements(password)}

        return self._run("password", "strength", len(password), action)

    # ------------------------------------------------------------------ #
    #  Obfuscation / QR
    # ------------------------------------------------------------------ #

    def obfuscate(
        self,
        text: str,
        techniques: Optional[Sequence[str]] = None,
    ) -> OperationResult:
        """Apply a chain of obfuscation techniques to *text*."""
        steps = list(techniques) if techniques else list(self.config.obfuscator.techniques)

        def action() -> tuple[Any, dict[str, Any]]:
            result = obfuscator.multi_obfuscate(text, steps)
            return result, {
                "techniques": steps,
                "strength": obfuscator.obfuscation_strength(text, result),
            }

        return self._run("obfuscator", "obfuscate", len(text), action)

    def qr_analyze(self, content: str, ec_level: Optional[str] = None) -> OperationResult:
        """Classify a QR payload and estimate the version needed to hold it.

        Content that fits no supported version yields ``estimate = None``
        and a warning in the metadata instead of failing the analysis.
        """
        level = ec_level or self.config.qr.ec_level

        def action() -> tuple[Any, dict[str, Any]]:
            detection = qr_content.detect_content_type(content)
            analysis = qr_content.analyze_content(content)
            metadata: dict[str, Any] = {"ec_level": level.upper()}
            try:
                estimate = qr_content.estimate_version(content, level)
            except CapacityExceededError as exc:
                self.logger.warning("QR capacity exceeded", length=len(content))
                estimate = None
                metadata["warning"] = str(exc)

            extracted = self._qr_payload(detection.primary_type, content)
            return {
                "detection": _plain(detection),
                "analysis": _plain(analysis),
                "estimate": _plain(estimate),
                "payload": _plain(extracted),
            }, metadata

        return self._run("qr", "analyze", len(content), action)

    @staticmethod
    def _qr_payload(kind: str, content: str) -> Any:
        extractors = {
            "url": qr_content.extract_url,
            "email": qr_content.extract_email,
            "phone": qr_content.extract_phone,
            "wifi": qr_content.extract_wifi,
            "contact": qr_content.extract_contact,
        }
        extractor = extractors.get(kind)
        return extractor(content) if extractor else None
