"""Tests for the VaultEngine facade."""

import json

import pytest

from shared.config import GlobalConfig, HasherConfig, VaultConfig, VigenereConfig
from vault.core.engine import VaultEngine
from vault.core.exceptions import InvalidKeyError, ValidationError


def test_result_envelope(engine):
    result = engine.caesar("encrypt", "Hello")
    assert result.tool == "caesar"
    assert result.operation == "encrypt"
    assert result.output == "Khoor"
    assert result.input_length == 5
    assert result.metadata == {"shift": 3}
    assert result.duration_ms >= 0
    json.dumps(result.model_dump(mode="json"))


def test_explicit_arguments_override_config(engine):
    assert engine.caesar("decrypt", "Hello", 1).output == "Gdkkn"


def test_unknown_mode_rejected(engine):
    with pytest.raises(ValidationError):
        engine.caesar("sideways", "Hello")
    with pytest.raises(ValidationError):
        engine.base64("compress", "Hello")


def test_caesar_brute_force(engine):
    result = engine.caesar_brute_force("KHOOR")
    assert len(result.output) == 25
    assert {"shift": 3, "plaintext": "HELLO"} in result.output


def test_rot13_and_base64(engine):
    assert engine.rot13("Hello").output == "Uryyb"
    encoded = engine.base64("encode", "HELLO")
    assert encoded.output == "SEVMTE8="
    assert encoded.metadata["padding"] == 1
    assert engine.base64("decode", "SEVMTE8=").output == "HELLO"


def test_vigenere_operations(engine):
    assert engine.vigenere_encrypt("ATTACK", "LIME").output == "LBFENS"
    assert engine.vigenere_decrypt("LBFENS", "LIME").output == "ATTACK"
    assert engine.vigenere_verify("ATTACK", "lbfens", "LIME").output is True
    assert len(engine.vigenere_keygen().output) == 8
    assert len(engine.vigenere_keygen(4).output) == 4


def test_vigenere_errors_propagate(engine):
    with pytest.raises(InvalidKeyError):
        engine.vigenere_encrypt("HELLO", "")
    with pytest.raises(TypeError):
        engine.vigenere_encrypt(123, "KEY")


def test_vigenere_crack_uses_limit_and_wordlist():
    config = VaultConfig(vigenere=VigenereConfig(wordlist=["KEY", "LEMON", "SECRET"], max_results=2))
    engine = VaultEngine(config, console_logging=False)
    ciphertext = engine.vigenere_encrypt("MEET ME NEAR THE OLD OAK TREE AT NOON", "LEMON").output

    result = engine.vigenere_crack(ciphertext)
    assert len(result.output) == 2
    assert result.metadata["candidates_tried"] == 3
    assert result.metadata["best_key"] == "LEMON"

    assert len(engine.vigenere_crack(ciphertext, ["KEY"], limit=5).output) == 1


def test_vigenere_analyze(engine):
    ciphertext = engine.vigenere_encrypt("ATTACKATDAWN" * 4, "AB").output
    result = engine.vigenere_analyze(ciphertext)
    assert 2 in result.output["key_lengths"]
    assert result.metadata["sequence_length"] == 3
    assert 0 < result.metadata["index_of_coincidence"] <= 1


def test_morse_and_braille(engine):
    encoded = engine.morse_encode("SOS")
    assert encoded.output == "... --- ..."
    assert encoded.metadata["wpm"] == 20
    assert encoded.metadata["stats"]["dots"] == 6

    decoded = engine.morse_decode("...  --- ...")
    assert decoded.output == "SOS"
    assert decoded.metadata["valid"] is False

    audio = engine.morse_audio("E T")
    assert audio.output["frequency"] == 800
    assert [s["kind"] for s in audio.output["pattern"]] == ["character", "silence", "character"]

    cells = engine.braille_encode("Hi~")
    assert cells.output == "⠓⠊?"
    assert cells.metadata["unsupported_positions"] == [2]
    assert engine.braille_decode("⠓⠊").output == "HI"


def test_password_hash_and_verify(engine):
    hashed = engine.password_hash("secret")
    assert hashed.metadata["record"]["iterations"] == 1000
    assert engine.password_verify("secret", hashed.output).output is True
    assert engine.password_verify("nope", hashed.output).output is False

    scrypt = engine.password_hash("secret", "scrypt")
    assert scrypt.metadata["record"]["cost"] == 4
    assert engine.password_verify("secret", scrypt.output, "scrypt").output is True


def test_password_hash_unknown_algorithm(engine):
    with pytest.raises(ValidationError):
        engine.password_hash("secret", "bcrypt")


def test_password_strength_uses_configured_min_length():
    config = VaultConfig(hasher=HasherConfig(min_length=12))
    engine = VaultEngine(config, console_logging=False)
    result = engine.password_strength("Pass123!")
    assert result.output["valid"] is False
    assert result.metadata["suggestions"] == []


def test_obfuscate(engine):
    result = engine.obfuscate("Hello", ["reverse", "shift"])
    assert result.output == "roohK"
    assert result.metadata["techniques"] == ["reverse", "shift"]
    assert engine.obfuscate("Hello World").output == "d1r0W 0113H"


def test_qr_analyze(engine):
    result = engine.qr_analyze("WIFI:T:WPA;S:MyNetwork;P:Password123;;")
    assert result.output["detection"]["primary_type"] == "wifi"
    assert result.output["payload"]["ssid"] == "MyNetwork"
    assert result.output["estimate"]["version"] >= 1
    assert result.metadata["ec_level"] == "M"


def test_qr_analyze_capacity_exceeded(engine):
    result = engine.qr_analyze("x" * 400, "H")
    assert result.output["estimate"] is None
    assert "capacity" in result.metadata["warning"]


def test_failures_are_logged_and_reraised(tmp_path):
    log_file = tmp_path / "vault.log"
    config = VaultConfig(
        global_settings=GlobalConfig(log_level="INFO", log_file=str(log_file), log_json=True),
    )
    engine = VaultEngine(config, console_logging=False)

    engine.caesar("encrypt", "Hello")
    with pytest.raises(InvalidKeyError):
        engine.vigenere_encrypt("Hello", "")

    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    completed = [r for r in records if r["message"].startswith("Completed")]
    failed = [r for r in records if r["message"].startswith("Operation failed")]

    assert completed[0]["operation"] == "caesar.encrypt"
    assert "duration_ms" in completed[0]["extra"]
    assert failed[0]["operation"] == "vigenere.encrypt"
    assert failed[0]["level"] == "ERROR"
    assert "InvalidKeyError" in failed[0]["exc_info"]
    assert all("Hello" not in r["message"] for r in records)
