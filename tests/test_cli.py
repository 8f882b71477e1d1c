"""Tests for the Click command-line interface."""

import json

import pytest
from click.testing import CliRunner

from vault.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def _json(runner, *args):
    result = runner.invoke(cli, ["-o", "json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


def test_caesar_json(runner):
    payload = _json(runner, "caesar", "Hello", "-s", "3")
    assert payload["tool"] == "caesar"
    assert payload["output"] == "Khoor"
    assert _json(runner, "caesar", "Khoor", "-m", "decrypt")["output"] == "Hello"


def test_console_output_contains_result(runner):
    result = runner.invoke(cli, ["-q", "caesar", "Hello"])
    assert result.exit_code == 0
    assert "Khoor" in result.stdout
    assert "Version:" not in result.stdout


def test_banner_shown_without_quiet(runner):
    result = runner.invoke(cli, ["rot13", "Hello"])
    assert result.exit_code == 0
    assert "Version: 1.0.0" in result.stdout
    assert "Uryyb" in result.stdout


def test_rot13_base64_and_brute_force(runner):
    assert _json(runner, "rot13", "Hello")["output"] == "Uryyb"
    assert _json(runner, "base64", "HELLO")["output"] == "SEVMTE8="
    assert _json(runner, "base64", "SEVMTE8=", "-m", "decode")["output"] == "HELLO"
    rows = _json(runner, "brute-force", "KHOOR")["output"]
    assert rows[2] == {"shift": 3, "plaintext": "HELLO"}


def test_vigenere_commands(runner):
    assert _json(runner, "vigenere", "encrypt", "ATTACK", "-k", "LIME")["output"] == "LBFENS"
    assert _json(runner, "vigenere", "decrypt", "LBFENS", "-k", "LIME")["output"] == "ATTACK"
    assert _json(runner, "vigenere", "verify", "ATTACK", "LBFENS", "-k", "LIME")["output"] is True
    assert len(_json(runner, "vigenere", "keygen", "-l", "6")["output"]) == 6

    analysis = _json(runner, "vigenere", "analyze", "ABCABCABC")
    assert analysis["output"]["key_lengths"] == [1, 3]
    assert "index_of_coincidence" in analysis["metadata"]


def test_vigenere_crack_with_wordlist(runner, tmp_path):
    wordlist = tmp_path / "words.txt"
    wordlist.write_text("KEY\nLEMON\n\nSECRET\n", encoding="utf-8")
    ciphertext = _json(runner, "vigenere", "encrypt",
                       "MEET ME NEAR THE OLD OAK TREE AT NOON", "-k", "SECRET")["output"]
    payload = _json(runner, "vigenere", "crack", ciphertext, "-w", str(wordlist), "-n", "2")
    assert len(payload["output"]) == 2
    assert payload["metadata"]["best_key"] == "SECRET"


def test_vigenere_console_renderers(runner):
    ciphertext = "LXFOPVEFRNHR" * 3
    assert runner.invoke(cli, ["-q", "vigenere", "analyze", ciphertext]).exit_code == 0
    assert runner.invoke(cli, ["-q", "vigenere", "crack", ciphertext]).exit_code == 0


def test_invalid_key_exits_with_error(runner):
    result = runner.invoke(cli, ["vigenere", "encrypt", "HELLO", "-k", "K3Y"])
    assert result.exit_code == 1
    assert "Key must contain only letters A-Z" in result.output


@pytest.mark.parametrize("args", [
    ["vigenere", "encrypt", "HELLO", "-k", ""],
    ["vigenere", "analyze", "AB", "-s", "5"],
    ["vigenere", "keygen", "-l", "0"],
])
def test_rejected_input_prints_only_the_error(runner, args):
    result = runner.invoke(cli, ["-q", *args])
    assert result.exit_code == 1
    assert "ERROR:" in result.output
    assert "Traceback" not in result.output
    assert "Operation failed" not in result.output


def test_qr_capacity_warning_is_not_logged_to_terminal(runner):
    result = runner.invoke(cli, ["-q", "qr", "analyze", "x" * 400, "-e", "H"])
    assert result.exit_code == 0
    assert "QR capacity exceeded" not in result.output
    assert "capacity" in result.output


def test_invalid_base64_exits_with_error(runner):
    result = runner.invoke(cli, ["-o", "json", "base64", "!!!", "-m", "decode"])
    assert result.exit_code == 1
    assert "Decoding failed" in result.output


def test_morse_and_braille_commands(runner):
    assert _json(runner, "morse", "encode", "SOS")["output"] == "... --- ..."
    assert _json(runner, "morse", "decode", "... --- ...")["output"] == "SOS"
    audio = _json(runner, "morse", "audio", "E", "-f", "600")
    assert audio["output"]["frequency"] == 600
    assert _json(runner, "braille", "encode", "HI")["output"] == "⠓⠊"
    assert _json(runner, "braille", "decode", "⠓⠊")["output"] == "HI"
    for args in (["morse", "encode", "SOS"], ["morse", "audio", "SOS"], ["braille", "encode", "Hi~"]):
        assert runner.invoke(cli, ["-q", *args]).exit_code == 0


def test_password_commands(runner, fast_config_file):
    base = ["-c", str(fast_config_file), "-o", "json"]
    hashed = runner.invoke(cli, [*base, "password", "hash", "-p", "secret"])
    assert hashed.exit_code == 0, hashed.output
    stored = json.loads(hashed.stdout)["output"]
    assert stored.endswith(":1000")

    verified = runner.invoke(cli, [*base, "password", "verify", stored, "-p", "secret"])
    assert json.loads(verified.stdout)["output"] is True

    strength = runner.invoke(cli, [*base, "password", "strength", "-p", "Pass123!"])
    assert json.loads(strength.stdout)["output"]["score"] == 100


def test_password_prompt(runner, fast_config_file):
    result = runner.invoke(
        cli,
        ["-c", str(fast_config_file), "-q", "password", "strength"],
        input="weak\n",
    )
    assert result.exit_code == 0
    assert "Failed rules" in result.stdout


def test_password_verify_malformed_storage(runner):
    result = runner.invoke(cli, ["password", "verify", "abc", "-p", "secret"])
    assert result.exit_code == 1
    assert "Invalid stored hash format" in result.output


def test_obfuscate_and_qr(runner):
    assert _json(runner, "obfuscate", "Hello", "-t", "reverse", "-t", "shift")["output"] == "roohK"
    payload = _json(runner, "qr", "analyze", "https://example.com", "-e", "l")
    assert payload["output"]["detection"]["primary_type"] == "url"
    assert payload["metadata"]["ec_level"] == "L"
    assert runner.invoke(cli, ["-q", "qr", "analyze", "WIFI:S:home;P:pw;;"]).exit_code == 0


def test_missing_config_file(runner, tmp_path):
    result = runner.invoke(cli, ["-c", str(tmp_path / "absent.toml"), "rot13", "x"])
    assert result.exit_code == 2
