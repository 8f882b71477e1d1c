"""Tests for the Vigenere engine and its cryptanalysis helpers."""

import string

import pytest

from vault.ciphers import vigenere
from vault.core.exceptions import InvalidKeyError, ValidationError


# ── Encryption ────────────────────────────────────────────────────────────────
def test_encrypt_known_vectors():
    assert vigenere.encrypt("HELLOWORLD", "KEY") == "RIJVSUYVJN"
    assert vigenere.encrypt("ATTACK", "LIME") == "LBFENS"


def test_encrypt_passes_non_letters_through_without_advancing_key():
    assert vigenere.encrypt("HELLO, WORLD!", "KEY") == "RIJVS, UYVJN!"


def test_encrypt_preserves_case_and_ignores_key_case():
    assert vigenere.encrypt("hello", "KEY") == "rijvs"
    assert vigenere.encrypt("HELLO", "key") == "RIJVS"
    assert vigenere.encrypt("HeLLo", "Key") == "RiJVs"


def test_encrypt_empty_text():
    assert vigenere.encrypt("", "KEY") == ""


def test_decrypt_inverts_encrypt():
    assert vigenere.decrypt("RIJVSUYVJN", "KEY") == "HELLOWORLD"
    text = "The quick brown fox jumps over the lazy dog. 123!"
    assert vigenere.decrypt(vigenere.encrypt(text, "Vault"), "VAULT") == text


def test_round_trip_long_mixed_text():
    text = "Attack at Dawn, 42!" * 60
    assert len(text) >= 1000
    ciphertext = vigenere.encrypt(text, "Lemon")
    assert len(ciphertext) == len(text)
    assert vigenere.decrypt(ciphertext, "LEMON") == text


@pytest.mark.parametrize("key", ["", "K3Y", "KEY WORD", "KÉY"])
def test_invalid_keys_rejected(key):
    with pytest.raises(InvalidKeyError):
        vigenere.encrypt("HELLO", key)
    with pytest.raises(ValidationError):
        vigenere.decrypt("HELLO", key)


def test_non_string_key_is_invalid_key():
    with pytest.raises(InvalidKeyError):
        vigenere.encrypt("HELLO", 42)


def test_non_string_text_is_type_error():
    with pytest.raises(TypeError):
        vigenere.encrypt(123, "KEY")
    with pytest.raises(TypeError):
        vigenere.decrypt(None, "KEY")


def test_invalid_key_error_is_value_error():
    with pytest.raises(ValueError):
        vigenere.encrypt("HELLO", "")


def test_verify():
    assert vigenere.verify("HELLO", "RIJVS", "KEY")
    assert vigenere.verify("HELLO", "rijvs", "KEY")
    assert not vigenere.verify("HELLO", "RIJVT", "KEY")
    assert not vigenere.verify("HELLO", vigenere.encrypt("HELLO", "KEY"), "LOCK")
    with pytest.raises(TypeError):
        vigenere.verify("HELLO", 5, "KEY")


# ── Key generation ───────────────────────────────────────────────────────────
def test_generate_key_shape():
    key = vigenere.generate_key(12)
    assert len(key) == 12
    assert set(key) <= set(string.ascii_uppercase)
    assert len(vigenere.generate_key()) == vigenere.DEFAULT_KEY_LENGTH


def test_generate_key_varies():
    assert len({vigenere.generate_key(16) for _ in range(20)}) > 1


def test_generated_key_round_trips():
    key = vigenere.generate_key(5)
    assert vigenere.decrypt(vigenere.encrypt("ATTACK AT DAWN", key), key) == "ATTACK AT DAWN"


@pytest.mark.parametrize("length", [0, -3, 2.5, True])
def test_generate_key_rejects_bad_length(length):
    with pytest.raises(ValidationError):
        vigenere.generate_key(length)


# ── Dictionary attack ────────────────────────────────────────────────────────
def test_brute_force_ranks_true_key_first():
    plaintext = "ATTACK AT DAWN THE ENEMY IS NEAR THE EASTERN GATE"
    ciphertext = vigenere.encrypt(plaintext, "SECRET")
    ranked = vigenere.brute_force(ciphertext, ["KEY", "LEMON", "SECRET", "VAULT"])
    assert ranked[0].key == "SECRET"
    assert ranked[0].plaintext == plaintext
    scores = [r.score for r in ranked]
    assert scores == sorted(scores, reverse=True)


def test_brute_force_skips_unusable_keys():
    ranked = vigenere.brute_force("RIJVS", ["", "K3Y", "KEY"])
    assert [r.key for r in ranked] == ["KEY"]


def test_brute_force_ties_keep_dictionary_order():
    ranked = vigenere.brute_force("1234 !?", ["KEY", "LEMON", "ABC"])
    assert [r.key for r in ranked] == ["KEY", "LEMON", "ABC"]
    assert all(r.score == 0 for r in ranked)


def test_brute_force_uses_default_dictionary():
    assert len(vigenere.brute_force("XYZ")) == len(vigenere.DEFAULT_WORDS)
    assert len(vigenere.brute_force("XYZ", [])) == len(vigenere.DEFAULT_WORDS)


def test_brute_force_rejects_empty_ciphertext():
    with pytest.raises(ValidationError):
        vigenere.brute_force("")
    with pytest.raises(TypeError):
        vigenere.brute_force(None)


# ── Kasiski examination ──────────────────────────────────────────────────────
def test_analyze_finds_key_length_factor():
    ciphertext = vigenere.encrypt("ATTACKATDAWN" * 4, "AB")
    result = vigenere.analyze(ciphertext)
    assert 2 in result.key_lengths
    assert 12 in result.distances
    assert result.likely_key_length == result.key_lengths[0]


def test_analyze_simple_repeat():
    result = vigenere.analyze("ABCABC", 3)
    assert result.distances == [3]
    assert result.key_lengths == [1, 3]
    assert result.likely_key_length == 1
    assert result.repetition_count == 1


def test_analyze_without_repeats():
    result = vigenere.analyze("ABCDEFG")
    assert result.key_lengths == []
    assert result.distances == []
    assert result.likely_key_length is None
    assert result.repetition_count == 0


def test_analyze_ignores_non_letters():
    assert vigenere.analyze("abc-abc", 3).distances == [3]


def test_analyze_limits_lengths_and_distances():
    result = vigenere.analyze("ABCD" * 40, 2)
    assert len(result.key_lengths) <= 5
    assert len(result.distances) == 10
    assert result.repetition_count > 10


def test_analyze_rejects_short_or_bad_input():
    with pytest.raises(ValidationError):
        vigenere.analyze("AB", 5)
    with pytest.raises(ValidationError):
        vigenere.analyze("ABCDEF", 0)
    with pytest.raises(ValidationError):
        vigenere.analyze("ABCDEF", "3")
    with pytest.raises(TypeError):
        vigenere.analyze(123)
