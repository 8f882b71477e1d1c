"""Tests for the Braille encoder."""

import pytest

from vault.core.exceptions import ValidationError
from vault.encoders import braille


# ── Conversion ────────────────────────────────────────────────────────────────
def test_text_to_braille():
    assert braille.text_to_braille("HELLO") == "⠓⠑⠇⠇⠕"
    assert braille.text_to_braille("hello") == "⠓⠑⠇⠇⠕"
    assert braille.text_to_braille("~") == "?"


def test_braille_to_text():
    assert braille.braille_to_text("⠓⠑⠇⠇⠕⠀⠺⠕⠗⠇⠙") == "HELLO WORLD"
    assert braille.braille_to_text("⣿") == "?"


def test_digits_use_number_sign_and_round_trip():
    assert braille.text_to_braille("A1") == "⠁⠼⠁"
    assert braille.braille_to_text("⠁⠼⠁") == "A1"


def test_multi_cell_punctuation_decodes_by_longest_match():
    encoded = braille.text_to_braille("A/B")
    assert encoded == "⠁⠸⠌⠃"
    assert braille.braille_to_text(encoded) == "A/B"
    assert braille.braille_to_text("⠸") == "."


def test_char_helpers():
    assert braille.char_to_braille("a") == "⠁"
    assert braille.char_to_braille("~") == "?"
    assert braille.braille_to_char("⠼⠁") == "1"
    assert braille.braille_to_char("⣿") == "?"
    with pytest.raises(ValidationError):
        braille.char_to_braille("AB")


def test_word_helpers():
    encoded = braille.text_to_braille_words("HI YOU")
    assert encoded == "⠓⠊⠀⠽⠕⠥"
    assert braille.braille_words_to_text(encoded) == "HI YOU"


def test_type_errors():
    with pytest.raises(TypeError):
        braille.text_to_braille(1)
    with pytest.raises(TypeError):
        braille.braille_to_text(None)


# ── Validation / statistics ──────────────────────────────────────────────────
def test_validity_checks():
    assert braille.is_valid_braille_text("Hello!")
    assert not braille.is_valid_braille_text("~")
    assert braille.is_valid_braille("⠓⠑⠌")
    assert not braille.is_valid_braille("⣿")


def test_braille_stats():
    stats = braille.braille_stats("⠓⠊⠀⠽⠕⠥⣿")
    assert stats.length == 7
    assert stats.words == 2
    assert stats.valid_chars == 6
    assert stats.invalid_chars == 1


def test_text_stats():
    stats = braille.text_stats("Hi, 42!")
    assert stats.length == 7
    assert stats.words == 2
    assert stats.letters == 2
    assert stats.numbers == 2
    assert stats.punctuation == 2
    assert stats.spaces == 1


def test_validate_braille():
    report = braille.validate_braille("⠓⣿")
    assert report.fixed == "⠓?"
    assert report.errors == [1]
    assert not report.is_valid


def test_validate_text():
    report = braille.validate_text("hi~")
    assert report.fixed == "HI?"
    assert report.errors == [2]
    assert braille.validate_text("ok").is_valid


def test_supported_characters():
    chars = braille.supported_characters()
    assert chars.letters[0] == "A"
    assert len(chars.letters) == 26
    assert chars.numbers == list("0123456789")
    assert "/" in chars.punctuation


# ── Cell inspection ──────────────────────────────────────────────────────────
def test_dot_pattern():
    assert braille.dot_pattern("⠃") == [1, 2]
    assert braille.dot_pattern("⠿") == [1, 2, 3, 4, 5, 6]
    assert braille.dot_pattern("⠀") == []


def test_dot_pattern_errors():
    with pytest.raises(ValidationError):
        braille.dot_pattern("A")
    with pytest.raises(TypeError):
        braille.dot_pattern("⠃⠃")
    with pytest.raises(TypeError):
        braille.dot_pattern(5)


def test_braille_to_ascii():
    assert braille.braille_to_ascii("⠁") == "●○\n○○\n○○"
    assert braille.braille_to_ascii("⠛") == "●●\n●●\n○○"
    assert braille.braille_to_ascii("⠁", "X", ".") == "X.\n..\n.."
