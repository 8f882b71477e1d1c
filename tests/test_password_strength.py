"""Tests for the password strength checker."""

import pytest

from vault.analyzers.password_strength import check_password_strength, suggest_improvements


def test_strong_password():
    report = check_password_strength("Pass123!")
    assert report.valid
    assert report.errors == []
    assert report.score == 100


def test_weak_password():
    report = check_password_strength("weak")
    assert not report.valid
    assert report.score == 25
    assert len(report.errors) == 4
    assert "Password must be at least 8 characters long" in report.errors


def test_optional_rules_still_score():
    report = check_password_strength("Password123", require_special=False)
    assert report.valid
    assert report.score == 90


def test_long_password_bonus():
    report = check_password_strength("abcdefghijklmnopq")
    assert report.score == 60
    assert len(report.errors) == 3


def test_score_is_capped():
    assert check_password_strength("Password123!Password").score == 100


def test_custom_min_length():
    report = check_password_strength("Pass123!", min_length=12)
    assert report.errors == ["Password must be at least 12 characters long"]
    assert report.score == 75


def test_type_error():
    with pytest.raises(TypeError):
        check_password_strength(None)


def test_suggestions():
    suggestions = suggest_improvements("abc")
    assert "Increase length to at least 8 characters (currently 3)" in suggestions
    assert "Add uppercase letters (A-Z)" in suggestions
    assert "Mix different types of characters" in suggestions
    assert "Add lowercase letters (a-z)" not in suggestions


def test_suggestions_detect_repeats():
    suggestions = suggest_improvements("aaa111")
    assert "Avoid repeating characters (aaa, 111, etc.)" in suggestions
    assert "Mix different types of characters" not in suggestions


def test_no_suggestions_for_good_password():
    assert suggest_improvements("Pass123!Word") == []
