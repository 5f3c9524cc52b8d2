"""Tests for credential validation."""

import pytest

from classifier_app.core.validation import validate_identifier, validate_secret


class TestValidateIdentifier:
    """Identifier must be 3-20 of letters, digits, underscore, hyphen."""

    @pytest.mark.parametrize("value", [
        "abc",
        "user_01",
        "a-b-c",
        "A" * 20,
        "___",
        "John-Doe_99",
    ])
    def test_accepts_valid(self, value):
        assert validate_identifier(value)

    @pytest.mark.parametrize("value", [
        "ab",
        "",
        "A" * 21,
        "john.doe",
        "john@example.com",
        "with space",
        "tab\tbed",
        "abc\n",
        "ümlaut",
    ])
    def test_rejects_invalid(self, value):
        assert not validate_identifier(value)

    def test_rejects_non_strings(self):
        assert not validate_identifier(None)
        assert not validate_identifier(12345)


class TestValidateSecret:
    """Secret needs 8+ chars with a letter, a digit and a symbol from @$!%*#?&."""

    @pytest.mark.parametrize("value", [
        "passw0rd!",
        "A1@aaaaa",
        "12345678a#",
        "?&%*$!@#x9",
    ])
    def test_accepts_valid(self, value):
        assert validate_secret(value)

    @pytest.mark.parametrize("value", [
        "a1@aaaa",       # 7 characters
        "password!",     # no digit
        "12345678!",     # no letter
        "password1",     # no symbol
        "password1^",    # symbol outside the allowed set
        "pass word1!",   # whitespace
        "",
    ])
    def test_rejects_invalid(self, value):
        assert not validate_secret(value)

    def test_rejects_non_strings(self):
        assert not validate_secret(None)
