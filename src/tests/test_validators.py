"""
Tests for input validation functions.

Tests cover the validators module:
- Number parsing of free-text input
- String validation (required, length)
- Positive number validation
- Unit presence
- Login PIN format
"""

import math

import pytest

from src.utils import validators


class TestParseNumber:
    """Test parsing of user-entered numbers."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (5, 5.0),
            (2.5, 2.5),
            ("12", 12.0),
            (" 7 ", 7.0),
            ("0.25", 0.25),
            ("-3", -3.0),
        ],
    )
    def test_numbers(self, raw, expected):
        assert validators.parse_number(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "12g", "1,000", True, False])
    def test_not_numbers(self, raw):
        assert validators.parse_number(raw) is None

    def test_nan_and_infinity_rejected(self):
        assert validators.parse_number("nan") is None
        assert validators.parse_number(math.inf) is None
        assert validators.parse_number("-inf") is None

    def test_is_numeric(self):
        assert validators.is_numeric("3")
        assert not validators.is_numeric("three")


class TestWholeToInt:
    """Test wire normalisation of parsed numbers."""

    def test_whole_float_becomes_int(self):
        result = validators.whole_to_int(200.0)
        assert result == 200
        assert type(result) is int

    def test_fraction_is_kept(self):
        assert validators.whole_to_int(82.5) == 82.5

    def test_int_passes_through(self):
        assert type(validators.whole_to_int(90)) is int


class TestStringValidation:
    """Test string validation functions."""

    def test_validate_required_string_valid(self):
        """Test required string with valid input."""
        is_valid, error = validators.validate_required_string("Croissant", "Name")
        assert is_valid
        assert error == ""

    def test_validate_required_string_none(self):
        is_valid, error = validators.validate_required_string(None, "Name")
        assert not is_valid
        assert "required" in error.lower()
        assert error.startswith("Name")

    def test_validate_required_string_whitespace(self):
        is_valid, _ = validators.validate_required_string("   ", "Name")
        assert not is_valid

    def test_validate_string_length_exact_max(self):
        is_valid, _ = validators.validate_string_length("a" * 10, 10)
        assert is_valid

    def test_validate_string_length_too_long(self):
        is_valid, error = validators.validate_string_length("a" * 11, 10, "Memo")
        assert not is_valid
        assert "10 characters" in error


class TestNumericValidation:
    """Test positive number validation."""

    def test_validate_positive_number_valid_string(self):
        is_valid, _ = validators.validate_positive_number("120")
        assert is_valid

    def test_validate_positive_number_zero(self):
        is_valid, error = validators.validate_positive_number(0, "Goal")
        assert not is_valid
        assert "greater than zero" in error

    def test_validate_positive_number_invalid_string(self):
        is_valid, error = validators.validate_positive_number("lots", "Goal")
        assert not is_valid
        assert "valid number" in error


class TestUnitValidation:
    """Test unit presence."""

    @pytest.mark.parametrize("unit", ["g", "ml", "개"])
    def test_validate_unit_valid(self, unit):
        is_valid, _ = validators.validate_unit(unit)
        assert is_valid

    def test_validate_unit_empty(self):
        is_valid, error = validators.validate_unit("")
        assert not is_valid
        assert error.startswith("Unit")


class TestPinValidation:
    """Test login PIN format."""

    def test_valid_pin(self):
        assert validators.validate_pin("0420") == (True, "")

    @pytest.mark.parametrize("pin", ["", "123", "12345", "12a4"])
    def test_invalid_pin(self, pin):
        is_valid, error = validators.validate_pin(pin)
        assert not is_valid
        assert "4 digits" in error


class TestSanitizeString:
    def test_strips(self):
        assert validators.sanitize_string("  Weekend  ") == "Weekend"

    def test_blank_becomes_none(self):
        assert validators.sanitize_string("   ") is None
        assert validators.sanitize_string(None) is None
