"""Unit tests for validator functions."""

import pytest

from bigint import (
    DivisionByZeroError,
    InvalidFormatError,
    InvalidInputError,
    OutOfRangeError,
    validate_decimal_string,
    validate_divisor,
    validate_integer,
    validate_range,
)


class TestValidateInteger:
    """Tests for validate_integer function."""

    def test_accepts_int(self):
        assert validate_integer(42) == 42

    def test_accepts_negative(self):
        assert validate_integer(-100) == -100

    def test_accepts_huge(self):
        assert validate_integer(10**100) == 10**100

    def test_rejects_float(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_integer(3.0)  # type: ignore
        assert "float" in str(exc_info.value)

    def test_rejects_none(self):
        with pytest.raises(InvalidInputError):
            validate_integer(None)  # type: ignore


class TestValidateDecimalString:
    """Tests for validate_decimal_string function."""

    @pytest.mark.parametrize("text", ["0", "7", "-7", "+7", "000123", "-0"])
    def test_accepts_well_formed(self, text):
        assert validate_decimal_string(text) == text

    @pytest.mark.parametrize("text", ["", "+", "-"])
    def test_rejects_missing_digits(self, text):
        with pytest.raises(InvalidFormatError) as exc_info:
            validate_decimal_string(text)
        assert "Missing digits" in str(exc_info.value)

    @pytest.mark.parametrize("text", ["12a", " 12", "12 ", "--1", "1-", "1.5", "0x10", "١٢"])
    def test_rejects_malformed(self, text):
        with pytest.raises(InvalidFormatError) as exc_info:
            validate_decimal_string(text)
        assert exc_info.value.text == text

    def test_format_error_is_input_error(self):
        with pytest.raises(InvalidInputError):
            validate_decimal_string("abc")

    def test_rejects_bytes(self):
        with pytest.raises(InvalidInputError):
            validate_decimal_string(b"12")  # type: ignore


class TestValidateRange:
    """Tests for validate_range function."""

    def test_accepts_value_in_range(self):
        assert validate_range(5, min_val=0, max_val=10) == 5

    def test_accepts_bounds(self):
        assert validate_range(0, min_val=0, max_val=10) == 0
        assert validate_range(10, min_val=0, max_val=10) == 10

    def test_rejects_outside(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            validate_range(11, min_val=0, max_val=10)
        assert exc_info.value.min_val == 0
        assert exc_info.value.max_val == 10

    def test_accepts_any_with_no_bounds(self):
        assert validate_range(-(10**50)) == -(10**50)


class TestValidateDivisor:
    """Tests for validate_divisor function."""

    def test_accepts_non_zero(self):
        assert validate_divisor(10, 3) is None

    def test_rejects_zero(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            validate_divisor(10, 0)
        assert exc_info.value.numerator == 10
