"""Tests for result formatting and lenient number parsing."""

import math

import pytest

from app.core.units.formatting import FormatPolicy, format_result, to_exponential, to_precision
from app.utils.numbers import parse_number


class TestGeneralFormat:
    def test_exponential_at_upper_threshold(self):
        assert format_result(1_000_000) == "1.000000e+6"

    def test_just_below_upper_threshold(self):
        result = format_result(999999.9999999999)
        assert "e" not in result
        assert result == "1000000"

    def test_large_negative(self):
        assert format_result(-2_500_000) == "-2.500000e+6"

    def test_exponential_below_lower_threshold(self):
        assert format_result(0.0000001) == "1.000000e-7"

    def test_lower_threshold_itself_is_plain(self):
        assert format_result(0.000001) == "0.000001"

    def test_zero(self):
        assert format_result(0.0) == "0"
        assert format_result(-0.0) == "0"

    def test_ten_significant_digits(self):
        assert format_result(1 / 0.3048) == "3.280839895"
        assert format_result(1 / 3) == "0.3333333333"

    def test_trailing_zeros_stripped(self):
        assert format_result(123.45) == "123.45"
        assert format_result(1000.0) == "1000"
        assert format_result(-2.5) == "-2.5"

    def test_pi(self):
        assert format_result(math.pi) == "3.141592654"


class TestFixedFormats:
    def test_currency_keeps_two_decimals(self):
        assert format_result(0.92, FormatPolicy.FIXED) == "0.92"
        assert format_result(1, FormatPolicy.FIXED) == "1.00"
        assert format_result(1 / 0.92, FormatPolicy.FIXED) == "1.09"

    def test_currency_never_exponential(self):
        assert format_result(5_000_000, FormatPolicy.FIXED) == "5000000.00"

    def test_temperature_trims_zeros(self):
        assert format_result(32.0, FormatPolicy.FIXED_TRIMMED) == "32"
        assert format_result(37.77777, FormatPolicy.FIXED_TRIMMED) == "37.78"
        assert format_result(273.15, FormatPolicy.FIXED_TRIMMED) == "273.15"
        assert format_result(98.6, FormatPolicy.FIXED_TRIMMED) == "98.6"

    def test_temperature_negative_zero(self):
        assert format_result(-0.001, FormatPolicy.FIXED_TRIMMED) == "0"


class TestNonFinite:
    @pytest.mark.parametrize("policy", list(FormatPolicy))
    def test_infinity(self, policy):
        assert format_result(math.inf, policy) == "Infinity"
        assert format_result(-math.inf, policy) == "-Infinity"

    def test_nan(self):
        assert format_result(math.nan) == "NaN"


class TestHelpers:
    def test_to_exponential(self):
        assert to_exponential(-1234567.0) == "-1.234567e+6"
        assert to_exponential(0.00012, 2) == "1.20e-4"

    def test_to_precision(self):
        assert to_precision(12.5) == "12.50000000"
        assert to_precision(0) == "0"


class TestParseNumber:
    @pytest.mark.parametrize("text,expected", [
        ("42", 42.0),
        ("-3.5", -3.5),
        ("1.", 1.0),
        (".5", 0.5),
        ("  7", 7.0),
        ("12abc", 12.0),
        ("1e3", 1000.0),
        ("1e", 1.0),
        ("+8", 8.0),
    ])
    def test_numeric_prefix(self, text, expected):
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", "-", ".", "abc", "nan", None])
    def test_not_a_number(self, text):
        assert parse_number(text) is None

    def test_infinity(self):
        assert parse_number("Infinity") == math.inf
        assert parse_number("-Infinity") == -math.inf
