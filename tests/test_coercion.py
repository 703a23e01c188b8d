"""
Unit Tests for Numeric Coercion

Malformed input never raises; it collapses to a fallback or the blank sentinel.
"""

import math

import pytest

from roi_engine.coercion import as_number, coerce_number


class TestCoerceNumber:
    """Test raw field value normalization."""

    def test_finite_numbers_pass_through(self):
        assert coerce_number(5) == 5
        assert coerce_number(2.5) == 2.5
        assert coerce_number(-40) == -40

    def test_empty_string_is_kept_as_blank_sentinel(self):
        assert coerce_number("") == ""

    def test_none_returns_fallback(self):
        assert coerce_number(None) == 0
        assert coerce_number(None, fallback=9) == 9

    def test_numeric_text_is_parsed(self):
        assert coerce_number("250000") == 250000.0
        assert coerce_number("-12.5") == -12.5

    def test_formatting_characters_are_stripped(self):
        """$1,234.50 -> 1234.5"""
        assert coerce_number("$1,234.50") == 1234.5
        assert coerce_number(" 15 % ") == 15.0

    def test_text_without_digits_reads_as_zero(self):
        assert coerce_number("abc") == 0.0

    def test_unparsable_text_returns_fallback(self):
        assert coerce_number("1.2.3") == 0
        assert coerce_number("1.2.3", fallback=7) == 7
        assert coerce_number("12-3", fallback=7) == 7
        assert coerce_number("-", fallback=7) == 7

    def test_non_finite_numbers_return_fallback(self):
        assert coerce_number(float("inf")) == 0
        assert coerce_number(float("nan"), fallback=3) == 3

    def test_booleans_are_not_numbers(self):
        assert coerce_number(True) == 0.0

    @pytest.mark.parametrize("raw", [5, 2.5, "", None, "$1,234.50", "abc", "1.2.3", float("inf"), "-7"])
    def test_idempotent(self, raw):
        once = coerce_number(raw)
        assert coerce_number(once) == once


class TestAsNumber:
    """Test the arithmetic view of a field value."""

    def test_blank_computes_as_zero(self):
        assert as_number("") == 0.0

    def test_always_returns_finite_float(self):
        for raw in [3, "4.5", None, "junk", float("nan")]:
            value = as_number(raw)
            assert isinstance(value, float)
            assert math.isfinite(value)
