"""Tests for domain selection and power evaluation (core/evaluator.py).

Every test is a pure function call — no I/O, no mocking.  These tests
exercise:

* Domain selection order (floating > signed > unsigned)
* 64-bit range limits of the integer domains
* Truncation of negative exponents in integer domains
* ``nan`` / ``inf`` surfacing in the floating domain
* Conversion failures
"""

from __future__ import annotations

import pytest

from powcalc.core.evaluator import evaluate, evaluate_expression, select_domain
from powcalc.core.models import Expression, NumericDomain
from powcalc.exceptions import (
    ConversionError,
    OperationSyntaxError,
    ResultRangeError,
)


# ---------------------------------------------------------------------------
# select_domain
# ---------------------------------------------------------------------------

class TestSelectDomain:
    @pytest.mark.parametrize(
        ("number", "exponent", "expected"),
        [
            ("2", "3", NumericDomain.UNSIGNED_INTEGER),
            ("-2", "3", NumericDomain.SIGNED_INTEGER),
            ("2", "-3", NumericDomain.SIGNED_INTEGER),
            ("2.0", "3", NumericDomain.FLOATING_POINT),
            ("2", ".5", NumericDomain.FLOATING_POINT),
            ("-2.5", "-3", NumericDomain.FLOATING_POINT),
        ],
    )
    def test_domain_rules(self, number: str, exponent: str, expected: NumericDomain) -> None:
        assert select_domain(number, exponent) is expected

    def test_dash_after_digit_is_not_negative(self) -> None:
        assert select_domain("2-", "3") is NumericDomain.UNSIGNED_INTEGER


# ---------------------------------------------------------------------------
# Unsigned integers
# ---------------------------------------------------------------------------

class TestUnsignedInteger:
    def test_simple_power(self) -> None:
        assert evaluate("2", "10") == "1024"

    def test_zero_to_zero_is_one(self) -> None:
        assert evaluate("0", "0") == "1"

    def test_leading_zeros_dropped(self) -> None:
        assert evaluate("007", "2") == "49"

    def test_largest_power_of_two(self) -> None:
        assert evaluate("2", "63") == "9223372036854775808"

    def test_maximum_operand(self) -> None:
        assert evaluate("18446744073709551615", "1") == "18446744073709551615"

    def test_overflow_raises(self) -> None:
        with pytest.raises(ResultRangeError, match="does not fit"):
            evaluate("2", "64")

    def test_huge_exponent_raises_without_computing(self) -> None:
        with pytest.raises(ResultRangeError):
            evaluate("3", "18446744073709551615")

    def test_one_to_huge_exponent(self) -> None:
        assert evaluate("1", "18446744073709551615") == "1"

    def test_operand_out_of_range(self) -> None:
        with pytest.raises(ConversionError, match="out of range"):
            evaluate("18446744073709551616", "1")


# ---------------------------------------------------------------------------
# Signed integers
# ---------------------------------------------------------------------------

class TestSignedInteger:
    def test_negative_base_odd_exponent(self) -> None:
        assert evaluate("-2", "3") == "-8"

    def test_negative_base_even_exponent(self) -> None:
        assert evaluate("-3", "2") == "9"

    def test_minimum_value(self) -> None:
        assert evaluate("-2", "63") == "-9223372036854775808"

    def test_overflow_raises(self) -> None:
        with pytest.raises(ResultRangeError):
            evaluate("-2", "64")

    def test_positive_result_above_signed_range(self) -> None:
        with pytest.raises(ResultRangeError):
            evaluate("-3", "40")

    def test_negative_exponent_truncates(self) -> None:
        assert evaluate("2", "-1") == "0"

    def test_negative_exponent_on_unit_bases(self) -> None:
        assert evaluate("1", "-5") == "1"
        assert evaluate("-1", "-3") == "-1"
        assert evaluate("-1", "-4") == "1"

    def test_zero_to_negative_power(self) -> None:
        with pytest.raises(ResultRangeError, match="negative power"):
            evaluate("0", "-1")


# ---------------------------------------------------------------------------
# Floating point
# ---------------------------------------------------------------------------

class TestFloatingPoint:
    def test_integral_float_keeps_decimal_point(self) -> None:
        assert evaluate("2.0", "3") == "8.0"

    def test_fractional_exponent(self) -> None:
        assert evaluate("2", "0.5") == "1.4142135623730951"

    def test_fractional_base(self) -> None:
        assert evaluate("2.5", "2") == "6.25"

    def test_negative_base_fractional_exponent_is_nan(self) -> None:
        assert evaluate("-8.0", "0.5") == "nan"

    def test_overflow_is_infinite(self) -> None:
        assert evaluate("10.0", "400") == "inf"

    def test_negative_overflow_with_odd_exponent(self) -> None:
        assert evaluate("-10.0", "401") == "-inf"

    def test_zero_to_negative_power_is_infinite(self) -> None:
        assert evaluate("0.0", "-1") == "inf"

    def test_zero_to_zero_is_one(self) -> None:
        assert evaluate("0.0", "0") == "1.0"

    def test_large_result_is_positional(self) -> None:
        assert evaluate("10.0", "16") == "10000000000000000.0"

    def test_small_result_is_positional(self) -> None:
        assert evaluate("10.0", "-5") == "0.00001"

    def test_negative_zero(self) -> None:
        assert evaluate("-0.0", "1") == "-0.0"


# ---------------------------------------------------------------------------
# Conversion failures
# ---------------------------------------------------------------------------

class TestConversionErrors:
    @pytest.mark.parametrize(
        ("number", "exponent"),
        [
            ("1.2.3", "2"),
            ("abc", "2"),
            ("", "2"),
            ("2", "--3"),
            ("2-1", "2"),
            ("2 3", "2"),
        ],
    )
    def test_malformed_operands(self, number: str, exponent: str) -> None:
        with pytest.raises(ConversionError):
            evaluate(number, exponent)

    def test_message_names_operand_and_domain(self) -> None:
        with pytest.raises(ConversionError) as exc_info:
            evaluate("1.2.3", "2")
        assert "'1.2.3'" in str(exc_info.value)
        assert "floating point" in str(exc_info.value)

    def test_exponent_notation_is_rejected(self) -> None:
        with pytest.raises(ConversionError):
            evaluate("1e5", "2.0")

    @pytest.mark.parametrize(
        ("number", "exponent", "phrase"),
        [
            ("abc", "2", "to an unsigned integer"),
            ("abc", "-2", "to a signed integer"),
            ("abc", "2.0", "to a floating point"),
        ],
    )
    def test_message_article(self, number: str, exponent: str, phrase: str) -> None:
        with pytest.raises(ConversionError, match=phrase):
            evaluate(number, exponent)

    def test_range_message_article(self) -> None:
        with pytest.raises(ConversionError, match="for an unsigned integer"):
            evaluate("18446744073709551616", "1")

    def test_unresolved_operand_is_rejected(self) -> None:
        with pytest.raises(OperationSyntaxError):
            evaluate("2^3", "2")


# ---------------------------------------------------------------------------
# evaluate_expression
# ---------------------------------------------------------------------------

class TestEvaluateExpression:
    def test_matches_evaluate(self) -> None:
        assert evaluate_expression(Expression(number="3", exponent="4")) == "81"
