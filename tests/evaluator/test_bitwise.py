"""
Tests for the evaluator - Bitwise operators.

Operators tested: & | |^ << >> ~
Operands are truncated to signed 64-bit integers and results converted back.
"""

import pytest

from clicalc.evaluator import EvaluationTypeError
from clicalc.executors import parse_and_evaluate
from clicalc.results import Bool, Number


class TestBitwiseResults:
    """Basic bitwise results."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("6 & 3", 2.0),
            ("6 | 3", 7.0),
            ("6 |^ 3", 5.0),
            ("1 << 4", 16.0),
            ("256 >> 4", 16.0),
            ("~0", -1.0),
            ("~5", -6.0),
            ("-16 >> 2", -4.0),
            ("~~9", 9.0),
        ],
    )
    def test_result(self, text, expected):
        assert parse_and_evaluate(text) == Number(expected)


class TestTruncation:
    """Operands are truncated toward zero and saturate at the 64-bit limits."""

    def test_positive_fraction(self):
        assert parse_and_evaluate("7.9 & 7") == Number(7.0)

    def test_negative_fraction(self):
        assert parse_and_evaluate("-7.9 | 0") == Number(-7.0)

    def test_infinity_saturates(self):
        assert parse_and_evaluate("(1 / 0) & 1") == Number(1.0)

    def test_nan_is_zero(self):
        assert parse_and_evaluate("(0 / 0) | 5") == Number(5.0)

    def test_shift_into_sign_bit(self):
        assert parse_and_evaluate("1 << 63") == Number(-9223372036854775808.0)

    def test_shift_amount_wraps(self):
        assert parse_and_evaluate("1 << 64") == Number(1.0)


class TestBitwisePrecedence:
    """Bitwise operators relative to the other levels."""

    def test_shift_after_addition(self):
        assert parse_and_evaluate("1 << 2 + 1") == Number(8.0)

    def test_bit_or_after_comparison(self):
        """2 | (1 == 3) is a type error."""
        with pytest.raises(
            EvaluationTypeError,
            match=r"Operator '\|' expects number operands, got number and boolean",
        ):
            parse_and_evaluate("2 | 1 == 3")

    def test_parenthesized_bit_or(self):
        assert parse_and_evaluate("(2 | 1) == 3") == Bool(True)

    def test_bit_and_before_logical(self):
        assert parse_and_evaluate("true && (6 & 3) == 2") == Bool(True)

    def test_bit_and_binds_tighter_than_logical_and(self):
        """true && (6 & 3): '&' runs first, so '&&' sees a number."""
        with pytest.raises(
            EvaluationTypeError,
            match=r"Operator '&&' expects boolean operands, got boolean and number",
        ):
            parse_and_evaluate("true && 6 & 3")

    def test_bit_or_binds_tighter_than_logical_or(self):
        """(6 | 1) || false: '|' runs first, so '||' sees a number."""
        with pytest.raises(
            EvaluationTypeError,
            match=r"Operator '\|\|' expects boolean operands, got number and boolean",
        ):
            parse_and_evaluate("6 | 1 || false")

    def test_shift_compares(self):
        assert parse_and_evaluate("1 << 3 == 8") == Bool(True)


class TestBitwiseTypeErrors:
    """Bitwise operators reject boolean operands."""

    def test_boolean_and(self):
        with pytest.raises(EvaluationTypeError, match="Operator '&' expects number operands"):
            parse_and_evaluate("true & 1")

    def test_bit_not_boolean(self):
        with pytest.raises(EvaluationTypeError, match="Operator '~' expects a number operand, got boolean"):
            parse_and_evaluate("~true")
