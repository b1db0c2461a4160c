"""
Tests for the evaluator - Comparison operators and chains.

Operators tested: == != > >= < <=
"""

import pytest

from clicalc.evaluator import EvaluationTypeError, Evaluator
from clicalc.executors import parse_and_evaluate
from clicalc.lexer import Operator
from clicalc.results import Bool
from clicalc.syntax_tree import ComparisonNode, NumberNode


class TestChains:
    """a < b < c means (a < b) and (b < c)."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1 < 2 < 3", True),
            ("1 < 3 < 2", False),
            ("3 > 2 > 1", True),
            ("1 == 1 == 1", True),
            ("2 == 2 != 3", True),
            ("1 <= 1 >= 1", True),
            ("1 < 2 > 3", False),
            ("5 > 4 > 3 > 2 > 1", True),
        ],
    )
    def test_chain(self, text, expected):
        assert parse_and_evaluate(text) == Bool(expected)

    def test_operands_are_expressions(self):
        assert parse_and_evaluate("1 + 1 == 2") == Bool(True)

    def test_every_operand_is_evaluated(self):
        """A false first pair does not skip later operands."""
        with pytest.raises(EvaluationTypeError):
            parse_and_evaluate("3 < 2 < (1 + true)")


class TestEquality:
    """Equality compares variant and value."""

    def test_equal_numbers(self):
        assert parse_and_evaluate("2 == 2.0") == Bool(True)

    def test_number_is_not_boolean(self):
        assert parse_and_evaluate("1 == true") == Bool(False)
        assert parse_and_evaluate("0 != false") == Bool(True)

    def test_booleans(self):
        assert parse_and_evaluate("true == true") == Bool(True)
        assert parse_and_evaluate("true != false") == Bool(True)

    def test_comparison_results_compare(self):
        assert parse_and_evaluate("(1 < 2) == (3 < 4)") == Bool(True)

    def test_nan_is_never_equal(self):
        assert parse_and_evaluate("0 / 0 == 0 / 0") == Bool(False)
        assert parse_and_evaluate("0 / 0 != 0 / 0") == Bool(True)


class TestOrdering:
    """Ordering uses the derived order of the result variants."""

    def test_booleans(self):
        assert parse_and_evaluate("false < true") == Bool(True)
        assert parse_and_evaluate("true >= true") == Bool(True)

    def test_numbers_order_before_booleans(self):
        assert parse_and_evaluate("5 < true") == Bool(True)
        assert parse_and_evaluate("false > 100") == Bool(True)

    def test_nan_orders_with_nothing(self):
        assert parse_and_evaluate("0 / 0 < 1") == Bool(False)
        assert parse_and_evaluate("0 / 0 >= 0 / 0") == Bool(False)

    def test_infinity(self):
        assert parse_and_evaluate("1 / 0 > 10 ^ 300") == Bool(True)


class TestInternalErrors:
    """Only relational operators may appear in a comparison node."""

    def test_arithmetic_operator_in_chain(self):
        node = ComparisonNode(
            operators=[Operator.ADD],
            operands=[NumberNode(1.0), NumberNode(2.0)],
        )
        with pytest.raises(ValueError, match="not a comparison operator"):
            Evaluator().evaluate(node)
