"""
Integration tests - One line of text in, one rendered result out.
"""

import pytest

import clicalc
from clicalc.evaluator import EvaluationTypeError, evaluate
from clicalc.executors import ExpressionExecutor, parse_and_evaluate
from clicalc.parser import ParseError, parse
from clicalc.results import Bool, Number


class TestExpressionExecutor:
    """Tests for the executor entry point."""

    def test_execute(self):
        assert ExpressionExecutor("2 + 3 * 4").execute() == Number(14.0)

    def test_parse_is_cached(self):
        executor = ExpressionExecutor("1 + 1")
        assert executor.parse() is executor.parse()

    def test_parse_error(self):
        with pytest.raises(ParseError):
            ExpressionExecutor("(1 + ").execute()

    def test_evaluation_error(self):
        with pytest.raises(EvaluationTypeError):
            ExpressionExecutor("true + 1").execute()

    def test_stages_compose(self):
        text = "hypot(3, 4) > 4 && !false"
        assert evaluate(parse(text)) == parse_and_evaluate(text) == Bool(True)

    def test_runs_are_independent(self):
        text = "max(1, 2) + foo(3)"
        assert parse_and_evaluate(text) == parse_and_evaluate(text) == Number(5.0)


class TestRendering:
    """Results render the way the shell prints them."""

    @pytest.mark.parametrize(
        "text,rendered",
        [
            ("2 + 3 * 4", "14"),
            ("1 / 4", "0.25"),
            ("0.1 + 0.2", "0.30000000000000004"),
            ("-3", "-3"),
            ("10 ^ 20", "100000000000000000000"),
            ("1 / 0", "inf"),
            ("-1 / 0", "-inf"),
            ("0 / 0", "NaN"),
            ("1 < 2", "true"),
            ("!true", "false"),
        ],
    )
    def test_render(self, text, rendered):
        assert str(parse_and_evaluate(text)) == rendered


class TestPackageExports:
    """The package exposes the entry points lazily."""

    def test_parse_and_evaluate(self):
        assert clicalc.parse_and_evaluate("2 ^ 3 ^ 2") == Number(512.0)

    def test_error_types(self):
        assert clicalc.ParseError is ParseError
        assert clicalc.EvaluationTypeError is EvaluationTypeError

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            clicalc.does_not_exist
