"""
Expression Executors - Entry point for evaluating expressions.

This module provides the ExpressionExecutor class that the shell
uses to turn one line of input into a result.
"""

import logging

from clicalc.evaluator import Evaluator
from clicalc.parser.expression_parser import parse
from clicalc.results import InterpreterResult
from clicalc.syntax_tree.nodes import ASTNode

logger = logging.getLogger("clicalc.executors")


class ExpressionExecutor:
    """
    Main executor for expression strings.

    Usage:
        executor = ExpressionExecutor("2 + 3 * 4")
        result = executor.execute()  # Number(14.0)
    """

    def __init__(self, expr: str):
        """
        Initialize the executor.

        Args:
            expr: One complete line of input
        """
        self.expr = expr
        self._ast: ASTNode | None = None

    def parse(self) -> ASTNode:
        """
        Parse the expression into an AST.

        Returns:
            The parsed AST

        Raises:
            ParseError: If the expression is malformed
        """
        if self._ast is None:
            self._ast = parse(self.expr)
        return self._ast

    def execute(self) -> InterpreterResult:
        """
        Parse and evaluate the expression.

        Returns:
            The resulting Number or Bool

        Raises:
            ParseError: If the expression is malformed
            EvaluationTypeError: If an operand has the wrong type
        """
        ast = self.parse()
        result = Evaluator().evaluate(ast)
        logger.debug("%r evaluated to %r", self.expr, result)
        return result


def parse_and_evaluate(expr: str) -> InterpreterResult:
    """Parse and evaluate one line of input."""
    return ExpressionExecutor(expr).execute()
