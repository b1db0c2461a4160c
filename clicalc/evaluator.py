"""
Tree-walk evaluator for expression ASTs.

Every operator family checks the variant of its operands explicitly:
arithmetic and bitwise operators take numbers, logical operators take
booleans, and only equality compares across variants. Unknown function
names return their first argument and unknown variables evaluate to 0;
neither is an error.
"""

import logging
import operator as py_operator

import numpy as np

from clicalc.functions import CONSTANTS, FunctionMap, truncate_to_int
from clicalc.lexer import Operator, OperatorFamily
from clicalc.results import Bool, InterpreterResult, Number
from clicalc.syntax_tree.nodes import (
    ASTNode,
    BinaryOpNode,
    BoolNode,
    ComparisonNode,
    FunctionCallNode,
    NumberNode,
    UnaryOpNode,
    VariableNode,
)

logger = logging.getLogger("clicalc.evaluator")

ARITHMETIC_UFUNCS = {
    Operator.ADD: np.add,
    Operator.SUBTRACT: np.subtract,
    Operator.MULTIPLY: np.multiply,
    Operator.DIVIDE: np.divide,
    Operator.MODULO: np.fmod,
    Operator.EXPONENT: np.power,
}

ORDERING_OPERATORS = {
    Operator.GREATER: py_operator.gt,
    Operator.GREATER_EQUAL: py_operator.ge,
    Operator.LESSER: py_operator.lt,
    Operator.LESSER_EQUAL: py_operator.le,
}

# Variant order used when an ordering operator sees mixed variants
VARIANT_RANK = {Number: 0, Bool: 1}

INT64_MASK = (1 << 64) - 1


class EvaluationTypeError(Exception):
    """Exception raised when an operator or function gets the wrong kind of operand."""

    def __init__(self, message: str, node: ASTNode | None = None):
        self.node = node
        if node is not None:
            super().__init__(f"{message} at position {node.position}")
        else:
            super().__init__(message)


def _wrap_int64(value: int) -> int:
    value &= INT64_MASK
    if value >= 1 << 63:
        value -= 1 << 64
    return value


def _values_equal(left: InterpreterResult, right: InterpreterResult) -> bool:
    return type(left) is type(right) and left.value == right.value


def _compare(op: Operator, left: InterpreterResult, right: InterpreterResult) -> bool:
    if op == Operator.EQUAL:
        return _values_equal(left, right)
    if op == Operator.NOT_EQUAL:
        return not _values_equal(left, right)
    if op not in ORDERING_OPERATORS:
        raise ValueError(f"Operator {op.symbol!r} is not a comparison operator")
    if type(left) is type(right):
        return ORDERING_OPERATORS[op](left.value, right.value)
    return ORDERING_OPERATORS[op](VARIANT_RANK[type(left)], VARIANT_RANK[type(right)])


def _bitwise(op: Operator, left: float, right: float) -> float:
    a = truncate_to_int(left)
    b = truncate_to_int(right)
    if op == Operator.SHIFT_LEFT:
        result = a << (b & 63)
    elif op == Operator.SHIFT_RIGHT:
        result = a >> (b & 63)
    elif op == Operator.BIT_AND:
        result = a & b
    elif op == Operator.BIT_OR:
        result = a | b
    elif op == Operator.BIT_XOR:
        result = a ^ b
    else:
        raise ValueError(f"Operator {op.symbol!r} is not a binary bitwise operator")
    return float(_wrap_int64(result))


class Evaluator:
    """
    Evaluates an AST to a Number or Bool.

    Children are evaluated before their parent, left to right. Logical
    operators evaluate both sides; there is no short-circuiting.
    """

    def evaluate(self, node: ASTNode) -> InterpreterResult:
        """
        Evaluate a node and everything below it.

        Args:
            node: Root of the (sub)tree to evaluate

        Returns:
            The resulting Number or Bool

        Raises:
            EvaluationTypeError: If an operand has the wrong variant
        """
        if isinstance(node, NumberNode):
            return Number(node.value)
        if isinstance(node, BoolNode):
            return Bool(node.value)
        if isinstance(node, VariableNode):
            return self._eval_variable(node)
        if isinstance(node, FunctionCallNode):
            return self._eval_function(node)
        if isinstance(node, UnaryOpNode):
            return self._eval_unary(node)
        if isinstance(node, BinaryOpNode):
            return self._eval_binary(node)
        if isinstance(node, ComparisonNode):
            return self._eval_comparison(node)
        raise ValueError(f"Unknown node type: {type(node).__name__}")

    def _eval_variable(self, node: VariableNode) -> Number:
        if node.name in CONSTANTS:
            return Number(CONSTANTS[node.name])
        logger.debug("Unknown variable %r evaluates to 0", node.name)
        return Number(0.0)

    def _eval_function(self, node: FunctionCallNode) -> Number:
        args: list[float] = []
        for arg_node in node.arguments:
            value = self.evaluate(arg_node)
            if not isinstance(value, Number):
                raise EvaluationTypeError(
                    f"Function '{node.name}' expects number arguments, got {value.type_name}",
                    arg_node,
                )
            args.append(value.value)

        function = FunctionMap.get(node.name)
        if function is None:
            logger.debug("Unknown function %r returns its first argument", node.name)
            return Number(args[0] if args else 0.0)

        if len(args) < function.min_args:
            raise EvaluationTypeError(
                f"Function '{node.name}' expects at least {function.min_args} "
                f"argument(s), got {len(args)}",
                node,
            )

        with np.errstate(all="ignore"):
            return Number(float(function(args)))

    def _eval_unary(self, node: UnaryOpNode) -> InterpreterResult:
        operand = self.evaluate(node.operand)
        op = node.operator

        if op == Operator.ADD:
            return operand

        if op == Operator.NOT:
            if not isinstance(operand, Bool):
                raise EvaluationTypeError(
                    f"Operator '!' expects a boolean operand, got {operand.type_name}", node
                )
            return Bool(not operand.value)

        if op in (Operator.SUBTRACT, Operator.BIT_NOT):
            if not isinstance(operand, Number):
                raise EvaluationTypeError(
                    f"Operator '{op.symbol}' expects a number operand, got {operand.type_name}",
                    node,
                )
            if op == Operator.SUBTRACT:
                return Number(-operand.value)
            return Number(float(~truncate_to_int(operand.value)))

        raise ValueError(f"Operator {op.symbol!r} is not a unary operator")

    def _eval_binary(self, node: BinaryOpNode) -> InterpreterResult:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        op = node.operator
        family = op.family

        if family == OperatorFamily.LOGICAL:
            if not (isinstance(left, Bool) and isinstance(right, Bool)):
                raise EvaluationTypeError(
                    f"Operator '{op.symbol}' expects boolean operands, "
                    f"got {left.type_name} and {right.type_name}",
                    node,
                )
            if op == Operator.AND:
                return Bool(left.value and right.value)
            if op == Operator.OR:
                return Bool(left.value or right.value)
            raise ValueError(f"Operator {op.symbol!r} is not a binary logical operator")

        if family in (OperatorFamily.ARITHMETIC, OperatorFamily.BITWISE):
            if not (isinstance(left, Number) and isinstance(right, Number)):
                raise EvaluationTypeError(
                    f"Operator '{op.symbol}' expects number operands, "
                    f"got {left.type_name} and {right.type_name}",
                    node,
                )
            if family == OperatorFamily.BITWISE:
                return Number(_bitwise(op, left.value, right.value))
            with np.errstate(all="ignore"):
                return Number(float(ARITHMETIC_UFUNCS[op](left.value, right.value)))

        raise ValueError(f"Operator {op.symbol!r} cannot appear in a binary operation")

    def _eval_comparison(self, node: ComparisonNode) -> Bool:
        values = [self.evaluate(operand) for operand in node.operands]

        result = True
        for op, left, right in zip(node.operators, values, values[1:]):
            result = _compare(op, left, right) and result
        return Bool(result)


def evaluate(node: ASTNode) -> InterpreterResult:
    """Evaluate an AST with a fresh Evaluator."""
    return Evaluator().evaluate(node)
