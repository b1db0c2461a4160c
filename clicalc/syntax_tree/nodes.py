"""
AST Node definitions for the expression parser.

This module defines all node types used in the abstract syntax tree
representation of a parsed expression. Every node owns its children;
the tree is built once per input line and discarded after evaluation.
"""

from abc import ABC
from dataclasses import dataclass, field

from clicalc.lexer import Operator


class ASTNode(ABC):
    """Base class for all AST nodes."""

    position: int = 0  # Position in source string


@dataclass
class NumberNode(ASTNode):
    """Represents a numeric literal."""

    value: float
    position: int = 0

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


@dataclass
class BoolNode(ASTNode):
    """Represents a boolean literal (true / false)."""

    value: bool
    position: int = 0

    def __repr__(self) -> str:
        return f"Bool({self.value!r})"


@dataclass
class VariableNode(ASTNode):
    """Represents a named constant reference (e.g., pi)."""

    name: str
    position: int = 0

    def __repr__(self) -> str:
        return f"Variable({self.name})"


@dataclass
class FunctionCallNode(ASTNode):
    """Represents a function call (e.g., max(a, b), sum())."""

    name: str
    arguments: list[ASTNode] = field(default_factory=list)
    position: int = 0

    def __repr__(self) -> str:
        args_str = ", ".join(str(arg) for arg in self.arguments)
        return f"FunctionCall({self.name}({args_str}))"


@dataclass
class UnaryOpNode(ASTNode):
    """Represents a prefix operation (e.g., -x, !x, ~x)."""

    operator: Operator
    operand: ASTNode
    position: int = 0

    def __repr__(self) -> str:
        return f"UnaryOp({self.operator.symbol} {self.operand})"


@dataclass
class BinaryOpNode(ASTNode):
    """Represents a binary operation (e.g., a + b, x && y)."""

    left: ASTNode
    operator: Operator
    right: ASTNode
    position: int = 0

    def __repr__(self) -> str:
        return f"BinaryOp({self.left} {self.operator.symbol} {self.right})"


@dataclass
class ComparisonNode(ASTNode):
    """
    Represents a chain of relational operators (e.g., a < b <= c).

    Holds N operators and N + 1 operands; operator i compares
    operands i and i + 1.
    """

    operators: list[Operator] = field(default_factory=list)
    operands: list[ASTNode] = field(default_factory=list)
    position: int = 0

    def __repr__(self) -> str:
        parts = [str(self.operands[0])] if self.operands else []
        for op, operand in zip(self.operators, self.operands[1:]):
            parts.append(op.symbol)
            parts.append(str(operand))
        return f"Comparison({' '.join(parts)})"
