"""
Syntax tree module for the expression language.
"""

from .nodes import (
    ASTNode,
    NumberNode,
    BoolNode,
    VariableNode,
    FunctionCallNode,
    UnaryOpNode,
    BinaryOpNode,
    ComparisonNode,
)

__all__ = [
    "ASTNode",
    "NumberNode",
    "BoolNode",
    "VariableNode",
    "FunctionCallNode",
    "UnaryOpNode",
    "BinaryOpNode",
    "ComparisonNode",
]
