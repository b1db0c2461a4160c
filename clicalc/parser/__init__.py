"""
Parser module for expression syntax analysis.

This module provides the recursive descent parser for converting
tokenized input into AST nodes.
"""

from .expression_parser import ExpressionParser, ParseError, parse

__all__ = [
    "ExpressionParser",
    "ParseError",
    "parse",
]
