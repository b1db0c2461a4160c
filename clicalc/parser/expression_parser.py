"""
Expression Parser - Recursive descent parser for calculator expressions.

This module parses the token stream of one input line into an AST,
encoding operator precedence and associativity in the call structure.
"""

import logging

from clicalc.lexer import CalcLexer, LexerError, Operator, Token, TokenType
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

logger = logging.getLogger("clicalc.parser")

LOGICAL_OPERATORS = (Operator.AND, Operator.OR)
COMPARISON_OPERATORS = (
    Operator.EQUAL,
    Operator.NOT_EQUAL,
    Operator.GREATER,
    Operator.GREATER_EQUAL,
    Operator.LESSER,
    Operator.LESSER_EQUAL,
)
SHIFT_OPERATORS = (Operator.SHIFT_LEFT, Operator.SHIFT_RIGHT)
ADDITIVE_OPERATORS = (Operator.ADD, Operator.SUBTRACT)
MULTIPLICATIVE_OPERATORS = (Operator.MULTIPLY, Operator.DIVIDE, Operator.MODULO)
UNARY_OPERATORS = (Operator.ADD, Operator.SUBTRACT, Operator.NOT, Operator.BIT_NOT)


class ParseError(Exception):
    """Exception raised for malformed token sequences."""

    def __init__(self, message: str, token: Token | None = None):
        self.token = token
        if token:
            super().__init__(f"{message} at position {token.position}")
        else:
            super().__init__(message)


def _describe(token: Token) -> str:
    if token.type == TokenType.OPERATOR:
        return f"operator '{token.value.symbol}'"
    if token.type == TokenType.EOF:
        return "end of input"
    if token.type == TokenType.NUMBER:
        return f"number {token.value:g}"
    if token.type == TokenType.BOOL:
        return "true" if token.value else "false"
    if token.type == TokenType.IDENTIFIER:
        return f"identifier '{token.value}'"
    return f"'{token.value}'"


class ExpressionParser:
    """
    Parser for arithmetic, comparison, logical and bitwise expressions.

    Grammar (lowest to highest precedence):
        expression     := bit_or ((&& | ||) bit_or)*
        bit_or         := bit_xor (| bit_xor)*
        bit_xor        := bit_and (|^ bit_and)*
        bit_and        := comparison (& comparison)*
        comparison     := shift ((== | != | > | >= | < | <=) shift)*
        shift          := additive ((<< | >>) additive)*
        additive       := multiplicative ((+ | -) multiplicative)*
        multiplicative := unary ((* | / | %) unary)*
        unary          := (+ | - | ! | ~) unary | primary (^ unary)?
        primary        := NUMBER | BOOL | IDENTIFIER
                        | IDENTIFIER ( arg_list? ) | ( expression )
        arg_list       := expression (, expression)*

    && and || share one precedence level and group left to right.
    """

    def __init__(self, lexer: CalcLexer):
        self.lexer = lexer

    def parse_from_top(self) -> ASTNode:
        """Parse the complete line; all input must be consumed."""
        node = self._parse_expression()
        trailing = self.lexer.peek()
        if trailing.type != TokenType.EOF:
            raise ParseError(f"Unexpected trailing input {_describe(trailing)}", trailing)
        logger.debug("Parsed %r", node)
        return node

    def _current_token(self) -> Token:
        """Get current token."""
        return self.lexer.peek()

    def _advance(self) -> Token:
        """Advance and return current token."""
        return self.lexer.next_token()

    def _match(self, *types: TokenType) -> bool:
        """Check if current token matches any given type."""
        return self._current_token().type in types

    def _match_operator(self, operators: tuple[Operator, ...]) -> bool:
        """Check if current token is one of the given operators."""
        token = self._current_token()
        return token.type == TokenType.OPERATOR and token.value in operators

    def _expect(self, token_type: TokenType, what: str) -> Token:
        """Expect specific token type."""
        token = self._current_token()
        if token.type != token_type:
            raise ParseError(f"Expected {what}, got {_describe(token)}", token)
        return self._advance()

    def _parse_left_assoc(self, operators: tuple[Operator, ...], operand) -> ASTNode:
        """Parse operand (op operand)* folding to the left."""
        left = operand()

        while self._match_operator(operators):
            token = self._advance()
            right = operand()
            left = BinaryOpNode(
                left=left, operator=token.value, right=right, position=token.position
            )

        return left

    def _parse_expression(self) -> ASTNode:
        """Parse logical expression: bit_or ((&& | ||) bit_or)*"""
        return self._parse_left_assoc(LOGICAL_OPERATORS, self._parse_bit_or)

    def _parse_bit_or(self) -> ASTNode:
        """Parse bitwise or: bit_xor (| bit_xor)*"""
        return self._parse_left_assoc((Operator.BIT_OR,), self._parse_bit_xor)

    def _parse_bit_xor(self) -> ASTNode:
        """Parse bitwise xor: bit_and (|^ bit_and)*"""
        return self._parse_left_assoc((Operator.BIT_XOR,), self._parse_bit_and)

    def _parse_bit_and(self) -> ASTNode:
        """Parse bitwise and: comparison (& comparison)*"""
        return self._parse_left_assoc((Operator.BIT_AND,), self._parse_comparison)

    def _parse_comparison(self) -> ASTNode:
        """Parse comparison chain: shift (relop shift)*"""
        position = self._current_token().position
        first = self._parse_shift()

        if not self._match_operator(COMPARISON_OPERATORS):
            return first

        operators: list[Operator] = []
        operands: list[ASTNode] = [first]
        while self._match_operator(COMPARISON_OPERATORS):
            operators.append(self._advance().value)
            operands.append(self._parse_shift())

        return ComparisonNode(operators=operators, operands=operands, position=position)

    def _parse_shift(self) -> ASTNode:
        """Parse shift: additive ((<< | >>) additive)*"""
        return self._parse_left_assoc(SHIFT_OPERATORS, self._parse_additive)

    def _parse_additive(self) -> ASTNode:
        """Parse additive: multiplicative ((+ | -) multiplicative)*"""
        return self._parse_left_assoc(ADDITIVE_OPERATORS, self._parse_multiplicative)

    def _parse_multiplicative(self) -> ASTNode:
        """Parse multiplicative: unary ((* | / | %) unary)*"""
        return self._parse_left_assoc(MULTIPLICATIVE_OPERATORS, self._parse_unary)

    def _parse_unary(self) -> ASTNode:
        """Parse unary: (+ | - | ! | ~) unary | primary (^ unary)?"""
        if self._match_operator(UNARY_OPERATORS):
            token = self._advance()
            operand = self._parse_unary()
            return UnaryOpNode(operator=token.value, operand=operand, position=token.position)

        base = self._parse_primary()

        # Right-associative: the exponent recurses back into unary
        if self._match_operator((Operator.EXPONENT,)):
            token = self._advance()
            exponent = self._parse_unary()
            return BinaryOpNode(
                left=base, operator=token.value, right=exponent, position=token.position
            )

        return base

    def _parse_primary(self) -> ASTNode:
        """Parse primary: literal | identifier | function_call | (expr)"""
        token = self._advance()

        if token.type == TokenType.NUMBER:
            return NumberNode(value=token.value, position=token.position)

        if token.type == TokenType.BOOL:
            return BoolNode(value=token.value, position=token.position)

        if token.type == TokenType.IDENTIFIER:
            if self._match(TokenType.LPAREN):
                self._advance()
                arguments = self._parse_arguments()
                return FunctionCallNode(
                    name=token.value, arguments=arguments, position=token.position
                )
            return VariableNode(name=token.value, position=token.position)

        if token.type == TokenType.LPAREN:
            expr = self._parse_expression()
            self._expect(TokenType.RPAREN, "')'")
            return expr

        if token.type == TokenType.EOF:
            raise ParseError("Unexpected end of input", token)

        raise ParseError(f"Unexpected {_describe(token)}", token)

    def _parse_arguments(self) -> list[ASTNode]:
        """Parse function arguments after '(' up to and including ')'."""
        arguments: list[ASTNode] = []

        if self._match(TokenType.RPAREN):
            self._advance()
            return arguments

        while True:
            arguments.append(self._parse_expression())
            if not self._match(TokenType.COMMA):
                break
            self._advance()

        self._expect(TokenType.RPAREN, "')' or ','")
        return arguments


def parse(source: str) -> ASTNode:
    """
    Parse one line of input into an AST.

    Args:
        source: The expression text

    Returns:
        The root node of the parsed expression

    Raises:
        ParseError: If the text is not a well-formed expression
    """
    try:
        lexer = CalcLexer(source)
    except LexerError as e:
        raise ParseError(str(e))
    return ExpressionParser(lexer).parse_from_top()
