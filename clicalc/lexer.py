"""
Lexer module for tokenizing calculator expressions.

This module turns one line of input into a queue of tokens, handling
numbers, identifiers, boolean literals, one- and two-character operators
and punctuation. Characters the language does not know (whitespace
included) are skipped.
"""

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

logger = logging.getLogger("clicalc.lexer")


class TokenType(Enum):
    """Token types for the expression lexer."""

    # Literals
    NUMBER = auto()  # 3.14
    BOOL = auto()  # true, false
    IDENTIFIER = auto()  # variable and function names

    OPERATOR = auto()  # value holds an Operator

    # Punctuation
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    COMMA = auto()  # ,

    # Special
    EOF = auto()


class OperatorFamily(Enum):
    """Operand type family an operator works on."""

    ARITHMETIC = auto()
    COMPARISON = auto()
    LOGICAL = auto()
    BITWISE = auto()


class Operator(Enum):
    """All operators of the expression language, with their spelling."""

    # Arithmetic
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    EXPONENT = "^"

    # Comparison
    EQUAL = "=="
    NOT_EQUAL = "!="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESSER = "<"
    LESSER_EQUAL = "<="

    # Logical
    AND = "&&"
    OR = "||"
    NOT = "!"

    # Bitwise
    SHIFT_LEFT = "<<"
    SHIFT_RIGHT = ">>"
    BIT_OR = "|"
    BIT_XOR = "|^"
    BIT_AND = "&"
    BIT_NOT = "~"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def family(self) -> OperatorFamily:
        return OPERATOR_FAMILIES[self]


OPERATOR_FAMILIES = {
    Operator.ADD: OperatorFamily.ARITHMETIC,
    Operator.SUBTRACT: OperatorFamily.ARITHMETIC,
    Operator.MULTIPLY: OperatorFamily.ARITHMETIC,
    Operator.DIVIDE: OperatorFamily.ARITHMETIC,
    Operator.MODULO: OperatorFamily.ARITHMETIC,
    Operator.EXPONENT: OperatorFamily.ARITHMETIC,
    Operator.EQUAL: OperatorFamily.COMPARISON,
    Operator.NOT_EQUAL: OperatorFamily.COMPARISON,
    Operator.GREATER: OperatorFamily.COMPARISON,
    Operator.GREATER_EQUAL: OperatorFamily.COMPARISON,
    Operator.LESSER: OperatorFamily.COMPARISON,
    Operator.LESSER_EQUAL: OperatorFamily.COMPARISON,
    Operator.AND: OperatorFamily.LOGICAL,
    Operator.OR: OperatorFamily.LOGICAL,
    Operator.NOT: OperatorFamily.LOGICAL,
    Operator.SHIFT_LEFT: OperatorFamily.BITWISE,
    Operator.SHIFT_RIGHT: OperatorFamily.BITWISE,
    Operator.BIT_OR: OperatorFamily.BITWISE,
    Operator.BIT_XOR: OperatorFamily.BITWISE,
    Operator.BIT_AND: OperatorFamily.BITWISE,
    Operator.BIT_NOT: OperatorFamily.BITWISE,
}

# Two-character operators, keyed by first then second character
DOUBLE_CHAR_OPERATORS = {
    ">": {"=": Operator.GREATER_EQUAL, ">": Operator.SHIFT_RIGHT},
    "<": {"=": Operator.LESSER_EQUAL, "<": Operator.SHIFT_LEFT},
    "|": {"|": Operator.OR, "^": Operator.BIT_XOR},
    "!": {"=": Operator.NOT_EQUAL},
    "&": {"&": Operator.AND},
    "=": {"=": Operator.EQUAL},
}

# Fallbacks when the second character does not complete a pair.
# A lone "=" has no meaning and is skipped.
SINGLE_CHAR_OPERATORS = {
    "+": Operator.ADD,
    "-": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
    "%": Operator.MODULO,
    "^": Operator.EXPONENT,
    "~": Operator.BIT_NOT,
    ">": Operator.GREATER,
    "<": Operator.LESSER,
    "|": Operator.BIT_OR,
    "!": Operator.NOT,
    "&": Operator.BIT_AND,
}

PUNCTUATION = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
}

BOOL_LITERALS = {"true": True, "false": False}


@dataclass(frozen=True)
class Token:
    """Represents a single token from the lexer."""

    type: TokenType
    value: Any = None
    position: int = 0  # starting position in the source string

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, pos={self.position})"


class LexerError(Exception):
    """Exception raised for malformed input the lexer cannot turn into a token."""

    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(f"{message} at position {position}")


def _is_number_char(char: str) -> bool:
    return char.isascii() and (char.isdigit() or char == ".")


class CalcLexer:
    """
    Tokenizer for calculator expressions.

    The whole line is scanned on construction; tokens are then handed out
    in order with next_token() and inspected with peek(). Both return an
    EOF token once the queue is drained, as often as they are called.
    """

    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self._tokens: deque[Token] = deque()
        self._end_position = self.length
        self._scan()
        logger.debug("Tokenized %r into %d tokens", source, len(self._tokens))

    def next_token(self) -> Token:
        """Consume and return the next token."""
        if self._tokens:
            return self._tokens.popleft()
        return self._eof()

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        if self._tokens:
            return self._tokens[0]
        return self._eof()

    def tokenize(self) -> list[Token]:
        """Return the remaining tokens followed by EOF, without consuming them."""
        return [*self._tokens, self._eof()]

    def _eof(self) -> Token:
        return Token(TokenType.EOF, None, self._end_position)

    def _scan(self) -> None:
        number_chars: list[str] = []
        number_start = 0
        ident_chars: list[str] = []
        ident_start = 0
        skip_next = False

        for pos, char in enumerate(self.source):
            if skip_next:
                skip_next = False
                continue

            # Identifiers continue with any alphanumeric character
            if ident_chars and char.isalnum():
                ident_chars.append(char)
                continue

            if _is_number_char(char):
                if ident_chars:
                    self._flush_identifier(ident_chars, ident_start)
                if not number_chars:
                    number_start = pos
                number_chars.append(char)
                continue
            if number_chars:
                self._flush_number(number_chars, number_start)

            if char.isalpha():
                if not ident_chars:
                    ident_start = pos
                ident_chars.append(char)
                continue
            if ident_chars:
                self._flush_identifier(ident_chars, ident_start)

            if char in PUNCTUATION:
                self._tokens.append(Token(PUNCTUATION[char], char, pos))
                continue

            next_char = self.source[pos + 1] if pos + 1 < self.length else None
            pairs = DOUBLE_CHAR_OPERATORS.get(char, {})
            if next_char in pairs:
                self._tokens.append(Token(TokenType.OPERATOR, pairs[next_char], pos))
                skip_next = True
                continue

            if char in SINGLE_CHAR_OPERATORS:
                self._tokens.append(
                    Token(TokenType.OPERATOR, SINGLE_CHAR_OPERATORS[char], pos)
                )

        if number_chars:
            self._flush_number(number_chars, number_start)
        if ident_chars:
            self._flush_identifier(ident_chars, ident_start)

    def _flush_number(self, chars: list[str], start: int) -> None:
        text = "".join(chars)
        chars.clear()
        try:
            value = float(text)
        except ValueError:
            raise LexerError(f"Malformed number {text!r}", start)
        self._tokens.append(Token(TokenType.NUMBER, value, start))

    def _flush_identifier(self, chars: list[str], start: int) -> None:
        text = "".join(chars)
        chars.clear()
        if text in BOOL_LITERALS:
            self._tokens.append(Token(TokenType.BOOL, BOOL_LITERALS[text], start))
        else:
            self._tokens.append(Token(TokenType.IDENTIFIER, text, start))
