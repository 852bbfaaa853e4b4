"""
Operator decoding for Lox expressions.

Maps operator lexemes to semantic operator categories. Decoding is an
exhaustive match over the exact lexemes the scanner produces; anything
else is an OperatorDecodeError carrying the offending text.

Author: xwest
"""

from enum import Enum
from typing import Union

from ..lexer.tokens import Token
from .errors import OperatorDecodeError


class UnaryOperator(Enum):
    """Prefix operators."""
    BANG = "!"
    MINUS = "-"

    @classmethod
    def try_decode(cls, text: str) -> Union['UnaryOperator', OperatorDecodeError]:
        """Decode `text`, returning the error as a value instead of raising it."""
        if text == "!":
            return cls.BANG
        if text == "-":
            return cls.MINUS
        return OperatorDecodeError(text, "Unary")

    @classmethod
    def decode(cls, text: str) -> 'UnaryOperator':
        result = cls.try_decode(text)
        if isinstance(result, OperatorDecodeError):
            raise result
        return result

    @classmethod
    def from_token(cls, token: Token) -> 'UnaryOperator':
        return cls.decode(token.lexeme)


class BinaryOperator(Enum):
    """Infix operators."""
    EQUAL_EQUAL = "=="
    BANG_EQUAL = "!="
    LESS = "<"
    LESS_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"

    @classmethod
    def try_decode(cls, text: str) -> Union['BinaryOperator', OperatorDecodeError]:
        """Decode `text`, returning the error as a value instead of raising it."""
        for operator in cls:
            if operator.value == text:
                return operator
        return OperatorDecodeError(text, "Binary")

    @classmethod
    def decode(cls, text: str) -> 'BinaryOperator':
        result = cls.try_decode(text)
        if isinstance(result, OperatorDecodeError):
            raise result
        return result

    @classmethod
    def from_token(cls, token: Token) -> 'BinaryOperator':
        return cls.decode(token.lexeme)
