"""
Token definitions for the Lox scanner.

This module defines all token types the scanner can produce:
- Single-character punctuation
- One-or-two character operators
- Literals (identifiers, strings, numbers)
- Reserved words
- The end-of-file sentinel

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # breakfast, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 123, 45.67

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input, always the last token


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for diagnostics; tokens themselves only carry a line number.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, lexeme (raw text), the extracted literal value
    and the line the lexeme starts on.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Any                    # float for NUMBER, str for STRING, else None
    line: int                       # 1-based line the lexeme starts on

    def __str__(self) -> str:
        if self.literal is not None:
            return f"{self.type.name}({self.lexeme!r} -> {self.literal!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.type in OPERATORS.values()


# Lookup tables used by the scanner. Built once at import time and exposed
# read-only, so every scanner (and every thread) shares the same instance.

KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())

OPERATORS: Mapping[str, TokenType] = MappingProxyType({
    # Punctuation
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ";": TokenType.SEMICOLON,

    # Arithmetic
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    "/": TokenType.SLASH,
    "*": TokenType.STAR,

    # Comparison and assignment
    "!": TokenType.BANG,
    "!=": TokenType.BANG_EQUAL,
    "=": TokenType.EQUAL,
    "==": TokenType.EQUAL_EQUAL,
    ">": TokenType.GREATER,
    ">=": TokenType.GREATER_EQUAL,
    "<": TokenType.LESS,
    "<=": TokenType.LESS_EQUAL,
})

# Characters the scanner turns into a token without looking ahead
SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    char: OPERATORS[char] for char in "(){},.-+;*"
})

# Characters that become a two-character operator when followed by '='
TWO_CHAR_OPERATORS: Mapping[str, TokenType] = MappingProxyType({
    "!": TokenType.BANG_EQUAL,
    "=": TokenType.EQUAL_EQUAL,
    "<": TokenType.LESS_EQUAL,
    ">": TokenType.GREATER_EQUAL,
})

LITERAL_TYPES = frozenset({
    TokenType.IDENTIFIER, TokenType.STRING, TokenType.NUMBER,
    TokenType.TRUE, TokenType.FALSE, TokenType.NIL,
})
