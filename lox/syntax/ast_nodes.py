"""
Abstract Syntax Tree node definitions for Lox expressions.

The node set is closed (literal, unary, binary, grouping); new operations
over the tree are added as visitors without touching these classes.
Nodes are immutable and each one owns its children.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Union

from ..lexer.tokens import Token, TokenType


class LiteralKind(Enum):
    """Kinds of literal value a tree can hold."""
    STRING = "String"
    NUMBER = "Number"
    TRUE = "True"
    FALSE = "False"
    NIL = "Nil"


@dataclass(frozen=True)
class LiteralValue:
    """A literal carried by the tree: a string, a number, true, false or nil."""
    kind: LiteralKind
    value: Union[str, float, None] = None

    def __post_init__(self):
        # Numbers are always stored as float, however they were built
        if self.kind == LiteralKind.NUMBER:
            object.__setattr__(self, "value", float(self.value))

    @classmethod
    def string(cls, text: str) -> 'LiteralValue':
        return cls(LiteralKind.STRING, text)

    @classmethod
    def number(cls, value: float) -> 'LiteralValue':
        return cls(LiteralKind.NUMBER, float(value))

    @classmethod
    def true(cls) -> 'LiteralValue':
        return cls(LiteralKind.TRUE)

    @classmethod
    def false(cls) -> 'LiteralValue':
        return cls(LiteralKind.FALSE)

    @classmethod
    def nil(cls) -> 'LiteralValue':
        return cls(LiteralKind.NIL)

    @classmethod
    def from_token(cls, token: Token) -> Optional['LiteralValue']:
        """Build a literal from a literal-bearing token, or None for any other token."""
        if token.type == TokenType.NUMBER:
            return cls.number(token.literal)
        if token.type == TokenType.STRING:
            return cls.string(token.literal)
        if token.type == TokenType.TRUE:
            return cls.true()
        if token.type == TokenType.FALSE:
            return cls.false()
        if token.type == TokenType.NIL:
            return cls.nil()
        return None


class ExprVisitor(ABC):
    """Abstract visitor interface, one method per expression kind."""

    @abstractmethod
    def visit_literal(self, expr: 'Literal') -> Any:
        pass

    @abstractmethod
    def visit_unary(self, expr: 'Unary') -> Any:
        pass

    @abstractmethod
    def visit_binary(self, expr: 'Binary') -> Any:
        pass

    @abstractmethod
    def visit_grouping(self, expr: 'Grouping') -> Any:
        pass


class Expr(ABC):
    """Base class for all expression nodes."""

    @abstractmethod
    def accept(self, visitor: ExprVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['Expr']:
        """Get the direct child expressions, in source order."""
        pass


@dataclass(frozen=True)
class Literal(Expr):
    """Literal value expression."""
    value: LiteralValue

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_literal(self)

    def children(self) -> List[Expr]:
        return []


@dataclass(frozen=True)
class Unary(Expr):
    """Prefix operator applied to one operand."""
    operator: Token
    operand: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_unary(self)

    def children(self) -> List[Expr]:
        return [self.operand]


@dataclass(frozen=True)
class Binary(Expr):
    """Infix operator between two operands."""
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_binary(self)

    def children(self) -> List[Expr]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized expression."""
    inner: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_grouping(self)

    def children(self) -> List[Expr]:
        return [self.inner]
