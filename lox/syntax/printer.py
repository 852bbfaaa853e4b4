"""
Debug printer for Lox expression trees.

Renders a tree in fully parenthesized prefix form, e.g.

    (* (- 123) (group 45.67))

Author: xwest
"""

import math
from decimal import Decimal
from typing import Sequence

from .ast_nodes import (
    Binary, Expr, ExprVisitor, Grouping, Literal, LiteralKind, LiteralValue, Unary
)


class ASTPrinter(ExprVisitor):
    """Prints an expression tree as nested S-expressions."""

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_literal(self, expr: Literal) -> str:
        return format_literal(expr.value)

    def visit_unary(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, [expr.operand])

    def visit_binary(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, [expr.left, expr.right])

    def visit_grouping(self, expr: Grouping) -> str:
        return self._parenthesize("group", [expr.inner])

    def _parenthesize(self, name: str, exprs: Sequence[Expr]) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return f"({' '.join(parts)})"


def format_literal(literal: LiteralValue) -> str:
    """Render a literal the way it would be written in Lox source (strings unquoted)."""
    if literal.kind == LiteralKind.STRING:
        return literal.value
    if literal.kind == LiteralKind.NUMBER:
        return format_number(literal.value)
    if literal.kind == LiteralKind.TRUE:
        return "true"
    if literal.kind == LiteralKind.FALSE:
        return "false"
    return "nil"


def format_number(value: float) -> str:
    # Positional notation only: 123.0 prints as "123", 1e-05 as "0.00001"
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text
