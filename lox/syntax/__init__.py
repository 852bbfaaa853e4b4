"""
Lox Syntax Package

Expression tree, visitor contract, operator decoding and the debug printer.
There is no parser yet; trees are built directly or by future stages.

Author: xwest
"""

from .ast_nodes import (
    Expr, ExprVisitor, Literal, Unary, Binary, Grouping, LiteralValue, LiteralKind
)
from .operators import UnaryOperator, BinaryOperator
from .printer import ASTPrinter
from .errors import OperatorDecodeError

__all__ = [
    # AST nodes
    "Expr", "ExprVisitor",
    "Literal", "Unary", "Binary", "Grouping",
    "LiteralValue", "LiteralKind",

    # Operators
    "UnaryOperator", "BinaryOperator",

    # Printer
    "ASTPrinter",

    # Error handling
    "OperatorDecodeError",
]
