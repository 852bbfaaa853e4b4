"""
Lox Front End Package

Scanner and expression tree for the Lox scripting language.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical diagnostics
    ├── syntax/          # Expression tree, visitors, debug printer
    └── cli.py           # `lox` command (REPL / file scanner)

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, scan_source
from .syntax import ASTPrinter

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "ASTPrinter",
    "scan_source",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
