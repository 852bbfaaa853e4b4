"""
Lox Lexer Package

Implements the lexical scanner for the Lox language.

Key Features:
- Single pass, one character at a time
- Greedy one/two character operators with single-character lookahead
- Maximal-munch identifiers checked against a read-only keyword table
- Error recovery: bad characters and unterminated strings become diagnostics
- Literal value extraction for numbers and strings

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .scanner import Scanner, ScanResult, scan_source, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Scanner",
    "ScanResult",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
    "scan_source",
    "tokenize_string",
    "tokenize_file",
]
