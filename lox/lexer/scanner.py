"""
Lox Scanner - turns source text into a token stream

Hand-written, one character at a time. Operators need one character of
lookahead; the fractional part of a number is the only place that needs two.

xwest
"""

import math
from dataclasses import dataclass, field
from typing import Any, List

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, OPERATORS, SINGLE_CHAR_TOKENS,
    TWO_CHAR_OPERATORS
)
from .errors import (
    LexerError, create_number_overflow_error, create_unexpected_character_error,
    create_unterminated_string_error
)


@dataclass
class ScanResult:
    """Tokens and diagnostics from one scan pass."""
    tokens: List[Token]
    errors: List[LexerError] = field(default_factory=list)

    def has_errors(self) -> bool:
        return len(self.errors) > 0


class Scanner:
    """
    Lox lexical analyzer.

    Converts source text into a list of tokens terminated by a single EOF
    token. Unexpected characters and unterminated strings are recorded in
    `errors` and scanning carries on with the next character.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.start = 0
        self.current = 0
        self.line = 1
        self.line_start = 0
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

        # Position of the lexeme being scanned, for diagnostics
        self._start_line = 1
        self._start_column = 1

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.line_start = 0
        self.tokens = []
        self.errors = []

        while not self._is_at_end():
            self.start = self.current
            self._start_line = self.line
            self._start_column = self.current - self.line_start + 1
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in TWO_CHAR_OPERATORS:
            # Greedy: "!=" is always one token, never BANG EQUAL
            if self._match('='):
                self._add_token(TWO_CHAR_OPERATORS[char])
            else:
                self._add_token(OPERATORS[char])
        elif char == '/':
            if self._match('/'):
                # Comment runs to end of line; the newline itself is left
                # for the main loop so the line count stays right
                while self._peek() != '\n' and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in ' \r\t':
            pass
        elif char == '\n':
            self._newline()
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha(char):
            self._identifier()
        else:
            self.errors.append(create_unexpected_character_error(char, self._location()))

    def _string(self):
        """Scan a string literal; the opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == '\n':
                self._advance()
                self._newline()
            else:
                self._advance()

        if self._is_at_end():
            self.errors.append(create_unterminated_string_error(self._location()))
            return

        self._advance()  # Closing quote

        # Lox has no escape sequences: the value is the text between the quotes
        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self):
        while _is_digit(self._peek()):
            self._advance()

        # A trailing '.' with no digit after it is not part of the number
        if self._peek() == '.' and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        lexeme = self.source[self.start:self.current]
        value = float(lexeme)
        if math.isinf(value):
            # The token is still emitted so the stream stays complete
            self.errors.append(create_number_overflow_error(lexeme, self._location()))
        self._add_token(TokenType.NUMBER, value)

    def _identifier(self):
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, literal: Any = None):
        # Tokens are stamped with the line they start on (strings may span lines)
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, lexeme, literal, self._start_line))

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self._start_line, self._start_column, self.start)

    def _newline(self):
        self.line += 1
        self.line_start = self.current

    def _advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is `expected`."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return '\0'
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def has_errors(self) -> bool:
        """Check if the last scan recorded any errors."""
        return len(self.errors) > 0


def _is_digit(char: str) -> bool:
    # str.isdigit() accepts things like '²' that float() rejects
    return '0' <= char <= '9'


def _is_alpha(char: str) -> bool:
    return char.isalpha() or char == '_'


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


def scan_source(source: str, filename: str = "<string>") -> ScanResult:
    """
    Scan a source string and return tokens together with all diagnostics.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        ScanResult with the full token stream and collected errors
    """
    scanner = Scanner(source, filename)
    tokens = scanner.scan_tokens()
    return ScanResult(tokens, list(scanner.errors))


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning recorded any error (the first one is raised)
    """
    result = scan_source(source, filename)

    if result.has_errors():
        raise result.errors[0]

    return result.tokens


def tokenize_file(filepath: str) -> ScanResult:
    """
    Convenience function to scan a source file.

    Args:
        filepath: Path to source file

    Returns:
        ScanResult for the whole file

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return scan_source(source, filepath)
