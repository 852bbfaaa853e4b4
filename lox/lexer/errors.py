"""
Error handling for the Lox scanner.

Provides diagnostics with source location information. Scanning problems
are recoverable: the scanner records them and keeps going, so one pass can
report every bad character and unterminated string in a file.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single scanner diagnostic (error or warning)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def line(self) -> int:
        return self.location.line

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    A recoverable scanning error.

    The scanner collects these instead of raising them; `tokenize_string`
    raises the first one for callers that want strict behaviour.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
    "L003": "Number literal overflow",
}


def create_unexpected_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character no token can start with."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"{ERROR_CODES['L001']}: '{char}'",
        location=location,
        code="L001",
        help_text=help_text,
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal that runs to the end of input."""
    return LexerError(
        message=ERROR_CODES["L002"],
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
    )


def create_number_overflow_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for a number literal too large for a 64-bit float."""
    shown = lexeme if len(lexeme) <= 20 else lexeme[:17] + "..."
    return LexerError(
        message=f"{ERROR_CODES['L003']}: '{shown}'",
        location=location,
        code="L003",
        help_text="Number literals must fit in a 64-bit float.",
    )
