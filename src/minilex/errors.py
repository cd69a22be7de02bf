"""
minilex Error Hierarchy
=======================

This module defines the exceptions raised while scanning source text.
All exceptions inherit from MinilexError, so callers can catch every
tokenizer failure with a single except clause.

Exception Hierarchy
-------------------
MinilexError (base)
└── LexError - any lexical error, with location and source context
    ├── UnexpectedCharacterError - character cannot begin or continue a token
    ├── UnsupportedEscapeError - escape other than \\\\ or the active quote
    ├── UnterminatedStringError - input ended inside a string literal
    └── IntegerOverflowError - integer literal exceeds the configured width

Lexical errors are fatal: the tokenizer raises at the first problem and
makes no attempt to resynchronize.

Error Message Format
--------------------
    filename:line:column: error: description
        source_line_text
            ^
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MinilexError(Exception):
    """
    Base exception for all minilex errors.

        try:
            tokens = minilex.tokenize(source)
        except MinilexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexError(MinilexError):
    """
    Base exception for errors found while scanning.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            demo.ml:1:5: error: unexpected character '.'
                let 1.;
                     ^
            hint: a decimal point must be followed by at least one digit
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                # Keep tabs from the source line so the caret lines up
                prefix = self.source_line[:self.location.column - 1]
                padding = "".join("\t" if c == "\t" else " " for c in prefix)
                padding += " " * (self.location.column - 1 - len(prefix))
                parts.append(f"    {padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnexpectedCharacterError(LexError):
    """
    A character that cannot begin or continue any token.

    Raised for characters outside the language's alphabet, punctuation
    that is not in the symbol catalog, and malformed numeric literals
    such as "1." or "2e-".
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unexpected character '{char}' (U+{ord(char):04X})",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UnsupportedEscapeError(LexError):
    """
    Escape sequence other than a backslash or the active delimiter.

    Example:
        "tab\\there"    # \\t is not supported
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unsupported escape sequence '\\{char}'",
            location=location,
            hint="only the enclosing quote and the backslash itself can be escaped",
            source_line=source_line,
        )


class UnterminatedStringError(LexError):
    """
    Input ended while a string literal, or an escape inside one, was open.

    The location points at the opening quote.
    """

    def __init__(
        self,
        delimiter: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.delimiter = delimiter
        super().__init__(
            "unterminated string literal",
            location=location,
            hint=f"add closing {delimiter} to complete the string",
            source_line=source_line,
        )


class IntegerOverflowError(LexError):
    """Integer literal does not fit the configured signed width."""

    def __init__(
        self,
        text: str,
        bits: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text
        self.bits = bits
        shown = text if len(text) <= 40 else f"{text[:20]}...({len(text)} digits)"
        super().__init__(
            f"integer literal {shown} does not fit in a signed {bits}-bit integer",
            location=location,
            hint=f"the largest allowed value is {2 ** (bits - 1) - 1}",
            source_line=source_line,
        )
