"""
Tokenizer
=========

Converts source text into a stream of tokens for a parser. Tokens are
pulled one at a time with next_token(); once the input is exhausted
every further call returns an EOF token.

Scanning dispatches on the class of the first character:

| First character         | Routine                 | Produces                |
|-------------------------|-------------------------|-------------------------|
| (end of input)          | -                       | EOF                     |
| whitespace              | skipped                 | (next token)            |
| ASCII letter or _       | _scan_identifier        | KEYWORD / IDENTIFIER    |
| ASCII digit             | _scan_number            | LITERAL INT / FLOAT     |
| ASCII punctuation       | _scan_symbol            | SYMBOL / LITERAL STRING |
| anything else           | -                       | UnexpectedCharacterError|

Numbers
-------
    digits ('.' digits)? (('e'|'E') ('+'|'-')? digits)?

A literal with neither a decimal nor an exponent part is an INT;
everything else is a FLOAT. "1." and "1e" / "1e-" are errors.

Strings
-------
Delimited by ' or ", and closed only by the same character. Inside,
a backslash escapes either another backslash or the delimiter; no other
escape sequences exist.

Example Usage
-------------
>>> tokenizer = Tokenizer("let x = 4 ** 3.0;")
>>> for token in tokenizer.tokenize():
...     print(token)
Token(KEYWORD, LET, 1:1)
Token(IDENTIFIER, 'x', 1:5)
Token(SYMBOL, ASSIGN, 1:7)
Token(LITERAL, INT 4, 1:9)
Token(SYMBOL, POW, 1:11)
Token(LITERAL, FLOAT 3.0, 1:14)
Token(SYMBOL, SEMICOLON, 1:17)
Token(EOF, 1:18)
"""

import logging
import string
from typing import Iterator, Optional

from minilex.cursor import Cursor
from minilex.errors import (
    SourceLocation,
    IntegerOverflowError,
    UnexpectedCharacterError,
    UnsupportedEscapeError,
    UnterminatedStringError,
)
from minilex.options import TokenizerOptions
from minilex.tokens import (
    KEYWORDS,
    SINGLE_CHAR_SYMBOLS,
    STRING_DELIMITERS,
    Symbol,
    Token,
)

logger = logging.getLogger(__name__)


# Position of a character: its location plus the offset of its line start,
# so error messages can quote the right line after the cursor has moved on.
Mark = tuple[SourceLocation, int]


class Tokenizer:
    """
    Pull-based tokenizer over a source string.

    The tokenizer is single-use and not thread-safe: it owns a cursor
    that only moves forward.

    Usage:
        tokenizer = Tokenizer(source_text, filename)
        while not (token := tokenizer.next_token()).is_eof():
            ...

    Attributes:
        source: The source text being tokenized
        filename: Name of the source file (for error reporting)
        options: Literal handling options
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    DIGITS = string.digits

    PUNCTUATION = string.punctuation

    EXPONENT_MARKERS = ("e", "E")

    EXPONENT_SIGNS = ("+", "-")

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        options: Optional[TokenizerOptions] = None,
    ):
        """
        Initialize the tokenizer with source text.

        Args:
            source: The text to tokenize (referenced, not copied)
            filename: Name of the source file (for error messages)
            options: Literal handling options (default: TokenizerOptions())
        """
        self.source = source
        self.filename = filename
        self.options = options or TokenizerOptions()
        self._cursor = Cursor(source)

    # =========================================================================
    # Public Interface
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; an EOF token once input is exhausted

        Raises:
            LexError: If the input is not a valid token sequence
        """
        cursor = self._cursor

        while True:
            char = cursor.peek()

            if char is None:
                return Token.eof(**self._position(self._mark()))

            if char.isspace():
                cursor.advance_while(str.isspace)
                continue

            mark = self._mark()

            if char in self.IDENT_START:
                cursor.advance()
                return self._scan_identifier(char, mark)

            if char in self.DIGITS:
                cursor.advance()
                return self._scan_number(char, mark)

            if char in self.PUNCTUATION:
                cursor.advance()
                return self._scan_symbol(char, mark)

            raise self._unexpected(
                char,
                mark,
                hint="only ASCII letters, digits, punctuation and whitespace "
                     "may appear outside string literals",
            )

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the first EOF token.

        Yields:
            Token objects in source order

        Raises:
            LexError: If the input is not a valid token sequence
        """
        count = 0
        while True:
            token = self.next_token()
            yield token
            if token.is_eof():
                break
            count += 1
        logger.debug(f"Tokenized {self.filename}: {count} tokens")

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    # =========================================================================
    # Identifiers and Keywords
    # =========================================================================

    def _scan_identifier(self, first: str, mark: Mark) -> Token:
        """
        Scan an identifier or keyword whose first character is consumed.

        Keywords are matched exactly and case-sensitively.
        """
        name = first + self._cursor.advance_while(lambda c: c in self.IDENT_CHARS)

        if name in KEYWORDS:
            return Token.keyword(KEYWORDS[name], **self._position(mark))

        return Token.identifier(name, **self._position(mark))

    # =========================================================================
    # Symbols
    # =========================================================================

    def _scan_symbol(self, char: str, mark: Mark) -> Token:
        """
        Scan a symbol, or a string literal if char is a quote.

        '=' and '*' look one character ahead for '==' and '**'.
        """
        cursor = self._cursor

        if char in STRING_DELIMITERS:
            return self._scan_string(char, mark)

        if char == "=":
            symbol = Symbol.EQUALS if cursor.match("=") else Symbol.ASSIGN
            return Token.symbol(symbol, **self._position(mark))

        if char == "*":
            symbol = Symbol.POW if cursor.match("*") else Symbol.MULT
            return Token.symbol(symbol, **self._position(mark))

        # '/' is always DIV; there is no comment syntax.
        if char in SINGLE_CHAR_SYMBOLS:
            return Token.symbol(SINGLE_CHAR_SYMBOLS[char], **self._position(mark))

        raise self._unexpected(char, mark)

    # =========================================================================
    # String Literals
    # =========================================================================

    def _scan_string(self, delimiter: str, mark: Mark) -> Token:
        """
        Scan a string literal whose opening delimiter is consumed.

        Raises:
            UnsupportedEscapeError: For a backslash before any other character
            UnterminatedStringError: If input ends before the closing delimiter
        """
        cursor = self._cursor
        chars = []
        escaped = False

        while True:
            char_mark = self._mark()
            char = cursor.advance()

            if char is None:
                location, line_start = mark
                logger.debug(f"{location}: string literal opened here is never closed")
                raise UnterminatedStringError(
                    delimiter,
                    location,
                    cursor.line_text(line_start),
                )

            if char == "\\":
                if escaped:
                    chars.append("\\")
                escaped = not escaped
            elif char == delimiter:
                if not escaped:
                    break
                chars.append(delimiter)
                escaped = False
            elif escaped:
                location, line_start = char_mark
                logger.debug(f"{location}: unsupported escape of '{char}'")
                raise UnsupportedEscapeError(
                    char,
                    location,
                    cursor.line_text(line_start),
                )
            else:
                chars.append(char)

        return Token.string("".join(chars), **self._position(mark))

    # =========================================================================
    # Numeric Literals
    # =========================================================================

    def _scan_number(self, first: str, mark: Mark) -> Token:
        """
        Scan an integer or float literal whose first digit is consumed.

        Raises:
            UnexpectedCharacterError: For a '.' or exponent with no digits
            IntegerOverflowError: If an INT does not fit and the policy is ERROR
        """
        cursor = self._cursor
        is_digit = self.DIGITS.__contains__

        mantissa = first + cursor.advance_while(is_digit)

        fraction = ""
        if cursor.peek() == ".":
            dot_mark = self._mark()
            cursor.advance()
            digits = cursor.advance_while(is_digit)
            if not digits:
                raise self._unexpected(
                    ".",
                    dot_mark,
                    hint="a decimal point must be followed by at least one digit",
                )
            fraction = "." + digits

        exponent = ""
        if cursor.peek() in self.EXPONENT_MARKERS:
            last_mark = self._mark()
            last = cursor.advance()
            exponent = last
            if cursor.peek() in self.EXPONENT_SIGNS:
                last_mark = self._mark()
                last = cursor.advance()
                exponent += last
            digits = cursor.advance_while(is_digit)
            if not digits:
                raise self._unexpected(
                    last,
                    last_mark,
                    hint="an exponent must contain at least one digit",
                )
            exponent += digits

        if not fraction and not exponent:
            return Token.integer(self._integer_value(mantissa, mark), **self._position(mark))

        return Token.real(float(mantissa + fraction + exponent), **self._position(mark))

    def _integer_value(self, text: str, mark: Mark) -> int:
        """Convert an INT literal's digits, applying the overflow policy."""
        try:
            fitted = self.options.fit_digits(text)
        except OverflowError:
            location, line_start = mark
            logger.debug(f"{location}: integer literal overflows {self.options.int_bits} bits")
            raise IntegerOverflowError(
                text,
                self.options.int_bits,
                location,
                self._cursor.line_text(line_start),
            ) from None

        if str(fitted) != (text.lstrip("0") or "0"):
            logger.debug(
                f"{mark[0]}: {len(text)}-digit integer literal "
                f"{self.options.overflow.value} -> {fitted}"
            )
        return fitted

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _mark(self) -> Mark:
        """Record the position of the next character."""
        cursor = self._cursor
        location = SourceLocation(self.filename, cursor.line, cursor.column)
        return location, cursor.line_start

    @staticmethod
    def _position(mark: Mark) -> dict:
        """Token position keyword arguments for a mark."""
        location = mark[0]
        return {
            "line": location.line,
            "column": location.column,
            "filename": location.filename,
        }

    def _unexpected(
        self,
        char: str,
        mark: Mark,
        hint: Optional[str] = None,
    ) -> UnexpectedCharacterError:
        """Create an UnexpectedCharacterError for the character at mark."""
        location, line_start = mark
        logger.debug(f"{location}: unexpected character {char!r}")
        return UnexpectedCharacterError(
            char,
            location,
            self._cursor.line_text(line_start),
            hint=hint,
        )
