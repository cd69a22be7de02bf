"""
Token Definitions
=================

Token kinds and the fixed keyword and symbol catalogs of the language.

Token Categories
----------------
- Keywords: let, if, elif, else, func
- Identifiers: [A-Za-z_][A-Za-z0-9_]* that are not keywords
- Symbols: = == + - * ** / : ; , > < { } ( ) [ ]
- Literals: 'single' or "double" quoted strings, integers, floats
- EOF: end of input, returned forever once reached

Example
-------
>>> Token.keyword(Keyword.LET)
Token(KEYWORD, LET, 1:1)
>>> Token.integer(4) == Token(TokenKind.LITERAL, Literal(LiteralKind.INT, 4), 3, 7)
True
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union


# =============================================================================
# Token Kind Enumerations
# =============================================================================

class TokenKind(Enum):
    """Top-level classification of a token."""

    KEYWORD = auto()        # value is a Keyword
    IDENTIFIER = auto()     # value is the identifier text
    SYMBOL = auto()         # value is a Symbol
    LITERAL = auto()        # value is a Literal
    EOF = auto()            # value is None


class Keyword(Enum):
    """Reserved words. The enum value is the spelling in source."""

    LET = "let"
    IF = "if"
    ELIF = "elif"
    ELSE = "else"
    FUNC = "func"


class Symbol(Enum):
    """Operators and delimiters. The enum value is the spelling in source."""

    # === Operators ===
    ASSIGN = "="
    EQUALS = "=="
    PLUS = "+"
    MINUS = "-"
    MULT = "*"
    POW = "**"
    DIV = "/"
    GREATER_THAN = ">"
    LESS_THAN = "<"

    # === Delimiters ===
    COLON = ":"
    SEMICOLON = ";"
    COMMA = ","
    OPEN_BRACE = "{"
    CLOSE_BRACE = "}"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    OPEN_BRACKET = "["
    CLOSE_BRACKET = "]"


class LiteralKind(Enum):
    """Kinds of literal values."""

    STRING = auto()
    INT = auto()
    FLOAT = auto()


# =============================================================================
# Catalogs
# =============================================================================

KEYWORDS: dict[str, Keyword] = {kw.value: kw for kw in Keyword}

# Symbols that are always exactly one character. '=' and '*' need a
# second character of lookahead and are handled by the tokenizer.
SINGLE_CHAR_SYMBOLS: dict[str, Symbol] = {
    "+": Symbol.PLUS,
    "-": Symbol.MINUS,
    "/": Symbol.DIV,
    ":": Symbol.COLON,
    ";": Symbol.SEMICOLON,
    ",": Symbol.COMMA,
    ">": Symbol.GREATER_THAN,
    "<": Symbol.LESS_THAN,
    "{": Symbol.OPEN_BRACE,
    "}": Symbol.CLOSE_BRACE,
    "(": Symbol.OPEN_PAREN,
    ")": Symbol.CLOSE_PAREN,
    "[": Symbol.OPEN_BRACKET,
    "]": Symbol.CLOSE_BRACKET,
}

STRING_DELIMITERS = ("'", '"')


# =============================================================================
# Token Data Classes
# =============================================================================

@dataclass(frozen=True)
class Literal:
    """
    A literal value.

    Attributes:
        kind: STRING, INT or FLOAT
        value: The decoded str, int or float
    """
    kind: LiteralKind
    value: Union[str, int, float]

    def __str__(self) -> str:
        if self.kind is LiteralKind.STRING:
            return f"{self.kind.name} {self.value!r}"
        return f"{self.kind.name} {self.value}"


TokenValue = Union[Keyword, Symbol, Literal, str, None]


@dataclass(frozen=True)
class Token:
    """
    A single token from source text.

    Tokens are immutable and hold no reference to the tokenizer that
    produced them. The position fields describe where the token starts
    but do not take part in equality, so a scanned token compares equal
    to one built with the factory methods below.

    Attributes:
        kind: The TokenKind classification
        value: Keyword, identifier text, Symbol, Literal, or None for EOF
        line: Line of the first character (1-indexed)
        column: Column of the first character (1-indexed)
        filename: Name of the source file
    """
    kind: TokenKind
    value: TokenValue = None
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)
    filename: str = field(default="<input>", compare=False)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        position = f"{self.line}:{self.column}"
        if self.kind is TokenKind.EOF:
            return f"Token(EOF, {position})"
        return f"Token({self.kind.name}, {self._value_text()}, {position})"

    def describe(self) -> str:
        """Short form without position, e.g. "SYMBOL POW" or "IDENTIFIER 'x'"."""
        if self.kind is TokenKind.EOF:
            return "EOF"
        return f"{self.kind.name} {self._value_text()}"

    def _value_text(self) -> str:
        if self.kind is TokenKind.IDENTIFIER:
            return repr(self.value)
        if isinstance(self.value, Enum):
            return self.value.name
        return str(self.value)

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def keyword(cls, keyword: Keyword, **position) -> "Token":
        return cls(TokenKind.KEYWORD, keyword, **position)

    @classmethod
    def identifier(cls, name: str, **position) -> "Token":
        return cls(TokenKind.IDENTIFIER, name, **position)

    @classmethod
    def symbol(cls, symbol: Symbol, **position) -> "Token":
        return cls(TokenKind.SYMBOL, symbol, **position)

    @classmethod
    def string(cls, text: str, **position) -> "Token":
        return cls(TokenKind.LITERAL, Literal(LiteralKind.STRING, text), **position)

    @classmethod
    def integer(cls, value: int, **position) -> "Token":
        return cls(TokenKind.LITERAL, Literal(LiteralKind.INT, value), **position)

    @classmethod
    def real(cls, value: float, **position) -> "Token":
        return cls(TokenKind.LITERAL, Literal(LiteralKind.FLOAT, value), **position)

    @classmethod
    def eof(cls, **position) -> "Token":
        return cls(TokenKind.EOF, None, **position)

    # =========================================================================
    # Classification Helpers
    # =========================================================================

    def is_eof(self) -> bool:
        """Return True if this is the end-of-input sentinel."""
        return self.kind is TokenKind.EOF

    def is_literal(self, kind: "LiteralKind | None" = None) -> bool:
        """Return True if this is a literal, optionally of the given kind."""
        if self.kind is not TokenKind.LITERAL:
            return False
        return kind is None or self.value.kind is kind
