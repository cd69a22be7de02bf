"""
minilex - Tokenizer for a Small Expression/Statement Language
=============================================================

This package converts source text into a linear sequence of classified
tokens, ready to be consumed by a parser.

Main Components
---------------
- **tokenizer**: the pull-based Tokenizer (next_token / tokenize)
- **tokens**: Token, TokenKind and the keyword and symbol catalogs
- **cursor**: the one-character lookahead Cursor used by every scan routine
- **options**: TokenizerOptions (integer width and overflow policy)
- **errors**: the LexError hierarchy

Quick Start
-----------
    >>> import minilex
    >>> [t.kind.name for t in minilex.tokenize("let x = 'o';")]
    ['KEYWORD', 'IDENTIFIER', 'SYMBOL', 'LITERAL', 'SYMBOL', 'EOF']

Pull tokens one at a time:
    >>> from minilex import Tokenizer
    >>> tokenizer = Tokenizer("1e+3")
    >>> tokenizer.next_token()
    Token(LITERAL, FLOAT 1000.0, 1:1)
    >>> tokenizer.next_token()
    Token(EOF, 1:5)

Or use the command-line tool:
    $ mltok program.ml
    $ mltok -e "4 ** 3.0"
"""

__version__ = "0.3.0"

from minilex.errors import (
    MinilexError,
    SourceLocation,
    LexError,
    UnexpectedCharacterError,
    UnsupportedEscapeError,
    UnterminatedStringError,
    IntegerOverflowError,
)
from minilex.options import OverflowPolicy, TokenizerOptions
from minilex.tokens import (
    Keyword,
    Literal,
    LiteralKind,
    Symbol,
    Token,
    TokenKind,
)
from minilex.tokenizer import Tokenizer


def tokenize(
    source: str,
    filename: str = "<input>",
    options: TokenizerOptions | None = None,
) -> list[Token]:
    """
    Tokenize source text completely.

    Args:
        source: The text to tokenize
        filename: Name used in token positions and error messages
        options: Literal handling options

    Returns:
        All tokens, ending with a single EOF token

    Raises:
        LexError: If the input is not a valid token sequence
    """
    return list(Tokenizer(source, filename, options).tokenize())


__all__ = [
    "__version__",
    "tokenize",
    "Tokenizer",
    "TokenizerOptions",
    "OverflowPolicy",
    "Token",
    "TokenKind",
    "Keyword",
    "Symbol",
    "Literal",
    "LiteralKind",
    "MinilexError",
    "SourceLocation",
    "LexError",
    "UnexpectedCharacterError",
    "UnsupportedEscapeError",
    "UnterminatedStringError",
    "IntegerOverflowError",
]
