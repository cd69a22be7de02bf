"""
mltok - Token Dump Command-Line Interface
=========================================

Tokenizes a source file and prints the resulting token stream, one token
per line, ending with EOF. A lexical error fails the whole run: nothing
is printed except the diagnostic.

Usage Examples
--------------
Tokenize a file:
    $ mltok program.ml

Tokenize an expression given on the command line:
    $ mltok -e "4 ** 3.0"
    LITERAL INT 4
    SYMBOL POW
    LITERAL FLOAT 3.0
    EOF

Read from standard input, with token positions:
    $ echo "let x = r;" | mltok --positions -

Wrap oversized integers instead of failing:
    $ mltok -e "4294967297" --overflow wrap
"""

import logging
from pathlib import Path
from typing import Optional

import click

from minilex import __version__
from minilex.cli.errors import handle_cli_exception
from minilex.options import MAX_INT_BITS, MIN_INT_BITS, OverflowPolicy, TokenizerOptions
from minilex.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token_line(token, positions: bool) -> str:
    """Format one output line for a token."""
    if positions:
        return f"{token.line}:{token.column}\t{token.describe()}"
    return token.describe()


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "source_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "-e", "--expr",
    type=str,
    default=None,
    help="Tokenize TEXT instead of reading a file",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-p", "--positions",
    is_flag=True,
    help="Prefix each token with its line:column",
)
@click.option(
    "--int-bits",
    type=click.IntRange(MIN_INT_BITS, MAX_INT_BITS),
    default=None,
    help="Width of signed integer literals (default: 32, or $MINILEX_INT_BITS)",
)
@click.option(
    "--overflow",
    type=click.Choice([p.value for p in OverflowPolicy], case_sensitive=False),
    default=None,
    help="What to do with integer literals that do not fit "
         "(default: error, or $MINILEX_OVERFLOW)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mltok")
def main(
    source_file: Optional[Path],
    expr: Optional[str],
    output: Optional[Path],
    positions: bool,
    int_bits: Optional[int],
    overflow: Optional[str],
    verbose: bool,
) -> None:
    """
    Tokenize source text and print the token stream.

    SOURCE_FILE is the file to tokenize; use - to read standard input.
    Exactly one of SOURCE_FILE and --expr must be given.

    \b
    Examples:
        mltok program.ml             # Tokenize a file
        mltok -e "let x = r;"        # Tokenize an expression
        cat program.ml | mltok -     # Tokenize standard input
        mltok -p program.ml          # Show token positions
    """
    setup_logging(verbose)

    try:
        if (source_file is None) == (expr is None):
            raise click.UsageError("give exactly one of SOURCE_FILE or --expr")

        options = TokenizerOptions.from_env()
        if int_bits is not None:
            options.int_bits = int_bits
        if overflow is not None:
            options.overflow = OverflowPolicy(overflow.lower())

        if expr is not None:
            source, filename = expr, "<expr>"
        elif str(source_file) == "-":
            source, filename = click.get_text_stream("stdin").read(), "<stdin>"
        else:
            source, filename = source_file.read_text(encoding="utf-8"), str(source_file)

        logger.debug(
            f"Tokenizing {filename} ({len(source)} characters, "
            f"{options.int_bits}-bit integers, overflow={options.overflow.value})"
        )

        tokens = list(Tokenizer(source, filename, options).tokenize())
        result = "\n".join(format_token_line(t, positions) for t in tokens) + "\n"

        if output:
            output.write_text(result, encoding="utf-8")
            logger.debug(f"Output written to: {output}")
        else:
            click.echo(result, nl=False)

    except Exception as e:
        handle_cli_exception(e, verbose)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
