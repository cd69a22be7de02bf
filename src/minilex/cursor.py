"""
Source Cursor
=============

A forward-only view over source text with one character of lookahead.
Every scanning routine in the tokenizer reads input through a single
Cursor, so peeking, consuming and position tracking live in one place.

The cursor keeps a reference to the caller's string and an index into
it; it never copies or rewinds the text.

>>> cursor = Cursor("ab1 c")
>>> cursor.advance_while(str.isalpha)
'ab'
>>> cursor.peek()
'1'
>>> cursor.line, cursor.column
(1, 3)
"""

from typing import Callable, Optional


class Cursor:
    """
    One-character lookahead cursor with line/column tracking.

    Attributes:
        source: The text being scanned
        line: Line number of the next character (1-indexed)
        column: Column number of the next character (1-indexed)
    """

    def __init__(self, source: str, line: int = 1, column: int = 1):
        self.source = source
        self.line = line
        self.column = column
        self._pos = 0
        self._line_start_pos = 0

    def at_end(self) -> bool:
        """Check if every character has been consumed."""
        return self._pos >= len(self.source)

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it, or None at end."""
        if self._pos >= len(self.source):
            return None
        return self.source[self._pos]

    def advance(self) -> Optional[str]:
        """
        Consume and return the next character, or None at end.

        Updates line and column tracking.
        """
        if self._pos >= len(self.source):
            return None

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
            self._line_start_pos = self._pos
        else:
            self.column += 1

        return char

    def match(self, expected: str) -> bool:
        """
        Consume the next character if it equals expected.

        Returns:
            True if matched and consumed, False otherwise
        """
        if self.peek() == expected:
            self.advance()
            return True
        return False

    def advance_while(self, predicate: Callable[[str], bool]) -> str:
        """
        Consume characters while predicate holds and return them.

        Stops at end of input or at the first character for which
        predicate is false; that character is left unconsumed.
        """
        start = self._pos
        while not self.at_end() and predicate(self.source[self._pos]):
            self.advance()
        return self.source[start:self._pos]

    def line_text(self, line_start_pos: int) -> str:
        """Return the text of the line starting at line_start_pos."""
        line_end = self.source.find("\n", line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_start_pos:line_end]

    @property
    def line_start(self) -> int:
        """Offset of the first character of the current line."""
        return self._line_start_pos
