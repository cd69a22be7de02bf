# =============================================================================
# test_cursor.py - Cursor Unit Tests
# =============================================================================
# Tests for the one-character lookahead cursor shared by every scan routine.
# =============================================================================

from minilex.cursor import Cursor


class TestCursorAccess:
    """peek / advance / match."""

    def test_empty(self):
        cursor = Cursor("")
        assert cursor.at_end()
        assert cursor.peek() is None
        assert cursor.advance() is None

    def test_peek_does_not_consume(self):
        cursor = Cursor("ab")
        assert cursor.peek() == "a"
        assert cursor.peek() == "a"
        assert cursor.advance() == "a"
        assert cursor.peek() == "b"

    def test_advance_past_end(self):
        cursor = Cursor("a")
        assert cursor.advance() == "a"
        assert cursor.advance() is None
        assert cursor.advance() is None
        assert cursor.at_end()

    def test_match(self):
        cursor = Cursor("==")
        assert cursor.match("=")
        assert not cursor.match("*")
        assert cursor.match("=")
        assert not cursor.match("=")

    def test_source_is_not_copied(self):
        source = "let x"
        assert Cursor(source).source is source


class TestAdvanceWhile:
    """Consume-while-predicate primitive."""

    def test_consumes_run(self):
        cursor = Cursor("abc123")
        assert cursor.advance_while(str.isalpha) == "abc"
        assert cursor.peek() == "1"

    def test_empty_run(self):
        cursor = Cursor("123")
        assert cursor.advance_while(str.isalpha) == ""
        assert cursor.peek() == "1"

    def test_runs_to_end(self):
        cursor = Cursor("   ")
        assert cursor.advance_while(str.isspace) == "   "
        assert cursor.at_end()


class TestCursorPosition:
    """Line and column tracking."""

    def test_initial_position(self):
        cursor = Cursor("x")
        assert (cursor.line, cursor.column) == (1, 1)

    def test_columns_advance(self):
        cursor = Cursor("abc")
        cursor.advance()
        cursor.advance()
        assert (cursor.line, cursor.column) == (1, 3)

    def test_newline_starts_new_line(self):
        cursor = Cursor("ab\ncd")
        cursor.advance_while(lambda c: c != "c")
        assert (cursor.line, cursor.column) == (2, 1)
        assert cursor.line_text(cursor.line_start) == "cd"

    def test_line_start_on_first_line(self):
        cursor = Cursor("first\nsecond")
        cursor.advance()
        assert cursor.line_start == 0
        assert cursor.line_text(cursor.line_start) == "first"

    def test_line_text(self):
        cursor = Cursor("one\ntwo\nthree")
        assert cursor.line_text(4) == "two"
        assert cursor.line_text(8) == "three"
