"""
Cursor tests - matching, extraction and line/indent bookkeeping
"""

import pytest

from hot.lib.cursor import Cursor
from hot.lib.errors import HotSyntaxError
from hot.lib.grammar import STRING_BLOCK, WORD


class TestMatching:
    """Test matches(), extract(), consume() and char_consume()"""

    def test_matches_does_not_advance(self):
        """matches() reports a length and leaves the cursor in place"""
        cursor = Cursor("div span")
        assert cursor.matches(WORD) == 3
        assert cursor.index == 0

    def test_matches_caches_result(self):
        """A successful match is cached with its pattern and offset"""
        cursor = Cursor("div")
        cursor.matches(WORD)
        assert cursor.last_match.pattern is WORD
        assert (cursor.last_match.index, cursor.last_match.length) == (0, 3)

    def test_failed_match_clears_cache(self):
        """A failed match leaves no stale cache behind"""
        cursor = Cursor("div")
        cursor.matches(WORD)
        assert cursor.matches(STRING_BLOCK) == 0
        assert cursor.last_match is None

    def test_extract(self):
        """extract() returns the matched text and advances past it"""
        cursor = Cursor("div span")
        assert cursor.extract(WORD) == "div"
        assert cursor.index == 3
        assert cursor.last_match is None

    def test_extract_failure(self):
        """extract() without a match raises with the pattern's name"""
        cursor = Cursor("?")
        with pytest.raises(HotSyntaxError, match=r"Expected Word at \[1:1\]"):
            cursor.extract(WORD)

    def test_consume(self):
        """consume() skips a match and says whether there was one"""
        cursor = Cursor('"""x')
        assert cursor.consume(STRING_BLOCK) is True
        assert cursor.peek() == "x"
        assert cursor.consume(STRING_BLOCK) is False

    def test_char_consume(self):
        """char_consume() only skips the expected character"""
        cursor = Cursor("#a")
        assert cursor.char_consume(".") is False
        assert cursor.char_consume("#") is True
        assert cursor.index == 1

    def test_peek_at_end(self):
        """peek() returns '' once the input is exhausted"""
        cursor = Cursor("a")
        cursor.advance()
        assert cursor.peek() == ""
        assert cursor.done
        assert cursor.char_consume("") is False


class TestWhitespace:
    """Test line and indent bookkeeping"""

    def test_newline_updates_line_and_indent(self):
        """Crossing a newline sets indent from the new line's tabs"""
        cursor = Cursor("a\n\t\tb")
        cursor.advance()
        assert cursor.whitespace_consume() is True
        assert (cursor.line, cursor.indent) == (1, 2)

    def test_several_newlines(self):
        """Every newline counts and only the last line sets indent"""
        cursor = Cursor("\n\t\t\n\n\tb")
        cursor.whitespace_consume()
        assert (cursor.line, cursor.indent) == (3, 1)

    def test_same_line_keeps_indent(self):
        """Whitespace without a newline leaves indent alone"""
        cursor = Cursor("  \tb")
        cursor.indent = 3
        cursor.whitespace_consume()
        assert (cursor.line, cursor.indent) == (0, 3)
        assert cursor.peek() == "b"

    def test_no_whitespace(self):
        """Nothing to consume is reported"""
        cursor = Cursor("b")
        assert cursor.whitespace_consume() is False

    def test_newline_consume(self):
        """Block productions count the newlines they step over"""
        cursor = Cursor("\nx")
        assert cursor.newline_consume() is True
        assert cursor.line == 1
        assert cursor.newline_consume() is False


class TestErrorLocation:
    """Test error positions and snippets"""

    def test_location(self):
        """Line and column are 1-based and counted from the start"""
        cursor = Cursor("ab\n\tcd")
        assert cursor.location_get(0) == (1, 1)
        assert cursor.location_get(4) == (2, 2)

    def test_error_snippet(self):
        """The snippet shows the line with a caret under the offset"""
        cursor = Cursor("ab\n\tcd\nef")
        with pytest.raises(HotSyntaxError) as info:
            cursor.error("Boom", 4)

        assert (info.value.line, info.value.column) == (2, 2)
        assert info.value.snippet == "    cd\n    ^"
        assert str(info.value).startswith("Boom at [2:2]")

    def test_crlf_line_end(self):
        """A CRLF pair is one line end"""
        cursor = Cursor("\r\nx\r")
        assert cursor.lineEnd_is() is True
        assert cursor.newline_consume() is True
        assert (cursor.index, cursor.line) == (2, 1)
        cursor.advance()
        assert cursor.lineEnd_is() is False
        assert cursor.newline_consume() is False
