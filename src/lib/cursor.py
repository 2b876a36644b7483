"""
Character cursor over hot source text

The cursor owns the input and the scan offset and answers "does the text
here match pattern P" questions for the parser. It also keeps the two
counters the parser uses to find the end of a block:

- line: number of newlines crossed so far (0-based)
- indent: tab count of the line most recently entered

`indent` is only refreshed by whitespace_consume() when the consumed run
crosses a newline, and by the block string/comment productions which set
it directly. Anywhere else it is stale.

Example:
    >>> cursor = Cursor("div\\n\\tspan")
    >>> cursor.extract(WORD)
    'div'
    >>> cursor.whitespace_consume()
    True
    >>> (cursor.line, cursor.indent)
    (1, 1)
"""

import re
from typing import NoReturn, Optional

from ..models.parser import LastMatch
from .errors import HotSyntaxError
from .grammar import WHITESPACE, Char, pattern_name


class Cursor:
    """
    Scan state for one parse of one source text
    """

    def __init__(self, text: str) -> None:
        """
        Args:
            text: Source text to scan (never modified)

        Attributes:
            input: Source text
            index: Current offset into input
            line: Newlines crossed so far
            indent: Tab depth of the most recently entered line
            last_match: Cache of the last successful matches() call
        """
        self.input = text
        self.index = 0
        self.line = 0
        self.indent = 0
        self.last_match: Optional[LastMatch] = None

    @property
    def done(self) -> bool:
        """True once the whole input has been scanned"""
        return self.index >= len(self.input)

    def peek(self) -> str:
        """Character at the cursor, or '' at end of input"""
        if self.index < len(self.input):
            return self.input[self.index]
        return ""

    def advance(self, count: int = 1) -> None:
        """Move the cursor forward `count` characters"""
        self.index += count
        self.last_match = None

    def matches(self, pattern: re.Pattern) -> int:
        """
        Test the text at the cursor against `pattern` without advancing.

        Returns:
            Length of the match, 0 if there is none
        """
        match = pattern.match(self.input, self.index)
        if not match:
            self.last_match = None
            return 0
        self.last_match = LastMatch(pattern=pattern, index=self.index, length=match.end() - match.start())
        return self.last_match.length

    def extract(self, pattern: re.Pattern) -> str:
        """
        Consume and return the text matching `pattern` at the cursor.

        Reuses the cached match when the same pattern was just tested at
        the same offset.

        Raises:
            HotSyntaxError: If the text at the cursor does not match
        """
        cached = self.last_match
        if cached is None or cached.pattern is not pattern or cached.index != self.index:
            self.matches(pattern)
        if self.last_match is None or self.last_match.length == 0:
            self.error(f"Expected {pattern_name(pattern)}")

        result = self.input[self.index:self.index + self.last_match.length]
        self.advance(self.last_match.length)
        return result

    def consume(self, pattern: re.Pattern) -> bool:
        """Skip past a match of `pattern` if there is one"""
        match = pattern.match(self.input, self.index)
        if not match:
            return False
        self.advance(match.end() - match.start())
        return True

    def whitespace_consume(self) -> bool:
        """
        Skip a run of whitespace, keeping line and indent up to date.

        Every newline in the run advances `line`. When the run crosses at
        least one newline, `indent` becomes the number of tabs on the last
        line of the run.
        """
        match = WHITESPACE.match(self.input, self.index)
        if not match:
            return False
        self.advance(match.end() - match.start())

        lines = match.group(0).split(Char.NEWLINE)
        if len(lines) > 1:
            self.line += len(lines) - 1
            self.indent = lines[-1].count(Char.TAB)
        return True

    def char_consume(self, char: str) -> bool:
        """Skip exactly one character if it is `char`"""
        if self.peek() == char and char:
            self.advance()
            return True
        return False

    def lineEnd_is(self) -> bool:
        """True at a line feed or at a CRLF pair"""
        return self.input.startswith(Char.NEWLINE, self.index) or self.input.startswith(Char.CRLF, self.index)

    def newline_consume(self) -> bool:
        """Skip a single newline (LF or CRLF) inside a block production, counting the line"""
        if self.input.startswith(Char.CRLF, self.index):
            self.advance()
        if self.char_consume(Char.NEWLINE):
            self.line += 1
            return True
        return False

    def location_get(self, index: Optional[int] = None) -> tuple:
        """
        1-based (line, column) of an offset, counted from the start of input
        """
        if index is None:
            index = self.index
        before = self.input[:index]
        line = before.count(Char.NEWLINE) + 1
        column = index - (before.rfind(Char.NEWLINE) + 1) + 1
        return line, column

    def location_render(self, index: Optional[int] = None) -> str:
        """
        The source line containing `index` with a caret under it

        Tabs are expanded so the caret lines up in a terminal.
        """
        if index is None:
            index = self.index
        line_start = self.input.rfind(Char.NEWLINE, 0, index) + 1
        line_end = self.input.find(Char.NEWLINE, index)
        if line_end == -1:
            line_end = len(self.input)

        text = self.input[line_start:line_end].rstrip("\r")
        offset = len(self.input[line_start:index].expandtabs(4))
        return f"{text.expandtabs(4)}\n{' ' * offset}^"

    def error(self, message: str, index: Optional[int] = None) -> NoReturn:
        """
        Raise a HotSyntaxError located at `index` (default: the cursor)

        Raises:
            HotSyntaxError: Always
        """
        if index is None:
            index = self.index
        line, column = self.location_get(index)
        raise HotSyntaxError(message, line, column, self.location_render(index))
