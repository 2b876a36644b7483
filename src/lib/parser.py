"""
Parser for hot source

Compiles indentation-sensitive hot markup straight to HTML text. Parsing
and emission are fused: every production returns the HTML of the node it
parsed, already indented for its children, and callers join fragments with
explicit separators. No production returns text that starts or ends with a
newline it did not emit for nesting.

Grammar (one expression):
    element   word[#id][.class]*[[attrs]][: children | := only-children]
    string    "text with \\n and \\t escapes"  or a \"\"\"-fenced block
    comment   # dropped, ## kept, ### block dropped, #### block kept
    call      !word[[attrs]]

The end of a block of children is decided by indentation: siblings keep
coming while the line they start on is indented deeper than the parent,
and the first expression on the parent's own line always belongs to it.

Example:
    >>> Parser('div.card: span: "Hi"').parse()
    '<div class="card">\\n\\t<span>\\n\\t\\tHi\\n\\t</span>\\n</div>'
"""

import os
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Union

from ..config import appsettings
from ..models.parser import ParseOptions
from ..models.project import ProjectConfig
from .cursor import Cursor
from .grammar import (
    COMMENT_BLOCK,
    STRING_BLOCK,
    WHITESPACE_UNTIL_NEWLINE,
    WORD,
    Char,
)
from .log import LOG
from .paths import extension_replace

AttributeFormatter = Callable[[str, Optional[str]], str]


def tabbify(text: str) -> str:
    """Indent every line of `text` by one tab"""
    return Char.TAB + text.replace(Char.NEWLINE, Char.NEWLINE + Char.TAB)


def attribute_format(name: str, value: Optional[str]) -> str:
    """Render one attribute for an opening tag (leading space included)"""
    if value is None:
        return f" {name}"
    return f' {name}="{value}"'


def parse(text: str, import_content: Optional[str] = None) -> str:
    """
    Compile a standalone hot string to HTML

    Args:
        text: Hot source
        import_content: Fragment substituted for !content calls

    Example:
        >>> parse('div#foo')
        '<div id="foo"></div>'
    """
    return Parser(text).parse(options=ParseOptions(import_content=import_content))


class Parser:
    """
    Recursive-descent compiler for one hot source text

    A parser is either string-backed (`Parser(text)`) or file-backed
    (`Parser(config=...).file_load(path)`). Only file-backed parsers can
    import other hot files, since relative imports are resolved against the
    directory of the file being compiled.
    """

    def __init__(self, source: str = "", config: Optional[ProjectConfig] = None) -> None:
        """
        Initialize parser with source text

        Args:
            source: Hot source text (empty when loading from a file)
            config: Project configuration shared with every imported file

        Attributes:
            source: Source text being compiled
            config: Project configuration
            file: Absolute path of the backing source file, if any
            out_file: Destination of the compiled output, if any
            options: Side-channel values of the current parse
            cursor: Scan state of the current parse
            import_chain: Files whose imports led to this parse
        """
        from .directives import DirectiveResolver

        self.source = source
        self.config = config or ProjectConfig()
        self.file: Optional[str] = None
        self.out_file: Optional[str] = None
        self.import_chain: Tuple[str, ...] = ()
        self.options = ParseOptions()
        self.cursor = Cursor(source)
        self.directives = DirectiveResolver(self)

    def file_load(self, file: Union[str, Path]) -> "Parser":
        """
        Back this parser by a source file and read its text

        Raises:
            OSError: If the file cannot be read
        """
        self.file = os.path.abspath(file)
        self.source = Path(self.file).read_text(encoding="utf-8")
        LOG(f"Read {len(self.source)} characters from {self.file}", level=3)
        return self

    def parse(self, source: Optional[str] = None, options: Optional[ParseOptions] = None) -> str:
        """
        Compile source text to HTML

        Args:
            source: Text to compile instead of the current source
            options: Side-channel values (content injected by an importer)

        Returns:
            HTML text with carriage returns removed

        Raises:
            HotSyntaxError: If the source is malformed
            ImportContextError: If a hot file is imported without a backing file
        """
        if source:
            self.source = source
        self.cursor = Cursor(self.source)
        self.options = options or ParseOptions()
        return self.children_parse(-1).replace("\r", "")

    def compile(
        self,
        out: Optional[str] = None,
        write_file: bool = True,
        options: Optional[ParseOptions] = None,
    ) -> str:
        """
        Compile the backing file and optionally write the result

        Args:
            out: Output path; defaults to the source path with an .html extension
            write_file: Write the HTML to `out` (creating directories)
            options: Side-channel values for this parse

        Returns:
            The compiled HTML

        Raises:
            ValueError: If there is neither `out` nor a backing file to derive it from
        """
        if not out:
            if not self.file:
                if write_file:
                    raise ValueError("Cannot compile automatically, no filename to compile to.")
            else:
                out = extension_replace(self.file, appsettings.output_extension)
        self.out_file = out

        result = self.parse(options=options)
        if write_file and out:
            destination = Path(out)
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(result, encoding="utf-8")
            LOG(f"Wrote {destination}", level=2)
        return result

    def children_parse(self, until_indent: int, join: str = Char.NEWLINE) -> str:
        """
        Parse a block of sibling expressions

        Keeps parsing while no newline has been crossed since entering the
        block (an inline child sits on its parent's line) or while the line
        just entered is indented deeper than `until_indent`.

        Args:
            until_indent: Indentation of the parent; -1 for the whole document
            join: Separator placed between non-empty sibling fragments
        """
        cursor = self.cursor
        fragments = []
        line = cursor.line
        cursor.whitespace_consume()
        while (cursor.indent > until_indent or line == cursor.line) and not cursor.done:
            fragment = self.expression_parse()
            if fragment:
                fragments.append(fragment)
            cursor.whitespace_consume()
        return join.join(fragments)

    def expression_parse(self) -> str:
        """Parse one string, comment, call or element"""
        cursor = self.cursor
        cursor.whitespace_consume()
        char = cursor.peek()

        if char == Char.STRING:
            return self.string_parse()
        if char == Char.COMMENT:
            return self.comment_parse()
        if char == Char.CALL:
            cursor.advance()
            if cursor.matches(WORD):
                return self.directives.call_parse()
        elif cursor.matches(WORD):
            return self.element_parse()

        cursor.error(f"Invalid character: {cursor.peek() or 'end of input'}")

    def element_parse(self) -> str:
        """
        Parse an element and its children

        `tag: child` nests an indented block (every line tabbified, the
        block wrapped in newlines); `tag:= child child` splices children
        inline with no separators.
        """
        cursor = self.cursor
        name = cursor.extract(WORD)
        result = f"<{name}"

        if cursor.char_consume(Char.ID):
            result += f' id="{cursor.extract(WORD)}"'

        classes = []
        while cursor.char_consume(Char.CLASS):
            classes.append(cursor.extract(WORD))
        if classes:
            result += f' class="{" ".join(classes)}"'

        result += self.attributes_parse(attribute_format) or ""
        result += ">"

        if cursor.char_consume(Char.ELEMENT_CHILDREN):
            if cursor.char_consume(Char.ELEMENT_CHILD):
                result += self.children_parse(cursor.indent, "")
            else:
                result += Char.NEWLINE + tabbify(self.children_parse(cursor.indent)) + Char.NEWLINE

        return result + f"</{name}>"

    def attributes_parse(
        self, formatter: Optional[AttributeFormatter] = None
    ) -> Union[str, Dict[str, Optional[str]], None]:
        """
        Parse an optional `[name, name: value, ...]` attribute list

        Values are full expressions, so `[title: "x"]` yields the compiled
        string. A bare name is a flag and has the value None.

        Args:
            formatter: Renders one (name, value) pair

        Returns:
            With a formatter, the rendered pairs concatenated in source
            order; without one, a name -> value mapping. None when there is
            no attribute list at the cursor.
        """
        cursor = self.cursor
        if not cursor.char_consume(Char.ATTRIBUTE_START):
            return None

        pairs = []
        cursor.whitespace_consume()
        while not cursor.char_consume(Char.ATTRIBUTE_END):
            name = cursor.extract(WORD)
            if cursor.char_consume(Char.ATTRIBUTE_VALUE):
                cursor.whitespace_consume()
                pairs.append((name, self.expression_parse()))
                cursor.char_consume(Char.ADDITIONAL)
            else:
                pairs.append((name, None))
                cursor.char_consume(Char.ADDITIONAL_NO_VALUE)
            cursor.whitespace_consume()

        if formatter:
            return "".join(formatter(name, value) for name, value in pairs)
        return dict(pairs)

    def string_parse(self) -> str:
        """Parse a quoted string or, after \"\"\", a block string"""
        cursor = self.cursor
        if cursor.consume(STRING_BLOCK):
            return self.stringBlock_parse(cursor.indent)

        start = cursor.index
        cursor.char_consume(Char.STRING)
        result = ""
        while cursor.peek() != Char.STRING:
            if cursor.done:
                cursor.error("Unterminated string", start)
            if cursor.peek() == Char.ESCAPE:
                cursor.advance()
                if cursor.done:
                    cursor.error("Unterminated string", start)
                escaped = cursor.peek()
                if escaped == Char.ESCAPE_NEWLINE:
                    result += Char.NEWLINE
                    cursor.advance()
                    continue
                if escaped == Char.ESCAPE_TAB:
                    result += Char.TAB
                    cursor.advance()
                    continue
            result += cursor.peek()
            cursor.advance()
        cursor.advance()
        return result

    def stringBlock_parse(self, until_indent: int) -> str:
        """
        Collect the lines of a block string

        Takes every following line indented deeper than `until_indent`,
        with `until_indent + 1` tabs removed and deeper tabs kept. Stops at
        a \"\"\" fence or at the first non-empty line that is not indented
        deeper. Lines are joined with <br> so the block renders as one run.
        """
        cursor = self.cursor
        lines = []
        if cursor.consume(WHITESPACE_UNTIL_NEWLINE):
            cursor.line += 1
        while True:
            line = ""
            indent = 0
            while cursor.peek() == Char.TAB:
                cursor.advance()
                indent += 1
                if indent > until_indent + 1:
                    line += Char.TAB
            cursor.indent = indent

            if cursor.peek() == Char.STRING and cursor.consume(STRING_BLOCK):
                break
            if not cursor.lineEnd_is() and indent <= until_indent:
                break

            while not cursor.done and not cursor.lineEnd_is():
                line += cursor.peek()
                cursor.advance()
            lines.append(line)

            if not cursor.newline_consume():
                break
        return "<br>".join(lines)

    def comment_parse(self) -> str:
        """Parse a line comment, or a block comment after ###"""
        cursor = self.cursor
        if cursor.consume(COMMENT_BLOCK):
            return self.commentBlock_parse(cursor.indent)

        cursor.char_consume(Char.COMMENT)
        keep = cursor.char_consume(Char.COMMENT)
        result = ""
        while not cursor.done and not cursor.lineEnd_is():
            if keep:
                result += cursor.peek()
            cursor.advance()
        return f"<!-- {result.strip()} -->" if result else result

    def commentBlock_parse(self, until_indent: int) -> str:
        """
        Skip, or keep when opened with ####, a block comment

        The block takes the rest of the opening line plus every following
        line indented deeper than `until_indent`, and ends early at any ###
        fence.
        """
        cursor = self.cursor
        keep = cursor.char_consume(Char.COMMENT)
        was_newline = cursor.consume(WHITESPACE_UNTIL_NEWLINE)
        if was_newline:
            cursor.line += 1
        result = ""
        start = cursor.index

        while True:
            if cursor.index == start and not was_newline:
                cursor.indent = until_indent
            else:
                cursor.indent = 0
                while cursor.peek() == Char.TAB:
                    cursor.advance()
                    cursor.indent += 1
                if cursor.peek() == Char.COMMENT and cursor.consume(COMMENT_BLOCK):
                    break
            if not cursor.lineEnd_is() and cursor.indent <= until_indent and cursor.index != start:
                break

            fenced = False
            while not cursor.done and not cursor.lineEnd_is():
                if cursor.peek() == Char.COMMENT and cursor.consume(COMMENT_BLOCK):
                    fenced = True
                    break
                if keep:
                    result += cursor.peek()
                cursor.advance()
            if fenced:
                break

            if keep:
                result += Char.NEWLINE
            if not cursor.newline_consume():
                break
        return f"<!--\n{result.strip()}\n-->" if result else result
