"""
Lexical micro-grammar of the hot language

These are not tokens: the parser tests the text at the cursor against one
of these patterns at each decision point. Patterns are used with
`pattern.match(text, pos)`, so they are implicitly anchored at the cursor.
"""

import re
from typing import Dict

WHITESPACE = re.compile(r'\s+')
WHITESPACE_UNTIL_NEWLINE = re.compile(r'[ \t]*\r?\n')
WORD = re.compile(r'[a-zA-Z][a-zA-Z0-9-]*')
STRING_BLOCK = re.compile(r'"""')
COMMENT_BLOCK = re.compile(r'###')

PATTERN_NAMES: Dict[re.Pattern, str] = {
    WHITESPACE: 'Whitespace',
    WHITESPACE_UNTIL_NEWLINE: 'WhitespaceUntilNewLine',
    WORD: 'Word',
    STRING_BLOCK: 'StringBlock',
    COMMENT_BLOCK: 'CommentBlock',
}


def pattern_name(pattern: re.Pattern) -> str:
    """Human-readable name of a grammar pattern, for error messages"""
    return PATTERN_NAMES.get(pattern, pattern.pattern)


class Char:
    """Single characters with a fixed meaning"""
    STRING = '"'
    COMMENT = '#'
    ID = '#'
    CLASS = '.'
    ATTRIBUTE_START = '['
    ATTRIBUTE_END = ']'
    ATTRIBUTE_VALUE = ':'
    ADDITIONAL = ','
    ADDITIONAL_NO_VALUE = ';'
    ESCAPE = '\\'
    ESCAPE_NEWLINE = 'n'
    ESCAPE_TAB = 't'
    ELEMENT_CHILDREN = ':'
    ELEMENT_CHILD = '='
    CALL = '!'
    TAB = '\t'
    NEWLINE = '\n'
    CRLF = '\r\n'
