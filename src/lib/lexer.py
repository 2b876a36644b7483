"""
Custom Pygments lexer for hot syntax highlighting

Provides syntax highlighting for .hot source when it is shown in docs or
terminals. Registered as a Pygments plugin, so `pygmentize -l hot` works
once the package is installed.

Token types:
- Name.Tag: Element names (e.g., div, span)
- Name.Function: Directive calls (e.g., !import, !content)
- Name.Attribute: Attribute names inside [...]
- Name.Variable / Name.Class: #id and .class suffixes
- String / String.Doc: Quoted strings and \"\"\" block strings
- Comment: # and ## line comments, ### and #### block comments
- Punctuation: Brackets, separators and the : / := child markers
"""

from pygments.lexer import ExtendedRegexLexer, bygroups
from pygments.token import (
    Text,
    Whitespace,
    Punctuation,
    Name,
    String,
    Comment,
)


def indentedBlock(token, fence, fence_inline):
    """
    Callback lexing a block that ends at `fence` or at a dedent

    The block takes the rest of its opening line and every following line
    indented deeper than the line it opened on. Blank lines never end it.
    With `fence_inline` the fence may also sit mid-line; otherwise it only
    counts at the start of a line.
    """

    def callback(lexer, match, ctx):
        text = ctx.text
        start = match.start()
        line_start = text.rfind('\n', 0, start) + 1
        prefix = text[line_start:start]
        until_indent = len(prefix) - len(prefix.lstrip('\t'))

        pos = text.find('\n', match.end())
        if pos == -1:
            pos = len(text)
        opening = text[match.end():pos]
        if fence_inline and fence in opening:
            pos = match.end() + opening.index(fence) + len(fence)
        else:
            while pos < len(text):
                next_start = pos + 1
                next_end = text.find('\n', next_start)
                if next_end == -1:
                    next_end = len(text)
                line = text[next_start:next_end]
                body = line.lstrip('\t')
                indent = len(line) - len(body)

                if body.startswith(fence):
                    pos = next_start + indent + len(fence)
                    break
                if body.strip() and indent <= until_indent:
                    break
                if fence_inline and fence in body:
                    pos = next_start + line.index(fence) + len(fence)
                    break
                pos = next_end

        yield start, token, text[start:pos]
        ctx.pos = pos

    return callback


class HotLexer(ExtendedRegexLexer):
    """
    Lexer for the hot markup language

    Example:
        div#main.card[title: "Hi"]: span: "Hello"

    Tokens:
        div → Name.Tag
        #main → Name.Variable
        .card → Name.Class
        [ → Punctuation
        title → Name.Attribute
        "Hi" → String
        : → Punctuation
    """

    name = 'Hot'
    aliases = ['hot']
    filenames = ['*.hot']

    tokens = {
        'root': [
            (r'\s+', Whitespace),

            # Kept block comments (until a ### fence or a dedent)
            (r'####', indentedBlock(Comment.Special, '###', fence_inline=True)),

            # Block comments (until a ### fence or a dedent)
            (r'###', indentedBlock(Comment.Multiline, '###', fence_inline=True)),

            # Kept line comments, then dropped line comments
            (r'##.*?$', Comment.Special),
            (r'#.*?$', Comment.Single),

            # Block strings
            (r'"""', indentedBlock(String.Doc, '"""', fence_inline=False)),

            # Quoted strings
            (r'"', String, 'string'),

            # Directive calls
            (r'(!)([a-zA-Z][a-zA-Z0-9-]*)', bygroups(Punctuation, Name.Function)),

            # Element name with optional id
            (r'([a-zA-Z][a-zA-Z0-9-]*)(#[a-zA-Z][a-zA-Z0-9-]*)?',
             bygroups(Name.Tag, Name.Variable)),

            # Class suffixes
            (r'\.[a-zA-Z][a-zA-Z0-9-]*', Name.Class),

            # Attribute list
            (r'\[', Punctuation, 'attributes'),

            # Child markers
            (r':=?', Punctuation),

            (r'.', Text),
        ],

        'attributes': [
            (r'\s+', Whitespace),
            (r'\]', Punctuation, '#pop'),
            (r'([a-zA-Z][a-zA-Z0-9-]*)(\s*)(:)',
             bygroups(Name.Attribute, Whitespace, Punctuation)),
            (r'[a-zA-Z][a-zA-Z0-9-]*', Name.Attribute),
            (r'[,;]', Punctuation),
            (r'"', String, 'string'),
            (r'.', Text),
        ],

        'string': [
            (r'\\.', String.Escape),
            (r'"', String, '#pop'),
            (r'[^"\\]+', String),
        ],
    }


def get_lexer() -> HotLexer:
    """
    Get the HotLexer instance

    Returns:
        HotLexer instance ready for use with Pygments
    """
    return HotLexer()
