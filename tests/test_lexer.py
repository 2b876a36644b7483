"""
HotLexer tests - token types for highlighted hot source
"""

from pygments.token import Comment, Name, Punctuation, String

from hot.lib.lexer import HotLexer, get_lexer


def tokens(source):
    """Non-whitespace (token type, text) pairs"""
    return [(token, text) for token, text in HotLexer().get_tokens(source) if text.strip()]


class TestHotLexer:
    """Test token classification"""

    def test_element(self):
        """Tag, id, classes and child marker"""
        result = tokens('div#main.card: "Hi"')
        assert result[:4] == [
            (Name.Tag, "div"),
            (Name.Variable, "#main"),
            (Name.Class, ".card"),
            (Punctuation, ":"),
        ]
        assert (String, "Hi") in result

    def test_attributes(self):
        """Attribute names inside brackets"""
        result = tokens('a[href: "/", hidden]')
        assert (Name.Attribute, "href") in result
        assert (Name.Attribute, "hidden") in result
        assert (Punctuation, "[") in result
        assert (Punctuation, "]") in result

    def test_call(self):
        """Directive names"""
        result = tokens('!import[src: "./card"]')
        assert result[:2] == [(Punctuation, "!"), (Name.Function, "import")]

    def test_comments(self):
        """Dropped and kept line comments"""
        assert tokens("# dropped") == [(Comment.Single, "# dropped")]
        assert tokens("## kept") == [(Comment.Special, "## kept")]

    def test_block_string(self):
        """Fenced block strings are one token"""
        assert tokens('"""\n\ttext\n"""') == [(String.Doc, '"""\n\ttext\n"""')]

    def test_block_string_ends_at_dedent(self):
        """An unfenced block string stops at the first dedented line"""
        result = tokens('"""\n\ttext\n\n\tmore\ndiv: span\n')
        assert result[0] == (String.Doc, '"""\n\ttext\n\n\tmore')
        assert (Name.Tag, "div") in result
        assert (Name.Tag, "span") in result

    def test_nested_block_string(self):
        """The dedent is measured from the line the block opens on"""
        result = tokens('div:\n\t"""\n\t\ttext\n\tspan')
        assert (String.Doc, '"""\n\t\ttext') in result
        assert result[-1] == (Name.Tag, "span")

    def test_block_comment_ends_at_dedent(self):
        """Block comments stop at a dedent or at a ### fence"""
        assert tokens("###\n\thidden\np")[0] == (Comment.Multiline, "###\n\thidden")
        assert tokens("###\n\thidden\np")[1] == (Name.Tag, "p")
        assert tokens("#### a ### div") == [(Comment.Special, "#### a ###"), (Name.Tag, "div")]

    def test_escape(self):
        """Escapes inside strings"""
        assert (String.Escape, "\\n") in tokens('"a\\nb"')

    def test_get_lexer(self):
        """The helper returns a usable lexer"""
        assert isinstance(get_lexer(), HotLexer)
        assert "*.hot" in HotLexer.filenames
