"""
Comment parser tests

    # dropped          ## kept as <!-- -->
    ### dropped block  #### kept block, both ended by dedent or a ### fence
"""

from hot.lib.parser import parse


class TestLineComments:
    """Test # and ## comments"""

    def test_comment(self):
        """# comments produce nothing"""
        assert parse("# comment") == ""
        assert parse("div # comment") == "<div></div>"

    def test_comment_kept(self):
        """## comments become trimmed HTML comments"""
        assert parse("## comment") == "<!-- comment -->"
        assert parse("div ## comment\ndiv") == "<div></div>\n<!-- comment -->\n<div></div>"

    def test_comment_ends_at_newline(self):
        """The next line is parsed normally"""
        assert parse("# a: b\nspan") == "<span></span>"


class TestBlockComments:
    """Test ### and #### block comments"""

    def test_comment_block(self):
        """### drops every deeper-indented line"""
        source = "###\n\tThis is a\n\tblock comment.\n"
        assert parse(source) == ""

    def test_comment_block_with_fence(self):
        """A ### fence ends the block"""
        source = '###\n\tThis is a\n\tblock comment.\n###\n\tdiv: "hay"'
        assert parse(source) == "<div>\n\thay\n</div>"

    def test_comment_block_inline_fence(self):
        """A fence may sit in the middle of a line"""
        source = '### This is a\n\tblock comment. ### div: "hay"'
        assert parse(source) == "<div>\n\thay\n</div>"

    def test_comment_block_kept(self):
        """#### keeps the block as a multi-line HTML comment"""
        source = "####\n\tThis is a\n\tblock comment.\n"
        assert parse(source) == "<!--\nThis is a\nblock comment.\n-->"

    def test_comment_block_kept_with_fence(self):
        """A kept block also ends at a ### fence"""
        source = '####\n\tThis is a\n\tblock comment.\n###\n\tdiv: "hay"'
        expected = "<!--\nThis is a\nblock comment.\n-->\n<div>\n\thay\n</div>"
        assert parse(source) == expected

    def test_comment_block_kept_inline_fence(self):
        """The fence markers are not part of the kept text"""
        source = '#### This is a\n\tblock comment. ### div: "hay"'
        expected = "<!--\nThis is a\nblock comment.\n-->\n<div>\n\thay\n</div>"
        assert parse(source) == expected

    def test_comment_block_kept_single_hash(self):
        """A lone # inside a kept block is ordinary text"""
        assert parse("#### a # b") == "<!--\na # b\n-->"

    def test_comment_block_ends_at_dedent(self):
        """A block comment inside an element ends at the element's children"""
        source = "div:\n\t###\n\t\thidden\n\tspan\np"
        assert parse(source) == "<div>\n\t<span></span>\n</div>\n<p></p>"

    def test_comment_block_kept_crlf_blank_line(self):
        """CRLF line endings give the same kept block as LF"""
        assert parse("####\n\ta\n\n\tb") == "<!--\na\n\nb\n-->"
        assert parse("####\r\n\ta\r\n\r\n\tb") == "<!--\na\n\nb\n-->"

    def test_comment_block_crlf_blank_line(self):
        """A CRLF blank line inside a dropped block does not end it"""
        assert parse("###\r\n\thidden\r\n\r\n\tstill hidden\r\nspan") == "<span></span>"
