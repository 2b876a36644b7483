"""
Directive call tests on standalone strings

Standalone strings have no backing file, so script and stylesheet imports
keep their paths as written and hot imports are refused.
"""

import pytest

from hot.lib.parser import parse
from hot.lib.directives import DirectiveResolver
from hot.lib.errors import HotSyntaxError, ImportContextError
from hot.models.directives import DirectiveName, ImportArgs


class TestImportResources:
    """Test !import of scripts and stylesheets"""

    def test_relative(self):
        """Relative paths get the inferred extension"""
        assert parse('!import[style; src: "./test"]') == '<link rel="stylesheet" href="./test.css"/>'
        assert parse('!import[script; src: "./test"]') == '<script src="./test.js"></script>'

    def test_absolute(self):
        """Absolute paths are kept"""
        assert parse('!import[style; src: "/test"]') == '<link rel="stylesheet" href="/test.css"/>'
        assert parse('!import[script; src: "/test"]') == '<script src="/test.js"></script>'

    def test_web(self):
        """URLs are kept and get no extension"""
        assert (
            parse('!import[style; src: "http://blahblooblee.com/coolcss"]')
            == '<link rel="stylesheet" href="http://blahblooblee.com/coolcss"/>'
        )
        assert (
            parse('!import[script; src: "https://blahblooblee.com/cooljs"]')
            == '<script src="https://blahblooblee.com/cooljs"></script>'
        )

    def test_extension_from_src(self):
        """An extension in src decides the tag without flags"""
        assert parse('!import[src: "app.js"]') == '<script src="app.js"></script>'
        assert parse('!import[src: "site.css"]') == '<link rel="stylesheet" href="site.css"/>'

    def test_language_overrides_extension(self):
        """language and lang take precedence over the src extension"""
        assert parse('!import[lang: "css", src: "theme.less"]') == '<link rel="stylesheet" href="theme.less"/>'
        assert parse('!import[language: "js", src: "lib"]') == '<script src="lib.js"></script>'

    def test_extra_attributes(self):
        """Arguments the directive does not use are rendered on the tag"""
        source = '!import[script; defer; type: "module", src: "app"]'
        assert parse(source) == '<script src="app.js" defer type="module"></script>'

    def test_import_inside_element(self):
        """Imports are expressions like any other"""
        source = 'head:\n\t!import[style; src: "/a"]\n\t!import[script; src: "/b"]'
        expected = '<head>\n\t<link rel="stylesheet" href="/a.css"/>\n\t<script src="/b.js"></script>\n</head>'
        assert parse(source) == expected


class TestImportErrors:
    """Test import failures on standalone strings"""

    def test_hot_import_without_file(self):
        """Hot files cannot be imported without a backing file"""
        with pytest.raises(ImportContextError, match="Can't import a hot file when parsing a hot string."):
            parse('!import[src: "./test"]')

    def test_missing_src(self):
        """src is required"""
        with pytest.raises(HotSyntaxError, match="'src'"):
            parse("!import[style]")

    def test_unsupported_extension(self):
        """Only js, css and hot can be imported"""
        with pytest.raises(HotSyntaxError, match="Cannot import 'txt' files"):
            parse('!import[src: "notes.txt"]')


class TestCalls:
    """Test !content and undefined calls"""

    def test_content_without_injection(self):
        """!content is empty when nothing was injected"""
        assert parse("!content") == ""
        assert parse("div\n!content\nspan") == "<div></div>\n<span></span>"

    def test_content_with_injection(self):
        """!content yields the injected fragment"""
        assert parse("span:= !content", import_content="<b>x</b>") == "<span><b>x</b></span>"

    def test_content_ignores_arguments(self):
        """An argument list after !content is parsed and ignored"""
        assert parse("!content[x]", import_content="y") == "y"

    def test_undefined_call(self):
        """Unknown names are reported at the call"""
        with pytest.raises(HotSyntaxError, match="Undefined variable 'nope' cannot be called") as info:
            parse("div\n!nope[]")

        assert (info.value.line, info.value.column) == (2, 2)


class TestDirectiveModels:
    """Test the directive value objects"""

    def test_lookup(self):
        """Only content and import are directives"""
        assert DirectiveName.lookup("content") is DirectiveName.CONTENT
        assert DirectiveName.lookup("import") is DirectiveName.IMPORT
        assert DirectiveName.lookup("include") is None

    def test_import_args(self):
        """Reserved arguments are split from the rendered extras"""
        args = ImportArgs.from_attributes({"src": "a", "lang": "css", "template": None, "id": "x"})
        assert (args.src, args.language, args.template, args.script) == ("a", "css", True, False)
        assert args.extra == {"id": "x"}

    def test_extension_precedence(self):
        """language > src extension > script > style > hot"""
        resolver = DirectiveResolver(parser=None)
        assert resolver.extension_resolve(ImportArgs(src="a.css", language="js")) == "js"
        assert resolver.extension_resolve(ImportArgs(src="a.css", script=True)) == "css"
        assert resolver.extension_resolve(ImportArgs(src="a", script=True, style=True)) == "js"
        assert resolver.extension_resolve(ImportArgs(src="a", style=True)) == "css"
        assert resolver.extension_resolve(ImportArgs(src="a")) == "hot"
