"""
Directive calls for hot source

`!name[...]` calls are the only dynamic part of the language and both are
resolved eagerly at compile time:

    !content                    the fragment handed in by the importing file
    !import[src: "path"]        a script, a stylesheet, or other hot files

Importing hot files recompiles them with a fresh parser that shares the
project configuration. A child block after the call is compiled first and
becomes the `!content` of every imported file:

    !import[src: "./card"]: h1: "Title"
"""

import glob
import os
from typing import Dict, Optional, TYPE_CHECKING

from ..config import appsettings
from ..models.directives import DirectiveName, ImportArgs
from ..models.parser import ParseOptions
from .errors import ImportContextError, ImportCycleError
from .grammar import WORD, Char
from .log import LOG, WARN
from .paths import absolute_is, commondir, extension_get, extension_replace, link_make, url_is

if TYPE_CHECKING:
    from .parser import Parser


def attributes_render(attributes: Dict[str, Optional[str]]) -> str:
    """Render leftover import arguments as tag attributes (leading space included)"""
    from .parser import attribute_format

    return "".join(attribute_format(name, value) for name, value in attributes.items())


class DirectiveResolver:
    """
    Resolves `!name[...]` calls for one parser

    The resolver reads from and advances the parser's cursor, since an
    import may own a child block that follows its argument list.
    """

    def __init__(self, parser: "Parser") -> None:
        self.parser = parser

    def call_parse(self) -> str:
        """
        Parse a call whose `!` has already been consumed

        Raises:
            HotSyntaxError: If the called name is not a known directive
        """
        cursor = self.parser.cursor
        start = cursor.index
        name = cursor.extract(WORD)
        attributes = self.parser.attributes_parse() or {}

        directive = DirectiveName.lookup(name)
        if directive is DirectiveName.CONTENT:
            return self.content_resolve()
        if directive is DirectiveName.IMPORT:
            return self.import_resolve(attributes, start)

        cursor.error(f"Undefined variable '{name}' cannot be called", start)

    def content_resolve(self) -> str:
        """The fragment injected by the importing parse, '' if there is none"""
        return self.parser.options.import_content or ""

    def extension_resolve(self, args: ImportArgs) -> str:
        """
        Pick the extension that decides how an import is emitted

        Precedence: language/lang > extension of src > js for `script` >
        css for `style` > the hot source extension.
        """
        extension = args.language or extension_get(args.src)
        if extension:
            return extension
        if args.script:
            return "js"
        if args.style:
            return "css"
        return appsettings.source_extension

    def import_resolve(self, attributes: Dict[str, Optional[str]], start: int) -> str:
        """
        Resolve an `!import[...]` call

        Args:
            attributes: Parsed argument mapping of the call
            start: Offset of the call, for error reporting

        Returns:
            A <script> or <link> tag, or the compiled HTML of every hot file
            matched by `src`, joined with newlines
        """
        parser = self.parser
        cursor = parser.cursor
        try:
            args = ImportArgs.from_attributes(attributes)
        except KeyError:
            cursor.error("Expected a 'src' argument to import", start)

        extension = self.extension_resolve(args)
        import_path = args.src
        if not extension_get(import_path) and not url_is(import_path):
            import_path += f".{extension}"

        link = import_path
        if parser.file and not absolute_is(import_path):
            import_path = os.path.abspath(os.path.join(os.path.dirname(parser.file), import_path))
            link = link_make(import_path, parser.out_file or parser.file)

        extra = attributes_render(args.extra)

        if extension == "js":
            return f'<script src="{link}"{extra}></script>'
        if extension == "css":
            return f'<link rel="stylesheet" href="{link}"{extra}/>'
        if extension == appsettings.source_extension:
            if not parser.file:
                raise ImportContextError("Can't import a hot file when parsing a hot string.")
            return self.hotFiles_import(import_path, args, extra)

        cursor.error(f"Cannot import '{extension}' files", start)

    def importContent_parse(self) -> str:
        """
        Compile the optional child block that follows an import call

        `: block` is passed on as compiled; `:= inline` is trimmed first.
        """
        cursor = self.parser.cursor
        if not cursor.char_consume(Char.ELEMENT_CHILDREN):
            return ""
        inline = cursor.char_consume(Char.ELEMENT_CHILD)
        content = self.parser.children_parse(cursor.indent, "")
        return content.strip() if inline else content

    def hotFiles_import(self, pattern: str, args: ImportArgs, extra: str) -> str:
        """
        Compile every hot file matching `pattern` and join the results

        Matches are taken in sorted order; `**` matches any depth.
        """
        files = sorted(glob.glob(pattern, recursive=True))
        import_content = self.importContent_parse()
        if not files:
            WARN(f"No files match import '{args.src}'")
            return ""

        results = []
        for file in files:
            result = self.hotFile_compile(os.path.abspath(file), import_content)
            if args.template:
                result = f"<template{extra}>{result}</template>"
            results.append(result)
        return Char.NEWLINE.join(results)

    def hotFile_compile(self, file: str, import_content: str) -> str:
        """
        Compile one imported hot file with a fresh parser

        The output path mirrors the file's position under the common
        directory of the project source root and the file, placed under
        `outDir` when one is configured. The file is only written when the
        project sets compileAll and the importing parse writes output too.

        Raises:
            ImportCycleError: If the file is already being compiled higher up
        """
        from .parser import Parser

        parser = self.parser
        config = parser.config
        chain = parser.import_chain + (parser.file,)
        if file in chain:
            raise ImportCycleError(f"Circular import of {file}")

        src_root = commondir([config.src_root or os.path.dirname(parser.file), file])
        relative_out = os.path.relpath(
            extension_replace(file, appsettings.output_extension), src_root
        )
        out_path = os.path.abspath(os.path.join(src_root, config.out_dir or "", relative_out))

        LOG(f"Importing {file}", level=2)
        imported = Parser(config=config)
        imported.import_chain = chain
        imported.file_load(file)
        return imported.compile(
            out_path,
            write_file=bool(config.compile_all and parser.out_file),
            options=ParseOptions(import_content=import_content),
        )
