"""
hot - Indentation-sensitive markup compiler

Compiles .hot files, a compact tab-indented markup language, straight to HTML.
"""

__version__ = "1.0.0"

from .lib import (
    Parser,
    parse,
    Compiler,
    compile_paths,
    HotError,
    HotSyntaxError,
    ImportContextError,
    ImportCycleError,
    ConfigError,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "Parser",
    "parse",
    "Compiler",
    "compile_paths",
    "HotError",
    "HotSyntaxError",
    "ImportContextError",
    "ImportCycleError",
    "ConfigError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
