"""
hot - indentation-sensitive markup that compiles to HTML
"""

__version__ = "1.0.0"

from .parser import Parser, parse
from .compiler import Compiler, compile_paths
from .directives import DirectiveResolver
from .errors import HotError, HotSyntaxError, ImportContextError, ImportCycleError, ConfigError
from .log import LOG, ERROR, WARN, state_connectToLogger

__all__ = [
    "Parser",
    "parse",
    "Compiler",
    "compile_paths",
    "DirectiveResolver",
    "HotError",
    "HotSyntaxError",
    "ImportContextError",
    "ImportCycleError",
    "ConfigError",
    "LOG",
    "ERROR",
    "WARN",
    "state_connectToLogger",
    "__version__",
]
