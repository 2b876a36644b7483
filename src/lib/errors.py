"""
Error types raised while compiling hot source
"""


class HotError(Exception):
    """Base class for every error raised by the compiler"""
    pass


class HotSyntaxError(HotError, SyntaxError):
    """
    Raised when the source cannot be parsed

    The message ends with the 1-based `[line:column]` of the failing offset;
    `snippet` holds the offending line with a caret under that offset.

    Example:
        Invalid character: ? at [2:5]
            div?
               ^
    """

    def __init__(self, message: str, line: int, column: int, snippet: str = "") -> None:
        self.reason = message
        self.line = line
        self.column = column
        self.snippet = snippet
        super().__init__(f"{message} at [{line}:{column}]")

    def __str__(self) -> str:
        text = f"{self.reason} at [{self.line}:{self.column}]"
        if self.snippet:
            text += f"\n{self.snippet}"
        return text


class ImportContextError(HotError):
    """Raised when a hot file is imported from a parse with no backing file"""
    pass


class ImportCycleError(HotError):
    """Raised when a hot file ends up importing itself"""
    pass


class ConfigError(HotError):
    """Raised when a project configuration file cannot be read or validated"""
    pass
