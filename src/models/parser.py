"""
Parser-specific data models

Type-safe structures for cursor and parser operations.
"""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass
class LastMatch:
    """
    Cached result of the most recent Cursor.matches() call

    Lets a pattern be tested and then extracted without scanning twice.
    The cache is only valid for the same pattern at the same offset.

    Attributes:
        pattern: Compiled pattern that matched
        index: Offset the match was made at
        length: Length of the matched text
    """
    pattern: re.Pattern
    index: int
    length: int


@dataclass
class ParseOptions:
    """
    Side-channel values for one parse

    Attributes:
        import_content: HTML fragment substituted wherever the parsed source
                        calls !content. Handed from an importing parse to the
                        imported one only, never further down.

    Example:
        For `!import[src: "./card"]:= "Hi"` the imported card.hot is parsed
        with ParseOptions(import_content="Hi").
    """
    import_content: Optional[str] = None
