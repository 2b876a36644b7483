"""
Directive call models

Defines the closed set of `!name[...]` calls and the structured arguments
of the import directive.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Optional, Set


class DirectiveName(Enum):
    """
    Calls understood by the parser

    CONTENT yields the fragment injected by an importing file.
    IMPORT pulls in a script, a stylesheet or other hot files.
    """
    CONTENT = "content"
    IMPORT = "import"

    @classmethod
    def lookup(cls, name: str) -> Optional["DirectiveName"]:
        """Return the directive called `name`, or None if there is none"""
        try:
            return cls(name)
        except ValueError:
            return None


# Import arguments consumed by the directive itself (never rendered as attributes)
IMPORT_RESERVED_ARGS: Set[str] = {
    'language',
    'lang',
    'script',
    'style',
    'template',
    'src',
}


@dataclass
class ImportArgs:
    """
    Arguments of an `!import[...]` call

    Attributes:
        src: Path, glob or URL to import
        language: Explicit extension override (`language` or `lang`)
        script: `script` flag was given
        style: `style` flag was given
        template: `template` flag was given
        extra: Remaining arguments, rendered onto the emitted tag
               (None values are valueless flags)
    """
    src: str
    language: Optional[str] = None
    script: bool = False
    style: bool = False
    template: bool = False
    extra: Dict[str, Optional[str]] = field(default_factory=dict)

    @classmethod
    def from_attributes(cls, attributes: Dict[str, Optional[str]]) -> "ImportArgs":
        """
        Build ImportArgs from a parsed attribute mapping

        Raises:
            KeyError: If `src` is missing or has no value
        """
        src = attributes.get('src')
        if src is None:
            raise KeyError('src')
        return cls(
            src=src,
            language=attributes.get('language') or attributes.get('lang') or None,
            script='script' in attributes,
            style='style' in attributes,
            template='template' in attributes,
            extra={
                name: value for name, value in attributes.items()
                if name not in IMPORT_RESERVED_ARGS
            },
        )
