"""
Path helpers shared by the import resolver and the compile orchestrator
"""

import os
import re
from typing import Iterable, Optional

_URL = re.compile(r'^https?://')


def url_is(path: str) -> bool:
    """True for http:// and https:// addresses"""
    return bool(_URL.match(path))


def absolute_is(path: str) -> bool:
    """True for URLs and absolute filesystem paths, which are never rewritten"""
    return url_is(path) or os.path.isabs(path) or path.startswith("/")


def extension_get(path: str) -> str:
    """Extension of `path` without the dot, '' if there is none"""
    return os.path.splitext(path)[1][1:]


def extension_replace(path: str, extension: str) -> str:
    """
    Swap the extension of `path`

    Example:
        >>> extension_replace('pages/index.hot', 'html')
        'pages/index.html'
    """
    stem = os.path.splitext(os.path.basename(path))[0]
    return os.path.join(os.path.dirname(path), f"{stem}.{extension}")


def commondir(paths: Iterable[str]) -> str:
    """
    Deepest directory shared by all `paths`

    A single path is returned unchanged.
    """
    return os.path.commonpath([os.path.abspath(path) for path in paths])


def link_make(target: str, out_file: Optional[str]) -> str:
    """
    Express an absolute `target` relative to the directory `out_file` lives in

    Links are always written with forward slashes.
    """
    out_dir = os.path.dirname(os.path.abspath(out_file)) if out_file else os.getcwd()
    return os.path.relpath(target, out_dir).replace(os.sep, "/")
