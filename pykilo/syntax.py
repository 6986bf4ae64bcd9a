"""Filetype detection.

A small static table decides which highlight features a buffer gets. Files
outside the table still get a display name from Pygments' lexer registry so
the status bar can say what they are; they get no highlighting.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import PurePath

HL_HIGHLIGHT_NUMBERS = 1 << 0


@dataclass(frozen=True)
class FileSyntax:
    filetype: str
    filematch: tuple[str, ...]
    flags: int

    @property
    def highlight_numbers(self) -> bool:
        return bool(self.flags & HL_HIGHLIGHT_NUMBERS)

    def matches(self, filename: str) -> bool:
        """Suffix patterns (``.c``) match the extension; others match anywhere."""
        suffix = PurePath(filename).suffix
        for pattern in self.filematch:
            if pattern.startswith("."):
                if suffix == pattern:
                    return True
            elif pattern in filename:
                return True
        return False


HLDB: tuple[FileSyntax, ...] = (
    FileSyntax("c", (".c", ".h", ".cpp"), HL_HIGHLIGHT_NUMBERS),
    FileSyntax("go", (".go",), HL_HIGHLIGHT_NUMBERS),
    FileSyntax("python", (".py",), HL_HIGHLIGHT_NUMBERS),
)


def select_syntax(filename: str | None) -> FileSyntax | None:
    if not filename:
        return None
    name = PurePath(filename).name
    for syntax in HLDB:
        if syntax.matches(name):
            return syntax
    return None


@lru_cache(maxsize=64)
def _lexer_name(name: str) -> str | None:
    from pygments.lexers import get_lexer_for_filename
    from pygments.util import ClassNotFound

    try:
        lexer = get_lexer_for_filename(name)
    except ClassNotFound:
        return None
    return lexer.name.lower()


def describe_filetype(filename: str | None) -> str | None:
    """Return the status-bar filetype name for ``filename``, if any."""
    syntax = select_syntax(filename)
    if syntax is not None:
        return syntax.filetype
    if not filename:
        return None
    return _lexer_name(PurePath(filename).name)
