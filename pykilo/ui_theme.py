"""UI theme definitions and selection helpers.

Themes map highlight classes and bar chrome to ANSI SGR sequences. An empty
string means "draw with the terminal's default foreground".
"""

from __future__ import annotations

from dataclasses import dataclass

from .rows import Highlight


@dataclass(frozen=True)
class EditorTheme:
    """Semantic ANSI palette used by the screen renderer."""

    name: str
    number: str
    match: str
    default_fg: str
    reverse: str
    reset: str

    def color_for(self, highlight: Highlight) -> str:
        if highlight == Highlight.NUMBER:
            return self.number
        if highlight == Highlight.MATCH:
            return self.match
        return ""


DEFAULT_THEME = EditorTheme(
    name="default",
    number="\033[31m",
    match="\033[34m",
    default_fg="\033[39m",
    reverse="\033[7m",
    reset="\033[m",
)

OCEAN_THEME = EditorTheme(
    name="ocean",
    number="\033[38;5;215m",
    match="\033[1;38;5;45m",
    default_fg="\033[22;39m",
    reverse="\033[7m",
    reset="\033[m",
)

PLAIN_THEME = EditorTheme(
    name="plain",
    number="",
    match="",
    default_fg="",
    reverse="\033[7m",
    reset="\033[m",
)

_THEMES: dict[str, EditorTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> EditorTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "EditorTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
