"""Frame composition for the editor screen.

Builds one complete ANSI frame (text rows, status bar, message bar, cursor
placement) as a single string from session state without mutating it. The
caller writes the frame in one go so the terminal never shows a half-drawn
screen.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import __version__
from .buffer import Cursor, TextBuffer
from .rows import Row
from .ui_theme import DEFAULT_THEME, EditorTheme
from .viewport import Viewport

MESSAGE_TIMEOUT_SECONDS = 5.0
STATUS_NAME_LIMIT = 20
WELCOME_MESSAGE = f"Kilo editor -- version {__version__}"


@dataclass
class RenderContext:
    buffer: TextBuffer
    cursor: Cursor
    viewport: Viewport
    filename: str | None = None
    filetype: str | None = None
    status_message: str = ""
    status_message_age: float = 0.0
    message_timeout: float = MESSAGE_TIMEOUT_SECONDS
    theme: EditorTheme = DEFAULT_THEME


def _control_symbol(ch: str) -> str:
    code = ord(ch)
    if code <= 26:
        return chr(ord("@") + code)
    return "?"


def render_text_row(row: Row, col_offset: int, width: int, theme: EditorTheme) -> str:
    """Slice the visible part of ``row.render`` and color it by highlight class."""
    visible = row.render[col_offset : col_offset + max(0, width)]
    highlight = row.highlight[col_offset : col_offset + len(visible)]
    out: list[str] = []
    current = ""
    for ch, hl in zip(visible, highlight):
        if not ch.isprintable():
            out.append(theme.reverse + _control_symbol(ch) + theme.reset)
            if current:
                out.append(current)
            continue
        color = theme.color_for(hl)
        if color != current:
            out.append(color or theme.default_fg)
            current = color
        out.append(ch)
    out.append(theme.default_fg)
    return "".join(out)


def welcome_line(width: int) -> str:
    message = WELCOME_MESSAGE[:width]
    padding = (width - len(message)) // 2
    if padding <= 0:
        return message
    return "~" + " " * (padding - 1) + message


def build_status_line(left_text: str, width: int, right_text: str) -> str:
    """Left-aligned ``left_text`` with ``right_text`` flush right when it fits."""
    if width <= 0:
        return ""
    left = left_text[:width]
    gap = width - len(left) - len(right_text)
    if gap < 0:
        return left + " " * (width - len(left))
    return left + " " * gap + right_text


def status_bar(context: RenderContext) -> str:
    buffer = context.buffer
    name = (context.filename or "[No Name]")[:STATUS_NAME_LIMIT]
    left = f"{name} - {buffer.row_count} lines"
    if buffer.dirty:
        left += " (modified)"
    right = f"{context.filetype or 'no ft'} | {context.cursor.y + 1}/{buffer.row_count}"
    line = build_status_line(left, context.viewport.screen_cols, right)
    return context.theme.reverse + line + context.theme.reset + "\r\n"


def message_bar(context: RenderContext) -> str:
    message = context.status_message[: context.viewport.screen_cols]
    if message and context.status_message_age < context.message_timeout:
        return "\x1b[K" + message
    return "\x1b[K"


def render_frame(context: RenderContext) -> str:
    """Compose the full frame for the current state."""
    buffer = context.buffer
    viewport = context.viewport
    out: list[str] = ["\x1b[?25l", "\x1b[H"]

    for y in range(viewport.screen_rows):
        file_row = viewport.row_offset + y
        if file_row >= buffer.row_count:
            if buffer.row_count == 0 and y == viewport.screen_rows // 3:
                out.append(welcome_line(viewport.screen_cols))
            else:
                out.append("~")
        else:
            out.append(
                render_text_row(
                    buffer.rows[file_row],
                    viewport.col_offset,
                    viewport.screen_cols,
                    context.theme,
                )
            )
        out.append("\x1b[K\r\n")

    out.append(status_bar(context))
    out.append(message_bar(context))

    cursor_row = context.cursor.y - viewport.row_offset + 1
    cursor_col = viewport.render_x - viewport.col_offset + 1
    out.append(f"\x1b[{cursor_row};{cursor_col}H")
    out.append("\x1b[?25h")
    return "".join(out)
