"""Viewport scrolling and cursor movement.

``Viewport.scroll`` reconciles scroll offsets with the cursor after every key;
the movement helpers keep the cursor inside the buffer the way single key
presses do.
"""

from __future__ import annotations

from dataclasses import dataclass

from .buffer import Cursor, TextBuffer
from .input import keys
from .rows import char_to_render_column


@dataclass
class Viewport:
    screen_rows: int
    screen_cols: int
    row_offset: int = 0
    col_offset: int = 0
    render_x: int = 0

    def scroll(self, buffer: TextBuffer, cursor: Cursor) -> None:
        """Move offsets so the cursor's render position is on screen."""
        self.render_x = 0
        row = buffer.row_at(cursor.y)
        if row is not None:
            self.render_x = char_to_render_column(row, cursor.x, buffer.tab_stop)

        if cursor.y < self.row_offset:
            self.row_offset = cursor.y
        if cursor.y >= self.row_offset + self.screen_rows:
            self.row_offset = cursor.y - self.screen_rows + 1

        if self.render_x < self.col_offset:
            self.col_offset = self.render_x
        if self.render_x >= self.col_offset + self.screen_cols:
            self.col_offset = self.render_x - self.screen_cols + 1


def _row_size(buffer: TextBuffer, y: int) -> int:
    row = buffer.row_at(y)
    return row.size if row is not None else 0


def move_cursor(buffer: TextBuffer, cursor: Cursor, key: str) -> None:
    """Apply one arrow key, wrapping left/right across row boundaries."""
    if key == keys.UP:
        if cursor.y > 0:
            cursor.y -= 1
    elif key == keys.DOWN:
        if cursor.y < buffer.row_count:
            cursor.y += 1
    elif key == keys.LEFT:
        if cursor.x > 0:
            cursor.x -= 1
        elif cursor.y > 0:
            cursor.y -= 1
            cursor.x = _row_size(buffer, cursor.y)
    elif key == keys.RIGHT:
        row = buffer.row_at(cursor.y)
        if row is not None:
            if cursor.x < row.size:
                cursor.x += 1
            else:
                cursor.y += 1
                cursor.x = 0

    cursor.x = min(cursor.x, _row_size(buffer, cursor.y))


def page(buffer: TextBuffer, cursor: Cursor, viewport: Viewport, key: str) -> None:
    """Page Up/Down: jump to the viewport edge, then step a screenful."""
    if key == keys.PAGE_UP:
        cursor.y = viewport.row_offset
        step = keys.UP
    else:
        cursor.y = min(viewport.row_offset + viewport.screen_rows - 1, buffer.row_count)
        step = keys.DOWN
    cursor.x = min(cursor.x, _row_size(buffer, cursor.y))

    for _ in range(viewport.screen_rows):
        move_cursor(buffer, cursor, step)


def home(cursor: Cursor) -> None:
    cursor.x = 0


def end(buffer: TextBuffer, cursor: Cursor) -> None:
    cursor.x = _row_size(buffer, cursor.y)
