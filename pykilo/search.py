"""Incremental search with a single-row match highlight overlay.

The engine owns everything the find prompt needs between keystrokes: the
last matching row, the scan direction, the saved highlight of the row that
currently shows the match, and the cursor/scroll snapshot used on cancel.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .buffer import Cursor, TextBuffer
from .input import keys
from .rows import Highlight, render_to_char_column
from .viewport import Viewport


class SearchMode(Enum):
    IDLE = "idle"
    PROMPTING = "prompting"


@dataclass(frozen=True)
class SearchSnapshot:
    cursor_x: int
    cursor_y: int
    row_offset: int
    col_offset: int


class SearchEngine:
    """Find-as-you-type state machine over one buffer."""

    def __init__(self, buffer: TextBuffer, cursor: Cursor, viewport: Viewport) -> None:
        self.buffer = buffer
        self.cursor = cursor
        self.viewport = viewport
        self.mode = SearchMode.IDLE
        self.last_match = -1
        self.direction = 1
        self.saved_highlight: tuple[int, list[Highlight]] | None = None
        self._snapshot: SearchSnapshot | None = None

    @property
    def active(self) -> bool:
        return self.mode is SearchMode.PROMPTING

    def begin(self) -> None:
        self._snapshot = SearchSnapshot(
            cursor_x=self.cursor.x,
            cursor_y=self.cursor.y,
            row_offset=self.viewport.row_offset,
            col_offset=self.viewport.col_offset,
        )
        self.last_match = -1
        self.direction = 1
        self.mode = SearchMode.PROMPTING

    def on_key(self, query: str, key: str) -> None:
        """Prompt callback: steer by arrow keys, then search again."""
        if key in (keys.RIGHT, keys.DOWN):
            self.direction = 1
        elif key in (keys.LEFT, keys.UP):
            self.direction = -1
        else:
            self.direction = 1
            self.last_match = -1
        self.find(query)

    def _restore_saved_highlight(self) -> None:
        if self.saved_highlight is None:
            return
        line, highlight = self.saved_highlight
        self.saved_highlight = None
        row = self.buffer.row_at(line)
        if row is not None and len(highlight) == row.rsize:
            row.highlight = highlight

    def find(self, query: str) -> bool:
        """Move to the next row containing ``query``; return whether one matched."""
        self._restore_saved_highlight()
        if not query:
            return False

        if self.last_match == -1:
            self.direction = 1

        row_count = self.buffer.row_count
        current = self.last_match
        for _ in range(row_count):
            current += self.direction
            if current == -1:
                current = row_count - 1
            elif current == row_count:
                current = 0

            row = self.buffer.rows[current]
            index = row.render.find(query)
            if index == -1:
                continue

            self.last_match = current
            self.saved_highlight = (current, list(row.highlight))
            for i in range(index, index + len(query)):
                row.highlight[i] = Highlight.MATCH
            self.cursor.y = current
            self.cursor.x = render_to_char_column(row, index + len(query) - 1, self.buffer.tab_stop)
            # Forces the next scroll to put the match row on the bottom edge.
            self.viewport.row_offset = row_count
            return True
        return False

    def confirm(self) -> None:
        self._restore_saved_highlight()
        self.mode = SearchMode.IDLE
        self.last_match = -1
        self.direction = 1
        self._snapshot = None

    def cancel(self) -> None:
        snapshot = self._snapshot
        self.mode = SearchMode.IDLE
        if snapshot is not None:
            self.cursor.x = snapshot.cursor_x
            self.cursor.y = snapshot.cursor_y
            self.viewport.row_offset = snapshot.row_offset
            self.viewport.col_offset = snapshot.col_offset
        self._snapshot = None
        self.last_match = -1
        self.direction = 1
        self.find("")
