"""Text buffer: the ordered rows of one file plus the editing operations on them.

Operations take the session ``Cursor`` and move it the way the matching key
press would, so callers never have to re-derive the cursor after an edit.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .rows import TAB_STOP, Row, make_row, update_row


@dataclass
class Cursor:
    """Logical cursor; ``y == row_count`` is the virtual line past the end."""

    x: int = 0
    y: int = 0


@dataclass
class TextBuffer:
    rows: list[Row] = field(default_factory=list)
    tab_stop: int = TAB_STOP
    highlight_numbers: bool = False
    dirty: bool = False

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        tab_stop: int = TAB_STOP,
        highlight_numbers: bool = False,
    ) -> TextBuffer:
        """Build a clean buffer with one row per input line."""
        rows = [make_row(line, tab_stop, highlight_numbers) for line in lines]
        return cls(rows=rows, tab_stop=tab_stop, highlight_numbers=highlight_numbers)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def row_at(self, y: int) -> Row | None:
        if 0 <= y < len(self.rows):
            return self.rows[y]
        return None

    def to_text(self) -> str:
        """Serialize rows with one newline terminator per row."""
        return "".join(row.chars + "\n" for row in self.rows)

    def mark_saved(self) -> None:
        self.dirty = False

    def set_highlight_numbers(self, enabled: bool) -> None:
        self.highlight_numbers = enabled
        for row in self.rows:
            self._update(row)

    def _update(self, row: Row) -> None:
        update_row(row, self.tab_stop, self.highlight_numbers)

    # Row operations.

    def insert_row(self, at: int, text: str) -> Row:
        at = max(0, min(at, len(self.rows)))
        row = make_row(text, self.tab_stop, self.highlight_numbers)
        self.rows.insert(at, row)
        self.dirty = True
        return row

    def delete_row(self, at: int) -> None:
        if at < 0 or at >= len(self.rows):
            return
        del self.rows[at]
        self.dirty = True

    def _row_insert_char(self, row: Row, at: int, ch: str) -> None:
        if at < 0 or at > row.size:
            at = row.size
        row.chars = row.chars[:at] + ch + row.chars[at:]
        self._update(row)

    def _row_delete_char(self, row: Row, at: int) -> None:
        if at < 0 or at >= row.size:
            return
        row.chars = row.chars[:at] + row.chars[at + 1 :]
        self._update(row)

    def _row_append(self, row: Row, text: str) -> None:
        row.chars += text
        self._update(row)

    # Cursor-relative editing.

    def insert_char(self, cursor: Cursor, ch: str) -> None:
        if cursor.y == len(self.rows):
            self.insert_row(len(self.rows), "")
        self._row_insert_char(self.rows[cursor.y], cursor.x, ch)
        cursor.x += 1
        self.dirty = True

    def delete_char(self, cursor: Cursor) -> None:
        """Delete the character before the cursor, joining rows at column 0."""
        if cursor.y >= len(self.rows):
            return
        if cursor.x == 0 and cursor.y == 0:
            return

        row = self.rows[cursor.y]
        if cursor.x > 0:
            self._row_delete_char(row, cursor.x - 1)
            cursor.x -= 1
        else:
            prev = self.rows[cursor.y - 1]
            cursor.x = prev.size
            self._row_append(prev, row.chars)
            self.delete_row(cursor.y)
            cursor.y -= 1
        self.dirty = True

    def delete_forward(self, cursor: Cursor) -> None:
        """Delete the character under the cursor (the Delete key)."""
        row = self.row_at(cursor.y)
        if row is None:
            return
        if cursor.x < row.size:
            cursor.x += 1
        elif cursor.y + 1 < len(self.rows):
            cursor.y += 1
            cursor.x = 0
        else:
            return
        self.delete_char(cursor)

    def insert_newline(self, cursor: Cursor) -> None:
        if cursor.x == 0:
            self.insert_row(cursor.y, "")
        else:
            row = self.rows[cursor.y]
            self.insert_row(cursor.y + 1, row.chars[cursor.x :])
            row.chars = row.chars[: cursor.x]
            self._update(row)
        cursor.y += 1
        cursor.x = 0
