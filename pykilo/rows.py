"""Row storage and its rendered projection.

Each ``Row`` keeps the logical text exactly as it is in the file plus a
derived ``render`` string (tabs expanded) and a parallel highlight array.
The projection is recomputed from ``chars`` on every mutation; nothing edits
``render`` or ``highlight`` directly except the search overlay.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

TAB_STOP = 8
SEPARATORS = frozenset(" ,.()+-/*=~%<>[];")
_DIGITS = frozenset("0123456789")


class Highlight(IntEnum):
    NORMAL = 0
    NUMBER = 1
    MATCH = 2


@dataclass
class Row:
    chars: str = ""
    render: str = ""
    highlight: list[Highlight] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.chars)

    @property
    def rsize(self) -> int:
        return len(self.render)


def expand_tabs(chars: str, tab_stop: int = TAB_STOP) -> str:
    """Replace each tab with spaces up to the next multiple of ``tab_stop``."""
    out: list[str] = []
    col = 0
    for ch in chars:
        if ch == "\t":
            width = tab_stop - (col % tab_stop)
            out.append(" " * width)
            col += width
        else:
            out.append(ch)
            col += 1
    return "".join(out)


def classify_numbers(render: str) -> list[Highlight]:
    """Tag decimal literals in ``render`` as ``NUMBER``.

    A digit starts or continues a number when it follows a separator, the
    start of the row, or another number character; a ``.`` continues a
    number it directly follows.
    """
    highlight = [Highlight.NORMAL] * len(render)
    prev_sep = True
    for i, ch in enumerate(render):
        prev_hl = highlight[i - 1] if i > 0 else Highlight.NORMAL
        if (ch in _DIGITS and (prev_sep or prev_hl == Highlight.NUMBER)) or (
            ch == "." and prev_hl == Highlight.NUMBER
        ):
            highlight[i] = Highlight.NUMBER
            prev_sep = False
            continue
        prev_sep = ch in SEPARATORS
    return highlight


def update_row(row: Row, tab_stop: int = TAB_STOP, highlight_numbers: bool = False) -> Row:
    """Recompute ``render`` and ``highlight`` from ``chars`` in place."""
    row.render = expand_tabs(row.chars, tab_stop)
    if highlight_numbers:
        row.highlight = classify_numbers(row.render)
    else:
        row.highlight = [Highlight.NORMAL] * len(row.render)
    return row


def make_row(chars: str, tab_stop: int = TAB_STOP, highlight_numbers: bool = False) -> Row:
    return update_row(Row(chars=chars), tab_stop, highlight_numbers)


def char_to_render_column(row: Row, cx: int, tab_stop: int = TAB_STOP) -> int:
    """Map a logical column to the screen column it is drawn at."""
    rx = 0
    for ch in row.chars[:cx]:
        if ch == "\t":
            rx += (tab_stop - 1) - (rx % tab_stop)
        rx += 1
    return rx


def render_to_char_column(row: Row, rx: int, tab_stop: int = TAB_STOP) -> int:
    """Map a screen column back to the logical column that covers it."""
    cur_rx = 0
    for cx, ch in enumerate(row.chars):
        if ch == "\t":
            cur_rx += (tab_stop - 1) - (cur_rx % tab_stop)
        cur_rx += 1
        if cur_rx > rx:
            return cx
    return row.size
