"""Symbolic key tokens and the byte tables used to decode them.

Keys travel through the editor as plain strings: either one of the symbolic
tokens below or the literal character that was typed.
"""

from __future__ import annotations

UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
PAGE_UP = "PAGE_UP"
PAGE_DOWN = "PAGE_DOWN"
HOME = "HOME"
END = "END"
DEL = "DEL"
ESC = "ESC"
ENTER = "ENTER"
BACKSPACE = "BACKSPACE"
TAB = "TAB"
CTRL_F = "CTRL_F"
CTRL_L = "CTRL_L"
CTRL_Q = "CTRL_Q"
CTRL_S = "CTRL_S"

ARROW_KEYS = frozenset({UP, DOWN, LEFT, RIGHT})

# Single raw bytes with a fixed meaning. Ctrl-H is Backspace on most terminals.
CONTROL_KEYS: dict[bytes, str] = {
    b"\r": ENTER,
    b"\n": ENTER,
    b"\t": TAB,
    b"\x7f": BACKSPACE,
    b"\x08": BACKSPACE,
    b"\x06": CTRL_F,
    b"\x0c": CTRL_L,
    b"\x11": CTRL_Q,
    b"\x13": CTRL_S,
}

# Final byte of ``ESC [ x`` / ``ESC O x``.
SEQUENCE_FINAL_KEYS: dict[bytes, str] = {
    b"A": UP,
    b"B": DOWN,
    b"C": RIGHT,
    b"D": LEFT,
    b"H": HOME,
    b"F": END,
}

# Bytes after ``ESC [`` that may start a ``ESC [ n ~`` sequence. The 1/7 and
# 4/8 duplicates cover rxvt and the Linux console.
EXTENDED_SEQUENCE_KEYS: dict[bytes, str] = {
    b"1": HOME,
    b"3": DEL,
    b"4": END,
    b"5": PAGE_UP,
    b"6": PAGE_DOWN,
    b"7": HOME,
    b"8": END,
}

SEQUENCE_INTRODUCERS = frozenset({b"[", b"O"})


def control_token(byte: bytes) -> str | None:
    """Return ``CTRL_<letter>`` for an unbound C0 control byte, else ``None``."""
    code = byte[0]
    if 1 <= code <= 26:
        return "CTRL_" + chr(code + 64)
    return None


def is_printable_key(key: str) -> bool:
    """Whether ``key`` is a literal character the buffer can hold."""
    return len(key) == 1 and key.isprintable()
