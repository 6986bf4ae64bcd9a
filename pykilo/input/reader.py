"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into key tokens.
Handles ESC-sequence timing, extended ``ESC [ n ~`` keys, and UTF-8 assembly.
"""

from __future__ import annotations

import logging
import os
import select

from .keys import (
    CONTROL_KEYS,
    ESC,
    EXTENDED_SEQUENCE_KEYS,
    SEQUENCE_FINAL_KEYS,
    SEQUENCE_INTRODUCERS,
    control_token,
)

logger = logging.getLogger(__name__)

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_MODIFIER_BYTES = 8
_PENDING_BYTES: list[bytes] = []


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    """Total byte length of a UTF-8 sequence given its lead byte.

    Stray continuation bytes and invalid leads count as one byte.
    """
    if 0xF0 <= lead <= 0xF7:
        return 4
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xC0 <= lead <= 0xDF:
        return 2
    return 1


def _read_character(fd: int, first: bytes) -> str:
    """Assemble one multi-byte character starting with ``first``.

    A byte that is not a continuation byte ends the sequence early and is
    pushed back to be read as the next key.
    """
    data = first
    for _ in range(_utf8_length(first[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        if not 0x80 <= nxt[0] <= 0xBF:
            _PENDING_BYTES.append(nxt)
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _decode_extended(fd: int, key: str) -> str:
    """Finish an ``ESC [ n`` sequence whose ``n`` is in the extended table."""
    lookahead = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if lookahead is None:
        return key
    if lookahead == b"~":
        return key
    if lookahead == b";":
        # Modified key such as ``ESC [ 1 ; 5 C``. Modifiers are dropped.
        for _ in range(MAX_MODIFIER_BYTES):
            final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if final is None:
                return ESC
            if final == b"~":
                return key
            if 0x40 <= final[0] <= 0x7E:
                return SEQUENCE_FINAL_KEYS.get(final, ESC)
        return ESC
    known = SEQUENCE_FINAL_KEYS.get(lookahead)
    if known is not None:
        return known
    return lookahead.decode("utf-8", errors="replace")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Block until one key is available and return its token.

    Returns ``""`` on end of input, or when ``timeout_ms`` elapses first.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    known = CONTROL_KEYS.get(ch)
    if known is not None:
        return known

    if ch != b"\x1b":
        token = control_token(ch)
        if token is not None:
            return token
        if ch[0] >= 0x80:
            return _read_character(fd, ch)
        return ch.decode("ascii", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return ESC
    if seq not in SEQUENCE_INTRODUCERS:
        _PENDING_BYTES.append(seq)
        return ESC

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return ESC
    known = SEQUENCE_FINAL_KEYS.get(seq)
    if known is not None:
        return known
    extended = EXTENDED_SEQUENCE_KEYS.get(seq)
    if extended is not None:
        return _decode_extended(fd, extended)

    logger.debug("unrecognized escape sequence byte %r", seq)
    return seq.decode("utf-8", errors="replace")
