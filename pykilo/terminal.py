"""Terminal control helpers for the editor session.

Owns raw-mode lifecycle, alternate-screen switching, window-size queries,
and the single write that puts a composed frame on screen.
"""

from __future__ import annotations

import contextlib
import logging
import os
import re
import select
import termios
import tty

from .errors import TerminalError

logger = logging.getLogger(__name__)

CURSOR_REPORT_TIMEOUT_MS = 1000
_CURSOR_REPORT_RE = re.compile(rb"\x1b\[(\d+);(\d+)R")
_CURSOR_REPORT_MAX_BYTES = 32


class TerminalController:
    """Manage terminal mode transitions and raw output for one session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state: list | None = None

    @property
    def is_raw(self) -> bool:
        return self._saved_tty_state is not None

    def enter_raw_mode(self) -> list:
        """Switch stdin to raw mode and return the attributes it replaced.

        Canonical mode, echo, signal keys, flow control and output
        post-processing are all disabled; reads block for a single byte.
        """
        try:
            saved = termios.tcgetattr(self.stdin_fd)
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"cannot enable raw mode: {exc}") from exc
        self._saved_tty_state = saved
        return saved

    def restore(self) -> None:
        """Reapply the attributes saved by ``enter_raw_mode``; later calls no-op."""
        saved = self._saved_tty_state
        if saved is None:
            return
        self._saved_tty_state = None
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, saved)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"cannot restore terminal attributes: {exc}") from exc

    def enable_tui_mode(self) -> None:
        self.enter_raw_mode()
        # Enter alternate screen.
        os.write(self.stdout_fd, b"\x1b[?1049h")

    def disable_tui_mode(self) -> None:
        if not self.is_raw:
            return
        # Show cursor and restore the main screen buffer.
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        self.restore()

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()

    def write_frame(self, frame: str) -> None:
        """Write a whole frame, looping over short writes."""
        data = frame.encode("utf-8", errors="replace")
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]

    def clear_screen(self) -> None:
        os.write(self.stdout_fd, b"\x1b[2J\x1b[H")

    def query_window_size(self) -> tuple[int, int]:
        """Return ``(rows, cols)``, asking the terminal itself if ioctl fails."""
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            size = None
        if size is not None and size.lines > 0 and size.columns > 0:
            return size.lines, size.columns

        logger.info("window size ioctl unavailable; using cursor position report")
        return self._query_cursor_position()

    def _query_cursor_position(self) -> tuple[int, int]:
        # Push the cursor to the bottom-right corner, then ask where it is.
        os.write(self.stdout_fd, b"\x1b[999C\x1b[999B\x1b[6n")
        response = b""
        while len(response) < _CURSOR_REPORT_MAX_BYTES:
            ready, _, _ = select.select([self.stdin_fd], [], [], CURSOR_REPORT_TIMEOUT_MS / 1000.0)
            if not ready:
                break
            ch = os.read(self.stdin_fd, 1)
            if not ch:
                break
            response += ch
            if ch == b"R":
                break

        match = _CURSOR_REPORT_RE.search(response)
        if match is None:
            raise TerminalError("cannot determine window size")
        rows, cols = int(match.group(1)), int(match.group(2))
        if rows <= 0 or cols <= 0:
            raise TerminalError("cannot determine window size")
        return rows, cols
