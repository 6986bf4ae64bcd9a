"""Process-level composition: terminal scope, session startup, fatal errors.

Raw mode is held for exactly the lifetime of ``run_editor``. Every way out,
including fatal errors and termination signals, passes through the
``raw_mode`` scope so the user's shell is never left in raw mode.
"""

from __future__ import annotations

import contextlib
import logging
import signal
import sys
from functools import partial

from .config import EditorSettings
from .errors import EditorError, TerminalError
from .input import read_key
from .session import HELP_MESSAGE, EditorSession
from .terminal import TerminalController
from .ui_theme import EditorTheme, resolve_theme

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
_TERMINATION_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


@contextlib.contextmanager
def exit_on_termination_signals():
    """Turn SIGTERM/SIGHUP into ``SystemExit`` so cleanup scopes unwind."""

    def _handler(signum: int, frame: object) -> None:
        raise SystemExit(128 + signum)

    previous = {sig: signal.getsignal(sig) for sig in _TERMINATION_SIGNALS}
    for sig in _TERMINATION_SIGNALS:
        signal.signal(sig, _handler)
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


def die(terminal: TerminalController, error: BaseException) -> int:
    """Clear the screen, restore the terminal, then report ``error``."""
    logger.error("fatal: %s", error, exc_info=error)
    try:
        terminal.clear_screen()
        terminal.disable_tui_mode()
    finally:
        print(f"pykilo: {error}", file=sys.stderr)
    return EXIT_FAILURE


def run_editor(
    filename: str | None,
    settings: EditorSettings | None = None,
    *,
    theme: EditorTheme | None = None,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> int:
    """Edit ``filename`` until the user quits; return the process exit code."""
    settings = settings if settings is not None else EditorSettings()
    theme = theme if theme is not None else resolve_theme(settings.theme)
    stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
    terminal = TerminalController(stdin_fd, stdout_fd)

    logger.info("starting editor on %s", filename or "[No Name]")
    try:
        with terminal.raw_mode(), exit_on_termination_signals():
            try:
                rows, cols = terminal.query_window_size()
                session = EditorSession.open(
                    filename,
                    screen_rows=rows,
                    screen_cols=cols,
                    read_key=partial(read_key, stdin_fd),
                    write_frame=terminal.write_frame,
                    settings=settings,
                    theme=theme,
                )
                if not session.status_message:
                    session.set_status_message(HELP_MESSAGE)
                session.run()
            except (EditorError, OSError) as exc:
                return die(terminal, exc)
    except TerminalError as exc:
        logger.error("terminal setup failed: %s", exc)
        print(f"pykilo: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    logger.info("editor exited cleanly")
    return EXIT_OK
