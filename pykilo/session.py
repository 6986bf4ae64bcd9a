"""Editor session: key dispatch and the read/process/redraw loop.

One ``EditorSession`` owns the buffer, cursor, viewport, and search engine
for a single file. I/O is injected (``read_key`` and ``write_frame``) so the
whole session can be driven from tests without a terminal.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from . import viewport as nav
from .buffer import Cursor, TextBuffer
from .config import EditorSettings
from .errors import ExitSignal, FileIOError, TerminalError
from .fileio import load_lines, save_text
from .input import keys
from .prompt import PromptCallback, prompt
from .render import RenderContext, render_frame
from .search import SearchEngine
from .syntax import describe_filetype, select_syntax
from .ui_theme import DEFAULT_THEME, EditorTheme
from .viewport import Viewport

logger = logging.getLogger(__name__)

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"
# Status bar and message bar.
CHROME_ROWS = 2


class EditorSession:
    def __init__(
        self,
        buffer: TextBuffer,
        *,
        screen_rows: int,
        screen_cols: int,
        read_key: Callable[[], str],
        write_frame: Callable[[str], None],
        filename: str | None = None,
        settings: EditorSettings | None = None,
        theme: EditorTheme = DEFAULT_THEME,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings if settings is not None else EditorSettings()
        self.buffer = buffer
        self.cursor = Cursor()
        self.viewport = Viewport(
            screen_rows=max(1, screen_rows - CHROME_ROWS),
            screen_cols=max(1, screen_cols),
        )
        self.search = SearchEngine(self.buffer, self.cursor, self.viewport)
        self.theme = theme
        self.filename: str | None = None
        self.filetype: str | None = None
        self.status_message = ""
        self.status_message_time = 0.0
        self.quit_presses_left = self.settings.quit_times
        self._read_key = read_key
        self._write_frame = write_frame
        self._clock = clock
        self.set_filename(filename)

    @classmethod
    def open(cls, filename: str | None, **kwargs) -> EditorSession:
        """Create a session for ``filename``.

        Missing files start empty. A file that cannot be read also starts
        empty, keeps its name, and reports the error in the message bar.
        """
        settings = kwargs.get("settings") or EditorSettings()
        error: FileIOError | None = None
        lines: list[str] = []
        if filename:
            try:
                lines = load_lines(Path(filename))
            except FileIOError as exc:
                logger.warning("open failed: %s", exc)
                error = exc
        buffer = TextBuffer.from_lines(lines, tab_stop=settings.tab_stop)
        session = cls(buffer, filename=filename, **kwargs)
        if error is not None:
            session.set_status_message(f"Can't open! I/O error: {error.reason}")
        return session

    def set_filename(self, filename: str | None) -> None:
        """Adopt a new name and re-select highlighting for it."""
        self.filename = filename
        syntax = select_syntax(filename)
        self.filetype = describe_filetype(filename)
        self.buffer.set_highlight_numbers(syntax is not None and syntax.highlight_numbers)

    def set_status_message(self, message: str) -> None:
        self.status_message = message
        self.status_message_time = self._clock()

    def render_context(self) -> RenderContext:
        return RenderContext(
            buffer=self.buffer,
            cursor=self.cursor,
            viewport=self.viewport,
            filename=self.filename,
            filetype=self.filetype,
            status_message=self.status_message,
            status_message_age=self._clock() - self.status_message_time,
            message_timeout=self.settings.message_timeout,
            theme=self.theme,
        )

    def refresh_screen(self) -> None:
        self.viewport.scroll(self.buffer, self.cursor)
        self._write_frame(render_frame(self.render_context()))

    def _show_prompt(self, message: str) -> None:
        self.set_status_message(message)
        self.refresh_screen()

    def prompt(self, template: str, callback: PromptCallback | None = None) -> str:
        return prompt(template, read_key=self._read_key, show=self._show_prompt, callback=callback)

    # Commands.

    def save(self) -> None:
        if not self.filename:
            name = self.prompt("Save as: {} (ESC to cancel)")
            if not name:
                self.set_status_message("Save aborted")
                return
            self.set_filename(name)

        try:
            written = save_text(Path(self.filename), self.buffer.to_text())
        except FileIOError as exc:
            logger.warning("save failed: %s", exc)
            self.set_status_message(f"Can't save! I/O error: {exc.reason}")
            return
        self.buffer.mark_saved()
        self.set_status_message(f"{written} bytes written to disk")

    def find(self) -> None:
        self.search.begin()
        query = self.prompt("Search: {} (Use ESC/Arrows/Enter)", self.search.on_key)
        if query:
            self.search.confirm()
        else:
            self.search.cancel()

    def _quit(self) -> None:
        if self.buffer.dirty and self.quit_presses_left > 0:
            self.set_status_message(
                "WARNING!!! File has unsaved changes. "
                f"Press Ctrl-Q {self.quit_presses_left} more times to quit."
            )
            self.quit_presses_left -= 1
            return
        raise ExitSignal()

    def process_keypress(self, key: str | None = None) -> None:
        """Handle one key; raises ``ExitSignal`` when the user quits."""
        if key is None:
            key = self._read_key()
        if key == "":
            raise TerminalError("end of input on terminal")

        if key == keys.CTRL_Q:
            self._quit()
            return

        if key in keys.ARROW_KEYS:
            nav.move_cursor(self.buffer, self.cursor, key)
        elif key in (keys.PAGE_UP, keys.PAGE_DOWN):
            nav.page(self.buffer, self.cursor, self.viewport, key)
        elif key == keys.HOME:
            nav.home(self.cursor)
        elif key == keys.END:
            nav.end(self.buffer, self.cursor)
        elif key == keys.BACKSPACE:
            self.buffer.delete_char(self.cursor)
        elif key == keys.DEL:
            self.buffer.delete_forward(self.cursor)
        elif key == keys.ENTER:
            self.buffer.insert_newline(self.cursor)
        elif key in (keys.CTRL_L, keys.ESC):
            pass
        elif key == keys.CTRL_S:
            self.save()
        elif key == keys.CTRL_F:
            self.find()
        elif key == keys.TAB:
            self.buffer.insert_char(self.cursor, "\t")
        elif keys.is_printable_key(key):
            self.buffer.insert_char(self.cursor, key)
        else:
            logger.debug("ignoring key %r", key)

        self.quit_presses_left = self.settings.quit_times

    def run(self) -> None:
        """Redraw and process keys until the user quits."""
        while True:
            self.refresh_screen()
            try:
                self.process_keypress()
            except ExitSignal:
                logger.info("quit requested")
                return
