"""Error taxonomy shared by the terminal, file, and session layers."""

from __future__ import annotations


class EditorError(Exception):
    """Base class for failures raised by pykilo."""


class TerminalError(EditorError):
    """Terminal attribute get/set or window-size query failed. Fatal."""


class FileIOError(EditorError):
    """Opening, reading, or writing a file failed. Reported, never fatal."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ExitSignal(Exception):
    """Raised out of key processing when the user confirms quitting."""
