"""Whole-file load and save.

Loading is tolerant of encodings and a missing file (a new file is simply an
empty buffer). Saving writes a sibling temp file and renames it over the
target so a failed write never truncates the original.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from .errors import FileIOError

logger = logging.getLogger(__name__)

NEW_FILE_MODE = 0o644


def read_text(path: Path) -> str:
    """Decode the file's bytes as UTF-8 (dropping a BOM), else latin-1.

    Line endings are left untouched, so a lone carriage return stays inside
    its line.
    """
    data = path.read_bytes()
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def split_lines(text: str) -> list[str]:
    """Split file text into rows, dropping the final terminator and trailing CRs."""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def load_lines(path: Path) -> list[str]:
    """Return the rows of ``path``; a missing file yields no rows."""
    try:
        text = read_text(path)
    except FileNotFoundError:
        logger.info("%s does not exist yet; starting empty", path)
        return []
    except OSError as exc:
        raise FileIOError(str(path), exc.strerror or str(exc)) from exc
    lines = split_lines(text)
    logger.info("loaded %d lines from %s", len(lines), path)
    return lines


def save_text(path: Path, text: str) -> int:
    """Atomically replace ``path`` with ``text``; return bytes written."""
    data = text.encode("utf-8")
    directory = path.parent if str(path.parent) else Path(".")
    try:
        mode = stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        mode = NEW_FILE_MODE
    except OSError as exc:
        raise FileIOError(str(path), exc.strerror or str(exc)) from exc

    tmp_name: str | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as exc:
        raise FileIOError(str(path), exc.strerror or str(exc)) from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.warning("could not remove temporary file %s", tmp_name)

    logger.info("wrote %d bytes to %s", len(data), path)
    return len(data)
