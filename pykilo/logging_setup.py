"""Logging configuration.

The terminal belongs to the editor while it runs, so log records go to a
rotating file under the platform log directory and never to stderr.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
import tempfile
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = "pykilo.log"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)s - %(message)s"

logger = logging.getLogger("pykilo")


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )


def setup_logging(level: str = "WARNING", log_path: Path | None = None) -> Path | None:
    """Attach a rotating file handler to the ``pykilo`` logger.

    Falls back to the system temp directory when the preferred location
    cannot be created. Returns the log file in use, or ``None`` when file
    logging is unavailable. Calling it again replaces earlier handlers.
    """
    candidates = [log_path or default_log_path(), Path(tempfile.gettempdir()) / LOG_FILENAME]
    handler: logging.Handler | None = None
    chosen: Path | None = None
    for candidate in candidates:
        try:
            handler = _file_handler(candidate)
        except OSError as exc:
            print(f"pykilo: cannot log to {candidate}: {exc}", file=sys.stderr)
            continue
        chosen = candidate
        break

    if handler is None:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False
    return chosen
