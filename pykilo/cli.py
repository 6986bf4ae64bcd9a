"""Command-line front door for pykilo.

Parses CLI options, merges them over the persisted settings, configures
logging, and hands off to the interactive editor.
"""

from __future__ import annotations

import argparse
import dataclasses
from collections.abc import Sequence

from . import __version__
from .app import run_editor
from .config import MAX_TAB_STOP, load_settings
from .logging_setup import setup_logging
from .ui_theme import available_theme_names, resolve_theme


def _tab_stop(value: str) -> int:
    """argparse type for tab stop widths."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if not 1 <= parsed <= MAX_TAB_STOP:
        raise argparse.ArgumentTypeError(f"value must be between 1 and {MAX_TAB_STOP}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pykilo",
        description="Edit a text file in a minimal full-screen terminal editor.",
    )
    parser.add_argument("path", nargs="?", default=None, help="File to edit. Created on first save if missing.")
    parser.add_argument("--filename", default=None, help="Same as PATH.")
    parser.add_argument("--tab-stop", type=_tab_stop, default=None, help="Columns per tab stop (default 8).")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable highlight colors.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
        help="Log level for the log file.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the editor; return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.path is not None and args.filename is not None and args.path != args.filename:
        parser.error("give the file either as PATH or with --filename, not both")
    filename = args.path or args.filename

    settings = load_settings()
    overrides: dict[str, object] = {}
    if args.tab_stop is not None:
        overrides["tab_stop"] = args.tab_stop
    if args.theme is not None:
        overrides["theme"] = args.theme
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    setup_logging(settings.log_level)
    theme = resolve_theme(settings.theme, no_color=args.no_color)
    return run_editor(filename, settings, theme=theme)


if __name__ == "__main__":
    raise SystemExit(main())
