"""termlist command line.

Usage:
  termlist view [FILE] [--height N|fill] [--reserved-lines N] [--item-height N]
                [--no-indicators] [--select N] [--config PATH] [--log-level LEVEL]
  termlist size
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from termlist.config.loader import load_settings
from termlist.config.schema import VirtualListConfig
from termlist.core.capacity import ConfigurationError
from termlist.logging_config import setup_logging
from termlist.terminal.size import read_terminal_size

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2
CONTROLLING_TTY = "/dev/tty"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termlist", description="Browse large line lists in a terminal viewport.")
    parser.add_argument("--log-level", default=None, help="Override TERMLIST_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    view = sub.add_parser("view", help="Browse lines from FILE (or stdin)")
    view.add_argument("file", nargs="?", default="-", help="File to read, '-' for stdin")
    view.add_argument("--height", default=None, help="Fixed line count or 'fill'")
    view.add_argument("--reserved-lines", type=int, default=None, help="Lines kept free in fill mode")
    view.add_argument("--item-height", type=int, default=None, help="Lines per item")
    view.add_argument("--no-indicators", action="store_true", help="Hide the 'N more' indicators")
    view.add_argument("--select", type=int, default=None, help="Initially selected index")
    view.add_argument("--config", type=Path, default=None, help="YAML config path")

    sub.add_parser("size", help="Print the current terminal size reading")
    return parser


def build_config(args: argparse.Namespace) -> VirtualListConfig:
    """Merge CLI overrides on top of the loaded config file."""
    base = load_settings(args.config)
    overrides: dict[str, object] = {}
    if args.height is not None:
        overrides["height"] = args.height
    if args.reserved_lines is not None:
        overrides["reserved_lines"] = args.reserved_lines
    if args.item_height is not None:
        overrides["item_height"] = args.item_height
    if args.no_indicators:
        overrides["show_overflow_indicators"] = False
    if args.select is not None:
        overrides["selected_index"] = args.select
    if not overrides:
        return base
    return VirtualListConfig.model_validate({**base.model_dump(), **overrides})


def read_lines(source: str) -> list[str]:
    if source == "-":
        return sys.stdin.read().splitlines()
    return Path(source).read_text(encoding="utf-8").splitlines()


def reattach_tty() -> None:
    """Point fd 0 back at the controlling terminal after stdin was drained.

    Textual reads keys from stdin; an exhausted pipe would give it EOF and
    no keyboard.
    """
    tty_fd = os.open(CONTROLLING_TTY, os.O_RDONLY)
    try:
        os.dup2(tty_fd, 0)
    finally:
        os.close(tty_fd)


def _run_view(args: argparse.Namespace) -> int:
    # Deferred so `termlist size` does not pay for importing Textual
    from termlist.tui.app import ListBrowserApp

    try:
        config = build_config(args)
    except (ValidationError, ConfigurationError) as e:
        sys.stderr.write(f"termlist error: {e}\n")
        return EXIT_CONFIG_ERROR

    try:
        lines = read_lines(args.file)
    except OSError as e:
        sys.stderr.write(f"termlist error: cannot read {args.file}: {e}\n")
        return 1

    if args.file == "-":
        try:
            reattach_tty()
        except OSError as e:
            sys.stderr.write(f"termlist error: no terminal for keyboard input: {e}\n")
            return 1

    title = args.file if args.file != "-" else "stdin"
    logger.info("Browsing %d lines from %s (height=%s)", len(lines), title, config.height)
    app = ListBrowserApp(lines, config=config, title=title)
    chosen = app.run()
    if chosen is not None:
        print(chosen)
    return 0


def _run_size() -> int:
    size = read_terminal_size()
    print(f"{size.rows} {size.columns}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, textual=args.command == "view")
    if args.command == "size":
        return _run_size()
    return _run_view(args)


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    run()
