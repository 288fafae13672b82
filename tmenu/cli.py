"""Command-line front door for tmenu.

Parses CLI options, merges them over the persisted config, configures
logging, and dispatches into the interactive launcher.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from .app import EXIT_SCAN_FAILURE, LauncherOptions, run_launcher
from .catalog import ScanError
from .config import load_applications_dir, load_search_descriptions, load_theme_name
from .highlight import DEFAULT_STYLE
from .logging_setup import configure_logging
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tmenu",
        description="Pick an installed application from a filterable terminal list and launch it.",
    )
    parser.add_argument(
        "--dir",
        type=Path,
        default=None,
        help="Directory of .desktop shortcut files (default: config or /usr/share/applications).",
    )
    parser.add_argument("--query", default="", help="Initial search text.")
    parser.add_argument(
        "--names-only",
        action="store_true",
        help="Match the search text against names only, not descriptions.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style for the command preview.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print matching entries instead of starting the interactive picker.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Append debug logs to this file.")
    parser.add_argument("--verbose", action="store_true", help="Write debug logs to the default log file.")
    return parser


def options_from_args(args: argparse.Namespace) -> LauncherOptions:
    """Merge parsed CLI flags over persisted config values."""
    no_color = args.no_color or bool(os.environ.get("NO_COLOR"))
    return LauncherOptions(
        applications_dir=args.dir if args.dir is not None else load_applications_dir(),
        query=args.query,
        search_descriptions=False if args.names_only else load_search_descriptions(),
        theme_name=args.theme if args.theme is not None else load_theme_name(),
        style=args.style,
        no_color=no_color,
        list_only=args.list,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments, run the launcher, and exit with its status.

    A shortcut directory that cannot be read exits with status 2; every
    other outcome, including a failed launch, exits 0.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)
    options = options_from_args(args)
    try:
        status = run_launcher(options)
    except ScanError as exc:
        logger.error("scan failed: %s", exc)
        sys.stderr.write(f"tmenu: {exc}\n")
        raise SystemExit(EXIT_SCAN_FAILURE) from exc
    raise SystemExit(status)


if __name__ == "__main__":
    main()
