"""Launcher bootstrap: catalog, terminal session, selection, and launch."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import TextIO

from .catalog import DEFAULT_APPLICATIONS_DIR, AppEntry, build_catalog
from .highlight import DEFAULT_STYLE
from .input import read_key
from .launch import LaunchError, execute
from .loop import LauncherLoopCallbacks, LauncherView, run_main_loop
from .navigation import NavigationController
from .render import render_launcher_frame
from .state import LauncherState
from .terminal import TerminalController
from .ui_theme import resolve_theme

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SCAN_FAILURE = 2


@dataclass(frozen=True)
class LauncherOptions:
    applications_dir: Path = DEFAULT_APPLICATIONS_DIR
    query: str = ""
    search_descriptions: bool = True
    theme_name: str | None = None
    style: str = DEFAULT_STYLE
    no_color: bool = False
    list_only: bool = False


def initial_state(catalog: list[AppEntry], options: LauncherOptions) -> LauncherState:
    """Build loop state, pre-applying ``options.query`` as the committed filter."""
    state = LauncherState(catalog=catalog, search_descriptions=options.search_descriptions)
    if options.query:
        state.query = options.query
        state.committed_query = options.query
    NavigationController(state).refilter()
    return state


def print_entries(entries: list[AppEntry], stream: TextIO) -> None:
    for entry in entries:
        stream.write(entry.label + "\n")


def run_launcher(
    options: LauncherOptions,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> int:
    """Build the catalog, run the interactive picker, and launch the choice.

    ``ScanError`` propagates before the terminal leaves its original mode.
    Returns the process exit status.
    """
    catalog = build_catalog(options.applications_dir)
    state = initial_state(catalog, options)

    stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
    if options.list_only or not os.isatty(stdin_fd):
        print_entries(state.view, sys.stdout)
        return EXIT_OK

    view = LauncherView(
        theme=resolve_theme(options.theme_name, options.no_color),
        style=options.style,
        no_color=options.no_color,
    )
    callbacks = LauncherLoopCallbacks(
        read_key=partial(read_key, stdin_fd),
        render_frame=partial(render_launcher_frame, fd=stdout_fd),
    )
    terminal = TerminalController(stdin_fd, stdout_fd)
    launch_error: LaunchError | None = None
    with terminal.session():
        entry = run_main_loop(state, callbacks, view)
        if entry is None:
            logger.info("quit without launching")
        else:
            try:
                execute(entry, terminal.restore)
            except LaunchError as exc:
                launch_error = exc

    if launch_error is not None:
        sys.stderr.write(f"tmenu: {launch_error}\n")
    return EXIT_OK
