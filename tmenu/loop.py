"""Main interactive event loop for the launcher.

One iteration per key: block for the key, let the navigation controller
mutate state, then hand exactly one snapshot to the renderer. The loop is
wiring only; terminal mode and launching are owned by the caller.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from .catalog import AppEntry
from .highlight import DEFAULT_STYLE, highlight_command
from .navigation import KeyAction, NavigationController
from .render import RenderContext, compute_layout
from .state import LauncherState
from .ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)


def _default_terminal_size() -> os.terminal_size:
    return shutil.get_terminal_size((80, 24))


@dataclass(frozen=True)
class LauncherLoopCallbacks:
    """Injected I/O used by ``run_main_loop``.

    ``read_key`` blocks for the next key token and returns ``""`` on end of
    input. ``render_frame`` paints one ``RenderContext``.
    """

    read_key: Callable[[], str]
    render_frame: Callable[[RenderContext], None]
    terminal_size: Callable[[], os.terminal_size] = _default_terminal_size


@dataclass(frozen=True)
class LauncherView:
    """Presentation settings that stay fixed for a run."""

    theme: UITheme = DEFAULT_THEME
    style: str = DEFAULT_STYLE
    no_color: bool = False


def sync_list_window(state: LauncherState) -> None:
    """Scroll ``list_start`` so the selection stays inside the visible rows."""
    rows = max(1, state.list_rows)
    if state.selected < state.list_start:
        state.list_start = state.selected
    elif state.selected >= state.list_start + rows:
        state.list_start = state.selected - rows + 1
    max_start = max(0, len(state.view) - rows)
    state.list_start = max(0, min(state.list_start, max_start))


def build_render_context(
    state: LauncherState,
    navigation: NavigationController,
    view: LauncherView,
    size: os.terminal_size,
) -> RenderContext:
    """Snapshot ``state`` into a render context sized for ``size``."""
    state.list_rows = compute_layout(size.columns, size.lines).list_rows
    sync_list_window(state)
    entry = navigation.selected_entry()
    preview = highlight_command(entry.command, view.style, view.no_color) if entry is not None else ""
    return RenderContext(
        width=size.columns,
        height=size.lines,
        mode=state.mode,
        query=state.query,
        labels=[item.label for item in state.view],
        selected=state.selected,
        list_start=state.list_start,
        total_count=len(state.catalog),
        status_message=state.status_message,
        command_preview=preview,
        theme=view.theme,
    )


def run_main_loop(
    state: LauncherState,
    callbacks: LauncherLoopCallbacks,
    view: LauncherView | None = None,
) -> AppEntry | None:
    """Run the launcher loop until the user quits or selects an entry.

    Returns the selected entry, or ``None`` on quit or end of input.
    """
    view = view if view is not None else LauncherView()
    navigation = NavigationController(state)

    def redraw() -> None:
        callbacks.render_frame(build_render_context(state, navigation, view, callbacks.terminal_size()))

    redraw()
    while True:
        key = callbacks.read_key()
        if key == "":
            logger.debug("input closed, quitting")
            return None
        state.status_message = ""
        action = navigation.handle_key(key)
        if action is KeyAction.QUIT:
            return None
        if action is KeyAction.SELECT:
            entry = navigation.selected_entry()
            logger.info("selected %r", entry.name if entry is not None else None)
            return entry
        redraw()
