"""Rendering engine for the launcher screen.

The frame is three stacked bands inside a small margin: a one-line help or
status row, a bordered single-line search box, and a bordered list of
entries with the selection highlighted and marked. Composition is pure;
only ``render_launcher_frame`` touches the terminal.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

from .ansi import display_width, pad_ansi_line
from .state import InputMode
from .ui_theme import DEFAULT_THEME, UITheme

FRAME_MARGIN = 2
SEARCH_BAND_ROWS = 3
MIN_LIST_BAND_ROWS = 3
SELECTION_MARKER = "> "
SEARCH_TITLE = "Search"
LIST_TITLE = "App List"
EMPTY_LIST_TEXT = "No matching applications"
SEARCH_PLACEHOLDER = "Press / to search"

HELP_SEGMENTS: dict[InputMode, tuple[tuple[str, bool], ...]] = {
    InputMode.BROWSING: (
        ("Press ", False),
        ("Up/Down", True),
        (" to navigate, ", False),
        ("/", True),
        (" to search, ", False),
        ("Enter", True),
        (" to launch, ", False),
        ("Esc", True),
        (" to exit.", False),
    ),
    InputMode.EDITING: (
        ("Type", True),
        (" to filter, ", False),
        ("Enter", True),
        (" to confirm, ", False),
        ("Esc", True),
        (" to cancel, ", False),
        ("Up/Down", True),
        (" to navigate.", False),
    ),
}


@dataclass
class RenderContext:
    width: int
    height: int
    mode: InputMode
    query: str
    labels: list[str]
    selected: int
    list_start: int
    total_count: int
    status_message: str = ""
    command_preview: str = ""
    theme: UITheme = field(default=DEFAULT_THEME)


@dataclass(frozen=True)
class FrameLayout:
    """Zero-based screen geometry of the three bands."""

    left: int
    box_width: int
    help_row: int
    search_row: int
    list_row: int
    list_height: int

    @property
    def list_rows(self) -> int:
        """Entry rows available inside the list box borders."""
        return max(1, self.list_height - 2)


def compute_layout(width: int, height: int) -> FrameLayout:
    """Split the terminal into help, search, and list bands.

    The outer margin is dropped on terminals too small to afford it.
    """
    roomy = width >= 2 * FRAME_MARGIN + 12 and height >= 2 * FRAME_MARGIN + 1 + SEARCH_BAND_ROWS + MIN_LIST_BAND_ROWS
    margin = FRAME_MARGIN if roomy else 0
    box_width = max(4, width - 2 * margin)
    help_row = margin
    search_row = help_row + 1
    list_row = search_row + SEARCH_BAND_ROWS
    list_height = max(MIN_LIST_BAND_ROWS, height - margin - list_row)
    return FrameLayout(
        left=margin,
        box_width=box_width,
        help_row=help_row,
        search_row=search_row,
        list_row=list_row,
        list_height=list_height,
    )


def help_line(mode: InputMode, theme: UITheme) -> str:
    """Return the styled key-hint line for ``mode``."""
    out: list[str] = []
    for text, is_key in HELP_SEGMENTS[mode]:
        style = theme.help_key if is_key else theme.help_text
        out.append(f"{style}{text}{theme.reset}")
    return "".join(out)


def _box_top(title: str, width: int, theme: UITheme) -> str:
    inner = max(0, width - 2)
    label = f" {title} " if title else ""
    if display_width(label) + 1 > inner:
        label = ""
    fill = "─" * max(0, inner - 1 - display_width(label))
    return f"{theme.border}┌─{theme.reset}{theme.title}{label}{theme.reset}{theme.border}{fill}┐{theme.reset}"


def _box_middle(content: str, width: int, theme: UITheme) -> str:
    inner = max(0, width - 2)
    return f"{theme.border}│{theme.reset}{pad_ansi_line(content, inner)}{theme.reset}{theme.border}│{theme.reset}"


def _box_bottom(caption: str, width: int, theme: UITheme) -> str:
    inner = max(0, width - 2)
    label = ""
    if caption and inner > 6:
        label = pad_ansi_line(f" {caption}", inner - 3)
        label = label.rstrip(" ") + f"{theme.reset} "
    fill = "─" * max(0, inner - 1 - display_width(label))
    return f"{theme.border}└─{theme.reset}{label}{theme.border}{fill}┘{theme.reset}"


def _list_row(label: str, is_selected: bool, inner: int, theme: UITheme) -> str:
    if is_selected:
        return f"{theme.selected}{pad_ansi_line(SELECTION_MARKER + label, inner)}{theme.reset}"
    blank_marker = " " * len(SELECTION_MARKER)
    return f"{theme.list_item}{pad_ansi_line(blank_marker + label, inner)}{theme.reset}"


def compose_frame(context: RenderContext) -> tuple[dict[int, str], tuple[int, int] | None]:
    """Build screen rows for ``context``.

    Returns a mapping of zero-based row index to styled text (starting at the
    layout's left column) and the one-based ``(row, col)`` for the text
    cursor, or ``None`` when the cursor should stay hidden.
    """
    theme = context.theme
    layout = compute_layout(context.width, context.height)
    inner = max(0, layout.box_width - 2)
    rows: dict[int, str] = {}

    if context.status_message:
        rows[layout.help_row] = f"{theme.status}{context.status_message}{theme.reset}"
    else:
        rows[layout.help_row] = help_line(context.mode, theme)
    rows[layout.help_row] = pad_ansi_line(rows[layout.help_row], layout.box_width)

    search_title = SEARCH_TITLE
    if context.query:
        search_title = f"{SEARCH_TITLE} ({len(context.labels)}/{context.total_count})"
    rows[layout.search_row] = _box_top(search_title, layout.box_width, theme)
    if context.query or context.mode is InputMode.EDITING:
        search_text = f"{theme.query}{context.query}{theme.reset}"
    else:
        search_text = f"{theme.placeholder}{SEARCH_PLACEHOLDER}{theme.reset}"
    rows[layout.search_row + 1] = _box_middle(
        search_text,
        layout.box_width,
        theme,
    )
    rows[layout.search_row + 2] = _box_bottom("", layout.box_width, theme)

    rows[layout.list_row] = _box_top(LIST_TITLE, layout.box_width, theme)
    visible_rows = layout.list_rows
    for offset in range(visible_rows):
        idx = context.list_start + offset
        if offset == 0 and not context.labels:
            text = f"{theme.empty}{pad_ansi_line(EMPTY_LIST_TEXT, inner)}{theme.reset}"
        elif 0 <= idx < len(context.labels):
            text = _list_row(context.labels[idx], idx == context.selected, inner, theme)
        else:
            text = " " * inner
        rows[layout.list_row + 1 + offset] = _box_middle(text, layout.box_width, theme)
    rows[layout.list_row + 1 + visible_rows] = _box_bottom(
        context.command_preview,
        layout.box_width,
        theme,
    )

    cursor: tuple[int, int] | None = None
    if context.mode is InputMode.EDITING:
        cursor_col = layout.left + 2 + min(display_width(context.query), max(0, inner - 1))
        cursor = (layout.search_row + 2, cursor_col)
    return rows, cursor


def render_launcher_frame(context: RenderContext, fd: int | None = None) -> None:
    """Write one full frame for ``context`` to the terminal."""
    rows, cursor = compose_frame(context)
    layout_left = compute_layout(context.width, context.height).left
    out: list[str] = ["\033[?25l\033[H\033[J"]
    for row in sorted(rows):
        if row >= context.height:
            break
        out.append(f"\033[{row + 1};{layout_left + 1}H")
        out.append(rows[row])
    if cursor is not None:
        out.append(f"\033[{cursor[0]};{cursor[1]}H\033[?25h")
    target_fd = sys.stdout.fileno() if fd is None else fd
    os.write(target_fd, "".join(out).encode("utf-8", errors="replace"))
