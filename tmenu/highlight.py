"""Shell syntax highlighting for the selected entry's command preview."""

from __future__ import annotations

from functools import lru_cache

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import BashLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"


@lru_cache(maxsize=None)
def normalize_style(style: str) -> str:
    """Return ``style`` when pygments knows it, else the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=256)
def highlight_command(command: str, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Return ``command`` as a single ANSI-colored line."""
    flat = " ".join(command.split())
    if no_color or not flat:
        return flat
    formatter = Terminal256Formatter(style=normalize_style(style))
    return highlight(flat, BashLexer(), formatter).rstrip("\n")
