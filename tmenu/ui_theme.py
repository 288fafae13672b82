"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the launcher chrome. Command preview colors come
from pygments and are not part of a theme.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    help_text: str
    help_key: str
    status: str
    border: str
    title: str
    query: str
    placeholder: str
    list_item: str
    selected: str
    empty: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    help_text="\033[1m",
    help_key="\033[1;34m",
    status="\033[1;38;5;214m",
    border="\033[38;5;245m",
    title="\033[1;38;5;81m",
    query="\033[1;38;5;229m",
    placeholder="\033[2;38;5;250m",
    list_item="\033[37m",
    selected="\033[1;44;30m",
    empty="\033[2;38;5;250m",
)

MONO_THEME = UITheme(
    name="mono",
    reset="\033[0m",
    help_text="\033[1m",
    help_key="\033[1;4m",
    status="\033[1m",
    border="",
    title="\033[1m",
    query="\033[1m",
    placeholder="\033[2m",
    list_item="",
    selected="\033[7m",
    empty="\033[2m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    help_text="",
    help_key="",
    status="",
    border="",
    title="",
    query="",
    placeholder="",
    list_item="",
    selected="",
    empty="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    MONO_THEME.name: MONO_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable theme names in stable order."""
    return tuple(_THEMES)


def resolve_theme(name: str | None, no_color: bool = False) -> UITheme:
    """Return the named theme, falling back to the default.

    ``no_color`` always wins and yields the escape-free palette.
    """
    if no_color:
        return PLAIN_THEME
    if name is None:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
