from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .catalog import AppEntry


class InputMode(enum.Enum):
    """Which interpretation keystrokes get: list navigation or query editing."""

    BROWSING = "browsing"
    EDITING = "editing"


@dataclass
class LauncherState:
    catalog: list[AppEntry]
    view: list[AppEntry] = field(default_factory=list)
    query: str = ""
    committed_query: str = ""
    selected: int = 0
    mode: InputMode = InputMode.BROWSING
    search_descriptions: bool = True
    list_start: int = 0
    list_rows: int = 1
    status_message: str = ""

    def __post_init__(self) -> None:
        if not self.view and not self.query:
            self.view = list(self.catalog)
