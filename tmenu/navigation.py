"""Modal key handling and selection cursor movement.

``NavigationController`` owns every mutation of ``LauncherState`` made in
response to a key: cursor moves over the current filtered view, query
edits that recompute that view, and ``InputMode`` transitions. Key tables
are kept per mode so a new mode only needs a new registry.
"""

from __future__ import annotations

import enum
import logging

from .catalog import AppEntry
from .filtering import filter_entries
from .key_registry import KeyComboBinding, KeyComboRegistry
from .state import InputMode, LauncherState

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "No matching applications"


class KeyAction(enum.Enum):
    """Outcome of one key for the main loop."""

    CONTINUE = "continue"
    QUIT = "quit"
    SELECT = "select"


class NavigationController:
    """Apply key tokens to a ``LauncherState``."""

    def __init__(self, state: LauncherState) -> None:
        self.state = state
        self._registries: dict[InputMode, KeyComboRegistry[KeyAction]] = {
            InputMode.BROWSING: self._browsing_registry(),
            InputMode.EDITING: self._editing_registry(),
        }

    def _browsing_registry(self) -> KeyComboRegistry[KeyAction]:
        return KeyComboRegistry[KeyAction]().register_bindings(
            KeyComboBinding(("UP", "k"), self._action(self.previous)),
            KeyComboBinding(("DOWN", "j"), self._action(self.next)),
            KeyComboBinding(("HOME", "g"), self._action(self.first)),
            KeyComboBinding(("END", "G"), self._action(self.last)),
            KeyComboBinding(("PAGE_UP",), self._action(lambda: self.page(-1))),
            KeyComboBinding(("PAGE_DOWN",), self._action(lambda: self.page(1))),
            KeyComboBinding(("/", "TAB"), self._action(self.enter_search)),
            KeyComboBinding(("ENTER",), self.request_select),
            KeyComboBinding(("ESC", "q", "CTRL_C"), lambda: KeyAction.QUIT),
        )

    def _editing_registry(self) -> KeyComboRegistry[KeyAction]:
        return KeyComboRegistry[KeyAction]().register_bindings(
            KeyComboBinding(("UP",), self._action(self.previous)),
            KeyComboBinding(("DOWN",), self._action(self.next)),
            KeyComboBinding(("BACKSPACE",), self._action(self.backspace)),
            KeyComboBinding(("CTRL_U",), self._action(self.clear_query)),
            KeyComboBinding(("ENTER",), self._action(self.confirm_search)),
            KeyComboBinding(("ESC",), self._action(self.cancel_search)),
            KeyComboBinding(("CTRL_C",), lambda: KeyAction.QUIT),
        )

    @staticmethod
    def _action(operation):
        def run() -> KeyAction:
            operation()
            return KeyAction.CONTINUE

        return run

    def handle_key(self, key: str) -> KeyAction:
        """Dispatch ``key`` for the current mode and report what the loop should do."""
        registry = self._registries[self.state.mode]
        if key in registry:
            action = registry.dispatch(key)
            return action if action is not None else KeyAction.CONTINUE
        if self.state.mode is InputMode.EDITING and len(key) == 1 and key.isprintable():
            self.append_char(key)
        return KeyAction.CONTINUE

    # Cursor movement.

    def next(self) -> None:
        count = len(self.state.view)
        if count == 0:
            return
        self.state.selected = (self.state.selected + 1) % count

    def previous(self) -> None:
        count = len(self.state.view)
        if count == 0:
            return
        self.state.selected = (self.state.selected - 1) % count

    def first(self) -> None:
        if self.state.view:
            self.state.selected = 0

    def last(self) -> None:
        if self.state.view:
            self.state.selected = len(self.state.view) - 1

    def page(self, direction: int) -> None:
        """Move by one visible page, stopping at the list ends."""
        count = len(self.state.view)
        if count == 0:
            return
        step = max(1, self.state.list_rows) * direction
        self.state.selected = max(0, min(count - 1, self.state.selected + step))

    def clamp_selection(self) -> None:
        """Re-derive the cursor against the current view length."""
        count = len(self.state.view)
        self.state.selected = self.state.selected % count if count else 0

    # Query editing.

    def refilter(self) -> None:
        """Recompute the filtered view from the query and clamp the cursor."""
        self.state.view = filter_entries(
            self.state.catalog,
            self.state.query,
            search_descriptions=self.state.search_descriptions,
        )
        self.clamp_selection()

    def append_char(self, ch: str) -> None:
        self.state.query += ch
        self.refilter()

    def backspace(self) -> None:
        if not self.state.query:
            return
        self.state.query = self.state.query[:-1]
        self.refilter()

    def clear_query(self) -> None:
        if not self.state.query:
            return
        self.state.query = ""
        self.refilter()

    # Mode transitions.

    def _set_mode(self, mode: InputMode) -> None:
        logger.debug("mode %s -> %s", self.state.mode.value, mode.value)
        self.state.mode = mode
        self.state.status_message = ""

    def enter_search(self) -> None:
        self._set_mode(InputMode.EDITING)

    def confirm_search(self) -> None:
        """Commit the typed query and return to browsing."""
        self.state.committed_query = self.state.query
        self._set_mode(InputMode.BROWSING)

    def cancel_search(self) -> None:
        """Drop uncommitted edits, restoring the last committed query."""
        if self.state.query != self.state.committed_query:
            self.state.query = self.state.committed_query
            self.refilter()
        self._set_mode(InputMode.BROWSING)

    # Selection.

    def selected_entry(self) -> AppEntry | None:
        if not self.state.view:
            return None
        return self.state.view[self.state.selected % len(self.state.view)]

    def request_select(self) -> KeyAction:
        if self.selected_entry() is None:
            self.state.status_message = NO_MATCHES_MESSAGE
            return KeyAction.CONTINUE
        return KeyAction.SELECT
