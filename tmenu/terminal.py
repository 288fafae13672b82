"""Terminal control helpers for the launcher session.

Owns raw-mode lifecycle, alternate-screen switching, and mouse capture.
Restoring is idempotent so every exit path can call it without double
teardown: normal quit, restore-before-launch, and unwinding on a fault.
"""

from __future__ import annotations

import contextlib
import logging
import os
import signal
import termios
import tty

logger = logging.getLogger(__name__)

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?1000h\x1b[?1006h"
LEAVE_TUI_SEQUENCE = b"\x1b[?1000l\x1b[?1006l\x1b[?25h\x1b[?1049l"
_FATAL_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with mouse capture enabled."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self._active = True
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)

    def restore(self) -> bool:
        """Leave TUI mode if it is engaged.

        Returns ``True`` when this call performed the restore and ``False``
        when the terminal was already in its original mode.
        """
        if not self._active:
            return False
        self._active = False
        # Disable mouse capture, show cursor, and restore the main screen buffer.
        os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        logger.debug("terminal restored")
        return True

    @contextlib.contextmanager
    def session(self):
        """Bracket code with TUI enter and a guaranteed single restore.

        Termination signals are turned into ``SystemExit`` while the session is
        open so they unwind through the same restore.
        """
        previous_handlers = {sig: signal.getsignal(sig) for sig in _FATAL_SIGNALS}

        def _exit_on_signal(signum, _frame):
            raise SystemExit(128 + signum)

        for sig in _FATAL_SIGNALS:
            signal.signal(sig, _exit_on_signal)
        try:
            self.enable_tui_mode()
            yield self
        finally:
            try:
                self.restore()
            finally:
                for sig, handler in previous_handlers.items():
                    if handler is not None:
                        signal.signal(sig, handler)
