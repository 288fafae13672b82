"""Launch helper for the selected application.

Leaves TUI mode first, then starts the entry's command through ``sh -c``
detached from the launcher's terminal with all stdio discarded. The child
is not waited on; a spawn failure surfaces as ``LaunchError``.
"""

from __future__ import annotations

import logging
import re
import subprocess
from collections.abc import Callable

from .catalog import AppEntry

logger = logging.getLogger(__name__)

SHELL = "/bin/sh"
_FIELD_CODE_RE = re.compile(r"%(.)")
_FIELD_CODES = frozenset("fFuUdDnNickvm")


class LaunchError(Exception):
    """Raised when the shell for an entry's command cannot be started."""

    def __init__(self, entry: AppEntry, cause: OSError) -> None:
        super().__init__(f"failed to launch {entry.name!r}: {cause.strerror or cause}")
        self.entry = entry
        self.cause = cause


def _expand_field_code(match: re.Match[str]) -> str:
    code = match.group(1)
    if code == "%":
        return "%"
    if code in _FIELD_CODES:
        return ""
    return match.group(0)


def shell_command(entry: AppEntry) -> str:
    """Return the entry's command with desktop-entry field codes removed.

    ``%u``/``%F``-style placeholders expect file or URL arguments the launcher
    never supplies, so they are dropped; ``%%`` becomes a literal ``%``.
    """
    stripped = _FIELD_CODE_RE.sub(_expand_field_code, entry.command)
    return " ".join(stripped.split())


def execute(
    entry: AppEntry,
    restore_terminal: Callable[[], object],
) -> subprocess.Popen[bytes]:
    """Restore the terminal, then spawn ``entry`` without waiting for it."""
    restore_terminal()
    command = shell_command(entry)
    logger.info("launching %r: %s", entry.name, command)
    try:
        return subprocess.Popen(
            [SHELL, "-c", command],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        logger.error("launch of %r failed: %s", entry.name, exc)
        raise LaunchError(entry, exc) from exc
