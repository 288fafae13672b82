"""Application catalog discovery from desktop-entry shortcut files.

Scans one directory for ``*.desktop`` files, keeps the visible entries that
name a launch command, and drops later duplicates of an already-seen name.
Per-file problems skip that file; only an unlistable directory is fatal.
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_APPLICATIONS_DIR = Path("/usr/share/applications")
SHORTCUT_SUFFIX = ".desktop"
DESKTOP_ENTRY_SECTION = "Desktop Entry"


@dataclass(frozen=True)
class AppEntry:
    """One launchable application shown in the list."""

    name: str
    description: str
    command: str

    @property
    def label(self) -> str:
        """Display text: ``name`` with ``[description]`` appended when present."""
        if self.description:
            return f"{self.name} [{self.description}]"
        return self.name


class ScanError(Exception):
    """Raised when the shortcut directory itself cannot be listed."""

    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f"cannot read {directory}: {reason}")
        self.directory = directory
        self.reason = reason


class ParseSkip(Exception):
    """Raised for a single shortcut file that does not yield an entry."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None, strict=False, delimiters=("=",))
    # Desktop-entry keys are case-sensitive (Name vs name).
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def is_hidden(value: str | None) -> bool:
    """Return whether a ``NoDisplay`` value hides the entry.

    Only the literal ``true`` hides; absence or any other value shows it.
    """
    return value is not None and value.strip() == "true"


def read_shortcut(path: Path) -> AppEntry:
    """Parse one shortcut file into an ``AppEntry``.

    Raises ``ParseSkip`` when the file cannot be read or parsed, lacks the
    ``Desktop Entry`` section, lacks a non-empty ``Name`` or ``Exec``, or is
    marked ``NoDisplay=true``.
    """
    parser = _new_parser()
    try:
        with path.open(encoding="utf-8", errors="replace") as handle:
            parser.read_file(handle, source=str(path))
    except (OSError, configparser.Error) as exc:
        raise ParseSkip(path, f"unparseable: {exc}") from exc

    if not parser.has_section(DESKTOP_ENTRY_SECTION):
        raise ParseSkip(path, f"missing [{DESKTOP_ENTRY_SECTION}] section")
    section = parser[DESKTOP_ENTRY_SECTION]

    name = section.get("Name", "").strip()
    if not name:
        raise ParseSkip(path, "missing Name")
    if is_hidden(section.get("NoDisplay")):
        raise ParseSkip(path, "NoDisplay=true")
    command = section.get("Exec", "").strip()
    if not command:
        raise ParseSkip(path, "missing Exec")

    return AppEntry(
        name=name,
        description=section.get("GenericName", "").strip(),
        command=command,
    )


def _list_shortcut_files(directory: Path) -> list[Path]:
    try:
        with os.scandir(directory) as it:
            names = [entry.name for entry in it]
    except OSError as exc:
        raise ScanError(directory, exc.strerror or str(exc)) from exc
    return [directory / name for name in names if name.endswith(SHORTCUT_SUFFIX)]


def build_catalog(directory: Path = DEFAULT_APPLICATIONS_DIR) -> list[AppEntry]:
    """Build the launch catalog from shortcut files in ``directory``.

    Entries keep directory listing order. When two files share a ``Name`` the
    first one seen wins and later ones are dropped.
    """
    directory = Path(directory)
    logger.info("scanning %s for shortcut files", directory)
    catalog: list[AppEntry] = []
    seen_names: set[str] = set()
    skipped = 0
    for path in _list_shortcut_files(directory):
        try:
            entry = read_shortcut(path)
        except ParseSkip as skip:
            skipped += 1
            logger.debug("skipping %s: %s", skip.path, skip.reason)
            continue
        if entry.name in seen_names:
            logger.debug("dropping duplicate %r from %s", entry.name, path)
            continue
        seen_names.add(entry.name)
        catalog.append(entry)
    logger.info("catalog built: %d entries, %d files skipped", len(catalog), skipped)
    return catalog
