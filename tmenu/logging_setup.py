"""File logging for the launcher.

The TUI owns the terminal, so log records never go to stdout/stderr. They
are discarded unless a log file is requested.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_log_dir

LOG_ENV_VAR = "TMENU_LOG"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_PATH = Path(user_log_dir("tmenu", appauthor=False)) / "tmenu.log"


def resolve_log_path(log_file: Path | None, verbose: bool) -> Path | None:
    """Pick the log destination from flags, then ``$TMENU_LOG``."""
    if log_file is not None:
        return log_file
    env_value = os.environ.get(LOG_ENV_VAR, "").strip()
    if env_value:
        return Path(env_value).expanduser()
    if verbose:
        return DEFAULT_LOG_PATH
    return None


def configure_logging(log_file: Path | None = None, verbose: bool = False) -> Path | None:
    """Attach a handler to the ``tmenu`` logger and return the log path used."""
    logger = logging.getLogger("tmenu")
    logger.propagate = False
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    path = resolve_log_path(log_file, verbose)
    if path is None:
        logger.addHandler(logging.NullHandler())
        return None

    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return path
