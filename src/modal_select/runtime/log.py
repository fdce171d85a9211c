"""Log file living in the preferences directory."""

from __future__ import annotations

from pathlib import Path
from typing import IO

from modal_select.errors import LogFileError

from . import telemetry
from .preferences import Preferences, env

LOG_FILE_NAME = "log"


def create_log_file(preferences: Preferences) -> IO[str]:
    """Create (or truncate) the log file and return it opened for writing."""

    path = preferences.directory / LOG_FILE_NAME
    try:
        preferences.directory.mkdir(parents=True, exist_ok=True)
        return path.open("w", encoding="utf-8")
    except OSError as exc:
        raise LogFileError(f"Failed to create log file at {path}") from exc


def log_to_file(preferences: Preferences) -> Path:
    """Send telelog output to a fresh ``log`` file and return its path.

    An explicit ``MODAL_SELECT_LOG_FILE`` already routes output, so that path
    is returned and the preferences directory is left alone.
    """

    configured = env("LOG_FILE")
    if configured:
        return Path(configured)

    create_log_file(preferences).close()
    path = preferences.directory / LOG_FILE_NAME
    telemetry.configure(log_file=str(path))
    return path


__all__ = ["LOG_FILE_NAME", "create_log_file", "log_to_file"]
