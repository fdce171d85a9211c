"""Environment-driven preferences shared by the runtime and the application."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

ENV_PREFIX = "MODAL_SELECT_"
APP_DIRECTORY = "modal_select"
DEFAULT_VIEW_HEIGHT = 40


def env(
    name: str,
    default: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    source = os.environ if environ is None else environ
    return source.get(f"{ENV_PREFIX}{name}", default)


def env_flag(
    name: str, default: bool, *, environ: Optional[Mapping[str, str]] = None
) -> bool:
    raw = env(name, environ=environ)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def default_directory(environ: Optional[Mapping[str, str]] = None) -> Path:
    source = os.environ if environ is None else environ
    base = source.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_DIRECTORY


@dataclass(frozen=True, slots=True)
class Preferences:
    directory: Path
    system_clipboard: bool = False
    view_height: int = DEFAULT_VIEW_HEIGHT
    log_to_file: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Preferences":
        """Read ``MODAL_SELECT_*`` variables, falling back to defaults.

        ``MODAL_SELECT_CONFIG_DIR`` overrides the preferences directory,
        ``MODAL_SELECT_SYSTEM_CLIPBOARD`` turns on system clipboard sync,
        ``MODAL_SELECT_VIEW_HEIGHT`` sets the number of visible lines and
        ``MODAL_SELECT_LOG_TO_FILE`` writes logs to ``<directory>/log``.
        """

        configured = env("CONFIG_DIR", environ=environ)
        directory = Path(configured) if configured else default_directory(environ)
        raw_height = env("VIEW_HEIGHT", environ=environ)
        try:
            height = int(raw_height) if raw_height else DEFAULT_VIEW_HEIGHT
        except ValueError as exc:
            raise ValueError(
                f"{ENV_PREFIX}VIEW_HEIGHT must be an integer, got {raw_height!r}"
            ) from exc
        if height <= 0:
            raise ValueError(f"{ENV_PREFIX}VIEW_HEIGHT must be positive")
        return cls(
            directory=directory,
            system_clipboard=env_flag("SYSTEM_CLIPBOARD", False, environ=environ),
            view_height=height,
            log_to_file=env_flag("LOG_TO_FILE", False, environ=environ),
        )


__all__ = [
    "ENV_PREFIX",
    "Preferences",
    "default_directory",
    "env",
    "env_flag",
]
