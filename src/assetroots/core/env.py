"""Runtime settings read from the environment or a user settings file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from assetroots.core import paths

MANIFEST_VAR = "ASSETROOTS_MANIFEST"
LOG_LEVEL_VAR = "ASSETROOTS_LOG_LEVEL"
SETTINGS_FILE_VAR = "ASSETROOTS_ENV_FILE"


def settings_file() -> Path:
    override = os.environ.get(SETTINGS_FILE_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "assetroots" / "env"


def load_user_env(path: Path | None = None) -> dict[str, str]:
    """Apply the manifest and log-level settings from *path*.

    Variables already set in the environment win. Returns what was applied.
    """
    path = path or settings_file()
    if not path.is_file():
        return {}

    applied: dict[str, str] = {}
    for key, value in read_settings(path).items():
        if key in (MANIFEST_VAR, LOG_LEVEL_VAR) and key not in os.environ:
            os.environ[key] = value
            applied[key] = value
    return applied


def read_settings(path: Path) -> dict[str, str]:
    """Parse ``KEY=value`` lines; ``#`` comments and blank lines are ignored."""
    settings: dict[str, str] = {}
    for line in path.read_text().splitlines():
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        settings[key] = value.strip().strip("'\"")
    return settings


def default_manifest() -> str:
    return os.environ.get(MANIFEST_VAR, "").strip() or paths.DEFAULT_MANIFEST


def log_level(verbose: bool = False) -> int:
    """Resolve the log level from ``ASSETROOTS_LOG_LEVEL``; *verbose* forces DEBUG."""
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_VAR, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING
