"""Locations of gitswap's files."""

import os
from pathlib import Path

GITSWAP_HOME_ENV = "GITSWAP_HOME"
PROFILES_FILE_ENV = "GITSWAP_PROFILES_FILE"

PROFILES_FILENAME = "profiles.json"
LOG_FILENAME = "gitswap.log"


def get_gitswap_dir() -> Path:
    """Get the gitswap base directory (``~/.gitswap`` unless overridden)."""
    override = os.environ.get(GITSWAP_HOME_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".gitswap"


def get_profiles_file() -> Path:
    """Get the path of the profiles store."""
    override = os.environ.get(PROFILES_FILE_ENV)
    if override:
        return Path(override).expanduser()
    return get_gitswap_dir() / PROFILES_FILENAME


def get_log_file() -> Path:
    return get_gitswap_dir() / LOG_FILENAME
