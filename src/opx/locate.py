"""Locate the nearest env file walking up the directory tree."""

import logging
import os
from pathlib import Path
from typing import Iterator, Optional, Union

from .config import ENV_FILE_NAME
from .errors import EnvFileNotFoundError

logger = logging.getLogger(__name__)


def search_path(start: Union[str, Path]) -> Iterator[Path]:
    """
    Yield ``start`` and each of its parents, nearest first.

    Stops once a directory is its own parent (``/`` or a drive root).
    Paths are made absolute and ``..`` is collapsed, but symlinks are
    not resolved, so symlinked directories keep the spelling the caller used.
    """
    directory = Path(os.path.abspath(start))
    while True:
        yield directory
        parent = directory.parent
        if parent == directory:
            return
        directory = parent


def _exists(candidate: Path) -> bool:
    try:
        return candidate.exists()
    except OSError as e:
        # Unreadable directory: treat as missing and keep walking up
        logger.debug("Cannot check %s: %s", candidate, e)
        return False


def find_env_file(start: Union[str, Path], filename: str = None) -> Optional[Path]:
    """
    Find the nearest env file from ``start`` upwards.

    The start directory itself is checked first; a file in a closer
    directory always wins over one further up. Only existence is checked,
    the file is never opened.

    Returns None if no directory up to the root has one.
    """
    filename = filename or ENV_FILE_NAME

    for directory in search_path(start):
        candidate = directory / filename
        if _exists(candidate):
            logger.debug("Found %s", candidate)
            return candidate
        logger.debug("No %s in %s", filename, directory)

    return None


def require_env_file(start: Union[str, Path], filename: str = None) -> Path:
    """Like find_env_file, but raise EnvFileNotFoundError instead of returning None."""
    env_file = find_env_file(start, filename)
    if env_file is None:
        raise EnvFileNotFoundError(
            f"No {filename or ENV_FILE_NAME} file found in current directory "
            "or any parent directory."
        )
    return env_file
