"""Filesystem helpers for cache directory setup and teardown."""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path

from result import Ok, Result, is_err

from clientstate.common import create_logger

from .models import DirectoryCreateError
from .store import ensure_directory

logger = create_logger("lifecycle")


def create_directories(directories: Iterable[Path]) -> Result[None, DirectoryCreateError]:
    for directory in directories:
        result = ensure_directory(directory, "cache directories")
        if is_err(result):
            return result
    return Ok(None)


def remove_quietly(paths: Iterable[Path]) -> None:
    """Remove files and directory trees, logging anything that can't be removed."""
    for path in paths:
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Failed to remove path", path=str(path), error=str(exc))
        else:
            logger.debug("Removed path", path=str(path))
