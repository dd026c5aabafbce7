"""File-based section store."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from result import Err, Ok, Result, is_err

from clientstate.common import create_logger

from .codec import decode, encode
from .models import (
    ConfigError,
    DirectoryCreateError,
    EncodeError,
    FileReadError,
    FileWriteError,
    MalformedDataError,
)
from .registry import SectionSpec

logger = create_logger("store")

DIR_MODE = 0o700
FILE_MODE = 0o600


def ensure_directory(directory: Path, section: str) -> Result[None, DirectoryCreateError]:
    try:
        directory.mkdir(parents=True, exist_ok=True, mode=DIR_MODE)
    except OSError as exc:
        logger.error("Failed to create directory", section=section, path=str(directory), error=str(exc))
        return Err(
            DirectoryCreateError(
                section=section,
                path=directory,
                message=str(exc),
            )
        )
    return Ok(None)


def load_section(section: SectionSpec, directory: Path) -> Result[Any | None, ConfigError]:
    """Load one section file.

    Returns:
        Ok(value) when the file exists and decodes.
        Ok(None) when the file doesn't exist; the caller keeps its defaults.
        Err(ConfigError) on any directory, read or decode failure.
    """
    dir_result = ensure_directory(directory, section.label)
    if is_err(dir_result):
        return dir_result

    return read_section(section, directory)


def read_section(section: SectionSpec, directory: Path) -> Result[Any | None, ConfigError]:
    """Like `load_section`, but never creates ``directory``."""
    path = directory / section.filename
    logger.debug("Loading section", section=section.label, path=str(path))

    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.debug("Section file not found, using defaults", section=section.label, path=str(path))
        return Ok(None)
    except OSError as exc:
        logger.error("Section file read error", section=section.label, path=str(path), error=str(exc))
        return Err(
            FileReadError(
                section=section.label,
                path=path,
                message=str(exc),
            )
        )

    decoded = decode(section.format, raw, section.target)
    if is_err(decoded):
        failure = decoded.err_value
        logger.error(
            "Section parse error",
            section=section.label,
            path=str(path),
            line=failure.line,
            column=failure.column,
            error=failure.message,
        )
        return Err(
            MalformedDataError(
                section=section.label,
                path=path,
                line=failure.line,
                column=failure.column,
                field=failure.field,
                message=failure.message,
            )
        )

    return Ok(decoded.ok_value)


def save_section(section: SectionSpec, directory: Path, value: object) -> Result[None, ConfigError]:
    """Encode ``value`` and replace the section file with it."""
    dir_result = ensure_directory(directory, section.label)
    if is_err(dir_result):
        return dir_result

    encoded = encode(section.format, value, section.target)
    if is_err(encoded):
        logger.error("Section encode error", section=section.label, error=encoded.err_value.message)
        return Err(
            EncodeError(
                section=section.label,
                message=encoded.err_value.message,
            )
        )

    path = directory / section.filename
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as handle:
            handle.write(encoded.ok_value)
        # O_CREAT only applies the mode to new files
        path.chmod(FILE_MODE)
    except OSError as exc:
        logger.error("Section file write error", section=section.label, path=str(path), error=str(exc))
        return Err(
            FileWriteError(
                section=section.label,
                path=path,
                message=str(exc),
            )
        )

    logger.debug("Section saved", section=section.label, path=str(path))
    return Ok(None)
