"""Loguru setup for clientstate.

The CLI logs to a rotating file under the data directory. When clientstate is
used as a library its records are disabled until `enable_logging` is called.
"""

import sys
from pathlib import Path
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from clientstate.constants import APP_NAME

from .models import AppInfo


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_file: str | None = Field(default=None)
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")
    format: Literal["json", "text"] = Field(default="text")


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig, log_dir: Path) -> int:
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})

    log_file = Path(config.log_file).expanduser() if config.log_file else log_dir / f"{APP_NAME}.log"

    log_file.parent.mkdir(parents=True, exist_ok=True, mode=0o700)

    # JSON records carry the bound section/path fields as structured extras
    sink_format = {"serialize": True} if config.format == "json" else {"format": _get_text_format()}
    handler_id = logger.add(
        log_file,
        level=config.log_level,
        rotation=config.rotation,
        retention=config.retention,
        diagnose=(app_info.environment == "dev"),
        **sink_format,
    )

    logger.debug(
        "CLI logging initialized",
        log_file=str(log_file),
        level=config.log_level,
        format=config.format,
    )

    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()

    handler_id = logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )

    return handler_id


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
