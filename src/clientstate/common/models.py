"""Common models used across clientstate."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from clientstate.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "dev"


class AppPaths(BaseModel):
    """Root directory settings.

    The explicit roots win over the XDG based defaults. Each XDG default gets
    ``app_dir_name`` appended; explicit roots are used as given.
    """

    app_dir_name: str = APP_NAME
    config_root: Path | None = None
    data_root: Path | None = None
    cache_root: Path | None = None
    download_root: Path | None = None
