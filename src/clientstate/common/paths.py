"""XDG root directory discovery for clientstate."""

from __future__ import annotations

import os
from pathlib import Path

from .models import AppPaths


def _xdg_base(variable: str, fallback: Path) -> Path:
    value = os.getenv(variable)
    return Path(value).expanduser() if value else fallback


def get_config_root(paths: AppPaths) -> Path:
    """Get the config root directory.

    Returns ~/.config/{app_dir_name} (or XDG_CONFIG_HOME/{app_dir_name} if set).
    """
    if paths.config_root is not None:
        return paths.config_root.expanduser()
    return _xdg_base("XDG_CONFIG_HOME", Path.home() / ".config") / paths.app_dir_name


def get_data_root(paths: AppPaths) -> Path:
    """Get the data root directory.

    Returns ~/.local/share/{app_dir_name} (or XDG_DATA_HOME/{app_dir_name} if set).
    """
    if paths.data_root is not None:
        return paths.data_root.expanduser()
    return _xdg_base("XDG_DATA_HOME", Path.home() / ".local" / "share") / paths.app_dir_name


def get_cache_root(paths: AppPaths) -> Path:
    """Get the cache root directory.

    Returns ~/.cache/{app_dir_name} (or XDG_CACHE_HOME/{app_dir_name} if set).
    """
    if paths.cache_root is not None:
        return paths.cache_root.expanduser()
    return _xdg_base("XDG_CACHE_HOME", Path.home() / ".cache") / paths.app_dir_name


def get_download_root(paths: AppPaths) -> Path:
    """Get the download directory.

    Downloads are shared with other applications, so no app subdirectory is added.
    """
    if paths.download_root is not None:
        return paths.download_root.expanduser()
    return _xdg_base("XDG_DOWNLOAD_DIR", Path.home() / "Downloads")
