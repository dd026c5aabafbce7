"""Common models and helpers used across clientstate modules."""

from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo, AppPaths
from .paths import get_cache_root, get_config_root, get_data_root, get_download_root

__all__ = [
    "AppInfo",
    "AppPaths",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_cache_root",
    "get_config_root",
    "get_data_root",
    "get_download_root",
    "setup_cli_logging",
]
