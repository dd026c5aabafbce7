from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from clientstate.common import (
    AppInfo,
    AppPaths,
    LoggingConfig,
    get_cache_root,
    get_config_root,
    get_data_root,
    get_download_root,
)
from clientstate.config.paths import PathLayout


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    paths: AppPaths = AppPaths()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="CLIENTSTATE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )

    def to_path_layout(self) -> PathLayout:
        return PathLayout.from_roots(
            config_root=get_config_root(self.paths),
            data_root=get_data_root(self.paths),
            cache_root=get_cache_root(self.paths),
            download_root=get_download_root(self.paths),
        )

    def log_dir(self) -> Path:
        return get_data_root(self.paths) / "logs"


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None

# Convenience access - pre-initialized singleton
settings = get_settings()


__all__ = [
    "AppInfo",
    "AppPaths",
    "Settings",
    "get_settings",
    "settings",
]
