"""Public configuration API for clientstate."""

from __future__ import annotations

from .client import ClientConfig
from .codec import CodecFailure, SectionFormat
from .models import (
    AuthCache,
    ConfigError,
    DirectoryCreateError,
    EncodeError,
    FileReadError,
    FileWriteError,
    KeyMap,
    MainSettings,
    MalformedDataError,
    PushRuleset,
    RoomCacheError,
    UnsupportedOperationError,
    UserPreferences,
)
from .paths import PathLayout
from .protocol import RoomCache, RoomCacheFactory, SyncStore
from .registry import SECTIONS, SectionSpec

__all__ = [
    "SECTIONS",
    "AuthCache",
    "ClientConfig",
    "CodecFailure",
    "ConfigError",
    "DirectoryCreateError",
    "EncodeError",
    "FileReadError",
    "FileWriteError",
    "KeyMap",
    "MainSettings",
    "MalformedDataError",
    "PathLayout",
    "PushRuleset",
    "RoomCache",
    "RoomCacheError",
    "RoomCacheFactory",
    "SectionFormat",
    "SectionSpec",
    "SyncStore",
    "UnsupportedOperationError",
    "UserPreferences",
]
