"""Pydantic models for the persisted sections and their errors."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from clientstate.utils.types import JsonDict

type PushRuleset = JsonDict | None


class MainSettings(BaseModel):
    """Main settings (config.yaml).

    The user ID is stored under the `mxid` key.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True, populate_by_name=True)

    user_id: str = Field(default="", alias="mxid")
    device_id: str = ""
    access_token: str = ""
    homeserver: str = ""

    room_cache_size: int = 32
    room_cache_age: int = 60

    notify_sound: bool = True
    send_to_verified_only: bool = False

    keymap: str = "default"


class AuthCache(BaseModel):
    """Sync state written after every sync cycle (auth-cache.yaml)."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    next_batch: str = ""
    filter_id: str = ""
    initial_sync_done: bool = False


class UserPreferences(BaseModel):
    """Display and behaviour toggles (preferences.yaml)."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    hide_user_list: bool = False
    hide_room_list: bool = False
    bare_message_view: bool = False
    disable_images: bool = False
    disable_typing_notifs: bool = False
    disable_emojis: bool = False
    disable_markdown: bool = False
    disable_html: bool = False
    disable_downloads: bool = False
    disable_notifications: bool = False
    disable_show_urls: bool = False


class KeyMap(BaseModel):
    """Key bindings loaded from keymaps/<name>.yaml.

    Values are key strings handed to the UI as-is.
    """

    model_config = ConfigDict(extra="ignore")

    verification_done: str = ""
    verification_submit: str = ""

    fuzzy_search_open: str = ""
    fuzzy_search_cancel: str = ""
    fuzzy_search_next: str = ""
    fuzzy_search_prev: str = ""
    fuzzy_search_choose: str = ""

    room_next: str = ""
    room_prev: str = ""

    room_view_top: str = ""
    room_view_bottom: str = ""
    room_view_scroll_up: str = ""
    room_view_scroll_down: str = ""

    message_select_cancel: str = ""
    message_select_next: str = ""
    message_select_prev: str = ""
    message_select_choose: str = ""

    message_input_newline: str = ""
    message_input_clear: str = ""
    message_input_send: str = ""

    bare_view_open: str = ""

    def as_mapping(self) -> dict[str, str]:
        return self.model_dump()


class ConfigError(BaseModel):
    """Base error for section persistence."""

    model_config = ConfigDict(extra="forbid")

    section: str
    message: str


class DirectoryCreateError(ConfigError):
    """A section or cache directory could not be created."""

    path: Path


class FileReadError(ConfigError):
    """A section file exists but could not be read."""

    path: Path


class MalformedDataError(ConfigError):
    """A section file could not be decoded into its model."""

    path: Path
    line: int | None = None
    column: int | None = None
    field: str | None = None


class EncodeError(ConfigError):
    """A section value could not be serialized."""


class FileWriteError(ConfigError):
    """A section file could not be written."""

    path: Path


class UnsupportedOperationError(ConfigError):
    """The operation is part of the store surface but is not supported."""

    operation: str


class RoomCacheError(ConfigError):
    """The room cache failed to load or save its list."""

    operation: str
