"""The client configuration aggregate."""

from __future__ import annotations

from result import Err, Ok, Result, is_err

from clientstate.common import create_logger

from .lifecycle import create_directories, remove_quietly
from .models import (
    AuthCache,
    ConfigError,
    DirectoryCreateError,
    KeyMap,
    MainSettings,
    PushRuleset,
    RoomCacheError,
    UnsupportedOperationError,
    UserPreferences,
)
from .paths import PathLayout
from .protocol import RoomCache, RoomCacheFactory
from .registry import AUTH_CACHE, MAIN_SETTINGS, PREFERENCES, PUSH_RULES, SectionSpec, keymap_section
from .store import load_section, save_section

logger = create_logger("config")


class ClientConfig:
    """Owns the persisted sections, the path layout and the room cache.

    After ``clear()`` every save is skipped until ``delete_session()`` has
    finished resetting the session, so a half-deleted session is never written
    back to disk.
    """

    def __init__(self, layout: PathLayout, room_cache_factory: RoomCacheFactory) -> None:
        self.layout = layout
        self.main = MainSettings()
        self.auth_cache = AuthCache()
        self.preferences = UserPreferences()
        self.push_rules: PushRuleset = None
        self.keymap = KeyMap()
        self.rooms: RoomCache | None = None
        self._room_cache_factory = room_cache_factory
        self._save_suppressed = False

    @property
    def saving_suppressed(self) -> bool:
        return self._save_suppressed

    def get_user_id(self) -> str:
        return self.main.user_id

    # Sections

    def load_main_settings(self) -> Result[None, ConfigError]:
        result = self._load(MAIN_SETTINGS)
        if is_err(result):
            return result
        if result.ok_value is not None:
            self.main = result.ok_value
        return self.create_cache_dirs()

    def save_main_settings(self) -> Result[None, ConfigError]:
        return self._save(MAIN_SETTINGS, self.main)

    def load_auth_cache(self) -> Result[None, ConfigError]:
        result = self._load(AUTH_CACHE)
        if is_err(result):
            return result
        if result.ok_value is not None:
            self.auth_cache = result.ok_value
        return Ok(None)

    def save_auth_cache(self) -> Result[None, ConfigError]:
        return self._save(AUTH_CACHE, self.auth_cache)

    def load_preferences(self) -> Result[None, ConfigError]:
        result = self._load(PREFERENCES)
        if is_err(result):
            return result
        if result.ok_value is not None:
            self.preferences = result.ok_value
        return Ok(None)

    def save_preferences(self) -> Result[None, ConfigError]:
        return self._save(PREFERENCES, self.preferences)

    def load_push_rules(self) -> Result[None, ConfigError]:
        result = self._load(PUSH_RULES)
        if is_err(result):
            return result
        if result.ok_value is not None:
            self.push_rules = result.ok_value
        return Ok(None)

    def save_push_rules(self) -> Result[None, ConfigError]:
        if self.push_rules is None:
            return Ok(None)
        return self._save(PUSH_RULES, self.push_rules)

    def load_keymap(self) -> Result[None, ConfigError]:
        """Load the keymap named by ``main.keymap`` from the keymaps directory."""
        result = self._load(keymap_section(self.main.keymap))
        if is_err(result):
            return result
        if result.ok_value is not None:
            self.keymap = result.ok_value
        return Ok(None)

    def load_all(self) -> Result[None, ConfigError]:
        logger.debug("Loading all sections", config_dir=str(self.layout.config_dir))

        result = self.load_main_settings()
        if is_err(result):
            return result

        self.rooms = self._new_room_cache()

        for load in (self.load_auth_cache, self.load_push_rules, self.load_preferences):
            result = load()
            if is_err(result):
                return result

        list_result = self.rooms.load_list()
        if is_err(list_result):
            logger.error("Room list load failed", path=str(self.layout.room_list_path), error=list_result.err_value)
            return Err(
                RoomCacheError(
                    section="room list",
                    operation="load_list",
                    message=str(list_result.err_value),
                )
            )

        return Ok(None)

    def save_all(self) -> Result[None, ConfigError]:
        for save in (self.save_main_settings, self.save_auth_cache, self.save_push_rules, self.save_preferences):
            result = save()
            if is_err(result):
                return result

        if self.rooms is None:
            logger.debug("No room cache to save")
            return Ok(None)

        list_result = self.rooms.save_list()
        if is_err(list_result):
            logger.error("Room list save failed", path=str(self.layout.room_list_path), error=list_result.err_value)
            return Err(
                RoomCacheError(
                    section="room list",
                    operation="save_list",
                    message=str(list_result.err_value),
                )
            )
        self.rooms.save_loaded_rooms()
        return Ok(None)

    # Lifecycle

    def create_cache_dirs(self) -> Result[None, DirectoryCreateError]:
        return create_directories(self.layout.cache_dirs())

    def clear(self) -> None:
        """Remove the session cache and all history, then stop saving."""
        remove_quietly(
            [
                self.layout.history_path,
                self.layout.room_list_path,
                self.layout.state_dir,
                self.layout.media_dir,
                self.layout.cache_dir,
            ]
        )
        self._save_suppressed = True
        logger.info("Session cache cleared, saving suppressed")

    def clear_data(self) -> None:
        """Remove non-temporary session data."""
        remove_quietly([self.layout.data_dir])

    def delete_session(self) -> Result[None, DirectoryCreateError]:
        self.auth_cache.next_batch = ""
        self.auth_cache.initial_sync_done = False
        self.main.access_token = ""
        self.main.device_id = ""
        self.rooms = self._new_room_cache()
        self.push_rules = None

        self.clear_data()
        self.clear()
        self._save_suppressed = False
        logger.info("Session deleted")

        return self.create_cache_dirs()

    # Sync store

    def save_filter_id(self, user_id: str, filter_id: str) -> Result[None, ConfigError]:
        self.auth_cache.filter_id = filter_id
        return self.save_auth_cache()

    def load_filter_id(self, user_id: str) -> str:
        return self.auth_cache.filter_id

    def save_next_batch(self, user_id: str, next_batch: str) -> Result[None, ConfigError]:
        self.auth_cache.next_batch = next_batch
        return self.save_auth_cache()

    def load_next_batch(self, user_id: str) -> str:
        return self.auth_cache.next_batch

    def save_room(self, room: object) -> Result[None, UnsupportedOperationError]:
        return Err(
            UnsupportedOperationError(
                section="rooms",
                operation="save_room",
                message="Rooms are persisted by the room cache, not the sync store.",
            )
        )

    def load_room(self, room_id: str) -> Result[object, UnsupportedOperationError]:
        return Err(
            UnsupportedOperationError(
                section="rooms",
                operation="load_room",
                message="Rooms are persisted by the room cache, not the sync store.",
            )
        )

    def _new_room_cache(self) -> RoomCache:
        return self._room_cache_factory(
            self.layout.room_list_path,
            self.layout.state_dir,
            self.main.room_cache_size,
            self.main.room_cache_age,
            self.get_user_id,
        )

    def _load(self, section: SectionSpec) -> Result[object | None, ConfigError]:
        return load_section(section, section.directory(self.layout))

    def _save(self, section: SectionSpec, value: object) -> Result[None, ConfigError]:
        if self._save_suppressed:
            logger.debug("Save suppressed", section=section.label)
            return Ok(None)
        return save_section(section, section.directory(self.layout), value)
