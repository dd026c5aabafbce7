"""Protocols for the collaborators around the client configuration."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from result import Result

from .models import ConfigError, UnsupportedOperationError


class RoomCache(Protocol):
    """Room list and per-room state persistence, owned elsewhere."""

    def load_list(self) -> Result[None, str]:
        """Load the room list from disk."""
        ...

    def save_list(self) -> Result[None, str]:
        """Write the room list to disk."""
        ...

    def save_loaded_rooms(self) -> None:
        """Persist every room currently held in memory.

        Failures for individual rooms are handled by the cache itself.
        """
        ...


class RoomCacheFactory(Protocol):
    def __call__(
        self,
        room_list_path: Path,
        state_dir: Path,
        capacity: int,
        max_age_seconds: int,
        get_user_id: Callable[[], str],
    ) -> RoomCache: ...


class SyncStore(Protocol):
    """Sync state storage as seen by the network layer."""

    def save_filter_id(self, user_id: str, filter_id: str) -> Result[None, ConfigError]: ...

    def load_filter_id(self, user_id: str) -> str: ...

    def save_next_batch(self, user_id: str, next_batch: str) -> Result[None, ConfigError]: ...

    def load_next_batch(self, user_id: str) -> str: ...

    def save_room(self, room: object) -> Result[None, UnsupportedOperationError]: ...

    def load_room(self, room_id: str) -> Result[object, UnsupportedOperationError]: ...
