from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from result import Err, Ok, Result

from clientstate.config import ClientConfig, PathLayout


class FakeRoomCache:
    def __init__(
        self,
        room_list_path: Path,
        state_dir: Path,
        capacity: int,
        max_age_seconds: int,
        get_user_id: Callable[[], str],
        load_error: str | None = None,
        save_error: str | None = None,
    ) -> None:
        self.room_list_path = room_list_path
        self.state_dir = state_dir
        self.capacity = capacity
        self.max_age_seconds = max_age_seconds
        self.get_user_id = get_user_id
        self.load_error = load_error
        self.save_error = save_error
        self.calls: list[str] = []

    def load_list(self) -> Result[None, str]:
        self.calls.append("load_list")
        return Err(self.load_error) if self.load_error else Ok(None)

    def save_list(self) -> Result[None, str]:
        self.calls.append("save_list")
        return Err(self.save_error) if self.save_error else Ok(None)

    def save_loaded_rooms(self) -> None:
        self.calls.append("save_loaded_rooms")


class RoomCacheRecorder:
    """Room cache factory that remembers every cache it built."""

    def __init__(self) -> None:
        self.created: list[FakeRoomCache] = []
        self.load_error: str | None = None
        self.save_error: str | None = None

    def __call__(
        self,
        room_list_path: Path,
        state_dir: Path,
        capacity: int,
        max_age_seconds: int,
        get_user_id: Callable[[], str],
    ) -> FakeRoomCache:
        cache = FakeRoomCache(
            room_list_path,
            state_dir,
            capacity,
            max_age_seconds,
            get_user_id,
            load_error=self.load_error,
            save_error=self.save_error,
        )
        self.created.append(cache)
        return cache


@pytest.fixture
def layout(tmp_path: Path) -> PathLayout:
    return PathLayout.from_roots(
        config_root=tmp_path / "config",
        data_root=tmp_path / "data",
        cache_root=tmp_path / "cache",
        download_root=tmp_path / "downloads",
    )


@pytest.fixture
def room_caches() -> RoomCacheRecorder:
    return RoomCacheRecorder()


@pytest.fixture
def config(layout: PathLayout, room_caches: RoomCacheRecorder) -> ClientConfig:
    return ClientConfig(layout, room_caches)
