from __future__ import annotations

from pathlib import Path

import yaml
from result import is_err, is_ok

from clientstate.config import AuthCache, ClientConfig, DirectoryCreateError, PathLayout


def _populate(config: ClientConfig, layout: PathLayout) -> None:
    assert is_ok(config.load_all())
    config.main.user_id = "@alice:example.org"
    config.main.device_id = "DEVICE"
    config.main.access_token = "token"
    config.main.homeserver = "https://example.org"
    config.auth_cache = AuthCache(next_batch="s1", filter_id="f1", initial_sync_done=True)
    config.push_rules = {"global": {}}
    assert is_ok(config.save_all())
    layout.history_path.write_text("history")
    layout.room_list_path.write_text("rooms")
    (layout.state_dir / "room.json").write_text("{}")
    (layout.media_dir / "image.png").write_bytes(b"\x89PNG")
    (layout.data_dir / "crypto.db").write_bytes(b"keys")


def test_create_cache_dirs_is_idempotent(config: ClientConfig, layout: PathLayout) -> None:
    assert is_ok(config.create_cache_dirs())
    assert is_ok(config.create_cache_dirs())

    for directory in (layout.cache_dir, layout.data_dir, layout.state_dir, layout.media_dir):
        assert directory.is_dir()
    assert not layout.download_dir.exists()


def test_create_cache_dirs_reports_failure(tmp_path: Path, room_caches) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    layout = PathLayout.from_roots(
        config_root=tmp_path / "config",
        data_root=tmp_path / "data",
        cache_root=blocker / "cache",
        download_root=tmp_path / "downloads",
    )
    config = ClientConfig(layout, room_caches)

    result = config.create_cache_dirs()

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, DirectoryCreateError)
    assert error.path == blocker / "cache"


def test_clear_removes_cache_and_suppresses_saving(config: ClientConfig, layout: PathLayout) -> None:
    _populate(config, layout)

    config.clear()

    assert config.saving_suppressed is True
    assert not layout.history_path.exists()
    assert not layout.room_list_path.exists()
    assert not layout.state_dir.exists()
    assert not layout.media_dir.exists()
    assert not layout.cache_dir.exists()
    assert layout.data_dir.exists()
    assert (layout.config_dir / "config.yaml").exists()


def test_clear_tolerates_missing_paths(config: ClientConfig) -> None:
    config.clear()

    assert config.saving_suppressed is True


def test_saves_after_clear_leave_disk_untouched(config: ClientConfig, layout: PathLayout) -> None:
    _populate(config, layout)
    config_file = layout.config_dir / "config.yaml"
    before = config_file.read_bytes()

    config.clear()
    config.main.homeserver = "https://changed.example.org"
    config.auth_cache.next_batch = "s2"

    assert is_ok(config.save_main_settings())
    assert is_ok(config.save_auth_cache())
    assert is_ok(config.save_preferences())
    assert is_ok(config.save_push_rules())
    assert is_ok(config.save_next_batch("@alice:example.org", "s3"))
    assert is_ok(config.save_all())

    assert config_file.read_bytes() == before
    assert not (layout.cache_dir / "auth-cache.yaml").exists()
    assert not layout.cache_dir.exists()


def test_clear_data_removes_data_dir_without_suppressing(config: ClientConfig, layout: PathLayout) -> None:
    _populate(config, layout)

    config.clear_data()

    assert not layout.data_dir.exists()
    assert layout.cache_dir.exists()
    assert config.saving_suppressed is False


def test_delete_session_resets_session_state(config: ClientConfig, layout: PathLayout, room_caches) -> None:
    _populate(config, layout)
    old_rooms = config.rooms

    result = config.delete_session()

    assert is_ok(result)
    assert config.saving_suppressed is False
    assert config.auth_cache.next_batch == ""
    assert config.auth_cache.initial_sync_done is False
    assert config.main.access_token == ""
    assert config.main.device_id == ""
    assert config.main.user_id == "@alice:example.org"
    assert config.push_rules is None
    assert config.rooms is not old_rooms
    assert config.rooms is room_caches.created[-1]
    assert config.rooms.calls == []
    assert config.rooms.room_list_path == layout.room_list_path
    for directory in layout.cache_dirs():
        assert directory.is_dir()
    assert not (layout.data_dir / "crypto.db").exists()
    assert not layout.history_path.exists()
    assert not (layout.state_dir / "room.json").exists()


def test_delete_session_reenables_saving(config: ClientConfig, layout: PathLayout) -> None:
    _populate(config, layout)
    config.clear()
    assert config.saving_suppressed is True

    assert is_ok(config.delete_session())
    assert is_ok(config.save_filter_id("@alice:example.org", "fresh"))

    stored = yaml.safe_load((layout.cache_dir / "auth-cache.yaml").read_text())
    assert stored["filter_id"] == "fresh"
    assert stored["next_batch"] == ""


def test_delete_session_twice_reaches_same_state(config: ClientConfig, layout: PathLayout, room_caches) -> None:
    _populate(config, layout)

    def snapshot() -> tuple[object, ...]:
        return (
            config.auth_cache.model_dump(),
            config.main.model_dump(),
            config.push_rules,
            config.saving_suppressed,
            config.rooms.calls,
            sorted(str(path.relative_to(layout.cache_dir)) for path in layout.cache_dir.rglob("*")),
            layout.data_dir.is_dir(),
        )

    assert is_ok(config.delete_session())
    first = snapshot()
    assert is_ok(config.delete_session())
    second = snapshot()

    assert first == second
    assert len(room_caches.created) == 3
