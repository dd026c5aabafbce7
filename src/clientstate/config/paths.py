"""Directory and file layout derived from the root directories."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

HISTORY_FILENAME = "history.db"
ROOM_LIST_FILENAME = "rooms.json.gz"
STATE_DIR_NAME = "state"
MEDIA_DIR_NAME = "media"
KEYMAP_DIR_NAME = "keymaps"


@dataclass(frozen=True, slots=True)
class PathLayout:
    """All locations the client reads or writes.

    Every derived path lives under exactly one of the config, data or cache
    roots; the download directory is its own root.
    """

    config_dir: Path
    data_dir: Path
    cache_dir: Path
    download_dir: Path
    history_path: Path
    room_list_path: Path
    state_dir: Path
    media_dir: Path
    keymap_dir: Path

    @classmethod
    def from_roots(
        cls,
        config_root: Path,
        data_root: Path,
        cache_root: Path,
        download_root: Path,
    ) -> PathLayout:
        return cls(
            config_dir=config_root,
            data_dir=data_root,
            cache_dir=cache_root,
            download_dir=download_root,
            history_path=cache_root / HISTORY_FILENAME,
            room_list_path=cache_root / ROOM_LIST_FILENAME,
            state_dir=cache_root / STATE_DIR_NAME,
            media_dir=cache_root / MEDIA_DIR_NAME,
            keymap_dir=config_root / KEYMAP_DIR_NAME,
        )

    def cache_dirs(self) -> tuple[Path, ...]:
        """Directories that must exist before the client starts."""
        return (self.cache_dir, self.data_dir, self.state_dir, self.media_dir)

    def to_dict(self) -> dict[str, str]:
        return {name: str(getattr(self, name)) for name in self.__dataclass_fields__}
