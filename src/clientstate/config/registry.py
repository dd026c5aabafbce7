"""The fixed set of persisted sections."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any

from .codec import SectionFormat
from .models import AuthCache, KeyMap, MainSettings, PushRuleset, UserPreferences
from .paths import PathLayout


class SectionRoot(str, Enum):
    """Which layout directory a section file lives in."""

    CONFIG = "config"
    CACHE = "cache"
    KEYMAPS = "keymaps"


@dataclass(frozen=True, slots=True)
class SectionSpec:
    label: str
    filename: str
    format: SectionFormat
    target: Any
    root: SectionRoot

    def directory(self, layout: PathLayout) -> Path:
        match self.root:
            case SectionRoot.CONFIG:
                return layout.config_dir
            case SectionRoot.CACHE:
                return layout.cache_dir
            case SectionRoot.KEYMAPS:
                return layout.keymap_dir
            case _:
                raise ValueError(f"Unexpected section root: {self.root}")

    def path(self, layout: PathLayout) -> Path:
        return self.directory(layout) / self.filename


MAIN_SETTINGS = SectionSpec(
    label="config",
    filename="config.yaml",
    format=SectionFormat.YAML,
    target=MainSettings,
    root=SectionRoot.CONFIG,
)
AUTH_CACHE = SectionSpec(
    label="auth cache",
    filename="auth-cache.yaml",
    format=SectionFormat.YAML,
    target=AuthCache,
    root=SectionRoot.CACHE,
)
PREFERENCES = SectionSpec(
    label="user preferences",
    filename="preferences.yaml",
    format=SectionFormat.YAML,
    target=UserPreferences,
    root=SectionRoot.CACHE,
)
PUSH_RULES = SectionSpec(
    label="push rules",
    filename="pushrules.json",
    format=SectionFormat.JSON,
    target=PushRuleset,
    root=SectionRoot.CACHE,
)
KEYMAP = SectionSpec(
    label="keymap",
    filename="default.yaml",
    format=SectionFormat.YAML,
    target=KeyMap,
    root=SectionRoot.KEYMAPS,
)


def keymap_section(name: str) -> SectionSpec:
    """Return the keymap section for the keymap called ``name``."""
    return replace(KEYMAP, filename=f"{name}.yaml")


SECTIONS: dict[str, SectionSpec] = {
    "main": MAIN_SETTINGS,
    "auth-cache": AUTH_CACHE,
    "preferences": PREFERENCES,
    "push-rules": PUSH_RULES,
    "keymap": KEYMAP,
}
