"""Stored user settings and the volume-adjustment session."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

import platformdirs

APP_NAME = "mushroomhunt"
SETTINGS_FILENAME = "settings.json"
VOLUME_KEY = "audio/volume"
DEFAULT_VOLUME = 1.0
SLIDER_MIN = 0
SLIDER_MAX = 100


class VolumeControl(Protocol):
    """Anything whose playback volume can be read and set (0.0 to 1.0)."""

    def get_volume(self) -> float: ...

    def set_volume(self, value: float) -> None: ...


def default_settings_path() -> Path:
    """Location of the settings file in the user's configuration directory."""
    return Path(platformdirs.user_config_dir(APP_NAME)) / SETTINGS_FILENAME


class SettingsStore:
    """Key-value settings kept in a JSON file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_settings_path()

    def _load(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def load_volume(self) -> float:
        """The saved music volume, or full volume when none is stored."""
        value = self._load().get(VOLUME_KEY, DEFAULT_VOLUME)
        try:
            return float(value)
        except (TypeError, ValueError):
            return DEFAULT_VOLUME

    def save_volume(self, volume: float) -> None:
        """Store the music volume, keeping other settings intact."""
        data = self._load()
        data[VOLUME_KEY] = float(volume)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


class VolumeSession:
    """A volume change that is heard at once and then kept or undone."""

    def __init__(self, sound: VolumeControl, store: SettingsStore | None = None) -> None:
        self.sound = sound
        self.store = store if store is not None else SettingsStore()
        self.initial_volume = sound.get_volume()
        self.current_volume = self.initial_volume

    def slider_value(self) -> int:
        """The current volume as a slider position from 0 to 100."""
        return round(self.current_volume * SLIDER_MAX)

    def update(self, slider_value: int) -> None:
        """Apply a slider position to the sound straight away."""
        position = min(max(int(slider_value), SLIDER_MIN), SLIDER_MAX)
        self.current_volume = position / SLIDER_MAX
        self.sound.set_volume(self.current_volume)

    def save(self) -> None:
        """Keep the current volume and store it for later runs."""
        self.store.save_volume(self.current_volume)

    def discard(self) -> None:
        """Restore the volume the session started with."""
        self.current_volume = self.initial_volume
        self.sound.set_volume(self.initial_volume)