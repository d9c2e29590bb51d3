"""Persistent application settings backed by a JSON file."""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Optional

from .errors import SettingsError
from .utils.jsonio import read_json, write_json

_LOGGER = logging.getLogger(__name__)

HOME_ENV_VAR = "INSTAFILTER_HOME"
SETTINGS_FILENAME = "settings.json"

DEFAULT_SETTINGS: dict[str, Any] = {
    "edit": {
        "default_filter": "sepia_tone",
        "default_intensity": 0.5,
    },
    "library": {
        "directory": str(Path.home() / "Pictures" / "Instafilter"),
        "format": "png",
    },
    "logging": {
        "level": "INFO",
    },
}


def default_settings_path() -> Path:
    """Return the settings file location, honouring ``$INSTAFILTER_HOME``."""

    override = os.environ.get(HOME_ENV_VAR)
    base = Path(override).expanduser() if override else Path.home() / ".instafilter"
    return base / SETTINGS_FILENAME


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class SettingsManager:
    """Dotted-key access to the user's preferences.

    Keys such as ``"edit.default_intensity"`` address nested JSON objects.  The
    manager always starts from :data:`DEFAULT_SETTINGS` so callers can rely on
    every documented key being present, even before the file exists.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path if path is not None else default_settings_path()
        self._data: dict[str, Any] = copy.deepcopy(DEFAULT_SETTINGS)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        """Read the settings file, raising :class:`SettingsError` on bad data.

        A missing file is not an error: the defaults stay in effect.
        """

        if not self._path.exists():
            self._data = copy.deepcopy(DEFAULT_SETTINGS)
            return
        stored = read_json(self._path)
        self._data = _merge(DEFAULT_SETTINGS, stored)

    def load_or_default(self) -> None:
        """Like :meth:`load` but fall back to defaults when the file is unusable."""

        try:
            self.load()
        except SettingsError as exc:
            _LOGGER.warning("Ignoring unreadable settings file: %s", exc)
            self._data = copy.deepcopy(DEFAULT_SETTINGS)

    def save(self) -> None:
        write_json(self._path, self._data)

    def get(self, key: str, default: Any = None) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key: str, value: Any, *, persist: bool = True) -> None:
        """Store *value* under the dotted *key* and optionally write the file."""

        parts = key.split(".")
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value
        if persist:
            self.save()


__all__ = ["DEFAULT_SETTINGS", "SettingsManager", "default_settings_path"]
