from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from instafilter.errors import SettingsError
from instafilter.settings import DEFAULT_SETTINGS, SettingsManager, default_settings_path
from instafilter.utils.logging import get_logger, set_log_level


def test_defaults_without_file(tmp_path: Path) -> None:
    settings = SettingsManager(tmp_path / "settings.json")
    settings.load()

    assert settings.get("edit.default_filter") == "sepia_tone"
    assert settings.get("edit.default_intensity") == 0.5
    assert settings.get("library.format") == "png"
    assert settings.get("missing.key", "fallback") == "fallback"


def test_stored_values_are_merged_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"edit": {"default_intensity": 0.8}}), encoding="utf-8")
    settings = SettingsManager(path)

    settings.load()

    assert settings.get("edit.default_intensity") == 0.8
    assert settings.get("edit.default_filter") == "sepia_tone"


def test_set_persists_atomically(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "settings.json"
    settings = SettingsManager(path)

    settings.set("edit.default_filter", "vignette")

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["edit"]["default_filter"] == "vignette"
    assert not path.with_suffix(".json.tmp").exists()

    reloaded = SettingsManager(path)
    reloaded.load()
    assert reloaded.get("edit.default_filter") == "vignette"


def test_invalid_json_raises_settings_error(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SettingsError):
        SettingsManager(path).load()


def test_load_or_default_recovers_from_bad_file(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    settings = SettingsManager(path)

    settings.load_or_default()

    assert settings.get("logging.level") == DEFAULT_SETTINGS["logging"]["level"]


def test_home_override(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("INSTAFILTER_HOME", str(tmp_path))

    assert default_settings_path() == tmp_path / "settings.json"


def test_set_log_level_accepts_names() -> None:
    logger = get_logger()
    previous = logger.level
    try:
        assert set_log_level("debug") == logging.DEBUG
        assert logger.level == logging.DEBUG
        assert set_log_level("nonsense") == logging.INFO
    finally:
        logger.setLevel(previous)
