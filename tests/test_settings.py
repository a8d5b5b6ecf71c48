"""Tests for settings defaults, normalisation and JSON round-trip."""

from __future__ import annotations

import json

import pytest

from keeptime.settings import (
    Settings, load_settings, save_settings, MIN_TICK_INTERVAL_MS,
)


@pytest.fixture
def settings_path(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr("keeptime.settings.SETTINGS_PATH", path)
    return path


class TestSettingsDefaults:
    def test_timer_ids(self):
        assert Settings().timer_ids == ["default"]

    def test_stopwatch_defaults(self):
        s = Settings()
        assert s.initial_value == 0
        assert s.persist is True
        assert s.tick_interval_ms == 1000

    def test_log_level(self):
        assert Settings().log_level == "WARNING"

    def test_window_defaults(self):
        s = Settings()
        assert s.window_x is None
        assert s.window_y is None
        assert s.always_on_top is False


class TestSettingsNormalisation:
    def test_negative_initial_value_clamped(self):
        assert Settings(initial_value=-10).initial_value == 0

    def test_tiny_tick_interval_clamped(self):
        assert Settings(tick_interval_ms=5).tick_interval_ms == MIN_TICK_INTERVAL_MS

    def test_blank_and_duplicate_ids_dropped(self):
        s = Settings(timer_ids=["work", " ", "work", "tea "])
        assert s.timer_ids == ["work", "tea"]

    def test_empty_ids_fall_back_to_default(self):
        assert Settings(timer_ids=[]).timer_ids == ["default"]

    def test_single_string_id(self):
        assert Settings(timer_ids="work").timer_ids == ["work"]


class TestSettingsPersistence:
    def test_round_trip(self, settings_path):
        original = Settings(
            timer_ids=["cooking", "workout"],
            initial_value=30,
            persist=False,
            window_x=100, window_y=200,
            always_on_top=True,
        )
        save_settings(original)
        loaded = load_settings()
        assert loaded == original

    def test_missing_file_gives_defaults(self, settings_path):
        assert load_settings() == Settings()

    def test_corrupt_file_gives_defaults(self, settings_path):
        settings_path.write_text("{not json", encoding="utf-8")
        assert load_settings() == Settings()

    def test_unknown_keys_ignored(self, settings_path):
        settings_path.write_text(
            json.dumps({"timer_ids": ["a"], "theme": "neon"}), encoding="utf-8",
        )
        loaded = load_settings()
        assert loaded.timer_ids == ["a"]

    def test_save_creates_directory(self, tmp_path, monkeypatch):
        path = tmp_path / "nested" / "settings.json"
        monkeypatch.setattr("keeptime.settings.SETTINGS_PATH", path)
        save_settings(Settings())
        assert path.exists()
