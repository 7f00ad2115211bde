# Area: Shared Tests
"""Tests for settings loading and validation."""

import json
import logging

import pytest

from arena_sync._runner_config import (
    ENV_FALLBACKS,
    ENV_MAPPINGS,
    INCOMING_EVENT_TYPES,
    ArenaSettings,
    is_incoming_event,
    load_settings,
    validate_settings,
)
from arena_sync.errors import ConfigurationError, InvalidPositionError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in [*ENV_MAPPINGS, *ENV_FALLBACKS]:
        monkeypatch.delenv(key, raising=False)


class TestIncomingEventTypes:
    """Tests for INCOMING_EVENT_TYPES."""

    def test_all_session_events_present(self):
        assert INCOMING_EVENT_TYPES == {
            "joinGame",
            "playerStateChange",
            "playerCollideWithCollectible",
            "disconnect",
        }

    def test_is_incoming_event(self):
        assert is_incoming_event("joinGame") is True
        assert is_incoming_event("scored") is False


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults(self):
        settings = load_settings()
        assert settings.port == 3000
        assert settings.collectible_value == 1
        assert settings.logging_level == logging.INFO

    def test_file_values(self, tmp_path):
        path = tmp_path / "arena.json"
        path.write_text(json.dumps({
            "port": 8765,
            "collectible_value": 5,
            "play_field": {"min_x": 5, "min_y": 50, "width": 630, "height": 425},
            "collectible_sprite": {"srcs": ["a.png", "b.png"], "width": 20, "height": 20},
        }))

        settings = load_settings(str(path))

        assert settings.port == 8765
        assert settings.collectible_value == 5
        assert settings.play_field.max_x == 635
        assert settings.collectible_sprite.count == 2

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "arena.json"
        path.write_text(json.dumps({"port": 8765}))
        monkeypatch.setenv("ARENA_PORT", "9000")
        monkeypatch.setenv("ARENA_LOG_LEVEL", "debug")

        settings = load_settings(str(path))

        assert settings.port == 9000
        assert settings.logging_level == logging.DEBUG

    def test_port_fallback(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert load_settings().port == 8080

    def test_arena_port_wins_over_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("ARENA_PORT", "9000")
        assert load_settings().port == 9000

    def test_overrides_win_and_none_is_ignored(self, monkeypatch):
        monkeypatch.setenv("ARENA_PORT", "9000")
        settings = load_settings(overrides={"port": 4000, "host": None})
        assert settings.port == 4000
        assert settings.host == "0.0.0.0"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_settings(str(tmp_path / "nope.json"))

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{oops")
        with pytest.raises(ConfigurationError):
            load_settings(str(path))

    def test_validation_errors_are_collected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(overrides={"port": 0, "collectible_value": 0})
        errors = exc_info.value.validation_errors
        assert any(e.startswith("port") for e in errors)
        assert any(e.startswith("collectible_value") for e in errors)

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ConfigurationError):
            load_settings(overrides={"log_level": "LOUD"})


class TestValidateSettings:
    """Tests for startup play-area validation."""

    def test_default_settings_are_valid(self):
        validate_settings(ArenaSettings())

    def test_sprite_too_large_is_fatal(self):
        settings = ArenaSettings.model_validate({
            "play_field": {"width": 10, "height": 10},
            "collectible_sprite": {"srcs": ["a.png"], "width": 20, "height": 20},
        })
        with pytest.raises(InvalidPositionError):
            validate_settings(settings)
