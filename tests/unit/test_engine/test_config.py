"""
Unit tests for GameConfig.
"""

import json

import pytest

from engine.config import GameConfig
from engine.error_handler import ConfigError
from settings import WINDOW_HEIGHT, WINDOW_WIDTH


@pytest.fixture
def config(tmp_path):
    return GameConfig(tmp_path / "settings.json")


class TestGameConfig:

    def test_defaults(self, config):
        assert config.get_resolution() == (WINDOW_WIDTH, WINDOW_HEIGHT)
        assert config.fullscreen is False
        assert config.sound_enabled is True
        assert config.telemetry_enabled is False
        assert config.rng_seed is None

    def test_missing_file_keeps_defaults(self, config):
        assert config.load() is False
        assert config.get_resolution() == (WINDOW_WIDTH, WINDOW_HEIGHT)

    def test_save_and_load(self, config, tmp_path):
        config.width, config.height = 1280, 720
        config.sound_enabled = False
        config.rng_seed = 42
        assert config.save() is True

        reloaded = GameConfig(tmp_path / "settings.json")
        assert reloaded.load() is True
        assert reloaded.get_resolution() == (1280, 720)
        assert reloaded.sound_enabled is False
        assert reloaded.rng_seed == 42

    def test_partial_file_fills_in_defaults(self, config):
        config.path.write_text(json.dumps({"fullscreen": True}), encoding="utf-8")
        assert config.load() is True
        assert config.fullscreen is True
        assert config.get_resolution() == (WINDOW_WIDTH, WINDOW_HEIGHT)

    @pytest.mark.parametrize("payload", [
        "{broken",
        "[]",
        '{"width": -5}',
        '{"height": "tall"}',
        '{"rng_seed": "abc"}',
    ])
    def test_broken_file_restores_defaults(self, config, payload):
        config.width = 10
        config.path.write_text(payload, encoding="utf-8")
        assert config.load() is False
        assert config.get_resolution() == (WINDOW_WIDTH, WINDOW_HEIGHT)
        assert config.rng_seed is None

    def test_from_dict_validates(self, config):
        with pytest.raises(ConfigError):
            config.from_dict({"width": 0, "height": 600})
        with pytest.raises(ConfigError):
            config.from_dict("not a dict")

    def test_config_error_carries_user_message(self):
        err = ConfigError("bad width", user_message="Settings file is damaged")
        assert str(err) == "bad width"
        assert err.user_message == "Settings file is damaged"
