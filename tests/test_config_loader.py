"""
Tests for the TOML runtime configuration.
"""

import logging

from src.memorize.app.state import Settings
from src.memorize.domain import BUILTIN_THEMES, DEFAULT_EMOJIS
from src.memorize.services import config_loader

_TOML = """
title = "Animal Pairs"

[settings]
pairs = 6
bonus_time_limit = 4.5
theme = "sea"

[themes.sea]
emojis = ["🐙", "🦀", "🐠"]

[pages]
how_to_play = "Flip two cards."
"""


class TestDefaults:
    def test_no_config(self):
        assert config_loader.get_app_title() == "Memorize!"
        assert config_loader.load_default_settings() == Settings()
        assert config_loader.get_how_to_play_text("x") == "x"
        assert config_loader.get_theme_names() == list(BUILTIN_THEMES)

    def test_unknown_theme_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert config_loader.get_theme_emojis("nope") == DEFAULT_EMOJIS
        assert "nope" in caplog.text


class TestTomlConfig:
    def test_full_document(self):
        assert config_loader.set_runtime_toml_bytes(_TOML.encode("utf-8")) is True

        assert config_loader.get_app_title() == "Animal Pairs"
        assert config_loader.get_how_to_play_text() == "Flip two cards."
        assert config_loader.load_default_settings() == Settings(
            pair_count=6, bonus_time_limit=4.5, theme="sea"
        )
        assert config_loader.get_theme_names()[-1] == "sea"
        assert config_loader.get_theme_emojis("sea") == ("🐙", "🦀", "🐠")

    def test_invalid_values_fall_back(self, caplog):
        config_loader.set_runtime_config(
            {
                "settings": {"pairs": -1, "bonus_time_limit": "long", "theme": ""},
                "themes": {"broken": {"emojis": []}},
            }
        )

        assert config_loader.load_default_settings() == Settings()
        with caplog.at_level(logging.WARNING):
            assert "broken" not in config_loader.get_theme_names()
        assert "broken" in caplog.text

    def test_bool_is_not_a_pair_count(self):
        config_loader.set_runtime_config({"settings": {"pairs": True}})
        assert config_loader.load_default_settings_values() == {}

    def test_broken_toml(self, caplog):
        config_loader.set_runtime_config({"title": "old"})
        with caplog.at_level(logging.WARNING):
            assert config_loader.set_runtime_toml_bytes(b"title = ") is False
        assert config_loader.get_app_title() == "Memorize!"
        assert caplog.records


class TestConfigFile:
    def test_load_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "memorize.toml"
        path.write_text(_TOML, encoding="utf-8")
        monkeypatch.setenv(config_loader.CONFIG_ENV_VAR, str(path))

        assert config_loader.load_config_from_env() is True
        assert config_loader.get_app_title() == "Animal Pairs"

    def test_env_not_set(self, monkeypatch):
        monkeypatch.delenv(config_loader.CONFIG_ENV_VAR, raising=False)
        assert config_loader.load_config_from_env() is False

    def test_missing_file(self, tmp_path):
        assert config_loader.load_config_file(tmp_path / "missing.toml") is False
