"""Tests for configuration loading."""

import json
import logging

import pytest

from luachflow.config import CONFIG_ENV_VAR, AppConfig, get_app_config, load_config


class TestAppConfig:
    """Nested lookups and merging."""

    def test_get_nested(self):
        cfg = AppConfig({"calendar": {"in_israel": True}})
        assert cfg.get("calendar", "in_israel") is True
        assert cfg.get("calendar", "missing", default="x") == "x"
        assert cfg.get("calendar", "in_israel", "deeper", default=None) is None

    def test_merge_is_recursive(self):
        cfg = AppConfig({"calendar": {"in_israel": False, "use_modern_holidays": False}})
        cfg.merge({"calendar": {"in_israel": True}, "extra": {"kept": 1}})
        assert cfg.data == {
            "calendar": {"in_israel": True, "use_modern_holidays": False},
            "extra": {"kept": 1},
        }


class TestLoadConfig:
    """Packaged defaults and user overrides."""

    def test_defaults(self, default_config):
        assert default_config.get("calendar", "in_israel") is False
        assert default_config.get("calendar", "use_modern_holidays") is False
        assert default_config.get("logging", "level") == "WARNING"
        assert default_config.get("logging", "file") is None
        assert default_config.get("tefila", "tachanun_recited_pesach_sheni") is False

    def test_user_file(self, user_config_file):
        path = user_config_file({"calendar": {"in_israel": True}})
        cfg = load_config(path)
        assert cfg.get("calendar", "in_israel") is True
        assert cfg.get("calendar", "use_modern_holidays") is False

    def test_missing_user_file(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="luachflow"):
            cfg = load_config(tmp_path / "nope.json")
        assert cfg.get("calendar", "in_israel") is False
        assert "not found" in caplog.text

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_config(path)

    def test_environment_variable(self, user_config_file, monkeypatch):
        path = user_config_file({"calendar": {"use_modern_holidays": True}})
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert get_app_config().get("calendar", "use_modern_holidays") is True

    def test_without_environment_variable(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert get_app_config().data == load_config().data
