"""
Tests for settings parsing and the logging preset.
"""

import logging

import pytest

from config import app_config, logging_config
from smarthome.core.exceptions import ConfigurationError


class TestSettings:
    @pytest.mark.parametrize("raw,expected", [
        ("true", True), ("1", True), ("YES", True), ("on", True),
        ("false", False), ("0", False), ("", False),
    ])
    def test_flag_parsing(self, monkeypatch, raw, expected):
        monkeypatch.setenv("SOME_FLAG", raw)
        assert app_config._flag("SOME_FLAG") is expected

    def test_flag_default(self, monkeypatch):
        monkeypatch.delenv("SOME_FLAG", raising=False)
        assert app_config._flag("SOME_FLAG") is False
        assert app_config._flag("SOME_FLAG", "true") is True


class TestLoggingPreset:
    def test_unknown_level_rejected(self, monkeypatch):
        monkeypatch.setattr(app_config.settings, "LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigurationError):
            logging_config.configure()

    def test_installs_rich_handler(self, monkeypatch):
        from rich.logging import RichHandler

        root = logging.getLogger()
        saved, saved_level = root.handlers[:], root.level
        root.handlers = []
        monkeypatch.setattr(app_config.settings, "LOG_LEVEL", "DEBUG")
        try:
            logging_config.configure()
            assert any(isinstance(h, RichHandler) for h in root.handlers)
            assert root.level == logging.DEBUG
        finally:
            root.handlers = saved
            root.setLevel(saved_level)
