"""Tests for csscolor.config and the settings-backed validator."""

import pytest

from csscolor.config import Settings, get_settings
from csscolor.errors import InvalidArgumentError
from csscolor.validators import CssColorMode, get_validator


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.DEFAULT_MODE == "hex_long"
        assert settings.RULES_PATH == ""
        assert settings.DEBUG is False
        assert settings.LOG_LEVEL == "info"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_MODE", "named_colors")
        assert get_settings().DEFAULT_MODE == "named_colors"


class TestGetValidator:
    def test_uses_configured_mode(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_MODE", "hex_short")
        assert get_validator().default_mode is CssColorMode.HEX_SHORT

    def test_is_cached(self):
        assert get_validator() is get_validator()

    def test_bad_configured_mode(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_MODE", "rgb")
        with pytest.raises(InvalidArgumentError, match='"defaultMode"'):
            get_validator()
