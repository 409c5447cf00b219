"""Shared fixtures."""

import pytest

from csscolor.config import get_settings
from csscolor.validators import CssColorMode, CssColorValidator, get_engine, get_validator


@pytest.fixture
def validator() -> CssColorValidator:
    return CssColorValidator(CssColorMode.HEX_LONG)


@pytest.fixture(autouse=True)
def _clear_caches(monkeypatch):
    """Isolate tests from the environment and from cached singletons."""
    monkeypatch.delenv("DEFAULT_MODE", raising=False)
    monkeypatch.delenv("RULES_PATH", raising=False)
    for cached in (get_settings, get_validator, get_engine):
        cached.cache_clear()
    yield
    for cached in (get_settings, get_validator, get_engine):
        cached.cache_clear()
