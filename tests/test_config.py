"""Tests for SpynetSettings configuration."""

import logging

import pytest

from spynet_service.config import SpynetSettings


def test_default_settings(monkeypatch):
    """Settings have sensible defaults."""
    for var in ("PORT", "SESSION_TTL", "SWEEP_INTERVAL", "HISTORY_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    s = SpynetSettings()
    assert s.port == 8675
    assert s.host == "0.0.0.0"
    assert s.session_ttl == 3600000
    assert s.sweep_interval == 60000
    assert s.history_limit == 1000
    assert s.cors_origins == ["*"]
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    """PORT and SESSION_TTL are read from the environment."""
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("SESSION_TTL", "120000")
    s = SpynetSettings()
    assert s.port == 9000
    assert s.session_ttl == 120000


def test_duration_properties():
    """Millisecond settings expose second-based views."""
    s = SpynetSettings(session_ttl=90000, sweep_interval=1500)
    assert s.session_ttl_seconds == 90.0
    assert s.sweep_interval_seconds == 1.5


@pytest.mark.parametrize("field", ["session_ttl", "sweep_interval", "history_limit"])
def test_non_positive_values_rejected(field):
    """Durations and limits must be positive."""
    with pytest.raises(Exception):
        SpynetSettings(**{field: 0})


def test_log_level_is_normalized():
    """Lowercase log levels are accepted and mapped to logging constants."""
    s = SpynetSettings(log_level="debug")
    assert s.log_level == "DEBUG"
    assert s.log_level_value == logging.DEBUG


def test_log_level_rejects_unknown():
    with pytest.raises(Exception):
        SpynetSettings(log_level="chatty")
