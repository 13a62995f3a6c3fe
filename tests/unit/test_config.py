"""Configuration tests."""

import pytest

from chimprompt.core.config import Settings


def test_settings_defaults(settings):
    """Test default settings load correctly."""
    assert settings.reset_delay_seconds == 5.0
    assert settings.max_prompt_length == 10_000
    assert settings.lowercase_answers is True
    assert settings.log_level == "DEBUG"
    assert settings.metrics_enabled is True


def test_settings_from_environment(monkeypatch):
    """Environment variables use the CHIM_ prefix."""
    monkeypatch.setenv("CHIM_RESET_DELAY_SECONDS", "2.5")
    monkeypatch.setenv("CHIM_JSON_LOGS", "true")

    settings = Settings()

    assert settings.reset_delay_seconds == 2.5
    assert settings.json_logs is True


def test_settings_validation():
    """Test settings validation."""
    assert Settings(reset_delay_seconds=1.0).reset_delay_seconds == 1.0

    # Delay must be positive
    with pytest.raises(Exception):
        Settings(reset_delay_seconds=0)

    with pytest.raises(Exception):
        Settings(max_prompt_length=-1)
