"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pennywise.configuration import PennywiseSettings


def test_environment_overrides_defaults(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("PENNYWISE_CHAT_REPLY_DELAY_SECONDS", "0")
    monkeypatch.setenv("PENNYWISE_LEGACY_LAST_MONTH_ESTIMATE", "true")
    monkeypatch.setenv("PENNYWISE_DATA_DIRECTORY", str(tmp_path / "state"))

    settings = PennywiseSettings()

    assert settings.chat_reply_delay_seconds == 0
    assert settings.legacy_last_month_estimate is True
    assert (tmp_path / "state").is_dir()
    assert settings.storage_path == (tmp_path / "state" / "preferences.json").resolve()


def test_port_must_be_in_range() -> None:
    with pytest.raises(ValidationError):
        PennywiseSettings(interface_port=70000)
