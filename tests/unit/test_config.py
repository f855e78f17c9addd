"""Tests for environment configuration loading."""

from __future__ import annotations

import pytest

from changecollection.config import load_config
from changecollection.models.config import ChangeCollectionConfig


class TestLoadConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CHANGECOLLECTION_LOG_LEVEL", raising=False)
        monkeypatch.delenv("CHANGECOLLECTION_AUTOREGISTER", raising=False)
        monkeypatch.delenv("CHANGECOLLECTION_LOG_FORMAT", raising=False)
        assert load_config() == ChangeCollectionConfig()

    def test_log_level_normalised(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHANGECOLLECTION_LOG_LEVEL", "DEBUG")
        assert load_config().log.level == "debug"

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHANGECOLLECTION_LOG_LEVEL", "verbose")
        with pytest.raises(ValueError, match="Invalid log level"):
            load_config()

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("false", False), ("0", False), ("no", False), ("true", True), ("1", True), ("YES", True)],
    )
    def test_autoregister(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
        monkeypatch.setenv("CHANGECOLLECTION_AUTOREGISTER", raw)
        assert load_config().plugin.autoregister is expected

    def test_log_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHANGECOLLECTION_LOG_FORMAT", "Console")
        assert load_config().log.format == "console"

    def test_invalid_log_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHANGECOLLECTION_LOG_FORMAT", "xml")
        with pytest.raises(ValueError, match="Invalid log format"):
            load_config()
