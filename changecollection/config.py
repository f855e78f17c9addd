"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from changecollection.models.config import (
    ChangeCollectionConfig,
    LogConfig,
    PluginConfig,
)


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"CHANGECOLLECTION_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _validate_choice(name: str, value: str, valid: set[str]) -> str:
    if value.lower() not in valid:
        raise ValueError(f"Invalid {name}: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> ChangeCollectionConfig:
    """Load configuration from CHANGECOLLECTION_* environment variables."""
    return ChangeCollectionConfig(
        log=LogConfig(
            level=_validate_choice("log level", _env("LOG_LEVEL", "warning"), {"debug", "info", "warning", "error"}),
            format=_validate_choice("log format", _env("LOG_FORMAT", "json"), {"json", "console"}),
        ),
        plugin=PluginConfig(
            autoregister=_env_bool("AUTOREGISTER", True),
        ),
    )
