"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "warning"
    format: str = "json"  # "json" or "console"


@dataclass
class PluginConfig:
    """pytest plugin configuration."""

    # Rebind the ``change`` keyword to the collection-aware matcher on startup.
    autoregister: bool = True


@dataclass
class ChangeCollectionConfig:
    """Top-level change-collection configuration."""

    log: LogConfig = field(default_factory=LogConfig)
    plugin: PluginConfig = field(default_factory=PluginConfig)
