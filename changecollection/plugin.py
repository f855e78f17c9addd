"""pytest plugin: installs the collection-aware ``change`` keyword.

Registered under the ``pytest11`` entry point. Set
``CHANGECOLLECTION_AUTOREGISTER=false`` to keep the plain ``change`` matcher.
"""

from __future__ import annotations

import pytest
import structlog

from changecollection import registry
from changecollection.config import load_config
from changecollection.observability.logging import setup_logging


def pytest_configure(config: pytest.Config) -> None:
    settings = load_config()
    # Leave structlog alone if the test-suite already configured it.
    if not structlog.is_configured():
        setup_logging(settings.log.level, settings.log.format)
    if settings.plugin.autoregister:
        registry.install()


def pytest_unconfigure(config: pytest.Config) -> None:
    registry.uninstall()
