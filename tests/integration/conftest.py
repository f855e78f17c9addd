"""Shared fixtures for change-collection integration tests.

Installs the collection-aware ``change`` keyword for every test so the
suite exercises the same path as a project using the pytest plugin, and
restores the previous registry state afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from changecollection import registry


@pytest.fixture(autouse=True)
def installed_change_keyword() -> Iterator[None]:
    was_installed = registry.is_installed()
    registry.install()
    yield
    if not was_installed:
        registry.uninstall()


@pytest.fixture
def is_even():
    """Predicate matching even integers."""

    def _is_even(value: int) -> bool:
        return value % 2 == 0

    return _is_even
