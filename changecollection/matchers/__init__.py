"""Change matchers.

Exports:
    Change           -- Generic "value changed" matcher.
    ChangeDetails    -- Before/after capture used by Change.
    CollectionChange -- Change with ``to_include``/``to_exclude`` rules.
    change           -- Keyword resolved through the registry, so it yields a
                        CollectionChange once ``registry.install()`` has run.
    change_with_collection    -- Always builds a CollectionChange.
    change_without_collection -- Always builds a plain Change.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from changecollection.matchers.change import Change, ChangeDetails
from changecollection.matchers.collection import CollectionChange

__all__ = [
    "Change",
    "ChangeDetails",
    "CollectionChange",
    "change",
    "change_with_collection",
    "change_without_collection",
]


def change_with_collection(
    receiver: object = None,
    attribute: str | None = None,
    value_fn: Callable[[], object] | None = None,
) -> CollectionChange:
    return CollectionChange(receiver, attribute, value_fn)


def change_without_collection(
    receiver: object = None,
    attribute: str | None = None,
    value_fn: Callable[[], object] | None = None,
) -> Change:
    return Change(receiver, attribute, value_fn)


def change(
    receiver: object = None,
    attribute: str | None = None,
    value_fn: Callable[[], object] | None = None,
) -> Any:
    """Build whatever matcher is currently registered for ``change``."""
    from changecollection.registry import resolve

    return resolve("change")(receiver, attribute, value_fn)
