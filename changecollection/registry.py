"""Process-wide matcher keyword registry.

Keywords map to matcher factories. Out of the box ``change`` builds the
generic ``Change`` matcher; ``install()`` rebinds it to ``CollectionChange``
so existing ``change(...)`` call sites gain ``to_include``/``to_exclude``
without losing their plain behaviour. ``change_without_collection`` always
refers to the generic matcher.

Registration is explicit: nothing is rebound at import time. The pytest
plugin calls ``install()`` from ``pytest_configure``.
"""

from __future__ import annotations

from collections.abc import Callable

from changecollection.matchers.change import Change
from changecollection.matchers.collection import CollectionChange
from changecollection.observability.logging import get_logger

_logger = get_logger("registry")

MatcherFactory = Callable[..., object]

_DEFAULTS: dict[str, MatcherFactory] = {
    "change": Change,
    "change_without_collection": Change,
}

_registry: dict[str, MatcherFactory] = dict(_DEFAULTS)
_installed = False


def register(keyword: str, factory: MatcherFactory) -> None:
    """Bind *keyword* to *factory*, replacing any previous binding."""
    _registry[keyword] = factory


def resolve(keyword: str) -> MatcherFactory:
    """Return the factory bound to *keyword*.

    Raises:
        KeyError: nothing is registered under *keyword*.
    """
    try:
        return _registry[keyword]
    except KeyError:
        raise KeyError(f"no matcher registered for keyword {keyword!r}") from None


def is_installed() -> bool:
    return _installed


def install() -> None:
    """Rebind ``change`` to the collection-aware matcher. Idempotent."""
    global _installed
    if _installed:
        return
    register("change", CollectionChange)
    register("change_with_collection", CollectionChange)
    _installed = True
    _logger.info("matcher_installed", keyword="change", matcher=CollectionChange.__name__)


def uninstall() -> None:
    """Restore the default keyword bindings, dropping custom registrations."""
    global _installed
    _registry.clear()
    _registry.update(_DEFAULTS)
    if _installed:
        _installed = False
        _logger.info("matcher_uninstalled", keyword="change", matcher=Change.__name__)
