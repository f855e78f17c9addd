"""Generic "value changed" matcher.

ChangeDetails -- Captures a watched value before and after an action.
Change        -- Matcher built on ChangeDetails with optional ``from_``,
                 ``to`` and ``by`` qualifiers.

The watched value is either the result of a zero-argument callable or an
attribute read from a receiver object. Builtin mutable containers are
shallow-copied, so a list mutated in place by the action still compares
unequal afterwards. Other collections are materialised into a list of their
items; every other value is kept as-is and compared with ``!=``.
"""

from __future__ import annotations

import copy
from collections import deque
from collections.abc import Callable

from changecollection.diff import is_collection
from changecollection.errors import InvalidDeclaration, NegationUnsupported

_UNSET = object()

_COPIED_CONTAINERS = (list, set, dict, bytearray, deque)
_IMMUTABLE_CONTAINERS = (tuple, frozenset, str, bytes)


def _snapshot(value: object) -> object:
    if isinstance(value, _COPIED_CONTAINERS):
        return copy.copy(value)
    return value


def _contents(value: object) -> list[object] | None:
    """Items of a non-builtin collection, None for anything else."""
    if isinstance(value, _COPIED_CONTAINERS + _IMMUTABLE_CONTAINERS) or not is_collection(value):
        return None
    return list(value)  # type: ignore[call-overload]


class ChangeDetails:
    """Evaluates the watched value around an action."""

    def __init__(
        self,
        receiver: object = None,
        attribute: str | None = None,
        value_fn: Callable[[], object] | None = None,
    ) -> None:
        if value_fn is not None and attribute is not None:
            raise InvalidDeclaration(
                "`change` requires either an object and attribute name "
                "(`change(obj, 'attr')`) or a callable (`change(fn)`) but not both."
            )
        if value_fn is None and attribute is None:
            raise InvalidDeclaration(
                "`change` requires either an object and attribute name "
                "(`change(obj, 'attr')`) or a callable (`change(fn)`)."
            )
        self._receiver = receiver
        self._attribute = attribute
        self._value_fn = value_fn
        self.actual_before: object = None
        self.actual_after: object = None
        self.contents_before: list[object] | None = None
        self.contents_after: list[object] | None = None

    @property
    def description(self) -> str:
        if self._attribute is not None:
            owner = self._receiver if isinstance(self._receiver, type) else type(self._receiver)
            return f"`{owner.__name__}.{self._attribute}`"
        return "result"

    def _evaluate(self) -> tuple[object, list[object] | None]:
        if self._value_fn is not None:
            value = self._value_fn()
        else:
            value = getattr(self._receiver, self._attribute)  # type: ignore[arg-type]
        return _snapshot(value), _contents(value)

    def perform_change(self, action: object) -> bool:
        """Run *action* between two snapshots.

        Returns False without evaluating anything when *action* is not
        callable.
        """
        if not callable(action):
            return False
        self.actual_before, self.contents_before = self._evaluate()
        action()
        self.actual_after, self.contents_after = self._evaluate()
        return True

    @property
    def changed(self) -> bool:
        if self.contents_before is not None and self.contents_after is not None:
            return self.contents_before != self.contents_after
        return self.actual_before != self.actual_after

    @property
    def collection_before(self) -> object:
        """The before snapshot as seen by collection rules."""
        return self.actual_before if self.contents_before is None else self.contents_before

    @property
    def collection_after(self) -> object:
        return self.actual_after if self.contents_after is None else self.contents_after

    @property
    def actual_delta(self) -> object:
        return self.actual_after - self.actual_before  # type: ignore[operator]


class Change:
    """Passes when the watched value changed across the action."""

    def __init__(
        self,
        receiver: object = None,
        attribute: str | None = None,
        value_fn: Callable[[], object] | None = None,
    ) -> None:
        if value_fn is None and attribute is None and callable(receiver):
            receiver, value_fn = None, receiver
        self._change_details = ChangeDetails(receiver, attribute, value_fn)
        self._expected_before: object = _UNSET
        self._expected_after: object = _UNSET
        self._expected_delta: object = _UNSET
        self._performed = False

    # -- qualifiers ------------------------------------------------------

    def from_(self, value: object) -> Change:
        self._expected_before = value
        return self

    def to(self, value: object) -> Change:
        self._expected_after = value
        return self

    def by(self, delta: object) -> Change:
        self._expected_delta = delta
        return self

    # -- evaluation ------------------------------------------------------

    @property
    def change_details(self) -> ChangeDetails:
        return self._change_details

    @property
    def description(self) -> str:
        return self._change_details.description

    def _before_matches(self) -> bool:
        return self._expected_before is _UNSET or self._change_details.actual_before == self._expected_before

    def _after_matches(self) -> bool:
        return self._expected_after is _UNSET or self._change_details.actual_after == self._expected_after

    def _delta_matches(self) -> bool:
        return self._change_details.actual_delta == self._expected_delta

    def matches(self, action: object) -> bool:
        self._performed = self._change_details.perform_change(action)
        if not self._performed:
            return False
        if self._expected_delta is not _UNSET:
            return self._before_matches() and self._delta_matches()
        return self._change_details.changed and self._before_matches() and self._after_matches()

    def does_not_match(self, action: object) -> bool:
        if self._expected_after is not _UNSET or self._expected_delta is not _UNSET:
            raise NegationUnsupported(
                "`not_to change(...)` does not support `to` or `by` qualifiers"
            )
        self._performed = self._change_details.perform_change(action)
        if not self._performed:
            return False
        return not self._change_details.changed and self._before_matches()

    # -- messages --------------------------------------------------------

    def failure_message(self) -> str:
        details = self._change_details
        if not self._performed:
            return f"expected {self.description} to have changed, but was not given a callable"
        if not self._before_matches():
            return (
                f"expected {self.description} to have initially been "
                f"{self._expected_before!r}, but was {details.actual_before!r}"
            )
        if self._expected_delta is not _UNSET:
            return (
                f"expected {self.description} to have changed by {self._expected_delta!r}, "
                f"but was changed by {details.actual_delta!r}"
            )
        if not details.changed:
            return f"expected {self.description} to have changed, but is still {details.actual_before!r}"
        if not self._after_matches():
            return (
                f"expected {self.description} to have changed to {self._expected_after!r}, "
                f"but is now {details.actual_after!r}"
            )
        return ""

    def failure_message_when_negated(self) -> str:
        details = self._change_details
        if not self._performed:
            return f"expected {self.description} not to have changed, but was not given a callable"
        if not self._before_matches():
            return (
                f"expected {self.description} to have initially been "
                f"{self._expected_before!r}, but was {details.actual_before!r}"
            )
        return (
            f"expected {self.description} not to have changed, but did change "
            f"from {details.actual_before!r} to {details.actual_after!r}"
        )
