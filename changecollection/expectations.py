"""``expect(action).to(matcher)`` glue between matchers and pytest.

A failed expectation raises ``ChangeAssertionFailed`` with the matcher's
failure message. Frames from this module are hidden from pytest tracebacks.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from changecollection.errors import ChangeAssertionFailed


class ChangeMatcher(Protocol):
    """What an expectation needs from a matcher."""

    def matches(self, action: object) -> bool: ...

    def does_not_match(self, action: object) -> bool: ...

    def failure_message(self) -> str: ...

    def failure_message_when_negated(self) -> str: ...


class ActionExpectation:
    """Expectation about the effect of running an action."""

    def __init__(self, action: Callable[[], object]) -> None:
        self._action = action

    def to(self, matcher: ChangeMatcher, message: str | None = None) -> None:
        __tracebackhide__ = True
        if not matcher.matches(self._action):
            raise ChangeAssertionFailed(message or matcher.failure_message())

    def not_to(self, matcher: ChangeMatcher, message: str | None = None) -> None:
        __tracebackhide__ = True
        if not matcher.does_not_match(self._action):
            raise ChangeAssertionFailed(message or matcher.failure_message_when_negated())

    to_not = not_to


def expect(action: Callable[[], object]) -> ActionExpectation:
    """Start an expectation about what *action* changes."""
    return ActionExpectation(action)
