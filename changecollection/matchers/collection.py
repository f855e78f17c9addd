"""Collection-aware change matcher.

Extends the generic ``Change`` matcher with ``to_include`` and
``to_exclude`` rules. Without rules it behaves exactly like ``Change``.
With rules, the before and after snapshots are diffed against them and any
violation fails the match.
"""

from __future__ import annotations

from collections.abc import Callable

from changecollection.diff import compute_violations
from changecollection.errors import NegationUnsupported
from changecollection.matchers.change import Change
from changecollection.models.report import ViolationReport
from changecollection.models.rules import Polarity, RuleSet, build_rule
from changecollection.observability.logging import get_logger
from changecollection.report import render_failure

_logger = get_logger("matchers.collection")


class CollectionChange(Change):
    """Change matcher that also checks which items were added or removed."""

    def __init__(
        self,
        receiver: object = None,
        attribute: str | None = None,
        value_fn: Callable[[], object] | None = None,
    ) -> None:
        super().__init__(receiver, attribute, value_fn)
        self._rules = RuleSet()
        self._report: ViolationReport | None = None
        self._parent_matches = False

    # -- builder ---------------------------------------------------------

    def to_include(self, *items: object, predicate: Callable[[object], object] | None = None) -> CollectionChange:
        """Require *items* (or an item satisfying *predicate*) to be added."""
        self._rules.add(Polarity.INCLUDE, build_rule("to_include", items, predicate))
        return self

    def to_exclude(self, *items: object, predicate: Callable[[object], object] | None = None) -> CollectionChange:
        """Require *items* (or every item satisfying *predicate*) to be removed."""
        self._rules.add(Polarity.EXCLUDE, build_rule("to_exclude", items, predicate))
        return self

    @property
    def rules(self) -> RuleSet:
        return self._rules

    @property
    def report(self) -> ViolationReport | None:
        """Violations from the last evaluation, None if no rules were checked."""
        return self._report

    def expects_collection_change(self) -> bool:
        return not self._rules.empty

    # -- evaluation ------------------------------------------------------

    def matches(self, action: object) -> bool:
        self._parent_matches = super().matches(action)
        if not self.expects_collection_change():
            return self._parent_matches

        self._rules.freeze()
        if not self._performed:
            return False

        details = self.change_details
        self._report = compute_violations(
            details.collection_before,
            details.collection_after,
            self._rules.include,
            self._rules.exclude,
        )
        _logger.debug(
            "collection_rules_evaluated",
            target=self.description,
            changed=details.changed,
            include_rules=len(self._rules.include),
            exclude_rules=len(self._rules.exclude),
            **self._report.counts(),
        )
        return self._parent_matches and not self._report.has_violations

    def does_not_match(self, action: object) -> bool:
        if self.expects_collection_change():
            raise NegationUnsupported(self._negation_message())
        return super().does_not_match(action)

    # -- messages --------------------------------------------------------

    def failure_message(self) -> str:
        base = "" if self._parent_matches else super().failure_message()
        if not self.expects_collection_change() or not self._performed:
            return base
        details = self.change_details
        return render_failure(base, self._report, details.collection_before, details.collection_after)

    def failure_message_when_negated(self) -> str:
        if self.expects_collection_change():
            raise NegationUnsupported(self._negation_message())
        return super().failure_message_when_negated()

    def _negation_message(self) -> str:
        return (
            "Matcher does not support negation when `to_include` or `to_exclude` "
            f"rules are declared ({len(self._rules)} declared)"
        )
