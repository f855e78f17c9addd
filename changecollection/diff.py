"""Rule evaluation over before/after collection snapshots.

``compute_violations`` is a pure function: it never mutates the snapshots or
the rule lists, and the same inputs always produce the same report.

Snapshots are treated as unordered multisets. Membership uses ``==`` so
unhashable items (lists, dicts) work as collection elements and as literal
rule values.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from changecollection.models.report import ViolationReport
from changecollection.models.rules import LiteralRule, PredicateRule, Rule

# Iterable types that are values, not collections of values.
_SCALAR_ITERABLES = (str, bytes, bytearray, Mapping)


def is_collection(value: object) -> bool:
    """Return True if *value* should be inspected as a collection snapshot."""
    return isinstance(value, Iterable) and not isinstance(value, _SCALAR_ITERABLES)


def satisfies_any(value: object, rules: Sequence[Rule]) -> bool:
    """Return True if *value* matches at least one rule in *rules*."""
    return any(rule.matches(value) for rule in rules)


def _literal_items(rules: Sequence[Rule]) -> list[object]:
    items: list[object] = []
    for rule in rules:
        if isinstance(rule, LiteralRule):
            items.extend(rule.items)
    return items


def _missing(snapshot: list[object], rules: Sequence[Rule]) -> tuple[object, ...]:
    # Literal values keep their duplicates; predicates are reported as themselves.
    missing: list[object] = [item for item in _literal_items(rules) if item not in snapshot]
    for rule in rules:
        if isinstance(rule, PredicateRule) and not any(rule.matches(item) for item in snapshot):
            missing.append(rule)
    return tuple(missing)


def _already_selected(item: object, selected: list[object]) -> bool:
    # Same type and equal: 1, True and 1.0 stay distinct entries.
    return any(type(seen) is type(item) and seen == item for seen in selected)


def _selected(snapshot: list[object], rules: Sequence[Rule]) -> tuple[object, ...]:
    selected: list[object] = []
    for item in snapshot:
        if not _already_selected(item, selected) and satisfies_any(item, rules):
            selected.append(item)
    return tuple(selected)


def compute_violations(
    before: object,
    after: object,
    include_rules: Sequence[Rule],
    exclude_rules: Sequence[Rule],
) -> ViolationReport:
    """Compare two snapshots against include and exclude rules.

    A snapshot that is not a collection contributes no violations for its
    side of the comparison.
    """
    missing_in_original: tuple[object, ...] = ()
    extra_in_original: tuple[object, ...] = ()
    missing_in_final: tuple[object, ...] = ()
    extra_in_final: tuple[object, ...] = ()

    if is_collection(before):
        original = list(before)  # type: ignore[call-overload]
        missing_in_original = _missing(original, exclude_rules)
        extra_in_original = _selected(original, include_rules)

    if is_collection(after):
        final = list(after)  # type: ignore[call-overload]
        missing_in_final = _missing(final, include_rules)
        extra_in_final = _selected(final, exclude_rules)

    return ViolationReport(
        missing_in_original=missing_in_original,
        extra_in_original=extra_in_original,
        missing_in_final=missing_in_final,
        extra_in_final=extra_in_final,
    )
