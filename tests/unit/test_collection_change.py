"""Tests for CollectionChange: rule declaration, evaluation and messages."""

from __future__ import annotations

import pytest

from changecollection.errors import InvalidDeclaration, NegationUnsupported
from changecollection.matchers.change import Change
from changecollection.matchers.collection import CollectionChange
from changecollection.models.report import ViolationReport


def _is_even(value: object) -> bool:
    return isinstance(value, int) and value % 2 == 0


def _noop() -> None:
    pass


class _Box:
    def __init__(self, items: list[int]) -> None:
        self.items = items


class TestBuilder:
    def test_builder_methods_chain(self) -> None:
        matcher = CollectionChange(lambda: [])
        assert matcher.to_include(1) is matcher
        assert matcher.to_exclude(2) is matcher

    def test_rules_accumulate(self) -> None:
        matcher = CollectionChange(lambda: []).to_include(1).to_include(predicate=_is_even).to_exclude(3)
        assert len(matcher.rules.include) == 2
        assert len(matcher.rules.exclude) == 1

    def test_items_and_predicate_raise_at_declaration(self) -> None:
        matcher = CollectionChange(lambda: [])
        with pytest.raises(InvalidDeclaration):
            matcher.to_include(1, predicate=_is_even)
        with pytest.raises(InvalidDeclaration):
            matcher.to_exclude(1, predicate=_is_even)
        assert matcher.rules.empty is True

    def test_declaring_after_evaluation_rejected(self) -> None:
        items: list[int] = []
        matcher = CollectionChange(lambda: items).to_include(1)
        matcher.matches(lambda: items.append(1))
        with pytest.raises(InvalidDeclaration):
            matcher.to_include(2)

    def test_is_a_change_matcher(self) -> None:
        assert isinstance(CollectionChange(lambda: []), Change)


class TestWithoutRules:
    def test_behaves_like_change_when_changed(self) -> None:
        items: list[int] = []
        matcher = CollectionChange(lambda: items)
        assert matcher.matches(lambda: items.append(1)) is True
        assert matcher.report is None

    def test_failure_message_is_plain_change_message(self) -> None:
        items: list[int] = [1]
        matcher = CollectionChange(lambda: items)
        assert matcher.matches(_noop) is False
        assert matcher.failure_message() == "expected result to have changed, but is still [1]"

    def test_negation_supported(self) -> None:
        matcher = CollectionChange(lambda: [1])
        assert matcher.does_not_match(_noop) is True

    def test_scalar_values_supported(self) -> None:
        box = _Box([])
        matcher = CollectionChange(lambda: len(box.items)).by(1)
        assert matcher.matches(lambda: box.items.append(1)) is True


class _Bag:
    def __init__(self, *items: int) -> None:
        self._items = list(items)

    def add(self, item: int) -> None:
        self._items.append(item)

    def __iter__(self):
        return iter(self._items)


class TestEvaluation:
    def test_include_added_item_passes(self) -> None:
        items: list[int] = []
        matcher = CollectionChange(lambda: items).to_include(1)
        assert matcher.matches(lambda: items.append(1)) is True
        assert matcher.report == ViolationReport()

    def test_include_already_present_fails(self) -> None:
        items = [1]
        matcher = CollectionChange(lambda: items).to_include(1)
        assert matcher.matches(_noop) is False
        assert matcher.report is not None
        assert matcher.report.extra_in_original == (1,)

    def test_unchanged_value_fails(self) -> None:
        items = [2]
        matcher = CollectionChange(lambda: items).to_include(predicate=lambda v: v > 5)
        assert matcher.matches(lambda: items.__setitem__(0, 2)) is False

    def test_rules_fail_even_if_value_changed(self) -> None:
        items: list[int] = []
        matcher = CollectionChange(lambda: items).to_include(1, 2)
        assert matcher.matches(lambda: items.append(1)) is False
        assert matcher.report is not None
        assert matcher.report.missing_in_final == (2,)

    def test_attribute_form(self) -> None:
        box = _Box([1, 2])
        matcher = CollectionChange(box, "items").to_exclude(2)
        assert matcher.matches(lambda: box.items.remove(2)) is True

    def test_scalar_snapshot_skips_collection_checks(self) -> None:
        box = _Box([])
        matcher = CollectionChange(lambda: len(box.items)).to_include(99)
        assert matcher.matches(lambda: box.items.append(1)) is True
        assert matcher.report == ViolationReport()

    def test_non_callable_action_fails(self) -> None:
        matcher = CollectionChange(lambda: []).to_include(1)
        assert matcher.matches("not callable") is False
        assert matcher.report is None
        assert matcher.failure_message() == "expected result to have changed, but was not given a callable"


class TestFailureMessage:
    def test_rule_failure_without_base_failure(self) -> None:
        items: list[int] = []
        matcher = CollectionChange(lambda: items).to_include(1, 2)
        matcher.matches(lambda: items.append(1))
        assert matcher.failure_message() == (
            "\n"
            "the final collection should have included:        [2]\n"
            "the original collection was:                      []\n"
            "the final collection was:                         [1]\n"
        )

    def test_base_failure_and_rule_failure(self) -> None:
        items: list[int] = []
        matcher = CollectionChange(lambda: items).to_include(1)
        matcher.matches(_noop)
        message = matcher.failure_message()
        assert message.startswith("expected result to have changed, but is still []\n")
        assert "the final collection should have included:        [1]" in message


class TestNegationWithRules:
    def test_does_not_match_raises(self) -> None:
        matcher = CollectionChange(lambda: []).to_include(1)
        with pytest.raises(NegationUnsupported, match="does not support negation"):
            matcher.does_not_match(_noop)

    def test_negated_message_raises(self) -> None:
        matcher = CollectionChange(lambda: []).to_exclude(predicate=_is_even)
        with pytest.raises(NegationUnsupported):
            matcher.failure_message_when_negated()

    def test_negated_message_without_rules(self) -> None:
        items: list[int] = []
        matcher = CollectionChange(lambda: items)
        matcher.does_not_match(lambda: items.append(1))
        assert matcher.failure_message_when_negated() == (
            "expected result not to have changed, but did change from [] to [1]"
        )


class TestCustomCollections:
    def test_no_op_on_custom_collection_fails_without_rules(self) -> None:
        bag = _Bag(1)
        assert CollectionChange(lambda: bag).matches(_noop) is False

    def test_in_place_add_satisfies_include(self) -> None:
        bag = _Bag(1)
        matcher = CollectionChange(lambda: bag).to_include(2)
        assert matcher.matches(lambda: bag.add(2)) is True
        assert matcher.report == ViolationReport()

    def test_message_dumps_materialised_items(self) -> None:
        bag = _Bag(1)
        matcher = CollectionChange(lambda: bag).to_include(1)
        matcher.matches(lambda: bag.add(3))
        assert "the original collection was:                      [1]" in matcher.failure_message()
        assert "the final collection was:                         [1, 3]" in matcher.failure_message()
