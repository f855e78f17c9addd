"""Core data structures for change-collection."""

from changecollection.models.config import ChangeCollectionConfig
from changecollection.models.report import ViolationReport
from changecollection.models.rules import (
    LiteralRule,
    Polarity,
    PredicateRule,
    Rule,
    RuleSet,
    build_rule,
)

__all__ = [
    "ChangeCollectionConfig",
    "LiteralRule",
    "Polarity",
    "PredicateRule",
    "Rule",
    "RuleSet",
    "ViolationReport",
    "build_rule",
]
