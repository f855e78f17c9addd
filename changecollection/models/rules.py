"""Rule declarations accumulated by collection-aware matchers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum

from changecollection.errors import InvalidDeclaration


class Polarity(StrEnum):
    """Whether a rule describes items to add or items to remove."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


@dataclass(frozen=True)
class LiteralRule:
    """Explicit values declared in a single ``to_include``/``to_exclude`` call."""

    items: tuple[object, ...]

    def matches(self, value: object) -> bool:
        return value in self.items


@dataclass(frozen=True, eq=False)
class PredicateRule:
    """A one-argument predicate declared with ``predicate=``.

    Compared by identity: the rule object itself is reported as the
    violation marker when no element satisfies it.
    """

    fn: Callable[[object], object]

    def matches(self, value: object) -> bool:
        return bool(self.fn(value))

    def __repr__(self) -> str:
        name = getattr(self.fn, "__qualname__", None) or repr(self.fn)
        return f"<predicate {name}>"


Rule = LiteralRule | PredicateRule


def build_rule(method: str, items: tuple[object, ...], predicate: Callable[[object], object] | None) -> Rule:
    """Turn the arguments of one builder call into a single Rule.

    Raises:
        InvalidDeclaration: both literal values and a predicate were given,
            or neither was, or the predicate is not callable.
    """
    if predicate is not None and items:
        raise InvalidDeclaration(
            f"`{method}` requires either objects (`{method}(obj1, obj2, ...)`) "
            f"or a predicate (`{method}(predicate=fn)`) but not both."
        )
    if predicate is not None:
        if not callable(predicate):
            raise InvalidDeclaration(f"`{method}` predicate must be callable, got {predicate!r}")
        return PredicateRule(fn=predicate)
    if not items:
        raise InvalidDeclaration(
            f"`{method}` requires at least one object or a predicate."
        )
    return LiteralRule(items=items)


@dataclass
class RuleSet:
    """Append-only include and exclude rule lists owned by one matcher.

    Frozen once evaluation begins; later declarations raise
    ``InvalidDeclaration``.
    """

    include: list[Rule] = field(default_factory=list)
    exclude: list[Rule] = field(default_factory=list)
    frozen: bool = False

    def add(self, polarity: Polarity, rule: Rule) -> None:
        if self.frozen:
            raise InvalidDeclaration(
                f"cannot add {polarity} rules after the matcher has been evaluated"
            )
        if polarity is Polarity.INCLUDE:
            self.include.append(rule)
        else:
            self.exclude.append(rule)

    def freeze(self) -> None:
        self.frozen = True

    @property
    def empty(self) -> bool:
        return not self.include and not self.exclude

    def __len__(self) -> int:
        return len(self.include) + len(self.exclude)
