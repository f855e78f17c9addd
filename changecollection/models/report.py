"""Result structures produced by the diff engine and the change primitive."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ViolationReport:
    """Everything that is wrong with a collection change, by category.

    missing_in_original -- exclude-rule items (or predicates) absent before
                           the action, so they could not have been removed.
    extra_in_original   -- before-items already matching an include rule.
    missing_in_final    -- include-rule items (or predicates) absent after
                           the action.
    extra_in_final      -- after-items still matching an exclude rule.
    """

    missing_in_original: tuple[object, ...] = ()
    extra_in_original: tuple[object, ...] = ()
    missing_in_final: tuple[object, ...] = ()
    extra_in_final: tuple[object, ...] = ()

    @property
    def has_violations(self) -> bool:
        return any(
            (
                self.missing_in_original,
                self.extra_in_original,
                self.missing_in_final,
                self.extra_in_final,
            )
        )

    def categories(self) -> list[tuple[str, tuple[object, ...]]]:
        """Return ``(name, values)`` pairs in reporting order."""
        return [
            ("missing_in_original", self.missing_in_original),
            ("extra_in_original", self.extra_in_original),
            ("missing_in_final", self.missing_in_final),
            ("extra_in_final", self.extra_in_final),
        ]

    def counts(self) -> dict[str, int]:
        return {name: len(values) for name, values in self.categories()}
