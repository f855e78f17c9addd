"""Failure message rendering for collection-aware change matchers."""

from __future__ import annotations

from changecollection.models.report import ViolationReport

_LABELS = {
    "missing_in_original": "the original collection should have included:     ",
    "extra_in_original": "the original collection should not have included: ",
    "missing_in_final": "the final collection should have included:        ",
    "extra_in_final": "the final collection should not have included:    ",
}
_BEFORE_LABEL = "the original collection was:                      "
_AFTER_LABEL = "the final collection was:                         "


def _format_values(values: object) -> str:
    if isinstance(values, tuple):
        return repr(list(values))
    return repr(values)


def violation_lines(report: ViolationReport) -> list[str]:
    """One labeled line per non-empty violation category."""
    return [
        f"{_LABELS[name]}{_format_values(values)}"
        for name, values in report.categories()
        if values
    ]


def render_failure(
    base_message: str,
    report: ViolationReport | None,
    actual_before: object,
    actual_after: object,
) -> str:
    """Build the diagnostic for a failed collection change.

    *base_message* is the generic change failure text, empty when the
    generic check passed. *report* is None when no rules were declared, in
    which case the base message is returned unchanged.
    """
    if report is None:
        return base_message

    lines = violation_lines(report)
    lines.append(f"{_BEFORE_LABEL}{actual_before!r}")
    lines.append(f"{_AFTER_LABEL}{actual_after!r}")
    return base_message + "\n" + "\n".join(lines) + "\n"
