"""Label filter deciding whether an issue is added to the project."""

from __future__ import annotations

from enum import Enum
from typing import AbstractSet, Sequence


class LabelOperator(str, Enum):
    """How the `labeled` input is matched against an issue's labels."""

    AND = "and"
    NOT = "not"
    OR = "or"

    @classmethod
    def parse(cls, value: str | None) -> LabelOperator:
        """Parse an operator input. Anything but `and`/`not` means `or`."""
        normalized = (value or "").strip().lower()
        if normalized == cls.AND.value:
            return cls.AND
        if normalized == cls.NOT.value:
            return cls.NOT
        return cls.OR


def parse_labels(raw: str | None) -> tuple[str, ...]:
    """Split the comma-separated `labeled` input.

    Entries are trimmed and lower-cased; empty entries are dropped.
    """
    if not raw:
        return ()
    labels = (label.strip().lower() for label in raw.split(","))
    return tuple(label for label in labels if label)


def matches_label_filter(
    labeled: Sequence[str],
    operator: LabelOperator,
    issue_labels: AbstractSet[str],
) -> bool:
    """Evaluate the label filter.

    Args:
        labeled: Normalized configured labels.
        operator: How the configured labels are combined.
        issue_labels: Lower-cased labels on the issue or pull request.

    Returns:
        True if the issue should be added to the project.
    """
    if operator is LabelOperator.AND:
        return all(label in issue_labels for label in labeled)
    if operator is LabelOperator.NOT:
        return not any(label in issue_labels for label in labeled)
    # OR: an empty filter lets everything through
    return not labeled or any(label in issue_labels for label in labeled)


def skip_reason(number: int | None, labeled: Sequence[str], operator: LabelOperator) -> str:
    """Message logged when an issue is skipped by the label filter."""
    subject = "event" if number is None else f"issue {number}"
    joined = ", ".join(labeled)
    if operator is LabelOperator.AND:
        return f"Skipping {subject} because it doesn't match all the labels: {joined}"
    if operator is LabelOperator.NOT:
        return f"Skipping {subject} because it contains one of the labels: {joined}"
    return f"Skipping {subject} because it does not have one of the labels: {joined}"
