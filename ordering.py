from __future__ import annotations

from typing import Iterable

from classifier import ClassifiedIssue
from constants import NO_PRIORITY


def _sort_key(issue: ClassifiedIssue) -> tuple:
    # Issues without a cycle go after every numbered cycle, and "no priority"
    # goes after Low within a cycle.
    cycle_number = issue.get("cycleNumber")
    priority = issue.get("priority") or NO_PRIORITY
    return (
        cycle_number is None,
        cycle_number or 0,
        priority == NO_PRIORITY,
        priority,
    )


def sort_issues(issues: Iterable[ClassifiedIssue]) -> list[ClassifiedIssue]:
    """Order issues by cycle number, then priority (urgent first).

    ``sorted`` is stable, so issues sharing both keys keep their input order.
    """
    return sorted(issues, key=_sort_key)
