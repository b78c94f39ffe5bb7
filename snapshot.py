from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence, TypedDict

from classifier import ClassifiedIssue
from constants import RESPONSE_SHAPE_MERGE_VARIABLES, RESPONSE_SHAPE_ROOT
from cycles import CycleIndex, current_cycle_number


class Snapshot(TypedDict, total=False):
    issues: list[ClassifiedIssue]
    total_count: int
    current_cycle: int
    updated_at: str
    user_name: str


def format_timestamp(value: datetime) -> str:
    """Format ``value`` as ISO-8601 UTC with milliseconds, e.g. ``...T12:00:00.000Z``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def assemble_snapshot(
    issues: Sequence[ClassifiedIssue],
    index: CycleIndex,
    user_name: str,
    now: datetime | None = None,
) -> Snapshot:
    """Build the snapshot returned to the display.

    ``current_cycle`` is the active cycle of the first team that has one, so
    for users on several teams it only reflects one of them. It is left out
    when no team has an active cycle.
    """
    now = now or datetime.now(timezone.utc)
    snapshot: Snapshot = {
        "issues": list(issues),
        "total_count": len(issues),
    }
    current_cycle = current_cycle_number(index)
    if current_cycle is not None:
        snapshot["current_cycle"] = current_cycle
    snapshot["updated_at"] = format_timestamp(now)
    snapshot["user_name"] = user_name
    return snapshot


def render_body(snapshot: Snapshot, shape: str = RESPONSE_SHAPE_ROOT) -> dict:
    """Wrap ``snapshot`` in the response envelope named by ``shape``."""
    if shape == RESPONSE_SHAPE_ROOT:
        return dict(snapshot)
    if shape == RESPONSE_SHAPE_MERGE_VARIABLES:
        return {"merge_variables": dict(snapshot)}
    raise ValueError(f"Unknown response shape: {shape!r}")
