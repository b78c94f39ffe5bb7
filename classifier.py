from __future__ import annotations

from typing import TypedDict

from constants import CYCLE_STATUS_CURRENT, CYCLE_STATUS_FUTURE, CYCLE_STATUS_PAST
from cycles import CycleIndex, CycleInfo


class ClassifiedIssue(TypedDict, total=False):
    id: str
    identifier: str
    title: str
    priority: int
    priorityLabel: str
    status: str
    url: str
    cycleNumber: int
    cycleStatus: str
    dueDate: str
    labels: list[str]


def cycle_status(info: CycleInfo, team_active_number: int | None) -> str:
    """Return the status of a cycle relative to its team's active cycle.

    With no known active cycle for the team every cycle counts as current.
    """
    if info["is_active"]:
        return CYCLE_STATUS_CURRENT
    if team_active_number is not None:
        if info["number"] > team_active_number:
            return CYCLE_STATUS_FUTURE
        if info["number"] < team_active_number:
            return CYCLE_STATUS_PAST
    return CYCLE_STATUS_CURRENT


def classify_issue(issue: dict, index: CycleIndex) -> ClassifiedIssue | None:
    """Return the display record for ``issue``, or None when it is excluded.

    Backlog issues (no cycle) and issues whose cycle is not in the index are
    excluded.
    """
    cycle = issue.get("cycle")
    if not cycle:
        return None
    info = index.cycle_info.get(cycle.get("id"))
    if info is None:
        return None

    team_id = (issue.get("team") or {}).get("id")
    status = cycle_status(info, index.team_active_cycle.get(team_id))
    state_name = (issue.get("state") or {}).get("name")
    labels = (issue.get("labels") or {}).get("nodes") or []

    classified: ClassifiedIssue = {
        "id": issue["id"],
        "identifier": issue.get("identifier"),
        "title": issue.get("title"),
        "priority": issue.get("priority") or 0,
        "priorityLabel": issue.get("priorityLabel"),
        "status": state_name or "No Status",
        "url": issue.get("url"),
        "cycleNumber": info["number"],
        "cycleStatus": status,
        "labels": [label["name"] for label in labels],
    }
    if issue.get("dueDate"):
        classified["dueDate"] = str(issue["dueDate"])
    return classified
