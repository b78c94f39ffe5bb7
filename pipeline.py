from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

from classifier import classify_issue
from constants import DEFAULT_MAX_WORKERS
from cycles import TeamCycles, build_cycle_index
from linear.tracker import Tracker
from ordering import sort_issues
from snapshot import Snapshot, assemble_snapshot


def _load_team_cycles(tracker: Tracker, team_id: str) -> TeamCycles:
    active_cycles = tracker.get_cycles(team_id, active_only=True)
    cycles = tracker.get_cycles(team_id)
    return TeamCycles(team_id, cycles, active_cycles)


def load_team_cycles(
    tracker: Tracker, teams: list[dict], max_workers: int = DEFAULT_MAX_WORKERS
) -> list[TeamCycles]:
    """Fetch every team's cycles concurrently, returned in team order.

    The first failed fetch is re-raised; there are no partial results.
    """
    if not teams:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(_load_team_cycles, tracker, team["id"]) for team in teams
        ]
        return [future.result() for future in futures]


def build_snapshot(
    tracker: Tracker,
    now: datetime | None = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> Snapshot:
    """Build the open work snapshot for the user owning ``tracker``'s key.

    The cycle index is complete before any issue is classified. Upstream
    errors propagate to the caller unchanged.
    """
    viewer = tracker.get_viewer()
    teams = tracker.get_teams()
    index = build_cycle_index(load_team_cycles(tracker, teams, max_workers))
    logging.debug(
        "Indexed %d cycles across %d teams (%d with an active cycle)",
        len(index.cycle_info),
        len(teams),
        len(index.team_active_cycle),
    )

    issues = tracker.get_assigned_issues(viewer["id"])
    classified = []
    for issue in issues:
        result = classify_issue(issue, index)
        if result is not None:
            classified.append(result)
    logging.info(
        "Classified %d of %d open issues for %s",
        len(classified),
        len(issues),
        viewer.get("name"),
    )
    return assemble_snapshot(sort_issues(classified), index, viewer.get("name"), now)
