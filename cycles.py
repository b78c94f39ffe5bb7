from __future__ import annotations

from typing import Iterable, NamedTuple, TypedDict


class CycleInfo(TypedDict):
    number: int
    is_active: bool


class TeamCycles(NamedTuple):
    team_id: str
    cycles: list[dict]
    active_cycles: list[dict]


class CycleIndex(NamedTuple):
    # cycle id -> number and active flag
    cycle_info: dict[str, CycleInfo]
    # team id -> number of the team's active cycle, only for teams that have one
    team_active_cycle: dict[str, int]


def build_cycle_index(team_cycles: Iterable[TeamCycles]) -> CycleIndex:
    """Index every cycle of every team and record each team's active cycle.

    ``team_cycles`` must be in team listing order: ``team_active_cycle`` keeps
    that order, and the first entry is what gets reported as the snapshot's
    current cycle.
    """
    cycle_info: dict[str, CycleInfo] = {}
    team_active_cycle: dict[str, int] = {}
    for team_id, cycles, active_cycles in team_cycles:
        active_ids = {cycle["id"] for cycle in active_cycles}
        if active_cycles:
            team_active_cycle[team_id] = active_cycles[0]["number"]
        for cycle in cycles:
            cycle_info[cycle["id"]] = {
                "number": cycle["number"],
                "is_active": cycle["id"] in active_ids,
            }
        # An active cycle can fall outside the first page of all cycles.
        for cycle in active_cycles:
            cycle_info.setdefault(
                cycle["id"], {"number": cycle["number"], "is_active": True}
            )
    return CycleIndex(cycle_info, team_active_cycle)


def current_cycle_number(index: CycleIndex) -> int | None:
    """Return the active cycle number of the first team that has one."""
    return next(iter(index.team_active_cycle.values()), None)
