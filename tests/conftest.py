"""Pytest configuration and fixtures."""

import pytest


def make_issue(
    issue_id,
    team_id="team-a",
    cycle_id=None,
    priority=3,
    state="In Progress",
    labels=(),
    due_date=None,
):
    """Return an issue dict shaped like the Linear GraphQL response."""
    return {
        "id": issue_id,
        "identifier": f"ENG-{issue_id}",
        "title": f"Issue {issue_id}",
        "priority": priority,
        "priorityLabel": {0: "No priority", 1: "Urgent", 2: "High", 3: "Normal", 4: "Low"}[priority],
        "url": f"https://linear.app/acme/issue/ENG-{issue_id}",
        "dueDate": due_date,
        "team": {"id": team_id},
        "cycle": {"id": cycle_id} if cycle_id else None,
        "state": {"name": state} if state else None,
        "labels": {"nodes": [{"name": name} for name in labels]},
    }


class FakeTracker:
    """In-memory tracker serving fixed teams, cycles and issues."""

    def __init__(self, teams=None, cycles=None, issues=None, viewer=None):
        self.viewer = viewer or {"id": "user-1", "name": "Ada Lovelace"}
        self.teams = teams or []
        # team id -> list of {"id", "number", "active"}
        self.cycles = cycles or {}
        self.issues = issues or []
        self.calls = []

    def get_viewer(self):
        self.calls.append(("viewer",))
        return self.viewer

    def get_teams(self):
        self.calls.append(("teams",))
        return self.teams

    def get_cycles(self, team_id, active_only=False):
        self.calls.append(("cycles", team_id, active_only))
        cycles = self.cycles.get(team_id, [])
        if active_only:
            cycles = [c for c in cycles if c.get("active")]
        return [{"id": c["id"], "number": c["number"]} for c in cycles]

    def get_assigned_issues(self, user_id):
        self.calls.append(("issues", user_id))
        return self.issues


@pytest.fixture
def tracker():
    """Tracker with one team whose cycle 5 is active."""
    return FakeTracker(
        teams=[{"id": "team-a", "name": "Engineering"}],
        cycles={
            "team-a": [
                {"id": "c3", "number": 3},
                {"id": "c5", "number": 5, "active": True},
                {"id": "c6", "number": 6},
            ]
        },
    )
