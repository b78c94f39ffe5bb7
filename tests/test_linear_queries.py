import linear.issues as issues_mod
import linear.teams as teams_mod
from linear.tracker import LinearTracker


def _capture(monkeypatch, module, response):
    captured = {}

    def fake_execute(client, query, variable_values=None):
        captured["client"] = client
        captured["variables"] = variable_values
        return response

    monkeypatch.setattr(module, "_execute", fake_execute)
    return captured


def test_active_only_cycles_send_filter(monkeypatch):
    captured = _capture(
        monkeypatch,
        teams_mod,
        {"team": {"cycles": {"nodes": [{"id": "c5", "number": 5}]}}},
    )

    cycles = teams_mod.get_cycles(object(), "team-a", active_only=True)

    assert cycles == [{"id": "c5", "number": 5}]
    assert captured["variables"]["teamId"] == "team-a"
    assert captured["variables"]["filter"] == {"isActive": {"eq": True}}


def test_all_cycles_send_no_filter(monkeypatch):
    captured = _capture(monkeypatch, teams_mod, {"team": None})

    assert teams_mod.get_cycles(object(), "team-a") == []
    assert captured["variables"]["filter"] is None


def test_teams_and_viewer(monkeypatch):
    _capture(monkeypatch, teams_mod, {"teams": {"nodes": [{"id": "t1", "name": "Eng"}]}})
    assert teams_mod.get_teams(object()) == [{"id": "t1", "name": "Eng"}]

    _capture(monkeypatch, teams_mod, {"viewer": {"id": "u1", "name": "Ada"}})
    assert teams_mod.get_viewer(object()) == {"id": "u1", "name": "Ada"}


def test_assigned_issues_filter_closed_states(monkeypatch):
    captured = _capture(monkeypatch, issues_mod, {"issues": {"nodes": [{"id": "i1"}]}})

    assert issues_mod.get_assigned_issues(object(), "u1") == [{"id": "i1"}]
    assert captured["variables"]["userId"] == "u1"
    assert captured["variables"]["closedTypes"] == ["completed", "canceled"]


def test_tracker_reuses_client_per_thread(monkeypatch):
    import linear.tracker as tracker_mod

    made = []
    monkeypatch.setattr(tracker_mod, "_make_client", lambda key: made.append(key) or object())
    monkeypatch.setattr(tracker_mod, "get_teams", lambda client: [])

    tracker = LinearTracker("lin_key")
    tracker.get_teams()
    tracker.get_teams()

    assert made == ["lin_key"]
