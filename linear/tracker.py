from __future__ import annotations

import threading
from typing import Any, Protocol

from .client import _make_client
from .issues import get_assigned_issues
from .teams import get_cycles, get_teams, get_viewer


class Tracker(Protocol):
    """Read-only view of the issue tracker used to build a snapshot."""

    def get_viewer(self) -> dict[str, Any]: ...

    def get_teams(self) -> list[dict[str, Any]]: ...

    def get_cycles(
        self, team_id: str, active_only: bool = False
    ) -> list[dict[str, Any]]: ...

    def get_assigned_issues(self, user_id: str) -> list[dict[str, Any]]: ...


class LinearTracker:
    """``Tracker`` backed by the Linear GraphQL API.

    Cycles are fetched from worker threads, so each thread gets its own gql
    client; a single client cannot run two sessions at once.
    """

    def __init__(self, api_key: str):
        self._api_key = api_key
        self._thread_local = threading.local()

    def _get_client(self):
        client = getattr(self._thread_local, "client", None)
        if client is None:
            client = _make_client(self._api_key)
            self._thread_local.client = client
        return client

    def get_viewer(self) -> dict[str, Any]:
        return get_viewer(self._get_client())

    def get_teams(self) -> list[dict[str, Any]]:
        return get_teams(self._get_client())

    def get_cycles(
        self, team_id: str, active_only: bool = False
    ) -> list[dict[str, Any]]:
        return get_cycles(self._get_client(), team_id, active_only=active_only)

    def get_assigned_issues(self, user_id: str) -> list[dict[str, Any]]:
        return get_assigned_issues(self._get_client(), user_id)
