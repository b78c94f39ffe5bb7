from gql import gql

from constants import PAGE_SIZE
from .client import _execute, _nodes


def get_viewer(client):
    """Return the id and display name of the user owning the API key."""
    query = gql(
        """
        query Viewer {
          viewer {
            id
            name
          }
        }
        """
    )
    data = _execute(client, query)
    return data["viewer"]


def get_teams(client):
    """Return every team visible to the authenticated user."""
    query = gql(
        """
        query Teams ($first: Int) {
          teams(first: $first) {
            nodes {
              id
              name
            }
          }
        }
        """
    )
    data = _execute(client, query, variable_values={"first": PAGE_SIZE})
    return _nodes(data.get("teams"))


def get_cycles(client, team_id, active_only=False):
    """Return a team's cycles, optionally only the active one."""
    query = gql(
        """
        query TeamCycles ($teamId: String!, $first: Int, $filter: CycleFilter) {
          team(id: $teamId) {
            cycles(first: $first, filter: $filter) {
              nodes {
                id
                number
              }
            }
          }
        }
        """
    )
    params = {
        "teamId": team_id,
        "first": PAGE_SIZE,
        "filter": {"isActive": {"eq": True}} if active_only else None,
    }
    data = _execute(client, query, variable_values=params)
    team = data.get("team") or {}
    return _nodes(team.get("cycles"))
