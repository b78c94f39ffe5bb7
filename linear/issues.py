from gql import gql

from constants import CLOSED_STATE_TYPES, PAGE_SIZE
from .client import _execute, _nodes


def get_assigned_issues(client, user_id):
    """Return open issues assigned to ``user_id``.

    Completed and canceled issues are filtered out by Linear. State and label
    names are resolved in the same query so the caller never needs a second
    lookup per issue.
    """
    query = gql(
        """
        query AssignedIssues ($userId: ID, $closedTypes: [String!], $first: Int) {
          issues(
            first: $first
            filter: {
              assignee: { id: { eq: $userId } }
              state: { type: { nin: $closedTypes } }
            }
          ) {
            nodes {
              id
              identifier
              title
              priority
              priorityLabel
              url
              dueDate
              team {
                id
              }
              cycle {
                id
                number
              }
              state {
                name
              }
              labels {
                nodes {
                  name
                }
              }
            }
          }
        }
        """
    )
    params = {
        "userId": user_id,
        "closedTypes": CLOSED_STATE_TYPES,
        "first": PAGE_SIZE,
    }
    data = _execute(client, query, variable_values=params)
    return _nodes(data.get("issues"))
