from gql import Client
from gql.transport.aiohttp import AIOHTTPTransport

from constants import LINEAR_GRAPHQL_URL


def _make_client(api_key):
    """Return a gql client authenticated with a Linear personal API key."""
    headers = {"Authorization": api_key}
    transport = AIOHTTPTransport(url=LINEAR_GRAPHQL_URL, headers=headers)
    return Client(transport=transport, fetch_schema_from_transport=False)


def _execute(client, query, variable_values=None):
    if variable_values is None:
        return client.execute(query)
    return client.execute(query, variable_values=variable_values)


def _nodes(connection):
    """Return the node list of a GraphQL connection, tolerating nulls."""
    if not connection:
        return []
    return connection.get("nodes") or []
