from typing import Mapping

API_KEY_HEADER = "X-Linear-API-Key"
BEARER_PREFIX = "Bearer "


def resolve_api_key(headers: Mapping[str, str], fallback: str | None = None) -> str | None:
    """Return the Linear API key for a request.

    Checked in order: the ``X-Linear-API-Key`` header, the ``Authorization``
    header (``Bearer`` prefix removed), then ``fallback``. The first non-empty
    value wins.
    """
    key = (headers.get(API_KEY_HEADER) or "").strip()
    if key:
        return key
    authorization = (headers.get("Authorization") or "").strip()
    if authorization.startswith(BEARER_PREFIX):
        authorization = authorization[len(BEARER_PREFIX):].strip()
    if authorization:
        return authorization
    return fallback or None
