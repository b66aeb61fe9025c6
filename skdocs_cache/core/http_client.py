"""
skdocs_cache/core/http_client.py
Shared async httpx client for the upstream search API.
  • upstream_client() → plain client, created lazily, reused across attempts
  • fetch_json(url)   → one GET, body parsed as JSON, UpstreamError on failure
"""

from typing import Any

import httpx

_client: httpx.AsyncClient | None = None

_LIMITS  = httpx.Limits(max_connections=10, max_keepalive_connections=5)
_TIMEOUT = httpx.Timeout(30.0, connect=15.0)


class UpstreamError(Exception):
    """The upstream API could not be reached or returned an unusable body."""


def upstream_client() -> httpx.AsyncClient:
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            headers={"Accept": "application/json"},
            timeout=_TIMEOUT,
            follow_redirects=True,
            limits=_LIMITS,
        )
    return _client


async def fetch_json(url: str) -> Any:
    """GET `url` and return the decoded JSON body."""
    try:
        r = await upstream_client().get(url)
    except httpx.HTTPError as ex:
        raise UpstreamError(f"request failed: {ex!r}") from ex

    if not r.is_success:
        raise UpstreamError(f"upstream returned HTTP {r.status_code}")

    try:
        return r.json()
    except ValueError as ex:
        raise UpstreamError(f"invalid JSON body: {ex}") from ex


async def close_all() -> None:
    global _client
    if _client and not _client.is_closed:
        await _client.aclose()
    _client = None
