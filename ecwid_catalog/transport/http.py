"""
HTTP session factory and request helper for the Ecwid REST API.

Every call in this package goes through `send()`, which:
    - issues one request on a shared httpx.AsyncClient (no retries)
    - wraps httpx failures into TransportError
    - leaves status/body interpretation to transport.responses

Usage:
    client = create_http_client(store_id=123, token="secret_...")
    try:
        response = await send(client, "GET", "/products", params={"limit": "5"})
    finally:
        await client.aclose()
"""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping, Optional

import httpx

from ecwid_catalog.core.errors import TransportError

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_TIMEOUT",
    "store_base_url",
    "create_http_client",
    "send",
]

DEFAULT_API_URL = "https://app.ecwid.com/api/v3"

# Default timeout for catalog requests (30 seconds total, 10 to connect)
DEFAULT_TIMEOUT = httpx.Timeout(30.0, connect=10.0)

USER_AGENT = "ecwid-catalog/0.1"


def store_base_url(store_id: int, api_url: str = DEFAULT_API_URL) -> str:
    """Base URL of one store: {api_url}/{store_id}."""
    return f"{api_url.rstrip('/')}/{store_id}"


def create_http_client(
    store_id: int,
    token: str,
    *,
    api_url: str = DEFAULT_API_URL,
    timeout: httpx.Timeout | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an httpx.AsyncClient bound to one store with the bearer token injected.

    Args:
        store_id: Ecwid store id, part of every URL.
        token: secret or public access token.
        api_url: API root, overridable for sandboxes and tests.
        timeout: Optional custom timeout. Uses DEFAULT_TIMEOUT if not specified.
        transport: Optional transport (httpx.MockTransport in tests).
    """
    headers = {
        "Authorization": f"Bearer {token}",
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }
    return httpx.AsyncClient(
        base_url=store_base_url(store_id, api_url),
        headers=headers,
        timeout=timeout or DEFAULT_TIMEOUT,
        transport=transport,
    )


async def send(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    *,
    params: Optional[Mapping[str, str]] = None,
    json: Any = None,
) -> httpx.Response:
    """Issue a single request. Any httpx-level failure becomes TransportError."""
    t0 = time.perf_counter()
    headers = {"Content-Type": "application/json"} if json is not None else None
    try:
        response = await client.request(
            method,
            path,
            params=dict(params) if params else None,
            json=json,
            headers=headers,
        )
    except httpx.HTTPError as e:
        logger.warning("http %s %s failed err=%s", method, path, e)
        raise TransportError(f"{method} {path} failed: {e}") from e

    logger.debug(
        "http %s %s status=%s time=%.3fs",
        method, path, response.status_code, time.perf_counter() - t0,
    )
    return response
