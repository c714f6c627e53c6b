"""HTTP client construction for litellm-statusline."""

from __future__ import annotations

import httpx

from litellm_statusline.config.settings import DEFAULT_TIMEOUT


def get_timeout_config(timeout: float = DEFAULT_TIMEOUT) -> httpx.Timeout:
    """Apply one timeout to connect, read, write and pool acquisition."""
    return httpx.Timeout(timeout)


def create_http_client(
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a client for a single short-lived invocation.

    Usage:
        async with create_http_client(5.0) as client:
            response = await client.get(...)
    """
    limits = httpx.Limits(
        max_connections=1,
        max_keepalive_connections=0,
    )
    return httpx.AsyncClient(
        timeout=get_timeout_config(timeout),
        limits=limits,
        follow_redirects=False,
        transport=transport,
    )
