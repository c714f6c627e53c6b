"""Fetching account information from the LiteLLM budget service."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx
import msgspec

from litellm_statusline.config.settings import DEFAULT_TIMEOUT
from litellm_statusline.core.http import create_http_client
from litellm_statusline.errors.network import classify_fetch_error

logger = logging.getLogger(__name__)

USER_INFO_PATH = "/user/info"
API_KEY_HEADER = "x-litellm-api-key"


def user_info_url(base_url: str) -> str:
    """Build the ``/user/info`` URL under base_url."""
    return base_url.rstrip("/") + USER_INFO_PATH


class AccountInfoFetcher:
    """Issues one GET to ``/user/info`` per call.

    There are no retries; a failed call raises and the caller decides whether
    to invoke again.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self.transport = transport

    async def fetch_account_info(self, base_url: str, api_key: str) -> Any:
        """Fetch and decode the account payload.

        Raises:
            FetchTimeout: The request took longer than the timeout.
            InvalidResponse: Non-2xx status or a body that is not JSON.
            TransportError: DNS, connection, TLS, URL or header encoding failure.
        """
        url = user_info_url(base_url)
        headers = {
            "accept": "application/json",
            API_KEY_HEADER: api_key,
        }

        start_time = time.monotonic()
        try:
            async with create_http_client(self.timeout, self.transport) as client:
                response = await asyncio.wait_for(
                    client.get(url, headers=headers),
                    timeout=self.timeout,
                )
                response.raise_for_status()
                data = msgspec.json.decode(response.content)
        except (
            httpx.HTTPError,
            httpx.InvalidURL,
            asyncio.TimeoutError,
            msgspec.DecodeError,
            ValueError,  # Non-ASCII header values raise UnicodeEncodeError
        ) as e:
            error = classify_fetch_error(e)
            logger.debug("GET %s failed: %s", url, error.message)
            raise error from e

        duration_ms = (time.monotonic() - start_time) * 1000
        logger.debug("GET %s -> %s in %.0fms", url, response.status_code, duration_ms)
        return data
