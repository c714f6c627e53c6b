"""The render cycle: cache first, network only when needed.

States for one invocation:

- no credentials: print a hint
- fresh cache: print it, no network
- stale cache: print it, then refresh the cache in the background
- no cache: fetch, cache, print (or print a diagnostic)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from rich.console import Console
from rich.text import Text

from litellm_statusline.config.cache import CacheStore
from litellm_statusline.config.settings import Credentials
from litellm_statusline.display.statusline import render_credentials_hint
from litellm_statusline.display.statusline import render_diagnostic
from litellm_statusline.display.statusline import render_statusline
from litellm_statusline.errors.silent import attempt
from litellm_statusline.errors.silent import attempt_async
from litellm_statusline.errors.types import ConfigMissing
from litellm_statusline.errors.types import FetchError
from litellm_statusline.errors.types import InvalidResponse
from litellm_statusline.models import normalize_account_info

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    async def fetch_account_info(self, base_url: str, api_key: str) -> Any: ...


async def refresh_cache(
    store: CacheStore,
    fetcher: Fetcher,
    base_url: str,
    api_key: str,
) -> None:
    """Fetch and store fresh data.

    Raises:
        FetchError: If the fetch fails or the payload is not account data.
    """
    data = await fetcher.fetch_account_info(base_url, api_key)
    normalize_account_info(data)
    store.write(data)


async def run_statusline(
    credentials: Credentials,
    store: CacheStore,
    fetcher: Fetcher,
    console: Console,
) -> None:
    """Print exactly one line to console.

    Never raises for expected failures: fetch errors become a diagnostic
    line and cache errors are treated as a miss.
    """
    try:
        base_url, api_key = credentials.require()
    except ConfigMissing:
        console.print(render_credentials_hint())
        return

    cached = store.read()
    if cached.data is not None:
        line = attempt(render_statusline, cached.data, api_key, errors=(InvalidResponse,))
        if line is not None:
            console.print(line)
            if cached.is_expired:
                logger.debug("Cache expired, refreshing in background")
                task = asyncio.create_task(
                    refresh_cache(store, fetcher, base_url, api_key)
                )
                await attempt_async(task, errors=(FetchError,))
            return
        logger.debug("Cached data could not be rendered, fetching")

    console.print(await _fetch_line(store, fetcher, base_url, api_key))


async def _fetch_line(
    store: CacheStore,
    fetcher: Fetcher,
    base_url: str,
    api_key: str,
) -> Text:
    try:
        data = await fetcher.fetch_account_info(base_url, api_key)
        line = render_statusline(data, api_key)
    except FetchError as e:
        return render_diagnostic(e.message)
    store.write(data)
    return line
