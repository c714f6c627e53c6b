"""Pytest configuration and shared fixtures for litellm-statusline tests."""

from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from litellm_statusline.config.cache import CacheStore
from litellm_statusline.config.settings import Credentials

API_KEY = "sk-test-0000WXYZ"
BASE_URL = "https://proxy.example.com"


class FakeClock:
    """Epoch-millis clock that only moves when told to."""

    def __init__(self, now: int = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeFetcher:
    """Records calls and returns a canned payload or raises a canned error."""

    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.on_call = None

    async def fetch_account_info(self, base_url: str, api_key: str) -> Any:
        self.calls.append((base_url, api_key))
        if self.on_call is not None:
            self.on_call()
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def key_payload() -> dict:
    """Wrapped payload with one key matching API_KEY."""
    return {
        "user_id": "u-1",
        "user_info": {
            "user_id": "u-1",
            "user_email": "alice@example.com",
            "spend": 40.0,
            "max_budget": 500.0,
        },
        "keys": [
            {
                "key_name": "sk-...ABCD",
                "key_alias": "other",
                "spend": 1.0,
                "max_budget": 10.0,
            },
            {
                "key_name": "sk-...WXYZ",
                "key_alias": "alice",
                "spend": 22.9,
                "max_budget": 100,
            },
        ],
    }


@pytest.fixture
def user_payload() -> dict:
    """Unwrapped payload: the object itself is the user record."""
    return {
        "user_id": "u-2",
        "user_email": "bob@co.com",
        "spend": 60.0,
        "max_budget": 100.0,
    }


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache_path(tmp_path: Path) -> Path:
    return tmp_path / "statusline-cache.json"


@pytest.fixture
def store(cache_path: Path, clock: FakeClock) -> CacheStore:
    """Cache store in a temporary directory with a controllable clock."""
    return CacheStore(cache_path, ttl_ms=3000, clock=clock)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(base_url=BASE_URL, api_key=API_KEY)


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def console(output: StringIO) -> Console:
    """Plain-text console capturing into output."""
    return Console(file=output, force_terminal=False, width=200, highlight=False)


@pytest.fixture
def make_fetcher() -> type[FakeFetcher]:
    """Factory for fake fetchers: ``make_fetcher(result=...)``."""
    return FakeFetcher
