"""Network error classification utilities.

Maps the exceptions raised by httpx, asyncio and msgspec while talking to the
budget service onto the three fetch failures callers handle.
"""

from __future__ import annotations

import asyncio

import httpx
import msgspec

from litellm_statusline.errors.types import FetchError
from litellm_statusline.errors.types import FetchTimeout
from litellm_statusline.errors.types import InvalidResponse
from litellm_statusline.errors.types import TransportError


def classify_fetch_error(error: Exception) -> FetchError:
    """Classify an exception raised during a fetch.

    Args:
        error: Exception raised by the HTTP client or the body decoder

    Returns:
        FetchError subclass describing the failure
    """
    if isinstance(error, FetchError):
        return error

    if isinstance(error, (httpx.TimeoutException, asyncio.TimeoutError)):
        return FetchTimeout()

    if isinstance(error, (msgspec.DecodeError, UnicodeDecodeError)):
        return InvalidResponse()

    if isinstance(error, httpx.HTTPStatusError):
        return InvalidResponse(f"HTTP {error.response.status_code}")

    if isinstance(error, (httpx.TransportError, httpx.InvalidURL, OSError)):
        return TransportError(str(error) or type(error).__name__)

    return TransportError(f"{type(error).__name__}: {error}")

