"""Attempt-and-discard helpers for best-effort operations.

Cache reads, cache writes and the background refresh must never surface an
error to the status line. Those call sites go through these helpers instead of
catching inline, so the set of discarded exceptions is explicit at each use.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def attempt(
    func: Callable[..., T],
    *args: Any,
    errors: tuple[type[BaseException], ...],
    default: T | None = None,
    **kwargs: Any,
) -> T | None:
    """Call func, returning default if it raises one of errors."""
    try:
        return func(*args, **kwargs)
    except errors as e:
        logger.debug("Discarded %s from %s: %s", type(e).__name__, _name(func), e)
        return default


async def attempt_async(
    awaitable: Awaitable[T],
    *,
    errors: tuple[type[BaseException], ...],
    default: T | None = None,
) -> T | None:
    """Await awaitable, returning default if it raises one of errors."""
    try:
        return await awaitable
    except errors as e:
        logger.debug("Discarded %s from awaitable: %s", type(e).__name__, e)
        return default


def _name(func: Callable) -> str:
    return getattr(func, "__qualname__", repr(func))
