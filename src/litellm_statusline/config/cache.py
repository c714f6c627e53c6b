"""Response cache for litellm-statusline.

One JSON file holds the last successful ``/user/info`` response and the time
it was fetched. Stale data is still served; it only triggers a refresh.
"""

from __future__ import annotations

import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Any, Callable

import msgspec

from litellm_statusline.config.settings import DEFAULT_CACHE_TTL_MS
from litellm_statusline.errors.silent import attempt
from litellm_statusline.errors.types import CacheReadFailure
from litellm_statusline.errors.types import CacheWriteFailure

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class CacheRecord(msgspec.Struct):
    """On-disk cache record."""

    timestamp: float | None = None  # Epoch millis of the fetch
    data: Any = None  # Last successful response body


class CacheRead(msgspec.Struct, frozen=True):
    """Result of reading the cache."""

    data: Any = None
    is_expired: bool = True


class CacheStore:
    """Single-file cache with a fixed TTL."""

    def __init__(
        self,
        path: Path,
        ttl_ms: int = DEFAULT_CACHE_TTL_MS,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.path = Path(path)
        self.ttl_ms = ttl_ms
        self.clock = clock

    def read(self) -> CacheRead:
        """Read the cache, returning an empty expired result on any failure."""
        record = attempt(self._load, errors=(CacheReadFailure,))
        if record is None or record.data is None:
            return CacheRead()

        if record.timestamp is None:
            is_expired = True
        else:
            is_expired = self.clock() - record.timestamp >= self.ttl_ms
        return CacheRead(data=record.data, is_expired=is_expired)

    def write(self, data: Any) -> None:
        """Store data with the current time. Failures are ignored."""
        attempt(self._store, data, errors=(CacheWriteFailure,))

    def _load(self) -> CacheRecord:
        try:
            raw = self.path.read_bytes()
            return msgspec.json.decode(raw, type=CacheRecord)
        except FileNotFoundError as e:
            raise CacheReadFailure(f"No cache at {self.path}") from e
        except (OSError, msgspec.DecodeError) as e:
            raise CacheReadFailure(f"Unreadable cache {self.path}: {e}") from e

    def _store(self, data: Any) -> None:
        record = CacheRecord(timestamp=self.clock(), data=data)
        try:
            encoded = msgspec.json.encode(record)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", dir=self.path.parent
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(encoded)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, msgspec.EncodeError, TypeError) as e:
            raise CacheWriteFailure(f"Could not write cache {self.path}: {e}") from e
        logger.debug("Cached response at %s", self.path)
