"""Error handling for litellm-statusline."""

from litellm_statusline.errors.network import classify_fetch_error
from litellm_statusline.errors.silent import attempt, attempt_async
from litellm_statusline.errors.types import (
    CacheReadFailure,
    CacheWriteFailure,
    ConfigMissing,
    ErrorCategory,
    FetchError,
    FetchTimeout,
    InvalidResponse,
    SettingsFileError,
    StatuslineError,
    TransportError,
)

__all__ = [
    # Core types
    "ErrorCategory",
    "StatuslineError",
    "ConfigMissing",
    "SettingsFileError",
    "CacheReadFailure",
    "CacheWriteFailure",
    "FetchError",
    "TransportError",
    "FetchTimeout",
    "InvalidResponse",
    # Classification
    "classify_fetch_error",
    # Best-effort helpers
    "attempt",
    "attempt_async",
]
