"""Error types and classifications."""

from __future__ import annotations

from enum import StrEnum


class ErrorCategory(StrEnum):
    """Error categories for handling decisions."""

    CONFIGURATION = "configuration"
    CACHE = "cache"
    NETWORK = "network"
    PARSE = "parse"


class StatuslineError(Exception):
    """Base class for all litellm-statusline errors."""

    category: ErrorCategory = ErrorCategory.CONFIGURATION

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigMissing(StatuslineError):
    """Base URL or API key is not set in the environment."""

    category = ErrorCategory.CONFIGURATION


class SettingsFileError(StatuslineError):
    """The host settings file could not be read or written."""

    category = ErrorCategory.CONFIGURATION


class CacheReadFailure(StatuslineError):
    """Cache file is missing, unreadable or corrupt."""

    category = ErrorCategory.CACHE


class CacheWriteFailure(StatuslineError):
    """Cache file could not be written."""

    category = ErrorCategory.CACHE


class FetchError(StatuslineError):
    """A request to the budget service failed."""

    category = ErrorCategory.NETWORK


class TransportError(FetchError):
    """DNS, connection, TLS or protocol failure."""


class FetchTimeout(FetchError):
    """The request did not complete within the configured timeout."""

    def __init__(self, message: str = "Timeout") -> None:
        super().__init__(message)


class InvalidResponse(FetchError):
    """The response body was not usable account data."""

    category = ErrorCategory.PARSE

    def __init__(self, message: str = "Invalid JSON") -> None:
        super().__init__(message)
