"""Configuration structures and loading for litellm-statusline."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

import msgspec

from litellm_statusline.errors.types import ConfigMissing

logger = logging.getLogger(__name__)

# Default values
DEFAULT_CACHE_TTL_MS = 3000
DEFAULT_TIMEOUT = 5.0

BASE_URL_ENV = "ANTHROPIC_BASE_URL"
API_KEY_ENV = "ANTHROPIC_AUTH_TOKEN"


# Cache configuration
class CacheConfig(msgspec.Struct, omit_defaults=True):
    """Response cache settings."""

    ttl_ms: int = DEFAULT_CACHE_TTL_MS
    path: str | None = None  # Defaults to the temp directory


# Fetch configuration
class FetchConfig(msgspec.Struct, omit_defaults=True):
    """Fetch behavior settings."""

    timeout: float = DEFAULT_TIMEOUT


# Display configuration
class DisplayConfig(msgspec.Struct, omit_defaults=True):
    """Display settings."""

    color: bool = True


# Main configuration
class Config(msgspec.Struct, omit_defaults=True):
    """Main configuration structure."""

    cache: CacheConfig = msgspec.field(default_factory=CacheConfig)
    fetch: FetchConfig = msgspec.field(default_factory=FetchConfig)
    display: DisplayConfig = msgspec.field(default_factory=DisplayConfig)

    def cache_path(self) -> Path:
        """Resolve the cache file path, config first, then env/temp default."""
        from .paths import cache_file

        if self.cache.path:
            return Path(self.cache.path).expanduser()
        return cache_file()


class Credentials(msgspec.Struct, frozen=True):
    """Budget service location and API key."""

    base_url: str | None = None
    api_key: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.base_url) and bool(self.api_key)

    def require(self) -> tuple[str, str]:
        """Return (base_url, api_key).

        Raises:
            ConfigMissing: If either value is unset.
        """
        if not self.is_complete:
            raise ConfigMissing(f"Set {BASE_URL_ENV} and {API_KEY_ENV}")
        return self.base_url, self.api_key


def load_credentials() -> Credentials:
    """Read credentials from the environment."""
    return Credentials(
        base_url=os.environ.get(BASE_URL_ENV) or None,
        api_key=os.environ.get(API_KEY_ENV) or None,
    )


def _load_from_toml(path: Path) -> dict:
    """Load configuration from TOML file."""
    if not path.exists():
        return {}

    with path.open("rb") as f:
        return tomllib.load(f)


def convert_config(data: dict) -> Config:
    """Convert raw dict to Config struct."""
    return msgspec.convert(data, type=Config)


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file with defaults.

    A broken config file never stops the status line from rendering; it is
    logged and the defaults are used instead.
    """
    from .paths import config_file

    config_path = path or config_file()

    try:
        raw_data = _load_from_toml(config_path)
        if not raw_data:
            return Config()
        return convert_config(raw_data)
    except (OSError, tomllib.TOMLDecodeError, msgspec.ValidationError) as e:
        logger.warning("Ignoring invalid config %s: %s", config_path, e)
        return Config()
