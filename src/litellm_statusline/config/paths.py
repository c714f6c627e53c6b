"""Platform-specific paths for litellm-statusline configuration and cache."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from platformdirs import user_config_dir

PACKAGE_NAME = "litellm-statusline"
CACHE_FILE_NAME = "litellm-cc-statusline-cache.json"


def _get_env_path(env_var: str, fallback: Path) -> Path:
    """Get path from environment variable or fallback."""
    if env_value := os.environ.get(env_var):
        return Path(env_value)
    return fallback


def config_dir() -> Path:
    """Get user config directory.

    Respects LITELLM_STATUSLINE_CONFIG_DIR environment variable.
    """
    base_dir = Path(user_config_dir(PACKAGE_NAME))
    return _get_env_path("LITELLM_STATUSLINE_CONFIG_DIR", base_dir)


def config_file() -> Path:
    """Get main config.toml path."""
    return config_dir() / "config.toml"


def cache_file() -> Path:
    """Get the response cache path in the system temp directory.

    Respects LITELLM_STATUSLINE_CACHE_FILE environment variable.
    """
    base_path = Path(tempfile.gettempdir()) / CACHE_FILE_NAME
    return _get_env_path("LITELLM_STATUSLINE_CACHE_FILE", base_path)


def claude_settings_file() -> Path:
    """Get the Claude Code settings.json path."""
    return Path.home() / ".claude" / "settings.json"
