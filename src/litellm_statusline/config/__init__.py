"""Configuration management for litellm-statusline."""

from litellm_statusline.config.cache import (
    CacheRead,
    CacheRecord,
    CacheStore,
    now_ms,
)
from litellm_statusline.config.claude_settings import (
    InstallResult,
    UninstallResult,
    find_executable_path,
    install_statusline,
    uninstall_statusline,
)
from litellm_statusline.config.paths import (
    cache_file,
    claude_settings_file,
    config_dir,
    config_file,
)
from litellm_statusline.config.settings import (
    CacheConfig,
    Config,
    Credentials,
    DisplayConfig,
    FetchConfig,
    load_config,
    load_credentials,
)

__all__ = [
    # paths
    "config_dir",
    "config_file",
    "cache_file",
    "claude_settings_file",
    # settings
    "Config",
    "CacheConfig",
    "FetchConfig",
    "DisplayConfig",
    "Credentials",
    "load_config",
    "load_credentials",
    # cache
    "CacheRecord",
    "CacheRead",
    "CacheStore",
    "now_ms",
    # claude settings
    "InstallResult",
    "UninstallResult",
    "find_executable_path",
    "install_statusline",
    "uninstall_statusline",
]
