"""Core fetch and render logic for litellm-statusline."""

from litellm_statusline.core.fetch import AccountInfoFetcher, user_info_url
from litellm_statusline.core.http import create_http_client, get_timeout_config
from litellm_statusline.core.render import run_statusline
from litellm_statusline.core.stdin import ignore_stdin

__all__ = [
    "AccountInfoFetcher",
    "user_info_url",
    "create_http_client",
    "get_timeout_config",
    "run_statusline",
    "ignore_stdin",
]
