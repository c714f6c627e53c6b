"""litellm-statusline: LiteLLM budget status line for Claude Code."""

from __future__ import annotations

__version__ = "0.1.0"

from litellm_statusline.models import AccountInfo
from litellm_statusline.models import KeyRecord
from litellm_statusline.models import ResolvedIdentity
from litellm_statusline.models import SpendBand
from litellm_statusline.models import UserInfo
from litellm_statusline.models import format_currency
from litellm_statusline.models import normalize_account_info
from litellm_statusline.models import resolve_identity
from litellm_statusline.models import spend_band
from litellm_statusline.models import spend_percentage

__all__ = [
    "__version__",
    "AccountInfo",
    "KeyRecord",
    "UserInfo",
    "ResolvedIdentity",
    "SpendBand",
    "normalize_account_info",
    "resolve_identity",
    "spend_percentage",
    "spend_band",
    "format_currency",
]


def main() -> None:
    """Entry point for the litellm-statusline CLI."""
    from litellm_statusline.cli.app import run_app

    run_app()
