"""Rich-based rendering of the status line."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.text import Text

from litellm_statusline.models import ResolvedIdentity
from litellm_statusline.models import format_currency
from litellm_statusline.models import resolve_identity
from litellm_statusline.models import round_percentage
from litellm_statusline.models import spend_band

NAME_STYLE = "cyan"
DIAGNOSTIC_STYLE = "dim"
MONEY_MARKER = "💰"
CREDENTIALS_HINT = "⚠ Set ANTHROPIC_BASE_URL and ANTHROPIC_AUTH_TOKEN"


def format_identity(identity: ResolvedIdentity) -> Text:
    """Format a resolved identity as ``name | 💰$spend/$budget (pct%)``.

    Args:
        identity: Resolved name, spend and budget

    Returns:
        Rich Text with the name in cyan and the money segment colored by band
    """
    percentage = identity.percentage
    band = spend_band(percentage)

    text = Text()
    text.append(identity.display_name, style=NAME_STYLE)
    text.append(f" | {MONEY_MARKER}")
    text.append(
        f"${format_currency(identity.spend)}/${format_currency(identity.max_budget)}"
        f" ({round_percentage(percentage)}%)",
        style=band.color,
    )
    return text


def render_statusline(payload: Any, api_key: str | None) -> Text:
    """Render the status line for a raw ``/user/info`` payload.

    Raises:
        InvalidResponse: If the payload cannot be normalized.
    """
    return format_identity(resolve_identity(payload, api_key))


def render_diagnostic(message: str) -> Text:
    """Render a dimmed one-line error."""
    return Text(f"LiteLLM: {message}", style=DIAGNOSTIC_STYLE)


def render_credentials_hint() -> Text:
    return Text(CREDENTIALS_HINT)


def create_console(color: bool = True) -> Console:
    """Create the stdout console.

    Claude Code captures stdout through a pipe, so terminal detection is
    bypassed and colors are always emitted unless disabled. Rich also
    honours NO_COLOR.
    """
    return Console(
        force_terminal=color,
        no_color=None if color else True,
        color_system="standard" if color else None,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )
