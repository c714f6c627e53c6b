"""Display utilities for litellm-statusline."""

from litellm_statusline.display.statusline import (
    create_console,
    format_identity,
    render_credentials_hint,
    render_diagnostic,
    render_statusline,
)

__all__ = [
    "create_console",
    "format_identity",
    "render_statusline",
    "render_diagnostic",
    "render_credentials_hint",
]
