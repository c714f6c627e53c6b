"""CLI commands for litellm-statusline."""
