"""CLI framework for litellm-statusline."""
from __future__ import annotations

from litellm_statusline.cli.app import ExitCode
from litellm_statusline.cli.app import app
from litellm_statusline.cli.app import run_app

__all__ = ["app", "run_app", "ExitCode"]
