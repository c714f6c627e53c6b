"""Main CLI application for litellm-statusline."""

from __future__ import annotations

import asyncio
import logging
from enum import IntEnum

import typer
from rich.console import Console
from rich.logging import RichHandler

from litellm_statusline.config.settings import Config

logger = logging.getLogger(__name__)

EPILOG = """[bold]Environment variables[/bold]

  ANTHROPIC_BASE_URL     LiteLLM proxy base URL (required)

  ANTHROPIC_AUTH_TOKEN   LiteLLM API key (required)

[bold]Installation[/bold]

  1. pip install litellm-statusline

  2. litellm-statusline --install

  3. Restart Claude Code
"""

# Create the main app
app = typer.Typer(
    name="litellm-statusline",
    help="LiteLLM status line for Claude Code - displays user budget and spending.",
    add_completion=False,
    rich_markup_mode="rich",
)


class ExitCode(IntEnum):
    """Exit codes for litellm-statusline."""

    SUCCESS = 0
    GENERAL_ERROR = 1


@app.command(
    epilog=EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
def main(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version number and exit"
    ),
    install: bool = typer.Option(
        False, "--install", help="Install the status line in Claude Code settings"
    ),
    uninstall: bool = typer.Option(
        False, "--uninstall", help="Remove the status line from Claude Code settings"
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        envvar="LITELLM_STATUSLINE_DEBUG",
        help="Log diagnostics to stderr",
    ),
) -> None:
    """Print a one-line budget summary for the configured LiteLLM key."""
    if version:
        from litellm_statusline import __version__

        typer.echo(__version__)
        raise typer.Exit(ExitCode.SUCCESS)

    configure_logging(debug)

    if install:
        from litellm_statusline.cli.commands.install import install_command

        install_command()
        raise typer.Exit(ExitCode.SUCCESS)

    if uninstall:
        from litellm_statusline.cli.commands.install import uninstall_command

        uninstall_command()
        raise typer.Exit(ExitCode.SUCCESS)

    from litellm_statusline.config.settings import load_config

    asyncio.run(run_default_statusline(load_config()))
    raise typer.Exit(ExitCode.SUCCESS)


async def run_default_statusline(config: Config) -> None:
    """Run one render cycle with the given configuration."""
    from litellm_statusline.config.cache import CacheStore
    from litellm_statusline.config.settings import load_credentials
    from litellm_statusline.core.fetch import AccountInfoFetcher
    from litellm_statusline.core.render import run_statusline
    from litellm_statusline.core.stdin import ignore_stdin
    from litellm_statusline.display.statusline import create_console
    from litellm_statusline.display.statusline import render_diagnostic

    console = create_console(color=config.display.color)
    credentials = load_credentials()
    store = CacheStore(config.cache_path(), ttl_ms=config.cache.ttl_ms)
    fetcher = AccountInfoFetcher(timeout=config.fetch.timeout)

    with ignore_stdin(asyncio.get_running_loop()):
        try:
            await run_statusline(credentials, store, fetcher, console)
        except Exception as e:
            # Output must always be one line, whatever failed
            logger.debug("Render cycle failed", exc_info=True)
            console.print(render_diagnostic(f"{type(e).__name__}: {e}"))


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr; stdout is reserved for the status line."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=False,
    )
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def run_app() -> None:
    """Run the CLI app."""
    app()
