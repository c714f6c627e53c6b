"""Install and uninstall the status line in Claude Code settings."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from litellm_statusline.cli.app import ExitCode
from litellm_statusline.config.claude_settings import UninstallResult
from litellm_statusline.config.claude_settings import find_executable_path
from litellm_statusline.config.claude_settings import install_statusline
from litellm_statusline.config.claude_settings import uninstall_statusline
from litellm_statusline.config.paths import claude_settings_file
from litellm_statusline.errors.types import SettingsFileError


def install_command(console: Console | None = None) -> None:
    """Add the statusLine entry and print next steps."""
    console = console or Console()
    err_console = Console(stderr=True)
    settings_path = claude_settings_file()

    try:
        result = install_statusline(settings_path, find_executable_path())
    except SettingsFileError as e:
        err_console.print(f"[red]✗[/red] Failed to install: {escape(e.message)}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if result.created_dir:
        console.print(f"[green]✓[/green] Created {escape(str(settings_path.parent))}")
    if result.read_existing:
        console.print(f"[dim]Reading existing settings from {escape(str(settings_path))}[/dim]")
    if result.replaced_invalid:
        console.print(
            "[yellow]⚠[/yellow] Could not parse existing settings, creating new file"
        )

    console.print("[green]✓[/green] Status line installed successfully!")
    console.print(f"[dim]  Command: {escape(result.command)}[/dim]")
    console.print(f"[dim]  Settings: {escape(str(result.settings_path))}[/dim]")
    console.print()
    console.print("[bold]Next steps:[/bold]")
    console.print("  1. Make sure ANTHROPIC_BASE_URL and ANTHROPIC_AUTH_TOKEN are set")
    console.print("  2. Restart Claude Code to see the status line")


def uninstall_command(console: Console | None = None) -> None:
    """Remove the statusLine entry, if any."""
    console = console or Console()
    err_console = Console(stderr=True)
    settings_path = claude_settings_file()

    try:
        result = uninstall_statusline(settings_path)
    except SettingsFileError as e:
        err_console.print(f"[red]✗[/red] Failed to uninstall: {escape(e.message)}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    match result:
        case UninstallResult.NO_SETTINGS:
            console.print(
                f"[yellow]⚠[/yellow] No settings file found at {escape(str(settings_path))}"
            )
        case UninstallResult.NOT_CONFIGURED:
            console.print("[yellow]⚠[/yellow] No status line configured")
        case UninstallResult.INVALID_SETTINGS:
            console.print(
                f"[yellow]⚠[/yellow] Could not parse {escape(str(settings_path))}, "
                "left unchanged"
            )
        case UninstallResult.REMOVED:
            console.print(
                "[green]✓[/green] Status line removed from Claude Code settings"
            )
            console.print("[dim]Restart Claude Code to apply changes[/dim]")
