"""Claude Code settings.json management.

Adds or removes the ``statusLine`` entry that makes Claude Code run this
command. Other settings in the file are preserved.
"""

from __future__ import annotations

import json
import shutil
import sys
from enum import StrEnum
from pathlib import Path

import msgspec

from litellm_statusline.config.paths import PACKAGE_NAME
from litellm_statusline.errors.types import SettingsFileError


class UninstallResult(StrEnum):
    """Outcome of removing the status line."""

    REMOVED = "removed"
    NO_SETTINGS = "no_settings"
    NOT_CONFIGURED = "not_configured"
    INVALID_SETTINGS = "invalid_settings"


class InstallResult(msgspec.Struct, frozen=True):
    """Outcome of installing the status line."""

    settings_path: Path
    command: str
    created_dir: bool = False
    read_existing: bool = False
    replaced_invalid: bool = False


def status_line_entry(command: str) -> dict:
    """Build the statusLine settings object."""
    return {"type": "command", "command": command, "padding": 0}


def find_executable_path() -> str:
    """Locate the command Claude Code should run.

    Prefers the installed console script on PATH, then the script that is
    currently running, then the bare command name.
    """
    if installed := shutil.which(PACKAGE_NAME):
        return installed

    invoked = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
    if invoked is not None and invoked.name == PACKAGE_NAME and invoked.exists():
        return str(invoked.resolve())

    return PACKAGE_NAME


def _read_settings(path: Path) -> dict:
    content = path.read_text(encoding="utf-8")
    settings = json.loads(content)
    if not isinstance(settings, dict):
        raise ValueError("settings root is not an object")
    return settings


def _write_settings(path: Path, settings: dict) -> None:
    path.write_text(json.dumps(settings, indent=2), encoding="utf-8")


def install_statusline(settings_path: Path, command: str) -> InstallResult:
    """Point Claude Code's status line at command.

    An unparsable settings file is replaced rather than treated as an error.

    Raises:
        SettingsFileError: If the settings directory or file cannot be written.
    """
    created_dir = False
    read_existing = False
    replaced_invalid = False
    settings: dict = {}

    try:
        if not settings_path.parent.exists():
            settings_path.parent.mkdir(parents=True, exist_ok=True)
            created_dir = True

        if settings_path.exists():
            try:
                settings = _read_settings(settings_path)
                read_existing = True
            except (json.JSONDecodeError, UnicodeDecodeError, ValueError):
                settings = {}
                replaced_invalid = True

        settings["statusLine"] = status_line_entry(command)
        _write_settings(settings_path, settings)
    except OSError as e:
        raise SettingsFileError(str(e)) from e

    return InstallResult(
        settings_path=settings_path,
        command=command,
        created_dir=created_dir,
        read_existing=read_existing,
        replaced_invalid=replaced_invalid,
    )


def uninstall_statusline(settings_path: Path) -> UninstallResult:
    """Remove the status line from Claude Code settings.

    An unparsable settings file is left untouched and reported as
    ``INVALID_SETTINGS``.

    Raises:
        SettingsFileError: If the settings file cannot be read or rewritten.
    """
    if not settings_path.exists():
        return UninstallResult.NO_SETTINGS

    try:
        try:
            settings = _read_settings(settings_path)
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError):
            return UninstallResult.INVALID_SETTINGS

        if not settings.get("statusLine"):
            return UninstallResult.NOT_CONFIGURED

        del settings["statusLine"]
        _write_settings(settings_path, settings)
    except OSError as e:
        raise SettingsFileError(str(e)) from e

    return UninstallResult.REMOVED
