"""Runtime dependency checks for external commands."""

from __future__ import annotations

import shutil

from selpg.exceptions import DependencyError


def _is_command_available(command: str) -> bool:
    """Check whether an executable can be found on `PATH`.

    Args:
        command (str): Executable name or path.

    Returns:
        bool: True if the executable resolves.
    """
    return shutil.which(command) is not None


def _collect_missing_commands(commands: list[str]) -> list[str]:
    """Collect missing executables.

    Args:
        commands (list[str]): Executables to look up.

    Returns:
        list[str]: Missing executable names.
    """
    return [command for command in commands if not _is_command_available(command)]


def ensure_spooler_available(command: str) -> None:
    """Validate that the print spooler can be launched.

    Args:
        command (str): Spooler executable, `lp` by default.

    Raises:
        DependencyError: If the executable cannot be found.
    """
    missing = _collect_missing_commands([command])
    if missing:
        raise DependencyError(missing_package=missing, message="print spooler")
