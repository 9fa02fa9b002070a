"""Synchronous execution of formatted vendor commands."""

from __future__ import annotations

import subprocess
import time

from rich.console import Console

from please.core.catalog import lookup, vendor_name
from please.core.errors import EXIT_SUCCESS, EXIT_UNSUPPORTED, SpawnError
from please.core.formatter import format_command
from please.core.logging import get_logger
from please.core.models import Invocation
from please.core.platforms import Platform, current_platform

log = get_logger(__name__)

err_console = Console(stderr=True, highlight=False)

UNSUPPORTED_MESSAGE = "command not supported by the current vendor"
ELEVATION_TOOL = "sudo"


def build_argv(command: str, elevate: bool = False, platform: Platform | None = None) -> list[str]:
    """Build the argument vector used to spawn a command.

    Without elevation the command goes through the platform shell as a
    single string. With elevation it is split on whitespace and handed to
    `sudo`, so quoted arguments, spaced package names and shell operators
    (including a pager pipe) are not preserved.

    Args:
        command: The formatted vendor command.
        elevate: Run the command through `sudo`.
        platform: Target platform, defaults to the host.

    Returns:
        The argv list for subprocess.
    """
    if elevate:
        return [ELEVATION_TOOL, *command.split()]
    if (platform or current_platform()) is Platform.WINDOWS:
        return ["cmd", "/C", command]
    return ["sh", "-c", command]


def execute(command: str, dry_run: bool = False, elevate: bool = False) -> int:
    """Run, or print, a formatted vendor command.

    Args:
        command: The formatted command; empty means unsupported.
        dry_run: Print the command on stderr instead of running it.
        elevate: Run the command through `sudo`.

    Returns:
        1 for an unsupported command, 0 for a dry run, otherwise the exit
        status of the command (0 when it was killed by a signal).

    Raises:
        SpawnError: If the shell or `sudo` could not be launched.
    """
    if not command:
        log.warning("command_unsupported")
        err_console.out(UNSUPPORTED_MESSAGE)
        return EXIT_UNSUPPORTED

    if dry_run:
        log.info("command_dry_run", command=command, elevated=elevate)
        err_console.out(command)
        return EXIT_SUCCESS

    argv = build_argv(command, elevate=elevate)
    start = time.perf_counter()
    log.debug("command_start", command=command, elevated=elevate)

    try:
        completed = subprocess.run(argv, check=False)
    except OSError as e:
        log.error(
            "command_spawn_failed",
            command=command,
            program=argv[0],
            error=str(e),
        )
        raise SpawnError(program=argv[0], command=command, error=str(e)) from e

    duration_ms = int((time.perf_counter() - start) * 1000)
    log.info(
        "command_complete",
        command=command,
        returncode=completed.returncode,
        duration_ms=duration_ms,
    )

    # Negative return codes mean the child died from a signal
    return max(completed.returncode, 0)


def run_invocation(invocation: Invocation) -> int:
    """Format an invocation's command and execute it."""
    profile = lookup(invocation.vendor)
    command = format_command(
        profile,
        invocation.action,
        invocation.args,
        assume_yes=invocation.yes,
        pager=invocation.pager,
    )
    log.debug(
        "invocation_formatted",
        vendor=vendor_name(invocation.vendor),
        action=invocation.action.label,
        command=command,
    )
    return execute(command, dry_run=invocation.dry_run, elevate=invocation.su)
