"""CLI entry point for the please package manager front-end."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer

from please.cli.renderers import console, vendor_table
from please.core.catalog import candidates, parse_vendor
from please.core.config import (
    Settings,
    apply_defaults,
    default_config_path,
    default_pager,
    load_config,
    settings_for,
)
from please.core.errors import (
    EXIT_SYSTEM_ERROR,
    EXIT_USER_ERROR,
    PleaseError,
    SystemError,
    UserError,
    format_error_message,
)
from please.core.logging import configure_logging, get_logger
from please.core.models import Action, Invocation
from please.core.platforms import current_platform, supports_elevation
from please.core.resolver import is_available, resolve
from please.core.shell import err_console, run_invocation

log = get_logger(__name__)

app = typer.Typer(
    help="please: one command line for every package manager.",
    no_args_is_help=True,
)


@dataclass
class GlobalOptions:
    """Options given before the command name."""
    config: Optional[Path] = None
    dry_run: bool = False
    su: bool = False
    vendor: Optional[str] = None
    skip_config: bool = False
    yes: bool = False


def handle_error(error: Exception) -> int:
    """Handle errors and return appropriate exit codes.

    Args:
        error: The exception to handle.

    Returns:
        An integer exit code.
    """
    if isinstance(error, PleaseError):
        log.error(
            "cli_error",
            error_type=type(error).__name__,
            message=error.message,
            context=error.context,
        )
        err_console.print(f"\n{format_error_message(error)}\n", style="bold red", markup=False)

        if isinstance(error, UserError):
            return EXIT_USER_ERROR
        elif isinstance(error, SystemError):
            return EXIT_SYSTEM_ERROR
        else:
            return EXIT_USER_ERROR
    else:
        log.error(
            "unexpected_error",
            error=str(error),
            exc_info=True
        )
        err_console.print(
            f"\n⚠️ Unexpected error occurred: {error}\n",
            style="bold red",
            markup=False,
        )
        return EXIT_SYSTEM_ERROR


def build_invocation(
    options: GlobalOptions, action: Action, args: str = "", paginate: bool = False
) -> Invocation:
    """Combine command-line options with configured defaults.

    Args:
        options: Global command-line options.
        action: The action requested.
        args: Space-joined package names or query.
        paginate: Pipe the output through a pager.

    Returns:
        An Invocation with a resolved vendor.

    Raises:
        UnknownVendorError: If the CLI or config names an unknown vendor.
        ConfigError: If the config holds a wrongly typed value.
        NoVendorError: If no vendor is pinned and none is installed.
    """
    platform = current_platform()

    defaults = Settings()
    if not options.skip_config:
        config_path = options.config or default_config_path()
        defaults = settings_for(load_config(config_path), action, config_path)

    settings = apply_defaults(
        Settings(yes=options.yes, su=options.su, vendor=options.vendor),
        defaults,
    )

    explicit = None
    if settings.vendor:
        source = "cli" if options.vendor else "config"
        explicit = parse_vendor(settings.vendor, platform, source=source)

    return Invocation(
        vendor=resolve(explicit, platform),
        action=action,
        args=args,
        yes=bool(settings.yes),
        su=bool(settings.su) and supports_elevation(platform),
        dry_run=options.dry_run,
        pager=(settings.pager or default_pager()) if paginate else None,
    )


def dispatch(ctx: typer.Context, action: Action, args: str = "", paginate: bool = False) -> None:
    """Run an action and exit with its status."""
    options: GlobalOptions = ctx.obj or GlobalOptions()
    try:
        code = run_invocation(build_invocation(options, action, args, paginate))
    except Exception as e:
        code = handle_error(e)
    raise typer.Exit(code)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-d", help="Print commands instead of running them"
    ),
    su: bool = typer.Option(
        False, "--su", "-s", help="Run as root (user must be a sudoer)"
    ),
    vendor: Optional[str] = typer.Option(
        None, "--vendor", "-v", help="Package manager to use"
    ),
    skip_config: bool = typer.Option(
        False, "--skip-config", "-x", help="Do not read the configuration file"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Assume yes for all prompts"),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug events to stderr"),
) -> None:
    """Translate generic package commands for the installed package manager."""
    if verbose:
        configure_logging(level="DEBUG", enable_console=True, force=True)
    ctx.obj = GlobalOptions(
        config=config,
        dry_run=dry_run,
        su=su,
        vendor=vendor,
        skip_config=skip_config,
        yes=yes,
    )


@app.command()
def install(
    ctx: typer.Context,
    packages: List[str] = typer.Argument(..., help="Package(s) to install"),
) -> None:
    """Install package(s)."""
    dispatch(ctx, Action.INSTALL, " ".join(packages))


@app.command()
def remove(
    ctx: typer.Context,
    packages: List[str] = typer.Argument(..., help="Package(s) to remove"),
) -> None:
    """Remove package(s)."""
    dispatch(ctx, Action.REMOVE, " ".join(packages))


@app.command()
def upgrade(
    ctx: typer.Context,
    packages: Optional[List[str]] = typer.Argument(
        None, help="Package(s) to upgrade, everything when omitted"
    ),
) -> None:
    """Upgrade package(s)."""
    if packages:
        dispatch(ctx, Action.UPGRADE, " ".join(packages))
    else:
        dispatch(ctx, Action.UPGRADE_ALL)


@app.command()
def search(
    ctx: typer.Context,
    query: List[str] = typer.Argument(..., help="Text to search for"),
    paginate: bool = typer.Option(False, "--paginate", "-p", help="Paginate results"),
) -> None:
    """Search for packages."""
    dispatch(ctx, Action.SEARCH, " ".join(query), paginate=paginate)


@app.command()
def info(
    ctx: typer.Context,
    package: str = typer.Argument(..., help="Package to describe"),
) -> None:
    """Get information for a package."""
    dispatch(ctx, Action.INFO, package)


@app.command()
def update(ctx: typer.Context) -> None:
    """Update the system package database."""
    dispatch(ctx, Action.UPDATE)


@app.command("list")
def list_installed(
    ctx: typer.Context,
    paginate: bool = typer.Option(False, "--paginate", "-p", help="Paginate results"),
) -> None:
    """List installed packages."""
    dispatch(ctx, Action.LIST, paginate=paginate)


@app.command("list-vendors")
def list_vendors(
    show_all: bool = typer.Option(
        False, "--all", "-a", help="Include vendors that are not installed"
    ),
    paginate: bool = typer.Option(False, "--paginate", "-p", help="Paginate results"),
) -> None:
    """List the package managers available on this host."""
    rows = [(vendor, is_available(vendor)) for vendor in candidates(current_platform())]
    if not show_all:
        rows = [row for row in rows if row[1]]

    table = vendor_table(rows)
    if paginate:
        with console.pager():
            console.print(table)
    else:
        console.print(table)


if __name__ == "__main__":
    app()
