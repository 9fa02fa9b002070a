"""Renderers for displaying vendor information in the CLI using Rich."""

from typing import Iterable

from rich import box
from rich.console import Console
from rich.table import Table

from please.core.catalog import lookup, vendor_name
from please.core.models import Vendor

console = Console()


def availability_to_str(available: bool) -> str:
    """Colour-coded installed marker."""
    return "[green]yes[/green]" if available else "[dim]no[/dim]"


def vendor_table(vendors: Iterable[tuple[Vendor, bool]]) -> Table:
    """Create a Rich Table describing vendors.

    Args:
        vendors: Pairs of vendor and whether its executable is installed.

    Returns:
        A Rich Table with one row per vendor, in probe order.
    """
    table = Table(box=box.MINIMAL_HEAVY_HEAD)
    table.add_column("Vendor", style="bold")
    table.add_column("Executable")
    table.add_column("Assume-yes flag", style="dim")
    table.add_column("Installed")

    for vendor, available in vendors:
        profile = lookup(vendor)
        table.add_row(
            vendor_name(vendor),
            profile.executable,
            profile.yes_flag,
            availability_to_str(available),
        )

    return table
