"""Turn a vendor template into a concrete shell command."""

from __future__ import annotations

from please.core.models import Action, VendorProfile


def format_command(
    profile: VendorProfile,
    action: Action,
    args: str = "",
    assume_yes: bool = False,
    pager: str | None = None,
) -> str:
    """Build the shell command for an action.

    For pageable actions the pager is appended before substitution, so a
    pager such as `less -p $args` receives the query too. Placeholders are
    replaced verbatim; whitespace left by an empty `$yes` is kept.

    Args:
        profile: Catalog profile of the vendor.
        action: The action to run.
        args: Space-joined package names or search query.
        assume_yes: Substitute the vendor's assume-yes flag for `$yes`.
        pager: Optional pager command for search and list output.

    Returns:
        The command, or an empty string when the vendor does not support
        the action.
    """
    template = profile.template(action)
    if not template:
        return ""

    if pager and action.pageable:
        template = f"{template} | {pager}"

    return (
        template
        .replace("$yes", profile.yes_flag if assume_yes else "")
        .replace("$args", args)
    )
