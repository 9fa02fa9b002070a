"""Selection of the package manager to drive."""

from __future__ import annotations

import shutil

from please.core.catalog import candidates, lookup, vendor_name
from please.core.errors import NoVendorError
from please.core.logging import get_logger
from please.core.models import Vendor
from please.core.platforms import Platform, current_platform

log = get_logger(__name__)


def is_available(vendor: Vendor) -> bool:
    """Whether the vendor's executable is on PATH."""
    return shutil.which(lookup(vendor).executable) is not None


def resolve(explicit: Vendor | None = None, platform: Platform | None = None) -> Vendor:
    """Pick the vendor to use.

    An explicit vendor is returned as is, without checking that it is
    installed. Otherwise the platform's candidates are probed in catalog
    order and the first one found on PATH is returned.

    Args:
        explicit: Vendor pinned by the user, if any.
        platform: Platform whose candidates to probe, defaults to the host.

    Returns:
        The selected Vendor.

    Raises:
        NoVendorError: If no candidate executable is installed.
    """
    if explicit is not None:
        log.debug("vendor_pinned", vendor=vendor_name(explicit))
        return explicit

    platform = platform or current_platform()
    vendors = candidates(platform)
    for vendor in vendors:
        if is_available(vendor):
            log.debug("vendor_resolved", vendor=vendor_name(vendor), platform=platform.value)
            return vendor

    log.error("vendor_not_found", platform=platform.value, candidates=len(vendors))
    raise NoVendorError(
        candidates=[vendor_name(vendor) for vendor in vendors],
        platform=platform.value,
    )
