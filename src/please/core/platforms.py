"""Host platform detection."""

from __future__ import annotations

import sys
from enum import Enum


class Platform(Enum):
    """Operating systems with a distinct set of package managers."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    ANDROID = "android"
    HAIKU = "haiku"
    FREEBSD = "freebsd"


def current_platform(name: str | None = None) -> Platform:
    """Map a `sys.platform` string to a Platform.

    Args:
        name: Platform string to map, defaults to `sys.platform`.

    Returns:
        The matching Platform. Unrecognised POSIX systems are treated as Linux.
    """
    if name is None:
        name = sys.platform
        # Android reports "linux" before Python 3.13
        if name == "linux" and hasattr(sys, "getandroidapilevel"):
            return Platform.ANDROID

    if name == "darwin":
        return Platform.MACOS
    if name in ("win32", "cygwin"):
        return Platform.WINDOWS
    if name == "android":
        return Platform.ANDROID
    if name.startswith("haiku"):
        return Platform.HAIKU
    if name.startswith("freebsd"):
        return Platform.FREEBSD
    return Platform.LINUX


def supports_elevation(platform: Platform | None = None) -> bool:
    """Whether `sudo`-style elevation exists on the platform."""
    return (platform or current_platform()) is not Platform.WINDOWS
