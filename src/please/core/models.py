"""Data models for vendors, actions and invocations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from please.core.platforms import Platform


class Vendor(Enum):
    """Enumeration of supported package managers.

    The value is the canonical display name, used both to print a vendor
    and to parse one from user input.
    """

    APK = "Apk"
    APT = "Apt"
    BREW = "Brew"
    CARDS = "Cards"
    CHOCO = "Choco"
    DNF = "Dnf"
    EMERGE = "Emerge"
    EOPKG = "Eopkg"
    FLATPAK = "Flatpak"
    GUIX = "Guix"
    NIX_ENV = "NixEnv"
    OPKG = "Opkg"
    PACMAN = "Pacman"
    PKG = "Pkg"
    PKGMAN = "Pkgman"
    PORTS = "Ports"
    SCOOP = "Scoop"
    SLACKPKG = "Slackpkg"
    SNAP = "Snap"
    TERMUX = "Termux"
    URPM = "Urpm"
    WINGET = "Winget"
    XBPS = "Xbps"
    YAY = "Yay"
    YUM = "Yum"
    ZYPPER = "Zypper"

    def __str__(self) -> str:
        return self.value


class Action(Enum):
    """Abstract package-management operations.

    Each member carries its slot in a catalog row: slot 0 is the
    executable and slot 1 the assume-yes flag.
    """

    INSTALL = ("install", 2)
    REMOVE = ("remove", 3)
    UPGRADE = ("upgrade", 4)
    SEARCH = ("search", 5)
    INFO = ("info", 6)
    UPDATE = ("update", 7)
    UPGRADE_ALL = ("upgrade-all", 8)
    LIST = ("list", 9)

    def __init__(self, label: str, slot: int) -> None:
        self.label = label
        self.slot = slot

    @property
    def pageable(self) -> bool:
        """Whether output of this action may be piped into a pager."""
        return self in (Action.SEARCH, Action.LIST)

    @property
    def config_section(self) -> str:
        """Configuration table holding this action's defaults."""
        return "upgrade" if self is Action.UPGRADE_ALL else self.label


@dataclass(frozen=True)
class VendorProfile:
    """Executable, assume-yes flag and command templates of a vendor.

    Templates contain the `$yes` and `$args` placeholders; an empty
    template means the vendor does not support the action.
    """

    executable: str
    yes_flag: str
    install: str
    remove: str
    upgrade: str
    search: str
    info: str
    update: str
    upgrade_all: str
    list_installed: str
    platforms: frozenset[Platform] = field(default_factory=frozenset)

    @property
    def row(self) -> tuple[str, ...]:
        """The ten-slot row: executable, yes flag, then eight templates."""
        return (
            self.executable,
            self.yes_flag,
            self.install,
            self.remove,
            self.upgrade,
            self.search,
            self.info,
            self.update,
            self.upgrade_all,
            self.list_installed,
        )

    @property
    def slots(self) -> tuple[str, ...]:
        """The nine substitutable slots (yes flag and templates)."""
        return self.row[1:]

    def template(self, action: Action) -> str:
        """Command template of an action, empty when unsupported."""
        return self.row[action.slot]


@dataclass
class Invocation:
    """A single resolved request, consumed once by the dispatcher."""

    vendor: Vendor
    action: Action
    args: str = ""
    yes: bool = False
    su: bool = False
    dry_run: bool = False
    pager: str | None = None
