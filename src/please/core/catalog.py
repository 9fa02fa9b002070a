"""Static table of vendor command templates.

Rows are declared in probe order: when several vendors of the same
platform are installed, the first one listed wins.
"""

from __future__ import annotations

from types import MappingProxyType

from please.core.errors import CatalogError, UnknownVendorError
from please.core.models import Vendor, VendorProfile
from please.core.platforms import Platform, current_platform

LINUX = frozenset({Platform.LINUX})
MACOS = frozenset({Platform.MACOS})
WINDOWS = frozenset({Platform.WINDOWS})


def _profile(platforms: frozenset[Platform], *row: str) -> VendorProfile:
    executable, yes_flag, *templates = row
    return VendorProfile(executable, yes_flag, *templates, platforms=platforms)


_VENDORS: dict[Vendor, VendorProfile] = {
    Vendor.TERMUX: _profile(
        frozenset({Platform.ANDROID}),
        "pkg",
        "--yes",
        "pkg install $yes $args",
        "pkg uninstall $yes $args",
        "pkg install $yes $args",
        "pkg search $args",
        "pkg show $args",
        "pkg update $yes",
        "pkg upgrade $yes",
        "pkg list-installed",
    ),
    Vendor.PKGMAN: _profile(
        frozenset({Platform.HAIKU}),
        "pkgman",
        "-y",
        "pkgman install $yes $args",
        "pkgman uninstall $yes $args",
        "pkgman update $yes $args",
        "pkgman search $args",
        "",
        "pkgman refresh $yes",
        "pkgman update $yes",
        "pkgman search --installed-only --all",
    ),
    Vendor.PKG: _profile(
        frozenset({Platform.FREEBSD}),
        "pkg",
        "--yes",
        "pkg install $yes $args",
        "pkg remove $yes $args",
        "pkg install $yes $args",
        "pkg search $args",
        "pkg info $args",
        "pkg update $yes",
        "pkg upgrade $yes",
        "pkg info --all",
    ),
    Vendor.BREW: _profile(
        MACOS,
        "brew",
        "",
        "brew install $args",
        "brew uninstall $args",
        "brew upgrade $args",
        "brew search $args",
        "brew info $args",
        "brew update",
        "brew upgrade",
        "brew list",
    ),
    Vendor.APT: _profile(
        LINUX,
        "apt",
        "--yes",
        "apt install $yes $args",
        "apt remove $yes $args",
        "apt install --only-upgrade $yes $args",
        "apt search $args",
        "apt show $args",
        "apt update $yes",
        "apt upgrade $yes",
        "apt list --installed",
    ),
    Vendor.DNF: _profile(
        LINUX,
        "dnf",
        "--assumeyes",
        "dnf install $yes $args",
        "dnf remove $yes $args",
        "dnf upgrade $yes $args",
        "dnf search $args",
        "dnf info $args",
        "dnf check-update $yes",
        "dnf update $yes",
        "dnf list --installed",
    ),
    Vendor.YUM: _profile(
        LINUX,
        "yum",
        "--assumeyes",
        "yum install $yes $args",
        "yum remove $yes $args",
        "yum update $yes $args",
        "yum search $args",
        "yum info $args",
        "yum check-update $yes",
        "yum update $yes",
        "yum list --installed",
    ),
    Vendor.YAY: _profile(
        LINUX,
        "yay",
        "--noconfirm",
        "yay --topdown --cleanafter -S $yes $args",
        "pacman -Rs $yes $args",
        "yay --topdown --cleanafter -S $yes $args",
        "yay --topdown -Ss $args",
        "yay --topdown -Si $args",
        "yay --topdown -Sy $yes",
        "yay --topdown -Syu $yes",
        "pacman -Q",
    ),
    Vendor.PACMAN: _profile(
        LINUX,
        "pacman",
        "--noconfirm",
        "pacman -S $yes $args",
        "pacman -Rs $yes $args",
        "pacman -S $yes $args",
        "pacman -Ss $args",
        "pacman -Si $args",
        "pacman -Sy $yes",
        "pacman -Syu $yes",
        "pacman -Q",
    ),
    Vendor.APK: _profile(
        LINUX,
        "apk",
        "",
        "apk add $args",
        "apk del $args",
        "apk upgrade $args",
        "apk search $args",
        "apk info $args",
        "apk update",
        "apk upgrade",
        "apk list --installed",
    ),
    Vendor.EMERGE: _profile(
        LINUX,
        "emerge",
        "",
        "emerge $args",
        "emerge --depclean $args",
        "emerge --update $args",
        "emerge --search $args",
        "emerge --info $args",
        "emerge --sync",
        "emerge -vuDN @world",
        "qlist -Iv",
    ),
    Vendor.SLACKPKG: _profile(
        LINUX,
        "slackpkg",
        "",
        "slackpkg install $args",
        "slackpkg remove $args",
        "slackpkg upgrade $args",
        "slackpkg search $args",
        "slackpkg info $args",
        "slackpkg update",
        "slackpkg upgrade-all",
        "ls -1 /var/log/packages",
    ),
    Vendor.ZYPPER: _profile(
        LINUX,
        "zypper",
        "--no-confirm",
        "zypper install $yes $args",
        "zypper remove $yes $args",
        "zypper update $yes $args",
        "zypper search $args",
        "zypper info $args",
        "zypper refresh $yes",
        "zypper update $yes",
        "zypper search --installed-only",
    ),
    Vendor.NIX_ENV: _profile(
        frozenset({Platform.LINUX, Platform.MACOS}),
        "nix-env",
        "",
        "nix-env --install $args",
        "nix-env --uninstall $args",
        "nix-env --upgrade $args",
        "nix-env -qaP $args",
        "nix-env -qa --description $args",
        "nix-channel --update",
        "nix-env --upgrade",
        "nix-env --query --installed",
    ),
    Vendor.XBPS: _profile(
        LINUX,
        "xbps-install",
        "--yes",
        "xbps-install $yes $args",
        "xbps-remove $yes $args",
        "xbps-install --update $yes $args",
        "xbps-query -Rs $args",
        "xbps-query -RS $args",
        "xbps-install --sync $yes",
        "xbps-install --update $yes",
        "xbps-query --list-pkgs",
    ),
    Vendor.CARDS: _profile(
        LINUX,
        "cards",
        "",
        "cards install $args",
        "cards remove $args",
        "cards install --upgrade $args",
        "cards search $args",
        "cards info $args",
        "cards sync",
        "cards upgrade",
        "cards list",
    ),
    Vendor.URPM: _profile(
        LINUX,
        "urpmi",
        "",
        "urpmi $args",
        "urpme $args",
        "urpmi $args",
        "urpmq --fuzzy $args",
        "urpmq -i $args",
        "urpmi.update -a",
        "urpmi --auto-update",
        "rpm --query --all",
    ),
    Vendor.EOPKG: _profile(
        LINUX,
        "eopkg",
        "--yes-all",
        "eopkg install $yes $args",
        "eopkg remove $yes $args",
        "eopkg upgrade $yes $args",
        "eopkg search $args",
        "eopkg info $args",
        "eopkg update-repo $yes",
        "eopkg upgrade $yes",
        "eopkg list-installed",
    ),
    Vendor.FLATPAK: _profile(
        LINUX,
        "flatpak",
        "--assumeyes",
        "flatpak install $yes $args",
        "flatpak uninstall $yes $args",
        "flatpak update $yes $args",
        "flatpak search $args",
        "flatpak info $args",
        "",
        "flatpak update $yes",
        "flatpak list",
    ),
    Vendor.SNAP: _profile(
        LINUX,
        "snap",
        "",
        "snap install --classic $args",
        "snap remove $args",
        "snap refresh $args",
        "snap find $args",
        "snap info $args",
        "",
        "snap refresh",
        "snap list",
    ),
    Vendor.GUIX: _profile(
        LINUX,
        "guix",
        "",
        "guix install $yes $args",
        "guix remove $yes $args",
        "guix upgrade $yes $args",
        "guix search $args",
        "guix show $args",
        "guix refresh $yes",
        "guix upgrade $yes",
        "guix package --list-installed",
    ),
    Vendor.OPKG: _profile(
        LINUX,
        "opkg",
        "",
        "opkg install $args",
        "opkg remove $args",
        "opkg upgrade $args",
        "opkg find $args",
        "opkg info $args",
        "opkg update",
        "opkg upgrade",
        "opkg list-installed",
    ),
    Vendor.PORTS: _profile(
        LINUX,
        "prt-get",
        "",
        "prt-get install $args",
        "prt-get remove $args",
        "prt-get update $args",
        "prt-get search $args",
        "prt-get info $args",
        "ports -u",
        "prt-get sysup",
        "prt-get listinst",
    ),
    Vendor.SCOOP: _profile(
        WINDOWS,
        "scoop",
        "",
        "scoop install $args",
        "scoop uninstall $args",
        "scoop update $args",
        "scoop search $args",
        "scoop info $args",
        "scoop update",
        "scoop update *",
        "scoop list",
    ),
    Vendor.CHOCO: _profile(
        WINDOWS,
        "choco",
        "--yes",
        "choco install $yes $args",
        "choco uninstall $yes $args",
        "choco upgrade $yes $args",
        "choco search $args",
        "choco info $args",
        "",
        "choco upgrade all $yes",
        "choco list",
    ),
    Vendor.WINGET: _profile(
        WINDOWS,
        "winget",
        "",
        "winget install $args",
        "winget uninstall $args",
        "winget upgrade $args",
        "winget search $args",
        "winget show $args",
        "",
        "winget upgrade --all",
        "winget list",
    ),
}

VENDORS = MappingProxyType(_VENDORS)


def lookup(vendor: Vendor) -> VendorProfile:
    """Return the profile of a vendor.

    Raises:
        CatalogError: If the vendor has no row, which is a bug.
    """
    try:
        return VENDORS[vendor]
    except KeyError:
        raise CatalogError(str(vendor)) from None


def candidates(platform: Platform | None = None) -> list[Vendor]:
    """Vendors meaningful on a platform, in probe order."""
    platform = platform or current_platform()
    return [vendor for vendor, profile in VENDORS.items() if platform in profile.platforms]


def vendor_name(vendor: Vendor) -> str:
    """Canonical display name of a vendor."""
    return vendor.value


def parse_vendor(name: str, platform: Platform | None = None, source: str | None = None) -> Vendor:
    """Find the vendor whose display name matches, ignoring case.

    Only vendors meaningful on the platform can be selected.

    Args:
        name: Vendor name as typed by the user.
        platform: Platform to restrict the match to, defaults to the host.
        source: Where the name came from, for error reporting.

    Raises:
        UnknownVendorError: If no vendor of the platform has this name.
    """
    wanted = name.strip().lower()
    for vendor in candidates(platform):
        if vendor_name(vendor).lower() == wanted:
            return vendor
    raise UnknownVendorError(name=name, source=source)
