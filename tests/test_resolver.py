"""Tests for vendor resolution."""

from typing import Callable, Iterable

import pytest

from please.core.catalog import candidates, vendor_name
from please.core.errors import NoVendorError
from please.core.models import Vendor
from please.core.platforms import Platform
from please.core.resolver import is_available, resolve

Installed = Callable[[Iterable[str]], None]


class TestResolve:
    """Tests for resolve."""

    def test_explicit_vendor_is_not_probed(self, installed: Installed) -> None:
        """Test a pinned vendor is returned even when not installed."""
        installed([])

        assert resolve(Vendor.ZYPPER, Platform.LINUX) is Vendor.ZYPPER

    def test_first_installed_candidate_wins(self, installed: Installed) -> None:
        """Test apt is preferred over snap when both exist."""
        installed(['snap', 'apt'])

        assert resolve(platform=Platform.LINUX) is Vendor.APT

    def test_later_candidate_found(self, installed: Installed) -> None:
        """Test probing continues past missing executables."""
        installed(['flatpak', 'pacman'])

        assert resolve(platform=Platform.LINUX) is Vendor.PACMAN

    @pytest.mark.parametrize(
        ('executables', 'expected'),
        [
            (['nix-env', 'zypper'], Vendor.ZYPPER),
            (['guix', 'slackpkg'], Vendor.SLACKPKG),
            (['prt-get', 'opkg', 'snap'], Vendor.SNAP),
        ],
    )
    def test_distribution_manager_beats_secondary(
        self, installed: Installed, executables: list[str], expected: Vendor
    ) -> None:
        """Test the distribution's own manager wins over later candidates."""
        installed(executables)

        assert resolve(platform=Platform.LINUX) is expected

    def test_other_platform_executables_ignored(self, installed: Installed) -> None:
        """Test executables of another platform are not picked."""
        installed(['winget', 'brew', 'dnf'])

        assert resolve(platform=Platform.LINUX) is Vendor.DNF

    @pytest.mark.parametrize('platform', list(Platform))
    def test_none_installed_lists_every_candidate(
        self, installed: Installed, platform: Platform
    ) -> None:
        """Test the error names every candidate of the platform."""
        installed([])

        with pytest.raises(NoVendorError) as exc_info:
            resolve(platform=platform)

        message = str(exc_info.value)
        assert message.startswith('no vendor installed, candidates are: ')
        for vendor in candidates(platform):
            assert vendor_name(vendor) in message
        assert exc_info.value.context['candidates'] == ', '.join(
            vendor_name(vendor) for vendor in candidates(platform)
        )
        assert exc_info.value.context['platform'] == platform.value


class TestIsAvailable:
    """Tests for is_available."""

    def test_probes_profile_executable(self, installed: Installed) -> None:
        """Test the catalog executable name is looked up."""
        installed(['nix-env', 'xbps-install'])

        assert is_available(Vendor.NIX_ENV)
        assert is_available(Vendor.XBPS)
        assert not is_available(Vendor.APT)
