"""Tests for configuration loading and merging."""

from pathlib import Path
from textwrap import dedent

import pytest

from please.core.config import (
    CONFIG_FILENAME,
    DEFAULT_PAGER,
    Settings,
    apply_defaults,
    default_config_path,
    default_pager,
    load_config,
    settings_for,
)
from please.core.errors import ConfigError
from please.core.models import Action


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / CONFIG_FILENAME


def write_config(path: Path, content: str) -> None:
    path.write_text(dedent(content).lstrip())


class TestLoadConfig:
    """Tests for best-effort loading."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        """Test a missing file yields no configuration."""
        assert load_config(tmp_path / 'nope.toml') == {}

    def test_malformed_file_is_ignored(self, config_path: Path) -> None:
        """Test invalid TOML is silently ignored."""
        write_config(config_path, '[default\nyes = ')

        assert load_config(config_path) == {}

    def test_directory_is_ignored(self, tmp_path: Path) -> None:
        """Test an unreadable path is ignored."""
        assert load_config(tmp_path) == {}

    def test_valid_file_parsed(self, config_path: Path) -> None:
        """Test a valid file is parsed into tables."""
        write_config(
            config_path,
            """
            [default]
            yes = true
            vendor = "apt"
            """,
        )

        assert load_config(config_path) == {'default': {'yes': True, 'vendor': 'apt'}}


class TestSettingsFor:
    """Tests for per-action defaults."""

    def test_action_table_overrides_default(self, config_path: Path) -> None:
        """Test [install] values win over [default]."""
        write_config(
            config_path,
            """
            [default]
            yes = true
            su = true
            vendor = "dnf"

            [install]
            yes = false

            [search]
            pager = "less -p $args"
            """,
        )
        config = load_config(config_path)

        install = settings_for(config, Action.INSTALL, config_path)
        search = settings_for(config, Action.SEARCH, config_path)

        assert install == Settings(yes=False, su=True, vendor='dnf', pager=None)
        assert search == Settings(yes=True, su=True, vendor='dnf', pager='less -p $args')

    def test_upgrade_all_uses_upgrade_table(self) -> None:
        """Test upgrading everything reads the [upgrade] table."""
        config = {'upgrade': {'yes': True}}

        assert settings_for(config, Action.UPGRADE_ALL).yes is True

    def test_empty_config(self) -> None:
        """Test no configuration yields unset settings."""
        assert settings_for({}, Action.LIST) == Settings()

    def test_wrong_type_is_an_error(self, config_path: Path) -> None:
        """Test a wrongly typed value raises ConfigError."""
        write_config(
            config_path,
            """
            [default]
            yes = "please"
            """,
        )

        with pytest.raises(ConfigError) as exc_info:
            settings_for(load_config(config_path), Action.INSTALL, config_path)

        assert exc_info.value.context['key'] == 'default.yes'
        assert exc_info.value.context['path'] == str(config_path)

    def test_section_must_be_table(self) -> None:
        """Test a scalar where a table is expected raises ConfigError."""
        with pytest.raises(ConfigError):
            settings_for({'install': 3}, Action.INSTALL)

    def test_unknown_keys_are_skipped(self) -> None:
        """Test unrecognised keys do not fail the load."""
        config = {'default': {'colour': 'always', 'yes': True}}

        assert settings_for(config, Action.INFO) == Settings(yes=True)


class TestApplyDefaults:
    """Tests for CLI/config precedence."""

    def test_config_fills_unset_values(self) -> None:
        """Test config values apply when flags are off."""
        cli = Settings(yes=False, su=False, vendor=None)
        defaults = Settings(yes=True, su=True, vendor='pacman', pager='most')

        assert apply_defaults(cli, defaults) == Settings(
            yes=True, su=True, vendor='pacman', pager='most'
        )

    def test_cli_values_win(self) -> None:
        """Test explicit CLI values are kept."""
        cli = Settings(yes=True, su=False, vendor='apt')
        defaults = Settings(yes=False, su=False, vendor='pacman')

        assert apply_defaults(cli, defaults) == Settings(yes=True, su=False, vendor='apt')

    def test_unset_everywhere_is_false(self) -> None:
        """Test booleans default to False."""
        assert apply_defaults(Settings(), Settings()) == Settings(yes=False, su=False)


class TestEnvironmentDefaults:
    """Tests for environment-derived defaults."""

    def test_config_path_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test PLEASE_CONFIG wins."""
        monkeypatch.setenv('PLEASE_CONFIG', str(tmp_path / 'custom.toml'))

        assert default_config_path() == tmp_path / 'custom.toml'

    def test_config_path_xdg(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test XDG_CONFIG_HOME is honoured."""
        monkeypatch.delenv('PLEASE_CONFIG', raising=False)
        monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path))

        assert default_config_path() == tmp_path / CONFIG_FILENAME

    def test_pager_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test PAGER is used, falling back to less."""
        monkeypatch.setenv('PAGER', 'most')
        assert default_pager() == 'most'

        monkeypatch.delenv('PAGER')
        assert default_pager() == DEFAULT_PAGER
