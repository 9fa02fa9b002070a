"""Configuration file loading and default merging.

The file is TOML with a `[default]` table and one optional table per
action, for example:

    [default]
    yes = true
    vendor = "apt"

    [search]
    pager = "less -p $args"
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from please.core.errors import ConfigError
from please.core.logging import get_logger
from please.core.models import Action

log = get_logger(__name__)

CONFIG_FILENAME = "please.toml"
DEFAULT_SECTION = "default"
DEFAULT_PAGER = "less"

_EXPECTED_TYPES: dict[str, type] = {
    "yes": bool,
    "su": bool,
    "vendor": str,
    "pager": str,
}


@dataclass
class Settings:
    """User-overridable defaults; None means "not set"."""
    yes: bool | None = None
    su: bool | None = None
    vendor: str | None = None
    pager: str | None = None

    def merged_over(self, base: Settings) -> Settings:
        """Return `base` with every value set here taking precedence."""
        updates = {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}
        return replace(base, **updates)


def default_config_path() -> Path:
    """Location of the configuration file.

    `PLEASE_CONFIG` wins, then `$XDG_CONFIG_HOME/please.toml`, then
    `~/.config/please.toml`.
    """
    override = os.environ.get("PLEASE_CONFIG")
    if override:
        return Path(override).expanduser()
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / CONFIG_FILENAME


def default_pager() -> str:
    """Pager used when neither the CLI nor the config names one."""
    return os.environ.get("PAGER") or DEFAULT_PAGER


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Read a configuration file, best effort.

    A missing, unreadable or malformed file yields an empty configuration
    so that built-in defaults apply.

    Args:
        path: File to read, defaults to `default_config_path()`.

    Returns:
        The parsed TOML document.
    """
    path = path or default_config_path()
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        log.debug("config_missing", path=str(path))
        return {}
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        log.warning("config_ignored", path=str(path), error=str(e))
        return {}

    log.debug("config_loaded", path=str(path), sections=sorted(data))
    return data


def _section_settings(config: dict[str, Any], section: str, path: Path | None) -> Settings:
    table = config.get(section)
    if table is None:
        return Settings()
    if not isinstance(table, dict):
        raise ConfigError(
            f"[{section}] must be a table",
            path=str(path) if path else None,
            key=section,
        )

    values: dict[str, Any] = {}
    for key, value in table.items():
        expected = _EXPECTED_TYPES.get(key)
        if expected is None:
            log.warning("config_unknown_key", section=section, key=key)
            continue
        if not isinstance(value, expected):
            raise ConfigError(
                f"{section}.{key} must be a {expected.__name__}, got {value!r}",
                path=str(path) if path else None,
                key=f"{section}.{key}",
            )
        values[key] = value
    return Settings(**values)


def settings_for(config: dict[str, Any], action: Action, path: Path | None = None) -> Settings:
    """Defaults for an action: `[default]` overlaid with the action's table.

    Raises:
        ConfigError: If a value has the wrong type.
    """
    defaults = _section_settings(config, DEFAULT_SECTION, path)
    specific = _section_settings(config, action.config_section, path)
    return specific.merged_over(defaults)


def apply_defaults(cli: Settings, defaults: Settings) -> Settings:
    """Fill values the command line left unset from configured defaults.

    Boolean flags count as unset when they are off, since the command
    line can only switch them on.
    """
    explicit = Settings(
        yes=cli.yes or None,
        su=cli.su or None,
        vendor=cli.vendor,
        pager=cli.pager,
    )
    merged = explicit.merged_over(defaults)
    return Settings(
        yes=bool(merged.yes),
        su=bool(merged.su),
        vendor=merged.vendor,
        pager=merged.pager,
    )
