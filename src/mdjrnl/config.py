"""Configuration loading for mdjrnl.

Resolution order:
1. ``--config`` path, else ``$XDG_CONFIG_HOME/jrnl/config.toml``, else each
   entry of ``$XDG_CONFIG_DIRS``
2. ``JRNL_*`` environment variables merged over the parsed document
3. Profile table chosen by ``--profile`` > top-level ``profile`` > ``default``
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

# Python 3.11+ has tomllib in stdlib; fall back to tomli for older versions
try:
    import tomllib  # Python 3.11+
except ImportError:  # pragma: no cover
    import tomli as tomllib  # Python <3.11

from .models import ConfigError, UsageError

logger = logging.getLogger(__name__)

CONFIG_RELPATH = Path("jrnl") / "config.toml"
ENV_PREFIX = "JRNL"
DEFAULT_PROFILE = "default"
DEFAULT_EDITOR = "nvim"


@dataclass(frozen=True)
class ProfileConfig:
    """A named bag of options selecting a journal root and commit behaviour."""

    name: str
    options: Mapping[str, Any] = field(default_factory=dict)

    def root(self) -> Path:
        """Journal storage directory.

        Raises:
            ConfigError: If the profile has no ``root`` key.
        """
        value = self.options.get("root")
        if value is None or str(value) == "":
            raise ConfigError(f"Profile has no root: '{self.name}'")
        return Path(str(value)).expanduser()

    def commit(self) -> bool:
        """Whether to auto-commit; true when absent or unparsable."""
        value = self.options.get("commit")
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value in ("true", "false"):
            return value == "true"
        return True

    def editor(self) -> str:
        return str(self.options.get("editor") or DEFAULT_EDITOR)


def get_config_home(environ: Mapping[str, str]) -> Path:
    """Base directory for per-user config (XDG standard)."""
    xdg_config = environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def find_config_file(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Find the config file in the XDG config directories.

    Search order:
    1. $XDG_CONFIG_HOME/jrnl/config.toml (default ~/.config)
    2. <dir>/jrnl/config.toml for each dir in $XDG_CONFIG_DIRS (default /etc/xdg)
    """
    if environ is None:
        environ = os.environ

    candidates = [get_config_home(environ)]
    config_dirs = environ.get("XDG_CONFIG_DIRS") or "/etc/xdg"
    candidates.extend(Path(d) for d in config_dirs.split(os.pathsep) if d)

    for base in candidates:
        path = base / CONFIG_RELPATH
        if path.is_file():
            return path

    return None


def load_toml_config(path: Path) -> dict[str, Any]:
    """Load configuration from TOML file."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Couldn't parse jrnl config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Couldn't read jrnl config file {path}: {e}") from e


def apply_env_overrides(
    data: Mapping[str, Any],
    environ: Mapping[str, str],
    prefix: str = ENV_PREFIX,
) -> dict[str, Any]:
    """Merge ``PREFIX_*`` environment variables into a config document.

    ``JRNL_PROFILE=work`` sets the top-level ``profile`` key, and
    ``JRNL_WORK__ROOT=/tmp/notes`` sets ``root`` inside the ``work`` table.
    Keys are lowercased. The input mapping is not modified.
    """
    merged: dict[str, Any] = {
        k: dict(v) if isinstance(v, dict) else v for k, v in data.items()
    }
    marker = prefix + "_"

    for env_key in sorted(environ):
        if not env_key.startswith(marker):
            continue
        key = env_key[len(marker):].lower()
        if not key:
            continue
        value = environ[env_key]

        table_name, sep, option = key.partition("__")
        if sep and table_name and option:
            table = merged.get(table_name)
            if not isinstance(table, dict):
                table = {}
                merged[table_name] = table
            table[option] = value
            logger.debug("env override %s -> [%s].%s", env_key, table_name, option)
        else:
            merged[key] = value
            logger.debug("env override %s -> %s", env_key, key)

    return merged


def select_profile_name(data: Mapping[str, Any], cli_profile: Optional[str] = None) -> str:
    """Pick the active profile: CLI flag, then config default, then ``default``."""
    if cli_profile:
        return cli_profile
    configured = data.get("profile")
    if isinstance(configured, str) and configured:
        return configured
    return DEFAULT_PROFILE


def dict_to_profile(data: Mapping[str, Any], name: str) -> ProfileConfig:
    """Extract one profile table from a merged config document."""
    table = data.get(name)
    if not isinstance(table, dict):
        raise ConfigError(f"Profile '{name}' doesn't exist")
    return ProfileConfig(name=name, options=dict(table))


def load_profile(
    config_path: Optional[Path] = None,
    profile: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ProfileConfig:
    """Load the active profile.

    Args:
        config_path: Optional explicit path to config file
        profile: Profile name from the command line
        environ: Environment mapping (default: os.environ)

    Returns:
        ProfileConfig instance

    Raises:
        ConfigError: If the config file is missing, malformed, or lacks the profile.
    """
    if environ is None:
        environ = os.environ

    if config_path is None:
        config_path = find_config_file(environ)
        if config_path is None:
            raise ConfigError(
                "No config found. Please create "
                f"{get_config_home(environ) / CONFIG_RELPATH}"
            )
    elif not config_path.is_file():
        raise ConfigError(f"No config found at {config_path}")

    logger.debug("loading config from %s", config_path)
    data = apply_env_overrides(load_toml_config(config_path), environ)
    name = select_profile_name(data, profile)
    logger.info("using profile '%s'", name)
    return dict_to_profile(data, name)


def resolve_commit_policy(profile: ProfileConfig, commit: bool = False, no_commit: bool = False) -> bool:
    """Decide whether to commit after opening a note.

    Raises:
        UsageError: If both ``commit`` and ``no_commit`` are set.
    """
    if commit and no_commit:
        raise UsageError("Cannot specify both --commit and --no-commit flags")
    if commit:
        return True
    if no_commit:
        return False
    return profile.commit()
