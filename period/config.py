"""Configuration file management for period."""

import os
import tomllib
from pathlib import Path
from typing import Any, cast

import tomli_w

from period.models import DATE_STYLES, WEEKDAY_NAMES, DateStyle

DEFAULT_CONFIG: dict[str, Any] = {
    "date_style": "iso",
    "week_start": "monday",
}


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "period" / "config.toml"


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(dict(DEFAULT_CONFIG), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file, filling in defaults.

    A missing file yields the defaults. Keys not known to period are kept.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        tomllib.TOMLDecodeError: If the file exists but is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    config = dict(DEFAULT_CONFIG)
    if config_path.exists():
        with open(config_path, "rb") as f:
            config.update(tomllib.load(f))
    return config


def validate_setting(key: str, value: str) -> str:
    """Check a setting against its allowed values.

    Values are matched case-insensitively.

    Returns:
        The value in the lowercase form that is stored.

    Raises:
        ValueError: If the key is unknown or the value is not allowed.
    """
    allowed = {"date_style": DATE_STYLES, "week_start": WEEKDAY_NAMES}
    if key not in allowed:
        raise ValueError(f"Unknown setting '{key}'. Known settings: {', '.join(allowed)}")
    normalized = value.lower()
    if normalized not in allowed[key]:
        raise ValueError(f"Invalid value '{value}' for {key}. Use one of: {', '.join(allowed[key])}")
    return normalized


def get_setting(key: str, config_path: Path | None = None) -> Any:
    """Get a single setting, falling back to its default.

    Args:
        key: Setting name.
        config_path: Path to config file. If None, uses default location.

    Returns:
        The setting value, or None if the key is not set anywhere.
    """
    return load_config(config_path).get(key)


def set_setting(key: str, value: str, config_path: Path | None = None) -> None:
    """Validate and persist a single setting.

    Args:
        key: Setting name.
        value: New value, in any case.
        config_path: Path to config file. If None, uses default location.

    Raises:
        ValueError: If the key or value is not valid.
    """
    normalized = validate_setting(key, value)
    config = load_config(config_path)
    config[key] = normalized
    save_config(config, config_path)


def week_start_index(config: dict[str, Any]) -> int:
    """Return the configured first weekday as 0 (Monday) through 6 (Sunday).

    Raises:
        ValueError: If the configured name is not a weekday.
    """
    name = str(config.get("week_start", "monday")).lower()
    if name not in WEEKDAY_NAMES:
        raise ValueError(f"Invalid week_start '{name}' in config")
    return WEEKDAY_NAMES.index(name)


def date_style_of(config: dict[str, Any]) -> DateStyle:
    """Return the configured date output style.

    Raises:
        ValueError: If the configured style is not iso, long or short.
    """
    style = str(config.get("date_style", "iso")).lower()
    if style not in DATE_STYLES:
        raise ValueError(f"Invalid date_style '{style}' in config")
    return cast(DateStyle, style)
