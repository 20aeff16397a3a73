"""XDG-compliant path helpers for quick response storage."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

from quickresponse.constants import PREFS_DIR_NAME

APP_NAME = "quickresponse"


def get_data_dir() -> Path:
    """Get the data directory holding every component's preference files."""
    override = os.environ.get("QUICKRESPONSE_DATA_DIR")
    if override:
        return Path(override).resolve()
    return Path(user_data_dir(APP_NAME))


def get_config_dir() -> Path:
    """Get the config directory (config.toml)."""
    override = os.environ.get("QUICKRESPONSE_CONFIG_DIR")
    if override:
        return Path(override).resolve()
    return Path(user_config_dir(APP_NAME))


def get_config_path() -> Path:
    """Get the path to the main config file."""
    return get_config_dir() / "config.toml"


def get_component_dir(component: str, data_dir: Path | None = None) -> Path:
    """Get the directory owned by a component.

    Its existence is what marks the component as installed.
    """
    return (data_dir or get_data_dir()) / component


def get_preferences_path(component: str, namespace: str, data_dir: Path | None = None) -> Path:
    """Get the TOML file backing a component's preference namespace."""
    return get_component_dir(component, data_dir) / PREFS_DIR_NAME / f"{namespace}.toml"


def ensure_directories() -> None:
    """Create the data and config directories if they don't exist."""
    get_data_dir().mkdir(parents=True, exist_ok=True)
    get_config_dir().mkdir(parents=True, exist_ok=True)
