"""Path discovery utilities for sitemanager."""

from __future__ import annotations

import os
from pathlib import Path

from .models import AppDirectories


def resolve_working_directory(working_dir: Path | None) -> Path:
    base = working_dir or Path.cwd()
    try:
        return base.resolve(strict=False)
    except OSError:
        return base


def get_global_config_root(directories: AppDirectories) -> Path:
    """Get global config root directory.

    Returns ~/.config/{app_name} (or XDG_CONFIG_HOME/{app_name} if set).
    """
    xdg_base = os.getenv("XDG_CONFIG_HOME")
    base_dir = Path(xdg_base).expanduser() if xdg_base else Path.home() / ".config"
    return base_dir / directories.config_dir_name


def get_data_directory(directories: AppDirectories) -> Path:
    """Get XDG data directory using AppDirectories.

    Returns ~/.local/share/{app_name} (or XDG_DATA_HOME/{app_name} if set).
    """
    xdg_data = os.getenv("XDG_DATA_HOME")
    base_dir = Path(xdg_data).expanduser() if xdg_data else Path.home() / ".local" / "share"
    return base_dir / directories.data_dir_name
