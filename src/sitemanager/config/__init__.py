"""Public configuration API for sitemanager."""

from __future__ import annotations

from .loader import load_config_file
from .models import (
    ConfigError,
    ConfigIOError,
    ConfigValidationError,
    ConfigYamlError,
    HostsConfig,
    NginxConfig,
    ServiceConfig,
    SiteManagerConfig,
)
from .store import FileConfigStore

__all__ = [
    "ConfigError",
    "ConfigIOError",
    "ConfigValidationError",
    "ConfigYamlError",
    "FileConfigStore",
    "HostsConfig",
    "NginxConfig",
    "ServiceConfig",
    "SiteManagerConfig",
    "load_config_file",
]
