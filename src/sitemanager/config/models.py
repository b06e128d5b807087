"""Pydantic models for sitemanager configuration and its errors."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from sitemanager.common import LoggingConfig

_NonEmptyString = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ConfigYamlError(BaseModel):
    """YAML parsing error in configuration file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Schema validation error in configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    field: str | None = None
    message: str


class ConfigIOError(BaseModel):
    """File I/O error reading configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


type ConfigError = ConfigYamlError | ConfigValidationError | ConfigIOError


class NginxConfig(BaseModel):
    """Where nginx virtual hosts live and how they are rendered."""

    model_config = ConfigDict(extra="forbid")

    sites_available_dir: Path = Path("/etc/nginx/sites-available")
    sites_enabled_dir: Path = Path("/etc/nginx/sites-enabled")
    web_root: Path = Path("/var/www")
    public_dir: _NonEmptyString = "public"
    php_fpm_socket: _NonEmptyString = "unix:/var/run/php/php-fpm.sock"


class HostsConfig(BaseModel):
    """Static hostname mapping for local domains."""

    model_config = ConfigDict(extra="forbid")

    hosts_file: Path = Path("/etc/hosts")
    address: _NonEmptyString = "127.0.0.1"
    tld: _NonEmptyString = "test"


class ServiceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    restart_command: list[_NonEmptyString] = Field(
        default_factory=lambda: ["sudo", "systemctl", "restart", "nginx"],
        min_length=1,
    )


class SiteManagerConfig(BaseModel):
    """Effective configuration (~/.config/sitemanager/config.yaml plus env overrides)."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    nginx: NginxConfig = Field(default_factory=NginxConfig)
    hosts: HostsConfig = Field(default_factory=HostsConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
