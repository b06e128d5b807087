"""Site derivation, step reports and error models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from sitemanager.config import SiteManagerConfig

_NonEmptyString = Annotated[StrictStr, Field(min_length=1)]


class SiteConfig(BaseModel):
    """Everything derived from the working directory, computed once."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    folder_name: _NonEmptyString
    domain: _NonEmptyString
    config_path: Path
    enabled_link_path: Path
    document_root: Path
    php_fpm_socket: _NonEmptyString
    hosts_file: Path
    hosts_address: _NonEmptyString

    @classmethod
    def from_directory(cls, working_dir: Path, config: SiteManagerConfig) -> SiteConfig:
        """Derive the site for ``working_dir``.

        Raises pydantic.ValidationError when the directory has no name (``/``).
        """
        folder_name = working_dir.name
        domain = f"{folder_name}.{config.hosts.tld}" if folder_name else ""
        return cls(
            folder_name=folder_name,
            domain=domain,
            config_path=config.nginx.sites_available_dir / domain,
            enabled_link_path=config.nginx.sites_enabled_dir / domain,
            document_root=config.nginx.web_root / folder_name / config.nginx.public_dir,
            php_fpm_socket=config.nginx.php_fpm_socket,
            hosts_file=config.hosts.hosts_file,
            hosts_address=config.hosts.address,
        )

    @property
    def hosts_entry(self) -> str:
        return f"{self.hosts_address}    {self.domain}"


class SiteStep(str, Enum):
    CONFIRM = "confirm"
    CONFIG = "config"
    SYMLINK = "symlink"
    HOSTS = "hosts"
    RESTART = "restart"


class StepStatus(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    ADDED = "added"
    SKIPPED = "skipped"
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    RESTARTED = "restarted"
    CANCELLED = "cancelled"


class StepReport(BaseModel):
    """What a single workflow step did."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    step: SiteStep
    status: StepStatus
    message: str


class SiteError(BaseModel):
    """Base error for site provisioning."""

    model_config = ConfigDict(extra="forbid")

    message: str


class WriteError(SiteError):
    """Writing, appending to or deleting a file failed."""

    path: Path


class ReadError(SiteError):
    """Reading a file failed."""

    path: Path


class LinkError(SiteError):
    """Creating or removing the sites-enabled symlink failed."""

    link_path: Path
    target: Path


class ProcessError(SiteError):
    """External command could not run or exited non-zero."""

    command: list[str]
    exit_code: int | None = None
