"""Local nginx virtual host provisioning."""

from .models import (
    LinkError,
    ProcessError,
    ReadError,
    SiteConfig,
    SiteError,
    SiteStep,
    StepReport,
    StepStatus,
    WriteError,
)
from .process import CommandOutcome, SubprocessRunner
from .protocol import CommandRunner, Confirm
from .provisioner import SiteProvisioner

__all__ = [
    "CommandOutcome",
    "CommandRunner",
    "Confirm",
    "LinkError",
    "ProcessError",
    "ReadError",
    "SiteConfig",
    "SiteError",
    "SiteProvisioner",
    "SiteStep",
    "StepReport",
    "StepStatus",
    "SubprocessRunner",
    "WriteError",
]
