"""Common models used across sitemanager."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel

from sitemanager.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "prod"


class AppPaths(BaseModel):
    config_dir_name: str = APP_NAME
    data_dir_name: str = APP_NAME
    config_filename: str = "config.yaml"
    logs_dir_name: str = "logs"
    log_filename: str = f"{APP_NAME}.log"


@dataclass(frozen=True)
class AppDirectories:
    """Where sitemanager keeps its own files.

    - ~/.config/{config_dir_name}/
    - ~/.local/share/{data_dir_name}/

    Attributes:
        config_dir_name: Name used under the XDG config directory
        data_dir_name: Name used under the XDG data directory
    """

    config_dir_name: str = APP_NAME
    data_dir_name: str = APP_NAME
