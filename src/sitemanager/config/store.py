"""File-based configuration store implementation."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
from result import Err, Ok, Result

from sitemanager.common import AppDirectories, create_logger, get_global_config_root

from .loader import describe_validation_error, load_config_file
from .models import ConfigError, ConfigValidationError, SiteManagerConfig
from .resolver import apply_env_overrides

logger = create_logger("config")


class FileConfigStore:
    def __init__(self, directories: AppDirectories, filename: str = "config.yaml") -> None:
        self.directories = directories
        self.filename = filename

    @property
    def config_path(self) -> Path:
        return get_global_config_root(self.directories) / self.filename

    def load(self) -> Result[SiteManagerConfig, ConfigError]:
        """Load the config file (defaults when absent) and apply env overrides."""
        path = self.config_path
        logger.debug("Loading config", path=str(path), exists=path.is_file())

        loaded: Result[SiteManagerConfig, ConfigError]
        loaded = load_config_file(path) if path.is_file() else Ok(SiteManagerConfig())

        return loaded.and_then(self._apply_env_overrides).inspect_err(
            lambda error: logger.error("Config load failed", path=str(error.path), error=error.message)
        )

    def _apply_env_overrides(self, config: SiteManagerConfig) -> Result[SiteManagerConfig, ConfigError]:
        try:
            return Ok(apply_env_overrides(config))
        except ValidationError as exc:
            field, message = describe_validation_error(exc)
            return Err(
                ConfigValidationError(
                    path=self.config_path,
                    field=field,
                    message=f"Invalid environment override: {message}",
                )
            )
