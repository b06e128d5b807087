"""Loguru setup for sitemanager.

The package keeps its own records quiet unless asked: the CLI sends them to a
rotating log file, and library callers can opt in to a stderr sink.
"""

import sys
from pathlib import Path
from typing import Any, Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from sitemanager.constants import APP_NAME

from .models import AppDirectories, AppInfo, AppPaths
from .paths import get_data_directory

TEXT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | [{extra[scope]}] {name}:{line} - {message} | {extra}\n{exception}"


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_file: str | None = Field(default=None)
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")
    format: Literal["json", "text"] = Field(default="text")


def resolve_log_file(config: LoggingConfig, directories: AppDirectories, paths: AppPaths) -> Path:
    """Explicit ``log_file`` wins; otherwise <data dir>/logs/sitemanager.log."""
    if config.log_file:
        return Path(config.log_file).expanduser()
    return get_data_directory(directories) / paths.logs_dir_name / paths.log_filename


def setup_cli_logging(
    app_info: AppInfo,
    config: LoggingConfig,
    directories: AppDirectories,
    paths: AppPaths,
) -> int:
    log_file = resolve_log_file(config, directories, paths)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})
    handler_id = logger.add(log_file, **_file_sink_options(config, app_info))

    logger.debug("File logging ready", log_file=str(log_file), level=config.log_level, format=config.format)
    return handler_id


def _file_sink_options(config: LoggingConfig, app_info: AppInfo) -> dict[str, Any]:
    options: dict[str, Any] = {
        "level": config.log_level,
        "rotation": config.rotation,
        "retention": config.retention,
        "diagnose": app_info.environment == "dev",
    }
    if config.format == "json":
        options["serialize"] = True
    else:
        options["format"] = TEXT_FORMAT
    return options


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": APP_NAME})
    return logger.add(sys.stderr, level=level, format=TEXT_FORMAT, colorize=False)


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)
