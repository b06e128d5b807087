"""Configuration file loading and validation helpers."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from sitemanager.common import create_logger

from .models import ConfigError, ConfigIOError, ConfigValidationError, ConfigYamlError, SiteManagerConfig

logger = create_logger("config")


def load_config_file(path: Path) -> Result[SiteManagerConfig, ConfigError]:
    """Load and validate configuration from a YAML file."""
    logger.debug("Loading config file", path=str(path))

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Config file read error", path=str(path), error=str(exc))
        return Err(
            ConfigIOError(
                path=path,
                message=str(exc),
            ),
        )

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        logger.error("Config YAML parse error", path=str(path), line=line, column=column, error=str(exc))
        return Err(
            ConfigYamlError(
                path=path,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            ),
        )

    if data is None:
        data = {}

    if not isinstance(data, dict):
        logger.error("Config must be a mapping", path=str(path))
        return Err(
            ConfigValidationError(
                path=path,
                field=None,
                message="Configuration root must be a mapping of keys to values.",
            ),
        )

    try:
        model = SiteManagerConfig.model_validate(data)
    except ValidationError as exc:
        field, message = describe_validation_error(exc)
        logger.error("Config validation error", path=str(path), field=field, error=message)
        return Err(
            ConfigValidationError(
                path=path,
                field=field,
                message=message,
            ),
        )

    logger.debug("Config validated", path=str(path))
    return Ok(model)


def describe_validation_error(exc: ValidationError) -> tuple[str | None, str]:
    """Return the dotted location and message of the first validation failure."""
    error_details = exc.errors()
    if not error_details:
        return None, str(exc)

    first = error_details[0]
    loc = first.get("loc") or ()
    field = ".".join(str(part) for part in loc) or None
    return field, first.get("msg", str(exc))
