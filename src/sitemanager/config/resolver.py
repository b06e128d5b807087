"""Environment variable resolution helpers for configuration."""

from __future__ import annotations

import os

import yaml

from sitemanager.constants import ENV_PREFIX
from sitemanager.utils import deep_merge

from .models import SiteManagerConfig


def apply_env_overrides(config: SiteManagerConfig) -> SiteManagerConfig:
    """Apply SITEMANAGER_CONFIG__SECTION__KEY overrides to config.

    Raises pydantic.ValidationError when an override does not fit the schema.
    """
    override_data: dict[str, object] = {}

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        path = key[len(ENV_PREFIX) :].strip("_")
        if not path:
            continue
        segments = [segment.lower() for segment in path.split("__") if segment]
        _insert_override(override_data, segments, _parse_env_value(value))

    if not override_data:
        return config

    merged = deep_merge(config.model_dump(), override_data)
    return SiteManagerConfig.model_validate(merged)


def _insert_override(data: dict[str, object], path: list[str], value: object) -> None:
    cursor = data
    *parents, leaf = path
    for segment in parents:
        child = cursor.get(segment)
        if not isinstance(child, dict):
            child = {}
            cursor[segment] = child
        cursor = child
    cursor[leaf] = value


def _parse_env_value(raw: str) -> object:
    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    return parsed
