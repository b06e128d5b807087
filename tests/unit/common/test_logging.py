from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from sitemanager.common import (
    AppDirectories,
    AppInfo,
    AppPaths,
    LoggingConfig,
    create_logger,
    resolve_log_file,
    setup_cli_logging,
)
from sitemanager.constants import APP_NAME


@pytest.fixture
def restore_logger() -> Iterator[None]:
    yield
    logger.remove()
    logger.disable(APP_NAME)


def test_resolve_log_file_defaults_to_data_directory(tmp_path: Path) -> None:
    path = resolve_log_file(LoggingConfig(), AppDirectories(), AppPaths())

    assert path == tmp_path / "xdg-data" / "sitemanager" / "logs" / "sitemanager.log"


def test_resolve_log_file_prefers_configured_path(tmp_path: Path) -> None:
    config = LoggingConfig(log_file=str(tmp_path / "custom.log"))

    assert resolve_log_file(config, AppDirectories(), AppPaths()) == tmp_path / "custom.log"


def test_json_format_writes_serialized_records(tmp_path: Path, restore_logger: None) -> None:
    log_file = tmp_path / "out" / "sitemanager.log"
    config = LoggingConfig(log_file=str(log_file), format="json", log_level="DEBUG")

    setup_cli_logging(AppInfo(), config, AppDirectories(), AppPaths())
    create_logger("test").info("Site created", domain="myapp.test")
    logger.complete()

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    created = [r for r in records if r["record"]["message"] == "Site created"]
    assert created[0]["record"]["extra"]["domain"] == "myapp.test"
    assert created[0]["record"]["extra"]["scope"] == "test"


def test_level_filters_lower_records(tmp_path: Path, restore_logger: None) -> None:
    log_file = tmp_path / "sitemanager.log"
    config = LoggingConfig(log_file=str(log_file), log_level="WARNING")

    setup_cli_logging(AppInfo(), config, AppDirectories(), AppPaths())
    create_logger("test").info("quiet")
    create_logger("test").warning("loud")
    logger.complete()

    contents = log_file.read_text()
    assert "loud" in contents
    assert "quiet" not in contents
    assert "[test]" in contents
