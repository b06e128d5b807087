from __future__ import annotations

from pathlib import Path

import pytest
from result import is_err, is_ok

from sitemanager.common import AppDirectories
from sitemanager.config import ConfigValidationError, ConfigYamlError, FileConfigStore, SiteManagerConfig


@pytest.fixture
def store() -> FileConfigStore:
    return FileConfigStore(directories=AppDirectories(config_dir_name="sitemanager"))


def test_config_path_follows_xdg_config_home(store: FileConfigStore, tmp_path: Path) -> None:
    assert store.config_path == tmp_path / "xdg-config" / "sitemanager" / "config.yaml"


def test_missing_file_gives_defaults(store: FileConfigStore) -> None:
    result = store.load()

    assert is_ok(result)
    assert result.unwrap() == SiteManagerConfig()


def test_env_overrides_apply_on_top_of_file(store: FileConfigStore, monkeypatch: pytest.MonkeyPatch) -> None:
    store.config_path.parent.mkdir(parents=True)
    store.config_path.write_text("hosts:\n  tld: localhost\n  address: 127.0.1.1\n")
    monkeypatch.setenv("SITEMANAGER_CONFIG__HOSTS__ADDRESS", "127.0.0.2")

    result = store.load()

    assert is_ok(result)
    hosts = result.unwrap().hosts
    assert hosts.tld == "localhost"
    assert hosts.address == "127.0.0.2"


def test_file_errors_are_returned(store: FileConfigStore) -> None:
    store.config_path.parent.mkdir(parents=True)
    store.config_path.write_text("hosts: [")

    result = store.load()

    assert is_err(result)
    assert isinstance(result.unwrap_err(), ConfigYamlError)


def test_invalid_env_override_is_a_validation_error(store: FileConfigStore, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SITEMANAGER_CONFIG__SERVICE__RESTART_COMMAND", "[]")

    result = store.load()

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, ConfigValidationError)
    assert error.field == "service.restart_command"
    assert error.message.startswith("Invalid environment override")
