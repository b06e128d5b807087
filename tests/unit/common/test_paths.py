from __future__ import annotations

from pathlib import Path

import pytest

from sitemanager.common import AppDirectories, get_data_directory, get_global_config_root, resolve_working_directory


@pytest.fixture
def app_directories() -> AppDirectories:
    return AppDirectories(config_dir_name="sitemanager", data_dir_name="sitemanager")


def test_global_config_root_uses_xdg(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, app_directories: AppDirectories
) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))

    assert get_global_config_root(app_directories) == tmp_path / "cfg" / "sitemanager"


def test_global_config_root_falls_back_to_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, app_directories: AppDirectories
) -> None:
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_global_config_root(app_directories) == tmp_path / ".config" / "sitemanager"


def test_data_directory_falls_back_to_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, app_directories: AppDirectories
) -> None:
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_data_directory(app_directories) == tmp_path / ".local" / "share" / "sitemanager"


def test_resolve_working_directory_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    project = tmp_path / "myapp"
    project.mkdir()
    monkeypatch.chdir(project)

    assert resolve_working_directory(None) == project.resolve()



def test_resolve_working_directory_normalizes_explicit_path(tmp_path: Path) -> None:
    project = tmp_path / "myapp"
    project.mkdir()

    assert resolve_working_directory(tmp_path / "other" / ".." / "myapp") == project.resolve()
