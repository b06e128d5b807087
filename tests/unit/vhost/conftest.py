from __future__ import annotations

from pathlib import Path

import pytest
from fakes import FakeRunner

from sitemanager.config import SiteManagerConfig
from sitemanager.vhost import SiteConfig


@pytest.fixture
def manager_config(tmp_path: Path) -> SiteManagerConfig:
    available = tmp_path / "nginx" / "sites-available"
    enabled = tmp_path / "nginx" / "sites-enabled"
    available.mkdir(parents=True)
    enabled.mkdir(parents=True)
    return SiteManagerConfig.model_validate(
        {
            "nginx": {
                "sites_available_dir": str(available),
                "sites_enabled_dir": str(enabled),
            },
            "hosts": {"hosts_file": str(tmp_path / "hosts")},
        }
    )


@pytest.fixture
def site(tmp_path: Path, manager_config: SiteManagerConfig) -> SiteConfig:
    return SiteConfig.from_directory(tmp_path / "projects" / "myapp", manager_config)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()
