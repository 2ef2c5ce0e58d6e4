"""
Root conftest: every test sees the repo's config/config.toml and a fresh
config cache, whatever the caller's environment says.
"""
from pathlib import Path

import pytest

import quantstat.config as config_module

REPO_CONFIG_DIR = Path(__file__).parent / "config"


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    monkeypatch.setenv(config_module.CONFIG_DIR_ENV, str(REPO_CONFIG_DIR))
    config_module._CONFIG = None
    yield
    config_module._CONFIG = None
