"""Shared pytest fixtures."""

import pytest

from repochain.config.schema import AppConfig
from repochain.observability.logging import configure_logging
from repochain.service.handler import RepositoryHandler


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep test output free of info logs."""
    configure_logging(level="WARNING")


@pytest.fixture
def config(tmp_path):
    """Configuration anchored at a temporary base directory."""
    return AppConfig(base_dir=tmp_path, maven_local_dir=tmp_path / "m2")


@pytest.fixture
def handler(config):
    """Repository handler with an empty container."""
    return RepositoryHandler(config)
