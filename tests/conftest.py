"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from berlinclock.models import AppConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir):
    """Path for a config file that does not exist yet."""
    return temp_dir / "config.json"


@pytest.fixture
def app_config(temp_dir):
    """AppConfig logging into the temp directory."""
    return AppConfig(log_dir=temp_dir / "logs")
