"""Pytest configuration and shared fixtures."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minimal_task.config import ConfigModel  # noqa: E402


@pytest.fixture
def vault(tmp_path):
    """An empty vault directory."""
    return tmp_path


@pytest.fixture
def config(vault):
    """Default settings rooted at the temporary vault."""
    return ConfigModel(vault_dir=str(vault))


@pytest.fixture
def fixed_clock():
    """A clock frozen at 2024-01-02 09:30."""
    return lambda: datetime(2024, 1, 2, 9, 30)
