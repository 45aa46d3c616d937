"""
Pytest configuration and fixtures.
"""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for testing."""
    with patch("subprocess.run") as mock:
        mock.return_value = MagicMock(returncode=0)
        yield mock


@pytest.fixture
def mock_geteuid():
    """Mock os.geteuid for testing; defaults to root."""
    with patch("os.geteuid") as mock:
        mock.return_value = 0
        yield mock


@pytest.fixture
def bootstrap_env(monkeypatch, temp_dir):
    """Point HOME, HOSTNAME and the config file at test-controlled values."""
    home = temp_dir / "home"
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("HOSTNAME", "node1")
    monkeypatch.setenv("GLUSTER_BOOTSTRAP_CONFIG_PATH", str(temp_dir / "missing-bootstrap.conf"))
    return home
