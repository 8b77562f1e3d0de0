"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from jays.config import Settings
from jays.repo_mode import RepoMode
from jays.session import Session


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def workdir(temp_dir, monkeypatch):
    """Run the test from inside an empty temporary directory."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def colocated_session():
    """Session for a repository with both .jj and .git."""
    return Session(mode=RepoMode.COLOCATED, settings=Settings())


@pytest.fixture
def standalone_session():
    """Session for a Jujutsu-only repository."""
    return Session(mode=RepoMode.STANDALONE, settings=Settings())


@pytest.fixture
def mock_subprocess_run(mocker):
    """Mock subprocess.run for external commands."""
    return mocker.patch("subprocess.run")
