"""Shared test fixtures for Claude Dashboard."""

import os
import shutil
import sys
from pathlib import Path

import pytest

from claude_dashboard.services.claude_paths import ClaudePaths
from helpers import PROJECT_DIR_NAME

FIXTURES_DIR = Path(__file__).parent / "fixtures"



@pytest.fixture(scope="session")
def qapp():
    """Create a QGuiApplication for tests that need Qt."""
    os.environ["QT_QPA_PLATFORM"] = "offscreen"
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication(sys.argv or ["test"])
    yield app


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def simple_session_path(fixtures_dir) -> Path:
    return fixtures_dir / "simple_session.jsonl"


@pytest.fixture
def malformed_session_path(fixtures_dir) -> Path:
    return fixtures_dir / "malformed_session.jsonl"


@pytest.fixture
def stats_cache_path(fixtures_dir) -> Path:
    return fixtures_dir / "stats-cache.json"


@pytest.fixture
def claude_paths(tmp_path) -> ClaudePaths:
    """ClaudePaths rooted at a synthetic home with an empty projects directory."""
    paths = ClaudePaths.from_home(tmp_path)
    paths.projects_dir.mkdir(parents=True)
    return paths


@pytest.fixture
def project_dir(claude_paths) -> Path:
    """Log directory for PROJECT_PATH."""
    project_dir = claude_paths.projects_dir / PROJECT_DIR_NAME
    project_dir.mkdir()
    return project_dir


@pytest.fixture
def installed_stats(claude_paths, stats_cache_path) -> Path:
    """Copy the fixture stats cache into the synthetic Claude home."""
    dest = claude_paths.stats_cache_path
    shutil.copy(stats_cache_path, dest)
    return dest
