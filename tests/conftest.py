"""Shared pytest fixtures for mdjrnl tests."""

import logging
import subprocess
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from mdjrnl.config import ProfileConfig
from mdjrnl.engine import JournalEngine
from mdjrnl.logging_setup import APP_LOGGER


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Undo setup_logging() so caplog sees records in every test."""
    yield
    logger = logging.getLogger(APP_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_root():
    """Create a temporary journal root directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def profile(temp_root):
    """Create a test profile pointing at the temporary root."""
    return ProfileConfig(name="test", options={"root": str(temp_root)})


@pytest.fixture
def engine(profile):
    return JournalEngine(profile)


@pytest.fixture
def fake_run():
    """Patch subprocess.run so no editor or git is ever spawned.

    Yields the mock; every call returns exit status 0 unless the test
    changes ``return_value`` or ``side_effect``.
    """
    with patch("subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess(args=[], returncode=0)
        yield run


@pytest.fixture
def write_config(temp_root):
    """Write a TOML config file and return its path."""

    def _write(content: str, name: str = "config.toml") -> Path:
        path = temp_root / "cfg" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
