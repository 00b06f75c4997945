"""Shared test fixtures for all test modules."""

import os
import stat
from pathlib import Path

import pytest

SAMPLES_DIR = Path(__file__).parent / "fixtures" / "samples"


@pytest.fixture
def samples_dir() -> Path:
    """Directory with sample markup files and their expected renderings."""
    return SAMPLES_DIR


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch):
    """
    Point HOME at a temporary directory.

    Keeps log files and default config lookups out of the real home
    directory, and clears ANTISYNC_* overrides from the environment.
    """
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    for name in list(os.environ):
        if name.startswith("ANTISYNC_"):
            monkeypatch.delenv(name)
    return home


@pytest.fixture
def write_config(tmp_path):
    """Factory writing a config file with owner-only permissions."""

    def _write(text: str, name: str = "config.yaml") -> Path:
        config_file = tmp_path / name
        config_file.write_text(text)
        os.chmod(config_file, stat.S_IRUSR | stat.S_IWUSR)
        return config_file

    return _write
