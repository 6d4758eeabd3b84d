"""Shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch):
    """Point settings at a throwaway directory so tests never touch the real config."""
    home = tmp_path / "config" / "illien"
    monkeypatch.setenv("ILLIEN_CONFIG_HOME", str(home))
    return home


@pytest.fixture
def journal_dir(tmp_path):
    path = tmp_path / "journal"
    path.mkdir()
    return path
