"""Shared fixtures for chronic tests."""

import pytest

from chronic.config import Config


@pytest.fixture()
def config(tmp_path):
    """Config pointing both the habitctl store and the chronic store at tmp_path."""
    legacy_dir = tmp_path / "habitctl"
    legacy_dir.mkdir()
    return Config.from_dirs(tmp_path / "chronic", legacy_dir)


@pytest.fixture()
def legacy_store(config):
    """Write habitctl files; returns a function taking (habits, log) text."""

    def _write(habits: str, log: str) -> None:
        config.legacy_habits_file.write_text(habits)
        config.legacy_log_file.write_text(log)

    return _write
