"""Shared fixtures for miscutils tests."""

import os

import pytest

from miscutils import config


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch, tmp_path):
    """Ensure tests never read a real miscutils.yaml or MISCUTILS_* env vars."""
    for key in list(os.environ):
        if key.startswith("MISCUTILS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("MISCUTILS_CONFIG", str(tmp_path / "miscutils.yaml"))
    config.reset()
    yield
    config.reset()


@pytest.fixture
def config_file(tmp_path):
    """Write a config file at the isolated location and return its path."""
    path = tmp_path / "miscutils.yaml"

    def _write(text: str):
        path.write_text(text)
        config.reset()
        return path

    return _write
