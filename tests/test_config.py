# /tests/test_config.py

import importlib
import logging

import pytest

from boltpath.core import config
from boltpath.core.logging_config import configure_logging


@pytest.fixture
def reload_config(monkeypatch):
    """Reloads the config module under patched environment variables, then restores it."""
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)
    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config, monkeypatch):
    for key in ("BOLTPATH_SEED_MOCK_DATA", "BOLTPATH_CORS_ORIGINS", "BOLTPATH_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    settings = reload_config()
    assert settings.SEED_MOCK_DATA is True
    assert settings.CORS_ORIGINS == ["*"]
    assert settings.LOG_LEVEL == "INFO"


def test_environment_overrides(reload_config):
    settings = reload_config(
        BOLTPATH_SEED_MOCK_DATA="False",
        BOLTPATH_CORS_ORIGINS="http://localhost:5173, https://boltpath.app ,",
        BOLTPATH_LOG_LEVEL="debug",
    )
    assert settings.SEED_MOCK_DATA is False
    assert settings.CORS_ORIGINS == ["http://localhost:5173", "https://boltpath.app"]
    assert settings.LOG_LEVEL == "DEBUG"


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("WARNING")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_invalid_log_level_names_the_variable(reload_config):
    with pytest.raises(ValueError, match="BOLTPATH_LOG_LEVEL"):
        reload_config(BOLTPATH_LOG_LEVEL="verbose")
