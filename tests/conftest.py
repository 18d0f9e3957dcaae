import logging

import pytest

from hide.engine.keys import InMemoryKeysStorage


@pytest.fixture
def store():
    return InMemoryKeysStorage()


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Points the tool at a throwaway key configuration file."""
    path = tmp_path / "config" / "hide-cfg.yaml"
    monkeypatch.setenv("HIDE_CONFIG_PATH", str(path))
    monkeypatch.delenv("HIDE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("HIDE_INDENT", raising=False)
    # keep a stray .env in the working directory out of the settings
    monkeypatch.chdir(tmp_path)
    return path


@pytest.fixture(autouse=True)
def reset_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
