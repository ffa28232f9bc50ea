"""Shared pytest fixtures."""

import tempfile
from pathlib import Path

import pytest

from tuneprompt.core.handlers import HandlerRegistry
from tuneprompt.utils.debug import reload_config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_tuneprompt_dir(temp_dir, monkeypatch):
    """Point TUNEPROMPT_DIR at a fresh directory for every test."""
    tuneprompt_dir = temp_dir / ".tuneprompt"
    tuneprompt_dir.mkdir()
    monkeypatch.setenv("TUNEPROMPT_DIR", str(tuneprompt_dir))
    reload_config()
    yield tuneprompt_dir
    reload_config()


@pytest.fixture
def clean_registry():
    """Empty HandlerRegistry for the test, restored afterwards."""
    saved = dict(HandlerRegistry._handlers)
    HandlerRegistry.clear()
    yield HandlerRegistry
    HandlerRegistry.clear()
    HandlerRegistry._handlers.update(saved)
