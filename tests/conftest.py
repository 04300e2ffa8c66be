"""Shared test fixtures for tintlog test suite."""

import io
import os
from unittest.mock import patch

import pytest

from tintlog import ColorLogger
from tintlog import logger as _logger_mod


# ---------------------------------------------------------------------------
# Sink fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing logger output."""
    return io.StringIO()


@pytest.fixture
def logger(buf):
    """A ColorLogger with default options writing to a buffer."""
    return ColorLogger(file=buf)


# ---------------------------------------------------------------------------
# Singleton isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_singleton():
    """Restore the module-level ColorLogger after each test."""
    old = _logger_mod._logger
    _logger_mod._logger = None
    yield
    _logger_mod._logger = old


# ---------------------------------------------------------------------------
# Temporary directory fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.tintlog/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path):
    """Provide a temporary project directory with a nested source tree."""
    project = tmp_path / "project"
    (project / "src" / "app").mkdir(parents=True)
    return project


# ---------------------------------------------------------------------------
# Collaborator fakes
# ---------------------------------------------------------------------------
class FakeEventbus:
    """Minimal pub/sub bus: one callback per event name."""

    def __init__(self):
        self.handlers = {}

    def on(self, name, callback):
        self.handlers[name] = callback

    def trigger(self, name, *args, **kwargs):
        return self.handlers[name](*args, **kwargs)


@pytest.fixture
def eventbus():
    return FakeEventbus()
