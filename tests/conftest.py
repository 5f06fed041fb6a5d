"""Shared test fixtures for consoler test suite."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from consoler.lib.log_lib import Consoler, MemoryStore
from consoler.lib.log_lib import manager as _manager_mod


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: spawns subprocesses")


# ---------------------------------------------------------------------------
# Collaborator doubles
# ---------------------------------------------------------------------------
class RecordingSink:
    """Display sink that keeps everything it is given."""

    def __init__(self):
        self.groups = []
        self.notes = []

    def group(self, label, color, values, trace):
        self.groups.append((label, color, tuple(values), trace))

    def log(self, text):
        self.notes.append(text)

    @property
    def labels(self):
        return [g[0] for g in self.groups]


class ScriptedPrompter:
    """Answers prompts from a fixed script, records prompts and alerts."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []
        self.alerts = []

    def prompt(self, message):
        self.prompts.append(message)
        return self.answers.pop(0) if self.answers else None

    def alert(self, message):
        self.alerts.append(message)


# ---------------------------------------------------------------------------
# Singleton reset
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_trigger():
    """Each test starts with no process-wide trigger installed."""
    old = (_manager_mod._trigger, _manager_mod._consoler)
    _manager_mod._trigger = None
    _manager_mod._consoler = None
    yield
    _manager_mod._trigger, _manager_mod._consoler = old


@pytest.fixture(autouse=True)
def _no_env_probe(monkeypatch):
    """Keep the host environment from declaring development mode."""
    monkeypatch.delenv("CONSOLER_ENV", raising=False)
    monkeypatch.delenv("PYTHON_ENV", raising=False)


# ---------------------------------------------------------------------------
# Facade fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def store():
    """An empty in-memory substrate."""
    return MemoryStore()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_consoler(store, sink):
    """Factory for a Consoler wired to the in-memory store and recording sink.

    Keyword arguments override the defaults (password 's3cret', production
    environment, INFO/WARN developer defaults).
    """
    def _make(**overrides):
        kwargs = dict(
            password="s3cret",
            default_developer_mode=["INFO", "WARN"],
            store=store,
            sink=sink,
            prompter=ScriptedPrompter(),
            development=False,
        )
        kwargs.update(overrides)
        return Consoler(**kwargs)
    return _make


# ---------------------------------------------------------------------------
# Temporary directory fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.consoler/."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path, tmp_config_home, monkeypatch):
    """A working directory with no config, under an isolated home."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def sample_project_config(tmp_project):
    """Write a .consoler.json file in the tmp project."""
    config = {
        "password": "projpass",
        "default_developer_mode": ["INFO", "ERROR"],
        "tags": [{"display_name": "Network", "color": "#8e44ad"}],
        "state_path": "state.json",
    }
    path = tmp_project / ".consoler.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config


@pytest.fixture
def sample_global_config(tmp_config_home):
    """Write a global config file in the tmp home."""
    config_dir = tmp_config_home / ".consoler"
    config_dir.mkdir()
    config = {
        "password": "globalpass",
        "default_developer_mode": ["WARN"],
        "state_path": str(tmp_config_home / "global-state.json"),
    }
    path = config_dir / "config.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config


@pytest.fixture
def scripted():
    """Factory for ScriptedPrompter: scripted("s3cret", "warn,info")."""
    return ScriptedPrompter
