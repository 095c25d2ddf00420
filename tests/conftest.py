import pytest

from tasklist import config
from tasklist.store import TaskStore


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run every test in its own cwd with no user config or env overrides."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.delenv("TASKLIST_FILE", raising=False)
    monkeypatch.delenv("TASKLIST_LOG_LEVEL", raising=False)
    monkeypatch.setenv("TASKLIST_CONFIG", str(tmp_path / "config.yaml"))
    config._clear_cache()
    yield workdir
    config._clear_cache()


@pytest.fixture
def tasks_path(isolated_env):
    return isolated_env / "tasks.json"


@pytest.fixture
def store(tasks_path):
    return TaskStore(tasks_path)
