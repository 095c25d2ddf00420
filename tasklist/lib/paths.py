import os
from pathlib import Path

TASKS_FILENAME = "tasks.json"


def dot_tasklist() -> Path:
    """Returns the per-user directory, ~/.tasklist."""
    return Path.home() / ".tasklist"


def config_file() -> Path:
    """Returns the YAML config path, TASKLIST_CONFIG or ~/.tasklist/config.yaml."""
    override = os.environ.get("TASKLIST_CONFIG")
    if override:
        return Path(override).expanduser()
    return dot_tasklist() / "config.yaml"


def default_tasks_file() -> Path:
    """Returns tasks.json in the current working directory."""
    return Path.cwd() / TASKS_FILENAME


def resolve_tasks_file(value: str | Path | None) -> Path:
    """Resolve a configured tasks file; relative paths are taken from the cwd."""
    if not value:
        return default_tasks_file()
    expanded = Path(value).expanduser()
    if expanded.is_absolute():
        return expanded
    return Path.cwd() / expanded
