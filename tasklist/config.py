"""Settings: defaults, then ~/.tasklist/config.yaml, then TASKLIST_* env vars."""

import logging
import os
from functools import lru_cache

import yaml

from tasklist.errors import ConfigError
from tasklist.lib import paths

logger = logging.getLogger(__name__)

ENV_VARS = {
    "tasks_file": "TASKLIST_FILE",
    "log_level": "TASKLIST_LOG_LEVEL",
}

DEFAULT_CONFIG = {
    "tasks_file": None,  # None means tasks.json in the working directory
    "log_level": "WARNING",
}


def _validate_config(cfg: dict) -> None:
    """Validate config structure. Fail fast on invalid types."""
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config must be a mapping, got {type(cfg).__name__}")

    unknown = set(cfg) - set(DEFAULT_CONFIG)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    for key in ("tasks_file", "log_level"):
        value = cfg.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"Config '{key}' must be a string")


def _clear_cache():
    load_config.cache_clear()


def load_file_config() -> dict:
    """Load the YAML config file, returning an empty dict if not found."""
    path = paths.config_file()
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse {path}: {e}") from e
    _validate_config(cfg)
    logger.debug("Loaded config from %s", path)
    return cfg


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Merge defaults, config file and environment. Env wins over the file."""
    cfg = DEFAULT_CONFIG.copy()
    cfg.update(load_file_config())

    for key, env_name in ENV_VARS.items():
        value = os.environ.get(env_name)
        if value:
            cfg[key] = value

    return cfg


def tasks_file(override: str | None = None):
    """Resolve the tasks file path. An explicit override beats every other source."""
    if override:
        return paths.resolve_tasks_file(override)
    return paths.resolve_tasks_file(load_config()["tasks_file"])


def log_level(verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    name = str(load_config()["log_level"]).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
