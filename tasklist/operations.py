"""Task operations: add, list, remove by 1-based position."""

import logging
import re

from tasklist.errors import InvalidTaskIndexError
from tasklist.models import Task
from tasklist.store import TaskStore

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_index(raw: str | None) -> int | None:
    """Parse the leading integer of a 1-based position, so "2abc" gives 2.

    Input with no leading digits yields None.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def add_task(store: TaskStore, description: str | None) -> Task:
    tasks = store.load()
    task = Task(description or "")
    tasks.append(task)
    store.save(tasks)
    logger.debug("Added task #%d", len(tasks))
    return task


def list_tasks(store: TaskStore) -> list[Task]:
    return store.load()


def remove_task(store: TaskStore, index: int | None) -> Task:
    """Remove the task at 1-based ``index`` and return it.

    Raises InvalidTaskIndexError without touching the file when ``index`` is
    None or outside 1..len(tasks).
    """
    tasks = store.load()
    if index is None or index < 1 or index > len(tasks):
        raise InvalidTaskIndexError(index, len(tasks))

    removed = tasks.pop(index - 1)
    store.save(tasks)
    logger.debug("Removed task #%d", index)
    return removed
