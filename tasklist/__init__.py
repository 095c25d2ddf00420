"""Command-line task list backed by a single JSON file."""

from .models import LoadResult, LoadStatus, Task
from .operations import add_task, list_tasks, parse_index, remove_task
from .store import TaskStore

__all__ = [
    "LoadResult",
    "LoadStatus",
    "Task",
    "TaskStore",
    "add_task",
    "list_tasks",
    "parse_index",
    "remove_task",
]
