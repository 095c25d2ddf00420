"""Task formatting for CLI display."""

from tasklist.models import Task


def format_task_line(index: int, task: Task) -> str:
    return f"{index} - {task.task}"


def format_task_list(tasks: list[Task]) -> str:
    """Format tasks one per line, numbered from 1. Empty list gives ''."""
    return "\n".join(format_task_line(i, task) for i, task in enumerate(tasks, 1))


def tasks_as_json(tasks: list[Task]) -> list[dict]:
    return [task.to_dict() for task in tasks]
