"""Whole-file JSON store for the task list."""

import json
import logging
from pathlib import Path

from tasklist.models import LoadResult, LoadStatus, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Reads and rewrites one JSON file holding an array of task records.

    Every save overwrites the full file. There is no locking and no temp-file
    swap, so concurrent writers are last-writer-wins.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"TaskStore({str(self.path)!r})"

    def read(self) -> LoadResult:
        """Load tasks, reporting whether the file was missing or corrupt."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No task file at %s", self.path)
            return LoadResult(LoadStatus.MISSING)
        except (OSError, UnicodeDecodeError) as e:
            logger.info("Unreadable task file %s: %s", self.path, e)
            return LoadResult(LoadStatus.CORRUPT)

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.info("Corrupt task file %s: %s", self.path, e)
            return LoadResult(LoadStatus.CORRUPT)

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.info("Task file %s is not an array of objects", self.path)
            return LoadResult(LoadStatus.CORRUPT)

        return LoadResult(LoadStatus.OK, [Task.from_dict(item) for item in data])

    def load(self) -> list[Task]:
        """Load tasks; a missing or corrupt file reads as an empty list."""
        return self.read().tasks

    def save(self, tasks: list[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False)
        self.path.write_text(payload, encoding="utf-8")
        logger.debug("Saved %d task(s) to %s", len(tasks), self.path)
