from dataclasses import dataclass, field
from enum import Enum


class LoadStatus(str, Enum):
    OK = "ok"
    MISSING = "missing"
    CORRUPT = "corrupt"


@dataclass
class Task:
    task: str = ""

    def to_dict(self) -> dict:
        return {"task": self.task}

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        raw = data.get("task")
        if raw is None:
            return cls("")
        return cls(raw if isinstance(raw, str) else str(raw))


@dataclass
class LoadResult:
    status: LoadStatus
    tasks: list[Task] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == LoadStatus.OK
