class TasklistError(Exception):
    """Base exception for tasklist domain errors."""

    pass


class InvalidTaskIndexError(TasklistError):
    """Raised when a 1-based task position is outside the stored list."""

    def __init__(self, index: int | None, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Invalid task number: {index} (have {size})")


class ConfigError(TasklistError):
    """Raised when the config file cannot be used."""

    pass
