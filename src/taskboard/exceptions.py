"""Exceptions raised by taskboard."""


class TaskboardError(Exception):
    """Base class for taskboard errors."""


class ValidationError(TaskboardError):
    """An operation would violate a board invariant. State is unchanged."""


class ConsistencyError(TaskboardError):
    """The in-memory board is inconsistent (e.g. a task with no project)."""


class PersistenceError(TaskboardError):
    """Reading or writing the backing store failed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
