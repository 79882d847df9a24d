"""Enums for task status."""

from enum import Enum


class TaskStatus(str, Enum):
    """Workflow stages, declared in board column order."""

    BACKLOG = "Backlog"
    IN_PROGRESS = "In Progress"
    DONE = "Done"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def css_id(self) -> str:
        """CSS-safe identifier for widgets."""
        return self.name.lower().replace("_", "-")

    def next(self) -> "TaskStatus":
        """Next column to the right; Done stays Done."""
        members = list(TaskStatus)
        idx = members.index(self)
        return members[min(idx + 1, len(members) - 1)]

    def previous(self) -> "TaskStatus":
        """Previous column to the left; Backlog stays Backlog."""
        members = list(TaskStatus)
        idx = members.index(self)
        return members[max(idx - 1, 0)]
