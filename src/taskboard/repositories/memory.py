"""In-memory repository."""

from collections.abc import Sequence

import pydantic

from ..models import Project, Task
from .codec import decode_projects, decode_tasks, encode_projects, encode_tasks


class InMemoryRepository:
    """
    Repository keeping encoded JSON documents in memory.

    Goes through the same codec as the file repository, so records
    handed back are fresh copies just like a disk round trip.
    """

    def __init__(
        self,
        tasks: Sequence[Task] | None = None,
        projects: Sequence[Project] | None = None,
    ) -> None:
        self.tasks_data: bytes | None = encode_tasks(tasks) if tasks is not None else None
        self.projects_data: bytes | None = (
            encode_projects(projects) if projects is not None else None
        )
        self.save_tasks_calls = 0
        self.save_projects_calls = 0

    def load_tasks(self) -> list[Task]:
        if self.tasks_data is None:
            return []
        try:
            return decode_tasks(self.tasks_data)
        except pydantic.ValidationError:
            return []

    def load_projects(self) -> list[Project]:
        if self.projects_data is None:
            return []
        try:
            return decode_projects(self.projects_data)
        except pydantic.ValidationError:
            return []

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        self.tasks_data = encode_tasks(tasks)
        self.save_tasks_calls += 1

    def save_projects(self, projects: Sequence[Project]) -> None:
        self.projects_data = encode_projects(projects)
        self.save_projects_calls += 1

    def clear_all(self) -> None:
        self.tasks_data = None
        self.projects_data = None
