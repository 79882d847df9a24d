"""Repository protocol for board storage backends."""

from collections.abc import Sequence
from typing import Protocol

from ..models import Project, Task


class RepositoryProtocol(Protocol):
    """Interface for board storage backends.

    Repositories never touch controller state. They return freshly
    decoded collections and serialize the snapshots they are handed.
    """

    def load_tasks(self) -> list[Task]:
        """Load all tasks.

        Returns:
            Tasks in stored order, or an empty list when nothing is stored
            or the stored document cannot be decoded.
        """
        ...

    def load_projects(self) -> list[Project]:
        """Load all projects.

        Returns:
            Projects in stored order, or an empty list when nothing is stored
            or the stored document cannot be decoded.
        """
        ...

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        """Replace the stored task collection.

        Raises:
            PersistenceError: if the write fails.
        """
        ...

    def save_projects(self, projects: Sequence[Project]) -> None:
        """Replace the stored project collection.

        Raises:
            PersistenceError: if the write fails.
        """
        ...

    def clear_all(self) -> None:
        """Remove both stored collections.

        Raises:
            PersistenceError: if stored data exists but cannot be removed.
        """
        ...
