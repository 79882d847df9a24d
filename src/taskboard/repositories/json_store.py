"""JSON file repository for board storage."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeVar

import pydantic

from ..exceptions import PersistenceError
from ..models import Project, Task
from .codec import decode_projects, decode_tasks, encode_projects, encode_tasks

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonFileRepository:
    """
    Repository storing the board as two JSON documents.

    tasks.json and projects.json each hold one array of records.
    Writes go to a temporary file in the same directory which then
    replaces the target, so a failed write never truncates existing data.
    """

    TASKS_FILE = "tasks.json"
    PROJECTS_FILE = "projects.json"

    def __init__(self, data_dir: Path) -> None:
        """
        Initialize repository.

        Args:
            data_dir: Directory holding tasks.json and projects.json
        """
        self.data_dir = data_dir

    @property
    def tasks_path(self) -> Path:
        return self.data_dir / self.TASKS_FILE

    @property
    def projects_path(self) -> Path:
        return self.data_dir / self.PROJECTS_FILE

    def ensure_directory(self) -> None:
        """Create the data directory if it doesn't exist."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(
                f"Cannot create data directory: {e}", path=str(self.data_dir)
            ) from e

    # --- Tasks ---

    def load_tasks(self) -> list[Task]:
        """Load tasks from tasks.json, or [] if missing or unreadable."""
        return self._load(self.tasks_path, decode_tasks)

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        """Write tasks to tasks.json."""
        self._write(self.tasks_path, encode_tasks(tasks))
        logger.info("Saved %d tasks to %s", len(tasks), self.tasks_path)

    # --- Projects ---

    def load_projects(self) -> list[Project]:
        """Load projects from projects.json, or [] if missing or unreadable."""
        return self._load(self.projects_path, decode_projects)

    def save_projects(self, projects: Sequence[Project]) -> None:
        """Write projects to projects.json."""
        self._write(self.projects_path, encode_projects(projects))
        logger.info("Saved %d projects to %s", len(projects), self.projects_path)

    # --- Utility ---

    def clear_all(self) -> None:
        """Delete both JSON documents."""
        for path in (self.tasks_path, self.projects_path):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                raise PersistenceError(f"Cannot remove {path.name}: {e}", path=str(path)) from e
        logger.info("Cleared board data in %s", self.data_dir)

    # --- Private Methods ---

    def _load(self, path: Path, decode: Callable[[bytes], list[T]]) -> list[T]:
        """Read and decode one document, treating any failure as no data."""
        if not path.exists():
            logger.debug("No %s found, starting empty", path.name)
            return []

        try:
            data = path.read_bytes()
        except OSError as e:
            logger.warning("Error reading %s: %s", path, e)
            return []

        try:
            return decode(data)
        except pydantic.ValidationError as e:
            logger.warning("Error decoding %s, ignoring stored data: %s", path, e)
            return []

    def _write(self, path: Path, data: bytes) -> None:
        """Atomically replace path with data."""
        self.ensure_directory()
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.data_dir, prefix=f".{path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Cannot write {path.name}: {e}", path=str(path)) from e
