"""Board controller: sole owner of task and project state."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from uuid import UUID

from ..exceptions import ConsistencyError, PersistenceError, ValidationError
from ..models import BoardChange, ChangeKind, Project, Task, TaskStatus
from ..repositories import RepositoryProtocol
from ..utils import later_than, now_utc

logger = logging.getLogger(__name__)

Subscriber = Callable[[BoardChange], None]


class _ActiveFilter:
    """Sentinel meaning "use the currently selected project filter"."""

    def __repr__(self) -> str:
        return "ACTIVE_FILTER"


ACTIVE_FILTER = _ActiveFilter()


class BoardController:
    """
    Sole mutator and query surface for tasks and projects.

    Every public method leaves the board consistent: each task's project
    exists, at least one project exists once initialized, ids are unique
    and no task was updated before it was created. Mutations notify
    subscribers; none of them performs I/O.
    """

    def __init__(
        self,
        repository: RepositoryProtocol,
        project_templates: list[tuple[str, str]] | None = None,
        clock: Callable[[], datetime] = now_utc,
    ) -> None:
        self.repository = repository
        self._project_templates = project_templates
        self._clock = clock
        self._tasks: list[Task] = []
        self._projects: list[Project] = []
        self._selected_project_id: UUID | None = None
        self._subscribers: list[Subscriber] = []

    # --- Startup ---

    def initialize(self) -> None:
        """Load projects (seeding templates on first launch), then tasks."""
        projects = self.repository.load_projects()
        if not projects:
            projects = Project.templates(self._project_templates)
            logger.info("No projects found, creating %d default projects", len(projects))
            self.load_projects(projects)
            try:
                self.repository.save_projects(self.projects)
            except PersistenceError as e:
                logger.error("Could not save default projects: %s", e)
        else:
            self.load_projects(projects)

        self.load_tasks(self.repository.load_tasks())
        logger.info(
            "Board initialized: %d projects, %d tasks", len(self._projects), len(self._tasks)
        )

    def load_projects(self, projects: Iterable[Project]) -> None:
        """Install a freshly decoded project collection."""
        loaded = _unique_by_id(projects, "project")
        if not loaded:
            raise ValidationError("At least one project is required")
        self._projects = loaded
        if self._selected_project_id is not None and self._find_project(
            self._selected_project_id
        ) is None:
            self._selected_project_id = None
        self._reassign_orphans()
        self._notify(ChangeKind.PROJECTS)

    def load_tasks(self, tasks: Iterable[Task]) -> None:
        """
        Install a freshly decoded task collection.

        Duplicate ids keep their first occurrence, tasks pointing at a
        missing project move to the first project, and updatedAt is
        clamped to createdAt.
        """
        loaded: list[Task] = []
        for task in _unique_by_id(tasks, "task"):
            if task.updated_at < task.created_at:
                task = task.model_copy(update={"updated_at": task.created_at})
            loaded.append(task)
        self._tasks = loaded
        self._reassign_orphans()
        self._notify(ChangeKind.TASKS)

    # --- Change notification ---

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register for change notifications. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, kind: ChangeKind) -> None:
        change = BoardChange(kind)
        for callback in list(self._subscribers):
            callback(change)

    # --- Snapshots ---

    @property
    def tasks(self) -> tuple[Task, ...]:
        """All tasks in insertion order."""
        return tuple(self._tasks)

    @property
    def projects(self) -> tuple[Project, ...]:
        """All projects in collection order."""
        return tuple(self._projects)

    @property
    def selected_project_id(self) -> UUID | None:
        """The active project filter, if any."""
        return self._selected_project_id

    def get_task(self, task_id: UUID) -> Task | None:
        """Get a task by ID."""
        index = self._task_index(task_id)
        return self._tasks[index] if index is not None else None

    def get_project(self, project_id: UUID) -> Project | None:
        """Get a project by ID."""
        return self._find_project(project_id)

    # --- Task Management ---

    def add_task(
        self,
        title: str,
        description: str = "",
        notes: str = "",
        *,
        project_id: UUID,
    ) -> Task:
        """
        Create a Backlog task at the end of the collection.

        Raises:
            ValidationError: if the title is blank or the project is unknown.
        """
        self._validate_title(title)
        self._validate_project_ref(project_id)

        now = self._clock()
        task = Task(
            title=title,
            description=description,
            notes=notes,
            status=TaskStatus.BACKLOG,
            project_id=project_id,
            created_at=now,
            updated_at=now,
        )
        self._tasks.append(task)
        logger.info("Task created: %s (%s)", task.id, title)
        self._notify(ChangeKind.TASKS)
        return task

    def update_task(self, task: Task) -> Task | None:
        """
        Replace the stored task with the same id.

        createdAt is kept from the stored record and updatedAt is always
        refreshed. Returns None if no task has this id.

        Raises:
            ValidationError: if the title is blank or the project is unknown.
        """
        index = self._task_index(task.id)
        if index is None:
            logger.debug("update_task: task not found: %s", task.id)
            return None

        self._validate_title(task.title)
        self._validate_project_ref(task.project_id)

        return self._replace_task(index, task)

    def delete_task(self, task_id: UUID) -> None:
        """Delete a task by ID. Unknown ids are ignored."""
        index = self._task_index(task_id)
        if index is None:
            logger.debug("delete_task: task not found: %s", task_id)
            return

        del self._tasks[index]
        logger.info("Task deleted: %s", task_id)
        self._notify(ChangeKind.TASKS)

    def move_task(self, task_id: UUID, status: TaskStatus) -> Task | None:
        """
        Move a task to another column.

        Moving to the current status still refreshes updatedAt.
        Returns None if no task has this id.
        """
        index = self._task_index(task_id)
        if index is None:
            logger.debug("move_task: task not found: %s", task_id)
            return None

        current = self._tasks[index]
        moved = self._replace_task(index, current.model_copy(update={"status": status}))
        logger.info("Task moved: %s (%s -> %s)", task_id, current.status.value, status.value)
        return moved

    # --- Filtering & Sorting ---

    def tasks_by_status(self, status: TaskStatus) -> list[Task]:
        """All tasks in a column, in collection order."""
        return [t for t in self._tasks if t.status == status]

    def filtered_tasks(
        self,
        status: TaskStatus,
        project_id: UUID | None | _ActiveFilter = ACTIVE_FILTER,
    ) -> list[Task]:
        """Tasks in a column restricted to one project when a filter applies."""
        selected = self._resolve_filter(project_id)
        status_tasks = self.tasks_by_status(status)
        if selected is None:
            return status_tasks
        return [t for t in status_tasks if t.project_id == selected]

    def sorted_tasks(
        self,
        status: TaskStatus,
        project_id: UUID | None | _ActiveFilter = ACTIVE_FILTER,
    ) -> list[Task]:
        """Tasks in a column, the filtered project's tasks first.

        Both groups keep collection order.
        """
        selected = self._resolve_filter(project_id)
        status_tasks = self.tasks_by_status(status)
        if selected is None:
            return status_tasks

        selected_tasks = [t for t in status_tasks if t.project_id == selected]
        other_tasks = [t for t in status_tasks if t.project_id != selected]
        return selected_tasks + other_tasks

    def project_for(self, task: Task) -> Project:
        """
        Get the project a task belongs to.

        Raises:
            ConsistencyError: if the project is missing.
        """
        project = self._find_project(task.project_id)
        if project is None:
            raise ConsistencyError(f"Task {task.id} references missing project {task.project_id}")
        return project

    def is_dimmed(self, task: Task) -> bool:
        """True when a filter is active and the task is outside it."""
        if self._selected_project_id is None:
            return False
        return task.project_id != self._selected_project_id

    def toggle_project_filter(self, project_id: UUID) -> None:
        """Filter by a project, or clear the filter if it is already active.

        Unknown project ids are ignored.
        """
        if self._find_project(project_id) is None:
            logger.debug("toggle_project_filter: project not found: %s", project_id)
            return
        if self._selected_project_id == project_id:
            self._selected_project_id = None
        else:
            self._selected_project_id = project_id
        logger.debug("Project filter: %s", self._selected_project_id)
        self._notify(ChangeKind.FILTER)

    def clear_filter(self) -> None:
        """Remove the active project filter."""
        if self._selected_project_id is None:
            return
        self._selected_project_id = None
        self._notify(ChangeKind.FILTER)

    # --- Project Management ---

    def add_project(self, name: str, color_hex: str) -> Project:
        """
        Append a new project. Duplicate names are allowed.

        Raises:
            ValidationError: if the name is blank.
        """
        self._validate_name(name)
        project = Project(name=name, color_hex=color_hex)
        self._projects.append(project)
        logger.info("Project created: %s (%s)", project.id, name)
        self._notify(ChangeKind.PROJECTS)
        return project

    def update_project(self, project: Project) -> Project | None:
        """
        Replace the stored project with the same id.

        Returns None if no project has this id.

        Raises:
            ValidationError: if the name is blank.
        """
        for i, existing in enumerate(self._projects):
            if existing.id == project.id:
                self._validate_name(project.name)
                self._projects[i] = project
                logger.info("Project updated: %s", project.id)
                self._notify(ChangeKind.PROJECTS)
                return project

        logger.debug("update_project: project not found: %s", project.id)
        return None

    def delete_project(self, project_id: UUID) -> bool:
        """
        Delete a project, moving its tasks to the first remaining project.

        Refused (returns False) when it is the last project or unknown.
        Clears the filter if it pointed at the deleted project.
        """
        if len(self._projects) < 2:
            logger.debug("delete_project: refusing to delete the last project")
            return False
        if self._find_project(project_id) is None:
            logger.debug("delete_project: project not found: %s", project_id)
            return False

        target = next(p for p in self._projects if p.id != project_id)

        reassigned = 0
        for i, task in enumerate(self._tasks):
            if task.project_id == project_id:
                self._tasks[i] = task.model_copy(update={"project_id": target.id})
                reassigned += 1

        self._projects = [p for p in self._projects if p.id != project_id]

        filter_cleared = self._selected_project_id == project_id
        if filter_cleared:
            self._selected_project_id = None

        logger.info(
            "Project deleted: %s (%d tasks moved to %s)", project_id, reassigned, target.name
        )
        if reassigned:
            self._notify(ChangeKind.TASKS)
        self._notify(ChangeKind.PROJECTS)
        if filter_cleared:
            self._notify(ChangeKind.FILTER)
        return True

    # --- Private Methods ---

    def _replace_task(self, index: int, task: Task) -> Task:
        stored = self._tasks[index]
        updated = task.model_copy(
            update={
                "created_at": stored.created_at,
                "updated_at": later_than(stored.updated_at, self._clock()),
            }
        )
        self._tasks[index] = updated
        self._notify(ChangeKind.TASKS)
        return updated

    def _task_index(self, task_id: UUID) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _find_project(self, project_id: UUID) -> Project | None:
        return next((p for p in self._projects if p.id == project_id), None)

    def _resolve_filter(self, project_id: UUID | None | _ActiveFilter) -> UUID | None:
        if isinstance(project_id, _ActiveFilter):
            return self._selected_project_id
        return project_id

    def _reassign_orphans(self) -> None:
        """Point tasks with a missing project at the first project."""
        if not self._projects:
            return
        known = {p.id for p in self._projects}
        fallback = self._projects[0].id
        for i, task in enumerate(self._tasks):
            if task.project_id not in known:
                logger.warning(
                    "Task %s references missing project %s, moving to %s",
                    task.id,
                    task.project_id,
                    fallback,
                )
                self._tasks[i] = task.model_copy(update={"project_id": fallback})

    def _validate_project_ref(self, project_id: UUID) -> None:
        if self._find_project(project_id) is None:
            raise ValidationError(f"Unknown project: {project_id}")

    @staticmethod
    def _validate_title(title: str) -> None:
        if not title.strip():
            raise ValidationError("Task title cannot be empty")

    @staticmethod
    def _validate_name(name: str) -> None:
        if not name.strip():
            raise ValidationError("Project name cannot be empty")


def _unique_by_id(records: Iterable, kind: str) -> list:
    """Keep the first record for each id."""
    seen: set[UUID] = set()
    unique = []
    for record in records:
        if record.id in seen:
            logger.warning("Dropping duplicate %s id: %s", kind, record.id)
            continue
        seen.add(record.id)
        unique.append(record)
    return unique
