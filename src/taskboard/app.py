"""taskboard TUI Application."""

import logging
from uuid import UUID

from textual.app import App
from textual.binding import Binding
from textual.screen import ModalScreen

from .config import Settings
from .exceptions import PersistenceError, ValidationError
from .models import BoardChange, TaskStatus
from .repositories import InMemoryRepository, JsonFileRepository, RepositoryProtocol
from .services import (
    AutosaveScheduler,
    BoardController,
    ConfigService,
    DropResolver,
    encode_payload,
    seed_sample_tasks,
)
from .ui.screens import BoardScreen, HelpScreen
from .ui.widgets import ConfirmModal, ProjectFormModal, TaskFormModal, TaskFormResult

logger = logging.getLogger(__name__)


class TaskboardApp(App):
    """taskboard - terminal kanban board."""

    TITLE = "taskboard"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        # Navigation
        Binding("h", "nav_left", "← Column", show=False),
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("l", "nav_right", "→ Column", show=False),
        Binding("left", "nav_left", "← Column", show=False),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        Binding("right", "nav_right", "→ Column", show=False),
        # Task actions
        Binding("n", "new_task", "New", show=True),
        Binding("e", "edit_task", "Edit", show=True),
        Binding("enter", "edit_task", "Edit", show=False),
        Binding("H", "move_task_left", "Move ←", show=False),
        Binding("L", "move_task_right", "Move →", show=False),
        Binding("shift+left", "move_task_left", "Move ←", show=False),
        Binding("shift+right", "move_task_right", "Move →", show=False),
        Binding("d", "delete_task", "Delete", show=True),
        # Projects
        Binding("p", "cycle_filter", "Project", show=True),
        Binding("P", "new_project", "New Project", show=False),
        Binding("X", "delete_project", "Delete Project", show=False),
        Binding("escape", "escape", "Back", show=False, priority=True),
    ]

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services()

    def _init_services(self) -> None:
        """Wire repository, controller, autosave and drop handling."""
        self.config_service = ConfigService(self.settings.data_dir)
        config = self.config_service.get_config()

        if self.settings.in_memory:
            self.repository: RepositoryProtocol = InMemoryRepository()
        else:
            self.repository = JsonFileRepository(self.settings.data_dir)

        self.controller = BoardController(self.repository, config.project_templates)
        self.autosave = AutosaveScheduler(self.controller, self.repository, config.autosave_delay)
        self.drop_resolver = DropResolver(self.controller)

    def start_board(self) -> None:
        """Load the board, seed first-run samples and start autosaving."""
        self.controller.initialize()

        if self.config_service.get_config().seed_sample_tasks and seed_sample_tasks(
            self.controller
        ):
            try:
                self.repository.save_tasks(self.controller.tasks)
            except PersistenceError as e:
                logger.error("Could not save sample tasks: %s", e)

        self.autosave.attach()
        self.controller.subscribe(self._on_board_change)

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.start_board()
        if self.config_service.has_config_error:
            self.notify(self.config_service.config_error or "", severity="warning")
        self.push_screen(BoardScreen())

    def _on_board_change(self, change: BoardChange) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.refresh_board()

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    # Navigation actions
    def action_nav_left(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_column(-1)

    def action_nav_right(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_column(1)

    def action_nav_up(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_task(-1)

    def action_nav_down(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_task(1)

    # Task actions
    def action_new_task(self) -> None:
        """Open the task form for a new Backlog task."""
        if not isinstance(self.screen, BoardScreen):
            return
        self.push_screen(
            TaskFormModal(self.controller.projects, self.controller.selected_project_id),
            callback=self._handle_new_task,
        )

    def _handle_new_task(self, result: TaskFormResult | None) -> None:
        if result is None:
            return
        try:
            task = self.controller.add_task(
                result.title, result.description, result.notes, project_id=result.project_id
            )
        except ValidationError as e:
            self.notify(str(e), severity="error")
            return
        self._follow(task.id)
        self.notify("Task created", timeout=2)

    def action_edit_task(self) -> None:
        """Open the task form for the focused task."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return
        task = screen.get_current_task()
        if task is None:
            return
        self.push_screen(
            TaskFormModal(self.controller.projects, task_data=task),
            callback=lambda result: self._handle_edit_task(task.id, result),
        )

    def _handle_edit_task(self, task_id: UUID, result: TaskFormResult | None) -> None:
        if result is None:
            return
        task = self.controller.get_task(task_id)
        if task is None:
            return
        edited = task.model_copy(
            update={
                "title": result.title,
                "description": result.description,
                "notes": result.notes,
                "project_id": result.project_id,
            }
        )
        try:
            self.controller.update_task(edited)
        except ValidationError as e:
            self.notify(str(e), severity="error")
            return
        self.notify("Task updated", timeout=2)

    def action_move_task_left(self) -> None:
        """Move the focused task to the previous column."""
        self._move_current(lambda status: status.previous())

    def action_move_task_right(self) -> None:
        """Move the focused task to the next column."""
        self._move_current(lambda status: status.next())

    def _move_current(self, step) -> None:
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return
        task = screen.get_current_task()
        if task is None:
            return
        destination = step(task.status)
        if destination == task.status:
            return
        self.drop_task(encode_payload(task), destination)

    def drop_task(self, payload: bytes, destination: TaskStatus) -> bool:
        """Move a task identified by a drag payload into a column."""
        if not self.drop_resolver.resolve(payload, destination):
            return False
        task_id = DropResolver.decode(payload)
        if task_id is not None:
            self._follow(task_id)
        self.notify(f"Moved to {destination.display_name}", timeout=2)
        return True

    def action_delete_task(self) -> None:
        """Delete the focused task (with confirmation)."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return
        task = screen.get_current_task()
        if task is None:
            return
        self.push_screen(
            ConfirmModal(f"Delete '{task.display_title}'?", "This cannot be undone."),
            callback=lambda confirmed: self._handle_delete_task(task.id, confirmed),
        )

    def _handle_delete_task(self, task_id: UUID, confirmed: bool) -> None:
        if not confirmed:
            return
        self.controller.delete_task(task_id)
        self.notify("Task deleted", timeout=2)

    # Project actions
    def action_cycle_filter(self) -> None:
        """Filter by the next project; past the last one, clear the filter."""
        project_ids = [p.id for p in self.controller.projects]
        selected = self.controller.selected_project_id
        if selected is None or selected not in project_ids:
            self.controller.toggle_project_filter(project_ids[0])
            return
        index = project_ids.index(selected)
        if index + 1 < len(project_ids):
            self.controller.toggle_project_filter(project_ids[index + 1])
        else:
            self.controller.clear_filter()

    def action_new_project(self) -> None:
        """Open the project form."""
        if isinstance(self.screen, BoardScreen):
            self.push_screen(ProjectFormModal(), callback=self._handle_new_project)

    def _handle_new_project(self, result: tuple[str, str] | None) -> None:
        if result is None:
            return
        name, color = result
        try:
            self.controller.add_project(name, color)
        except ValidationError as e:
            self.notify(str(e), severity="error")
            return
        self.notify(f"Project '{name}' created", timeout=2)

    def action_delete_project(self) -> None:
        """Delete the project selected in the filter (with confirmation)."""
        if not isinstance(self.screen, BoardScreen):
            return
        selected = self.controller.selected_project_id
        project = self.controller.get_project(selected) if selected else None
        if project is None:
            self.notify("Select a project with 'p' first", severity="warning")
            return
        if len(self.controller.projects) < 2:
            self.notify("Cannot delete the last project", severity="warning")
            return
        target = next(p for p in self.controller.projects if p.id != project.id)
        self.push_screen(
            ConfirmModal(
                f"Delete project '{project.name}'?",
                f"Its tasks will move to '{target.name}'.",
            ),
            callback=lambda confirmed: self._handle_delete_project(project.id, confirmed),
        )

    def _handle_delete_project(self, project_id: UUID, confirmed: bool) -> None:
        if confirmed and self.controller.delete_project(project_id):
            self.notify("Project deleted", timeout=2)

    def action_escape(self) -> None:
        """Dismiss a modal, otherwise clear the project filter."""
        screen = self.screen
        if isinstance(screen, ModalScreen):
            screen.dismiss(None)
            return
        self.controller.clear_filter()

    # Helpers
    def _follow(self, task_id: UUID) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.follow_task(task_id)


def run(settings: Settings | None = None) -> None:
    """Run the taskboard application."""
    app = TaskboardApp(settings)
    try:
        app.run()
    finally:
        # Write whatever the debounce timers were still holding
        app.autosave.close()
