"""Main kanban board screen."""

from uuid import UUID

from textual import events
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header

from ...models import Task, TaskStatus
from ...services import BoardController, encode_payload
from ..widgets.column import KanbanColumn
from ..widgets.project_bar import ProjectBar
from ..widgets.task_card import TaskCard

COLUMNS = list(TaskStatus)


class BoardScreen(Screen):
    """Three status columns with keyboard navigation and mouse drag-and-drop."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_column = 0
        self._current_task = 0
        self._drag: tuple[bytes, TaskStatus] | None = None
        self._pending_focus_id: UUID | None = None

    @property
    def controller(self) -> BoardController:
        return self.app.controller  # pyrefly: ignore[missing-attribute]

    def compose(self) -> ComposeResult:
        yield Header()
        yield ProjectBar(id="project-bar")
        with Container(id="board-container"), Horizontal(id="columns"):
            for status in COLUMNS:
                yield KanbanColumn(status, id=f"column-{status.css_id}")
        yield Footer()

    def on_mount(self) -> None:
        """Load tasks when screen mounts."""
        self.refresh_board()

    def follow_task(self, task_id: UUID) -> None:
        """Focus this task once the next refresh completes."""
        self._pending_focus_id = task_id

    def refresh_board(self, focus_task_id: UUID | None = None) -> None:
        """
        Redraw columns from the controller.

        Args:
            focus_task_id: If provided, focus this task after refresh.
                           If None, keeps the current position or a pending
                           follow_task target.
        """
        controller = self.controller
        self.query_one(ProjectBar).show(controller.projects, controller.selected_project_id)

        for index, status in enumerate(COLUMNS):
            tasks = controller.sorted_tasks(status)
            dimmed = {t.id for t in tasks if controller.is_dimmed(t)}
            column = self._get_column(index)
            if column is not None:
                column.set_tasks(tasks, dimmed)

        if focus_task_id is not None:
            self._pending_focus_id = focus_task_id
        # Columns rebuild after one refresh; focus after the next
        self.call_after_refresh(lambda: self.call_after_refresh(self._apply_pending_focus))

    def _apply_pending_focus(self) -> None:
        if self._pending_focus_id is not None:
            position = self._find_task_position(self._pending_focus_id)
            self._pending_focus_id = None
            if position is not None:
                self._current_column, self._current_task = position

        column = self._get_column(self._current_column)
        if column is not None and column.task_count > 0:
            self._current_task = min(self._current_task, column.task_count - 1)
        else:
            self._current_task = 0
        self._update_focus()

    def _find_task_position(self, task_id: UUID) -> tuple[int, int] | None:
        for col_idx in range(len(COLUMNS)):
            column = self._get_column(col_idx)
            if column is None:
                continue
            for task_idx, task in enumerate(column.tasks):
                if task.id == task_id:
                    return (col_idx, task_idx)
        return None

    # --- Navigation ---

    def navigate_column(self, delta: int) -> None:
        """Navigate between columns."""
        new_column = max(0, min(self._current_column + delta, len(COLUMNS) - 1))
        if new_column == self._current_column:
            return
        self._current_column = new_column
        column = self._get_column(new_column)
        if column and column.task_count > 0:
            self._current_task = min(self._current_task, column.task_count - 1)
        else:
            self._current_task = 0
        self._update_focus()

    def navigate_task(self, delta: int) -> None:
        """Navigate between tasks in current column."""
        column = self._get_column(self._current_column)
        if column is None or column.task_count == 0:
            return
        new_task = max(0, min(self._current_task + delta, column.task_count - 1))
        if new_task != self._current_task:
            self._current_task = new_task
            self._update_focus()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        """Keep the cursor on a card focused by mouse or tab."""
        if isinstance(event.widget, TaskCard):
            position = self._find_task_position(event.widget.task.id)
            if position is not None:
                self._current_column, self._current_task = position

    def _get_column(self, index: int) -> KanbanColumn | None:
        if index < 0 or index >= len(COLUMNS):
            return None
        return self.query_one(f"#column-{COLUMNS[index].css_id}", KanbanColumn)

    def _update_focus(self) -> None:
        column = self._get_column(self._current_column)
        if column:
            column.focus_task(self._current_task)

    def get_current_task(self) -> Task | None:
        """Get the currently focused task."""
        column = self._get_column(self._current_column)
        if column:
            return column.get_task(self._current_task)
        return None

    @property
    def current_column_status(self) -> TaskStatus:
        return COLUMNS[self._current_column]

    # --- Drag and drop ---

    def begin_drag(self, task: Task) -> None:
        """Remember the card under the pointer until the button is released."""
        self._drag = (encode_payload(task), task.status)

    def drop_on(self, destination: TaskStatus) -> None:
        """Finish a drag over a column."""
        drag, self._drag = self._drag, None
        if drag is None:
            return
        payload, source = drag
        if source == destination:
            # Plain click
            return
        self.app.drop_task(payload, destination)  # pyrefly: ignore[missing-attribute]

    def on_mouse_up(self, event: events.MouseUp) -> None:
        """Released outside any column: cancel the drag."""
        self._drag = None
