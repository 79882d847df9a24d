"""Kanban column widget."""

import asyncio

from textual import events
from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task, TaskStatus
from .task_card import TaskCard


def task_css_id(task: Task) -> str:
    """CSS-safe widget id for a task card."""
    return f"task-{task.id}"


class TaskListScroll(VerticalScroll):
    """Scroll container for task lists.

    Raises SkipAction for navigation keys so they bubble up to the App
    for task navigation instead of being handled as scroll actions.
    """

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()


class EmptyColumnMessage(Static):
    """Displayed when a column has no tasks."""


class KanbanColumn(Widget):
    """A single status column; also the drop target for dragged cards."""

    def __init__(self, status: TaskStatus, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.status = status
        self._tasks: list[Task] = []
        self._dimmed: set = set()
        self._refresh_lock = asyncio.Lock()

    def compose(self) -> ComposeResult:
        """Create column layout."""
        yield Static(self._header_text, classes="column-header", id=f"header-{self.status.css_id}")
        yield TaskListScroll(classes="column-content", id=f"content-{self.status.css_id}")

    @property
    def _header_text(self) -> str:
        """Header text with styled task count."""
        return f"{self.status.display_name} [dim]({len(self._tasks)})[/]"

    def set_tasks(self, tasks: list[Task], dimmed: set | None = None) -> None:
        """Set the tasks for this column.

        Args:
            tasks: Tasks in display order
            dimmed: Ids of tasks outside the active project filter
        """
        self._tasks = tasks
        self._dimmed = dimmed or set()
        # Use call_after_refresh to ensure DOM is ready
        self.call_after_refresh(self._refresh_tasks)

    async def _refresh_tasks(self) -> None:
        """Rebuild the task cards in this column."""
        # Overlapping rebuilds would mount duplicate card ids
        async with self._refresh_lock:
            content = self.query_one(f"#content-{self.status.css_id}", TaskListScroll)
            await content.remove_children()

            if not self._tasks:
                await content.mount(EmptyColumnMessage(f"No {self.status.display_name} tasks"))
            else:
                controller = self.app.controller  # pyrefly: ignore[missing-attribute]
                cards = [
                    TaskCard(
                        task,
                        controller.project_for(task),
                        dimmed=task.id in self._dimmed,
                        id=task_css_id(task),
                    )
                    for task in self._tasks
                ]
                await content.mount_all(cards)

        self.query_one(f"#header-{self.status.css_id}", Static).update(self._header_text)

    def on_mouse_up(self, event: events.MouseUp) -> None:
        """Drop a dragged card onto this column."""
        drop = getattr(self.screen, "drop_on", None)
        if drop is not None:
            drop(self.status)

    @property
    def tasks(self) -> list[Task]:
        """Get the tasks in this column."""
        return self._tasks

    @property
    def task_count(self) -> int:
        """Get the number of tasks in this column."""
        return len(self._tasks)

    def focus_task(self, index: int) -> bool:
        """
        Focus the task at the given index.

        Returns:
            True if a task was focused, False otherwise
        """
        if not self._tasks or index < 0 or index >= len(self._tasks):
            return False

        cards = self.query(f"#{task_css_id(self._tasks[index])}").results(TaskCard)
        for card in cards:
            card.focus()
            card.scroll_visible()
            return True
        return False

    def get_task(self, index: int) -> Task | None:
        """Get task at index."""
        if 0 <= index < len(self._tasks):
            return self._tasks[index]
        return None
