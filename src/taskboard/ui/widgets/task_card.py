"""Task card widget."""

from __future__ import annotations

from rich.markup import escape
from textual import events
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Project, Task


class TaskCard(Widget, can_focus=True):
    """A task card displayed in a column."""

    def __init__(
        self,
        task_data: Task,
        project: Project,
        dimmed: bool = False,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data
        self._project = project
        if dimmed:
            self.add_class("dimmed")

    @property
    def task(self) -> Task:
        """Get the task for this card."""
        return self._task_data

    def compose(self) -> ComposeResult:
        """Create card layout."""
        yield Static(
            self._truncate(self._task_data.display_title, 40),
            classes="task-title",
            markup=False,
        )
        yield Static(self._format_project(), classes="task-project")

        if self._task_data.description.strip():
            yield Static(
                self._truncate(self._task_data.description.strip(), 50),
                classes="task-description",
                markup=False,
            )

        preview = self._task_data.notes_preview
        if preview:
            yield Static(f"[dim]{escape(self._truncate(preview, 50))}[/]", classes="task-preview")

    def on_mouse_down(self, event: events.MouseDown) -> None:
        """Start dragging this card."""
        begin_drag = getattr(self.screen, "begin_drag", None)
        if begin_drag is not None:
            begin_drag(self._task_data)

    def _format_project(self) -> str:
        return f"[{self._project.css_color}]●[/] {escape(self._project.name)}"

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"
