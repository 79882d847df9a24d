"""Modal form for creating and editing tasks."""

from dataclasses import dataclass
from uuid import UUID

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, TextArea

from ...models import Project, Task


@dataclass
class TaskFormResult:
    """Values submitted from the task form."""

    title: str
    description: str
    notes: str
    project_id: UUID


class TaskFormModal(ModalScreen[TaskFormResult | None]):
    """Title, description, notes and project for a task.

    Save stays disabled while the title is blank.
    """

    DEFAULT_CSS = """
    TaskFormModal {
        align: center middle;
    }

    TaskFormModal > Vertical {
        width: 70;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    TaskFormModal .form-title {
        text-style: bold;
        padding-bottom: 1;
    }

    TaskFormModal TextArea {
        height: 8;
    }

    TaskFormModal .buttons {
        height: auto;
        align: right middle;
        padding-top: 1;
    }

    TaskFormModal Button {
        margin-left: 1;
    }
    """

    def __init__(
        self,
        projects: tuple[Project, ...],
        project_id: UUID | None = None,
        task_data: Task | None = None,
    ) -> None:
        super().__init__()
        self._projects = projects
        self._task_data = task_data
        if task_data is not None:
            project_id = task_data.project_id
        self._project_id = project_id if project_id is not None else projects[0].id

    def compose(self) -> ComposeResult:
        task = self._task_data
        with Vertical():
            yield Label("Edit Task" if task else "New Task", classes="form-title")
            yield Input(value=task.title if task else "", placeholder="Title", id="title")
            yield Input(
                value=task.description if task else "",
                placeholder="Short description",
                id="description",
            )
            yield Label("Notes")
            yield TextArea(task.notes if task else "", id="notes")
            yield Select(
                [(p.name, p.id) for p in self._projects],
                value=self._project_id,
                allow_blank=False,
                id="project",
            )
            with Horizontal(classes="buttons"):
                yield Button("Cancel", id="cancel")
                yield Button(
                    "Save",
                    id="save",
                    variant="primary",
                    disabled=not (task and task.title.strip()),
                )

    def on_mount(self) -> None:
        self.query_one("#title", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "title":
            self.query_one("#save", Button).disabled = not event.value.strip()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save":
            self._submit()
        else:
            self.dismiss(None)

    def _submit(self) -> None:
        title = self.query_one("#title", Input).value.strip()
        if not title:
            return
        self.dismiss(
            TaskFormResult(
                title=title,
                description=self.query_one("#description", Input).value.strip(),
                notes=self.query_one("#notes", TextArea).text,
                project_id=self.query_one("#project", Select).value,
            )
        )
