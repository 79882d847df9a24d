"""Modal form for creating projects."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from ...utils import parse_hex_color

DEFAULT_COLOR = "#3B82F6"


class ProjectFormModal(ModalScreen[tuple[str, str] | None]):
    """Name and hex color for a new project. Returns (name, colorHex)."""

    DEFAULT_CSS = """
    ProjectFormModal {
        align: center middle;
    }

    ProjectFormModal > Vertical {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    ProjectFormModal .form-title {
        text-style: bold;
        padding-bottom: 1;
    }

    ProjectFormModal #color-hint {
        color: $text-muted;
    }

    ProjectFormModal .buttons {
        height: auto;
        align: right middle;
        padding-top: 1;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("New Project", classes="form-title")
            yield Input(placeholder="Name", id="name")
            yield Input(value=DEFAULT_COLOR, placeholder="#RRGGBB", id="color")
            yield Label("", id="color-hint")
            with Horizontal(classes="buttons"):
                yield Button("Cancel", id="cancel")
                yield Button("Save", id="save", variant="primary", disabled=True)

    def on_mount(self) -> None:
        self.query_one("#name", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        name = self.query_one("#name", Input).value
        color = self.query_one("#color", Input).value
        self.query_one("#save", Button).disabled = not name.strip()
        # Invalid colors are allowed, they just won't render
        hint = "" if parse_hex_color(color) else "Not a valid hex color"
        self.query_one("#color-hint", Label).update(hint)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "save":
            self.dismiss(None)
            return
        name = self.query_one("#name", Input).value.strip()
        color = self.query_one("#color", Input).value.strip()
        self.dismiss((name, color))
