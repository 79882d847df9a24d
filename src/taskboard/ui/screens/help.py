"""Key reference overlay."""

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

# (section, [(keys, action)])
SHORTCUTS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Board",
        [
            ("h j k l / arrows", "Move the cursor"),
            ("p", "Filter by the next project"),
            ("Esc", "Clear the project filter"),
        ],
    ),
    (
        "Tasks",
        [
            ("n", "New task in Backlog"),
            ("e / Enter", "Edit title, description, notes, project"),
            ("H L / Shift+arrows", "Move to the previous or next column"),
            ("mouse drag", "Drop a card on another column"),
            ("d", "Delete"),
        ],
    ),
    (
        "Projects",
        [
            ("P", "New project"),
            ("X", "Delete the filtered project"),
        ],
    ),
    (
        "App",
        [
            ("?", "This help"),
            ("q", "Save and quit"),
        ],
    ),
]


def render_shortcuts(section: str, rows: list[tuple[str, str]]) -> str:
    """Markup for one section of the key reference."""
    width = max(len(keys) for keys, _ in rows)
    lines = [f"[bold underline]{section}[/]"]
    lines.extend(f"  [b]{keys.ljust(width)}[/b]  [dim]{action}[/]" for keys, action in rows)
    return "\n".join(lines)


class HelpScreen(ModalScreen):
    """Lists every key binding; any key closes it."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > VerticalScroll {
        width: 64;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $surface;
        border: round $accent;
        border-title-align: center;
    }

    HelpScreen .help-section {
        margin-bottom: 1;
    }
    """

    BINDINGS = [Binding("escape", "dismiss", "Close", show=False)]

    def compose(self) -> ComposeResult:
        scroll = VerticalScroll()
        scroll.border_title = "taskboard keys"
        with scroll:
            for section, rows in SHORTCUTS:
                yield Static(render_shortcuts(section, rows), classes="help-section")

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.dismiss()
