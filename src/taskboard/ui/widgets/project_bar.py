"""Project filter bar."""

from uuid import UUID

from rich.markup import escape
from textual.widgets import Static

from ...models import Project


class ProjectBar(Static):
    """One chip per project; the active filter is highlighted."""

    def show(self, projects: tuple[Project, ...], selected: UUID | None) -> None:
        chips = []
        for project in projects:
            chip = f"[{project.css_color}]●[/] {escape(project.name)}"
            if project.id == selected:
                chip = f"[reverse]{chip}[/reverse]"
            chips.append(chip)
        hint = "[dim](p: next filter, Esc: clear)[/]" if selected else "[dim](p: filter)[/]"
        self.update("  ".join(chips) + "  " + hint)
