"""taskboard: a local kanban board for tasks grouped by project."""

__version__ = "0.1.0"
