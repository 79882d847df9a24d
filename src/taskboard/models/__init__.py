"""Data models."""

from .board_config import ProjectTemplate, TaskboardConfig
from .enums import TaskStatus
from .events import BoardChange, ChangeKind
from .project import DEFAULT_PROJECT_TEMPLATES, Project
from .task import Task

__all__ = [
    "DEFAULT_PROJECT_TEMPLATES",
    "BoardChange",
    "ChangeKind",
    "Project",
    "ProjectTemplate",
    "Task",
    "TaskStatus",
    "TaskboardConfig",
]
