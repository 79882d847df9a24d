"""Change notifications emitted by the board controller."""

from dataclasses import dataclass
from enum import Enum


class ChangeKind(str, Enum):
    """Which part of the board changed."""

    TASKS = "tasks"
    PROJECTS = "projects"
    FILTER = "filter"


@dataclass(frozen=True)
class BoardChange:
    """Emitted after a successful mutation."""

    kind: ChangeKind
