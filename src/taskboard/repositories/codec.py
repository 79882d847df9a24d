"""JSON encoding of the task and project collections."""

from collections.abc import Sequence

from pydantic import TypeAdapter

from ..models import Project, Task

_TASKS = TypeAdapter(list[Task])
_PROJECTS = TypeAdapter(list[Project])


def encode_tasks(tasks: Sequence[Task]) -> bytes:
    """Serialize tasks as a pretty-printed JSON array."""
    return _TASKS.dump_json(list(tasks), by_alias=True, indent=2)


def decode_tasks(data: bytes | str) -> list[Task]:
    """Parse a JSON array of tasks.

    Raises:
        pydantic.ValidationError: for malformed JSON or invalid records.
    """
    return _TASKS.validate_json(data)


def encode_projects(projects: Sequence[Project]) -> bytes:
    """Serialize projects as a pretty-printed JSON array."""
    return _PROJECTS.dump_json(list(projects), by_alias=True, indent=2)


def decode_projects(data: bytes | str) -> list[Project]:
    """Parse a JSON array of projects.

    Raises:
        pydantic.ValidationError: for malformed JSON or invalid records.
    """
    return _PROJECTS.validate_json(data)
