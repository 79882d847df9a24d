"""Sample tasks shown on first launch."""

import logging
from uuid import NAMESPACE_URL, UUID, uuid5

from ..models import Task, TaskStatus
from ..utils import now_utc
from .board_controller import BoardController

logger = logging.getLogger(__name__)

_SAMPLE_NAMESPACE = uuid5(NAMESPACE_URL, "taskboard:sample-tasks")

# (project index, title, description, notes, status)
SAMPLE_TASKS: list[tuple[int, str, str, str, TaskStatus]] = [
    (
        0,
        "Review Q1 roadmap",
        "Align with team priorities",
        "Key discussion points:\n- Revenue targets\n- New feature priorities\n"
        "- Team capacity planning",
        TaskStatus.BACKLOG,
    ),
    (
        0,
        "Fix authentication bug",
        "Users can't log in with SSO",
        "Bug details:\n- Affects Safari users\n- Error: 'Invalid token'\n"
        "- Related to OAuth flow\n\nSolution:\nCheck token expiration logic in the auth service",
        TaskStatus.IN_PROGRESS,
    ),
    (0, "Deploy to staging", "Test new API endpoints", "", TaskStatus.DONE),
    (1, "Book dentist appointment", "Overdue checkup", "", TaskStatus.BACKLOG),
    (
        1,
        "Plan weekend trip",
        "Research hiking trails",
        "Trail options:\n1. Mount Tamalpais - 7 miles\n2. Point Reyes - 10 miles\n"
        "3. Big Sur - overnight camping\n\nBring: water, snacks, sunscreen",
        TaskStatus.IN_PROGRESS,
    ),
    (
        2,
        "Complete Textual course",
        "Chapters 5-7",
        "Topics to cover:\n- Reactive attributes\n- Screens and modals\n- Testing with pilots\n\n"
        "Practice projects:\n- Todo list\n- Weather app",
        TaskStatus.BACKLOG,
    ),
    (2, "Read asyncio documentation", "Focus on event loops", "", TaskStatus.IN_PROGRESS),
    (
        2,
        "Build sample Kanban app",
        "Practice drag and drop",
        "Completed!\n\nLearned:\n- Encoding drag payloads as text\n- Drop targets per column",
        TaskStatus.DONE,
    ),
]


def sample_task_id(title: str) -> UUID:
    """Stable id for a sample task."""
    return uuid5(_SAMPLE_NAMESPACE, title)


def seed_sample_tasks(controller: BoardController) -> bool:
    """
    Install the sample tasks on an empty board.

    Only runs when there are no tasks and at least three projects; the
    samples are spread over the first three projects.

    Returns:
        True if sample tasks were installed
    """
    projects = controller.projects
    if controller.tasks or len(projects) < 3:
        return False

    now = now_utc()
    tasks = [
        Task(
            id=sample_task_id(title),
            title=title,
            description=description,
            notes=notes,
            status=status,
            project_id=projects[index].id,
            created_at=now,
            updated_at=now,
        )
        for index, title, description, notes, status in SAMPLE_TASKS
    ]
    controller.load_tasks(tasks)
    logger.info("Created %d sample tasks", len(tasks))
    return True
