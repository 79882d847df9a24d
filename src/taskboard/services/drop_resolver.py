"""Translate dropped drag payloads into task moves."""

import logging
from uuid import UUID

from ..models import Task, TaskStatus
from .board_controller import BoardController

logger = logging.getLogger(__name__)


def encode_payload(task: Task) -> bytes:
    """Drag payload for a task: its id as UTF-8 text."""
    return str(task.id).encode("utf-8")


class DropResolver:
    """
    Turns a drop onto a column into a move_task call.

    Drops are best effort: a payload that cannot be decoded or that names
    no existing task is rejected without touching the board.
    """

    def __init__(self, controller: BoardController) -> None:
        self.controller = controller

    def resolve(self, payload: bytes | str, destination: TaskStatus) -> bool:
        """
        Apply a drop.

        Args:
            payload: Task id as text, raw UTF-8 bytes or already decoded
            destination: Status of the column receiving the drop

        Returns:
            True if the drop was accepted and the task moved
        """
        task_id = self.decode(payload)
        if task_id is None:
            return False

        if self.controller.get_task(task_id) is None:
            logger.debug("Drop rejected: unknown task %s", task_id)
            return False

        self.controller.move_task(task_id, destination)
        return True

    @staticmethod
    def decode(payload: bytes | str) -> UUID | None:
        """Task id carried by a payload, or None if it is not one.

        Only the canonical hyphenated form is accepted, in either case.
        Braces, urn prefixes, bare hex and surrounding whitespace are rejected.
        """
        if isinstance(payload, bytes):
            try:
                payload = payload.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("Drop rejected: payload is not UTF-8")
                return None
        try:
            task_id = UUID(payload)
        except ValueError:
            logger.debug("Drop rejected: payload is not a task id: %r", payload)
            return None
        if str(task_id) != payload.lower():
            logger.debug("Drop rejected: payload is not canonical id text: %r", payload)
            return None
        return task_id
