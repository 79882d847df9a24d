"""Debounced autosave of board state."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from ..exceptions import PersistenceError
from ..models import BoardChange, ChangeKind
from ..repositories import RepositoryProtocol
from .board_controller import BoardController

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_DELAY = 0.5


class Debouncer(Generic[T]):
    """
    Trailing-edge debounce of a save action.

    Each trigger stores a snapshot and restarts the timer; when the timer
    finally fires, only the last snapshot is written. There is no upper
    bound on how long a stream of triggers can postpone the write.
    """

    def __init__(
        self,
        name: str,
        action: Callable[[T], None],
        delay: float = DEFAULT_DELAY,
    ) -> None:
        self.name = name
        self.delay = delay
        self._action = action
        self._handle: asyncio.TimerHandle | None = None
        self._snapshot: T | None = None

    @property
    def pending(self) -> bool:
        """True while a write is waiting for its quiet period."""
        return self._handle is not None

    def trigger(self, snapshot: T) -> None:
        """Replace the pending snapshot and restart the timer.

        Must be called from the thread running the event loop.
        """
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
        self._snapshot = snapshot
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        """Drop the pending write, if any."""
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._snapshot = None

    def _fire(self) -> None:
        snapshot = self._snapshot
        self._handle = None
        self._snapshot = None
        if snapshot is None:
            return
        try:
            self._action(snapshot)
        except PersistenceError as e:
            # In-memory state stays authoritative; the next change retries.
            logger.error("Autosave of %s failed: %s", self.name, e)


class AutosaveScheduler:
    """
    Persists the board after a quiet period following each change.

    Tasks and projects are debounced independently. Snapshots are taken
    when the change is reported, on the loop that owns the controller.
    """

    def __init__(
        self,
        controller: BoardController,
        repository: RepositoryProtocol,
        delay: float = DEFAULT_DELAY,
    ) -> None:
        self.controller = controller
        self.repository = repository
        self.tasks = Debouncer("tasks", repository.save_tasks, delay)
        self.projects = Debouncer("projects", repository.save_projects, delay)
        self._unsubscribe: Callable[[], None] | None = None

    def attach(self) -> None:
        """Start listening to controller changes."""
        if self._unsubscribe is None:
            self._unsubscribe = self.controller.subscribe(self._on_change)

    def _on_change(self, change: BoardChange) -> None:
        if change.kind is ChangeKind.TASKS:
            self.tasks.trigger(self.controller.tasks)
        elif change.kind is ChangeKind.PROJECTS:
            self.projects.trigger(self.controller.projects)

    def flush(self) -> None:
        """Cancel pending timers and save both collections now."""
        self.tasks.cancel()
        self.projects.cancel()
        for name, save, snapshot in (
            ("tasks", self.repository.save_tasks, self.controller.tasks),
            ("projects", self.repository.save_projects, self.controller.projects),
        ):
            try:
                save(snapshot)
            except PersistenceError as e:
                logger.error("Final save of %s failed: %s", name, e)

    def close(self) -> None:
        """Flush and stop listening.

        Does nothing if the scheduler was never attached: the board was
        not loaded, so saving would overwrite stored data with empty lists.
        """
        if self._unsubscribe is None:
            logger.debug("Autosave was never attached, skipping final save")
            return
        self._unsubscribe()
        self._unsubscribe = None
        self.flush()
