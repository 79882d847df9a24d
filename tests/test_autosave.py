"""Tests for debounced autosave."""

import asyncio
import logging
from unittest.mock import MagicMock

import pytest

from taskboard.exceptions import PersistenceError
from taskboard.models import Project, TaskStatus
from taskboard.repositories import InMemoryRepository
from taskboard.services import AutosaveScheduler, BoardController, Debouncer

DELAY = 0.05
SETTLE = 0.2


@pytest.fixture
def project() -> Project:
    return Project(name="Work", color_hex="#3B82F6")


@pytest.fixture
def repo(project: Project) -> InMemoryRepository:
    return InMemoryRepository(projects=[project, Project(name="Other", color_hex="#000000")])


@pytest.fixture
def controller(repo: InMemoryRepository) -> BoardController:
    controller = BoardController(repo)
    controller.initialize()
    return controller


@pytest.fixture
def scheduler(controller: BoardController, repo: InMemoryRepository) -> AutosaveScheduler:
    scheduler = AutosaveScheduler(controller, repo, DELAY)
    scheduler.attach()
    return scheduler


class TestDebouncer:
    """Tests for Debouncer timing."""

    def test_fires_once_with_last_snapshot(self):
        """A burst of triggers produces one call with the final value."""
        action = MagicMock()
        debouncer = Debouncer("test", action, DELAY)

        async def scenario():
            for value in range(5):
                debouncer.trigger(value)
            assert debouncer.pending
            await asyncio.sleep(SETTLE)

        asyncio.run(scenario())

        action.assert_called_once_with(4)
        assert not debouncer.pending

    def test_retrigger_restarts_timer(self):
        """Triggers spaced under the delay keep postponing the write."""
        action = MagicMock()
        debouncer = Debouncer("test", action, 0.1)

        async def scenario():
            for value in range(4):
                debouncer.trigger(value)
                await asyncio.sleep(0.05)
            action.assert_not_called()
            await asyncio.sleep(0.2)

        asyncio.run(scenario())

        action.assert_called_once_with(3)

    def test_separate_bursts_fire_separately(self):
        action = MagicMock()
        debouncer = Debouncer("test", action, DELAY)

        async def scenario():
            debouncer.trigger("a")
            await asyncio.sleep(SETTLE)
            debouncer.trigger("b")
            await asyncio.sleep(SETTLE)

        asyncio.run(scenario())

        assert [c.args[0] for c in action.call_args_list] == ["a", "b"]

    def test_cancel_drops_pending_write(self):
        action = MagicMock()
        debouncer = Debouncer("test", action, DELAY)

        async def scenario():
            debouncer.trigger("a")
            debouncer.cancel()
            await asyncio.sleep(SETTLE)

        asyncio.run(scenario())

        action.assert_not_called()
        assert not debouncer.pending

    def test_failure_is_logged_not_raised(self, caplog):
        """A failed save is logged and the debouncer stays usable."""
        action = MagicMock(side_effect=[PersistenceError("disk full"), None])
        debouncer = Debouncer("tasks", action, DELAY)

        async def scenario():
            debouncer.trigger("first")
            await asyncio.sleep(SETTLE)
            debouncer.trigger("second")
            await asyncio.sleep(SETTLE)

        with caplog.at_level(logging.ERROR, logger="taskboard"):
            asyncio.run(scenario())

        assert action.call_count == 2
        assert "Autosave of tasks failed: disk full" in caplog.text

    def test_trigger_requires_running_loop(self):
        debouncer = Debouncer("test", MagicMock(), DELAY)

        with pytest.raises(RuntimeError):
            debouncer.trigger("x")


class TestAutosaveScheduler:
    """Tests for AutosaveScheduler wiring."""

    def test_burst_of_task_changes_saves_once(
        self,
        scheduler: AutosaveScheduler,
        controller: BoardController,
        repo: InMemoryRepository,
        project: Project,
    ):
        """Ten quick edits produce a single save holding the final state."""

        async def scenario():
            task = controller.add_task("T0", project_id=project.id)
            for i in range(1, 10):
                task = controller.update_task(task.model_copy(update={"title": f"T{i}"}))
            assert repo.save_tasks_calls == 0
            await asyncio.sleep(SETTLE)

        asyncio.run(scenario())

        assert repo.save_tasks_calls == 1
        assert [t.title for t in repo.load_tasks()] == ["T9"]

    def test_timers_are_independent(
        self,
        scheduler: AutosaveScheduler,
        controller: BoardController,
        repo: InMemoryRepository,
        project: Project,
    ):
        """Task edits do not postpone a pending project save."""

        async def scenario():
            controller.add_project("New", "#ABCDEF")
            for i in range(6):
                controller.add_task(f"T{i}", project_id=project.id)
                await asyncio.sleep(DELAY / 2)
            assert repo.save_projects_calls == 1
            await asyncio.sleep(SETTLE)

        asyncio.run(scenario())

        assert repo.save_projects_calls == 1
        assert len(repo.load_tasks()) == 6
        assert [p.name for p in repo.load_projects()][-1] == "New"

    def test_filter_changes_do_not_save(
        self,
        scheduler: AutosaveScheduler,
        controller: BoardController,
        repo: InMemoryRepository,
        project: Project,
    ):
        async def scenario():
            controller.toggle_project_filter(project.id)
            controller.clear_filter()
            await asyncio.sleep(SETTLE)

        asyncio.run(scenario())

        assert repo.save_tasks_calls == 0
        assert repo.save_projects_calls == 0

    def test_delete_project_saves_both_collections(
        self,
        scheduler: AutosaveScheduler,
        controller: BoardController,
        repo: InMemoryRepository,
        project: Project,
    ):
        async def scenario():
            controller.add_task("T", project_id=project.id)
            controller.delete_project(project.id)
            await asyncio.sleep(SETTLE)

        asyncio.run(scenario())

        assert [p.name for p in repo.load_projects()] == ["Other"]
        assert repo.load_tasks()[0].project_id == repo.load_projects()[0].id

    def test_save_failure_keeps_memory_state(
        self, controller: BoardController, project: Project, caplog
    ):
        """A failing store is logged; the controller keeps the change."""
        repository = MagicMock()
        repository.save_tasks.side_effect = PersistenceError("read-only")
        scheduler = AutosaveScheduler(controller, repository, DELAY)
        scheduler.attach()

        async def scenario():
            controller.add_task("Kept", project_id=project.id)
            await asyncio.sleep(SETTLE)

        with caplog.at_level(logging.ERROR, logger="taskboard"):
            asyncio.run(scenario())

        repository.save_tasks.assert_called_once()
        assert [t.title for t in controller.tasks] == ["Kept"]
        assert "read-only" in caplog.text

    def test_flush_writes_pending_changes(
        self,
        scheduler: AutosaveScheduler,
        controller: BoardController,
        repo: InMemoryRepository,
        project: Project,
    ):
        """flush saves immediately and cancels the timers."""

        async def scenario():
            task = controller.add_task("T", project_id=project.id)
            controller.move_task(task.id, TaskStatus.DONE)
            scheduler.flush()
            assert not scheduler.tasks.pending
            await asyncio.sleep(SETTLE)

        asyncio.run(scenario())

        assert repo.save_tasks_calls == 1
        assert repo.load_tasks()[0].status == TaskStatus.DONE

    def test_close_unsubscribes(
        self,
        scheduler: AutosaveScheduler,
        controller: BoardController,
        repo: InMemoryRepository,
        project: Project,
    ):
        scheduler.close()
        saves = repo.save_tasks_calls

        async def scenario():
            controller.add_task("After close", project_id=project.id)
            await asyncio.sleep(SETTLE)

        asyncio.run(scenario())

        assert repo.save_tasks_calls == saves

    def test_close_without_attach_does_not_save(
        self, controller: BoardController, repo: InMemoryRepository
    ):
        """A scheduler that never started cannot overwrite stored data."""
        scheduler = AutosaveScheduler(controller, repo, DELAY)

        scheduler.close()

        assert repo.save_tasks_calls == 0
        assert repo.save_projects_calls == 0

    def test_close_saves_once_after_attach(
        self, scheduler: AutosaveScheduler, repo: InMemoryRepository
    ):
        scheduler.close()
        scheduler.close()

        assert repo.save_tasks_calls == 1
        assert repo.save_projects_calls == 1

    def test_attach_is_idempotent(
        self,
        scheduler: AutosaveScheduler,
        controller: BoardController,
        repo: InMemoryRepository,
        project: Project,
    ):
        scheduler.attach()

        async def scenario():
            controller.add_task("T", project_id=project.id)
            await asyncio.sleep(SETTLE)

        asyncio.run(scenario())

        assert repo.save_tasks_calls == 1
