"""Tests for first-launch sample tasks."""

from collections import Counter

from taskboard.models import Project, TaskStatus
from taskboard.repositories import InMemoryRepository
from taskboard.services import BoardController, seed_sample_tasks
from taskboard.services.sample_data import SAMPLE_TASKS, sample_task_id


def make_controller(project_count: int = 3) -> BoardController:
    projects = [Project(name=f"P{i}", color_hex="#123456") for i in range(project_count)]
    controller = BoardController(InMemoryRepository(projects=projects))
    controller.initialize()
    return controller


class TestSeedSampleTasks:
    """Tests for seed_sample_tasks."""

    def test_seeds_empty_board(self):
        controller = make_controller()

        assert seed_sample_tasks(controller) is True
        assert len(controller.tasks) == len(SAMPLE_TASKS)

    def test_spreads_over_first_three_projects(self):
        controller = make_controller(4)
        seed_sample_tasks(controller)

        counts = Counter(t.project_id for t in controller.tasks)
        first_three = {p.id for p in controller.projects[:3]}

        assert set(counts) == first_three

    def test_every_column_has_samples(self):
        controller = make_controller()
        seed_sample_tasks(controller)

        for status in TaskStatus:
            assert controller.tasks_by_status(status)

    def test_skips_when_tasks_exist(self):
        controller = make_controller()
        controller.add_task("Mine", project_id=controller.projects[0].id)

        assert seed_sample_tasks(controller) is False
        assert [t.title for t in controller.tasks] == ["Mine"]

    def test_skips_with_fewer_than_three_projects(self):
        controller = make_controller(2)

        assert seed_sample_tasks(controller) is False
        assert controller.tasks == ()

    def test_ids_are_stable(self):
        """The same sample always gets the same id."""
        first = make_controller()
        second = make_controller()
        seed_sample_tasks(first)
        seed_sample_tasks(second)

        assert [t.id for t in first.tasks] == [t.id for t in second.tasks]
        assert first.tasks[0].id == sample_task_id(SAMPLE_TASKS[0][1])

    def test_timestamps_valid(self):
        controller = make_controller()
        seed_sample_tasks(controller)

        assert all(t.updated_at >= t.created_at for t in controller.tasks)
