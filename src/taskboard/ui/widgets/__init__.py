"""Widget components."""

from .column import EmptyColumnMessage, KanbanColumn
from .confirm_modal import ConfirmModal
from .project_bar import ProjectBar
from .project_form_modal import ProjectFormModal
from .task_card import TaskCard
from .task_form_modal import TaskFormModal, TaskFormResult

__all__ = [
    "ConfirmModal",
    "EmptyColumnMessage",
    "KanbanColumn",
    "ProjectBar",
    "ProjectFormModal",
    "TaskCard",
    "TaskFormModal",
    "TaskFormResult",
]
