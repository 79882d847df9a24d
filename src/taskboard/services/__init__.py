"""Service layer for business logic."""

from .autosave import AutosaveScheduler, Debouncer
from .board_controller import ACTIVE_FILTER, BoardController
from .config_service import ConfigService
from .drop_resolver import DropResolver, encode_payload
from .sample_data import seed_sample_tasks

__all__ = [
    "ACTIVE_FILTER",
    "AutosaveScheduler",
    "BoardController",
    "ConfigService",
    "Debouncer",
    "DropResolver",
    "encode_payload",
    "seed_sample_tasks",
]
