"""Repository layer for data access."""

from .json_store import JsonFileRepository
from .memory import InMemoryRepository
from .protocol import RepositoryProtocol

__all__ = [
    "InMemoryRepository",
    "JsonFileRepository",
    "RepositoryProtocol",
]
