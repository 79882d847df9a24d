"""Task domain model."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..utils import now_utc
from .enums import TaskStatus


class Task(BaseModel):
    """A single card on the board.

    Records are immutable; the controller derives new versions with
    ``model_copy(update=...)``. Serialized field names are camelCase
    (``projectId``, ``createdAt``, ``updatedAt``).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: UUID = Field(default_factory=uuid4)
    title: str
    description: str = ""
    notes: str = ""  # Long-form text, stored verbatim
    status: TaskStatus = TaskStatus.BACKLOG
    project_id: UUID
    created_at: datetime = Field(default_factory=now_utc)
    updated_at: datetime = Field(default_factory=now_utc)

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @property
    def display_title(self) -> str:
        """Title for display, never empty."""
        return self.title.strip() or "Untitled"

    @property
    def notes_preview(self) -> str:
        """First non-empty line of the notes."""
        for line in self.notes.split("\n"):
            line = line.strip()
            if line:
                return line
        return ""
