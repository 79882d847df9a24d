"""Configuration models for taskboard.yml."""

from pydantic import BaseModel, Field, field_validator

from ..utils.color import parse_hex_color
from .project import DEFAULT_PROJECT_TEMPLATES


class ProjectTemplate(BaseModel):
    """A project created on first launch."""

    name: str = Field(..., min_length=1)
    color: str = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject whitespace-only names."""
        if not v.strip():
            raise ValueError("Project name cannot be blank")
        return v

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Templates must carry a color that renders."""
        if parse_hex_color(v) is None:
            raise ValueError(f"Invalid hex color '{v}' (expected RRGGBB or AARRGGBB)")
        return v


def _default_templates() -> list[ProjectTemplate]:
    return [ProjectTemplate(name=name, color=color) for name, color in DEFAULT_PROJECT_TEMPLATES]


class TaskboardConfig(BaseModel):
    """Root configuration from taskboard.yml."""

    version: int = 1
    autosave_delay: float = Field(default=0.5, gt=0)
    seed_sample_tasks: bool = True
    default_projects: list[ProjectTemplate] = Field(default_factory=_default_templates)

    @field_validator("default_projects")
    @classmethod
    def validate_default_projects(cls, v: list[ProjectTemplate]) -> list[ProjectTemplate]:
        """At least one project must exist after first launch."""
        if not v:
            raise ValueError("default_projects must list at least one project")
        return v

    @property
    def project_templates(self) -> list[tuple[str, str]]:
        """Templates as (name, colorHex) pairs."""
        return [(t.name, t.color) for t in self.default_projects]

    @classmethod
    def default(cls) -> "TaskboardConfig":
        """Return the default configuration."""
        return cls()
