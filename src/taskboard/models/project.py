"""Project domain model."""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..utils.color import parse_hex_color

# Default projects created on first launch: (name, colorHex)
DEFAULT_PROJECT_TEMPLATES: list[tuple[str, str]] = [
    ("Work", "#3B82F6"),
    ("Personal", "#10B981"),
    ("Learning", "#F59E0B"),
]


class Project(BaseModel):
    """A color-coded group of tasks."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: UUID = Field(default_factory=uuid4)
    name: str
    color_hex: str

    @property
    def rgba(self) -> tuple[int, int, int, int] | None:
        """Parsed color, or None when color_hex is not valid hex."""
        return parse_hex_color(self.color_hex)

    @property
    def css_color(self) -> str:
        """Rich/Textual color markup for the project, falling back to blue."""
        rgba = self.rgba
        if rgba is None:
            return "blue"
        r, g, b, _ = rgba
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def templates(
        cls, templates: list[tuple[str, str]] | None = None
    ) -> list["Project"]:
        """Build fresh projects from (name, colorHex) templates."""
        if templates is None:
            templates = DEFAULT_PROJECT_TEMPLATES
        return [cls(name=name, color_hex=color) for name, color in templates]
