"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


def default_data_dir() -> Path:
    """Per-user data directory (~/.local/share/taskboard)."""
    return Path.home() / ".local" / "share" / "taskboard"


class Settings(BaseSettings):
    """Application settings."""

    data_dir: Path = Field(
        default_factory=default_data_dir,
        description="Directory holding tasks.json, projects.json and taskboard.yml",
    )

    in_memory: bool = Field(
        default=False,
        description="Keep the board in memory only (nothing is written to disk)",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TASKBOARD_",
    }
