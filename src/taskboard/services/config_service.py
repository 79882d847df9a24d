"""Configuration service for loading taskboard.yml."""

import logging
from pathlib import Path

import pydantic
import yaml

from ..models import TaskboardConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching application configuration."""

    CONFIG_FILE = "taskboard.yml"

    def __init__(self, data_dir: Path) -> None:
        """Initialize the config service.

        Args:
            data_dir: Directory containing taskboard.yml
        """
        self.data_dir = data_dir
        self._config: TaskboardConfig | None = None
        self._config_error: str | None = None

    @property
    def config_path(self) -> Path:
        return self.data_dir / self.CONFIG_FILE

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    def get_config(self) -> TaskboardConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def reload(self) -> None:
        """Clear cached configuration, forcing reload on next access."""
        self._config = None
        self._config_error = None

    def _load_config(self) -> TaskboardConfig:
        """Load configuration from file or return default."""
        config_path = self.config_path
        self._config_error = None

        if not config_path.exists():
            logger.debug("No %s found, using defaults", self.CONFIG_FILE)
            return TaskboardConfig.default()

        try:
            with config_path.open() as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            return self._fallback(f"Invalid YAML in {self.CONFIG_FILE}: {e}")
        except OSError as e:
            return self._fallback(f"Error reading {self.CONFIG_FILE}: {e}")

        if data is None:
            return self._fallback(f"{self.CONFIG_FILE} is empty")
        if not isinstance(data, dict):
            return self._fallback(f"{self.CONFIG_FILE} must contain a mapping")

        try:
            config = TaskboardConfig(**data)
        except pydantic.ValidationError as e:
            return self._fallback(f"Invalid {self.CONFIG_FILE}: {e}")

        logger.info(
            "Loaded %s (autosave_delay=%.2fs, %d default projects)",
            self.CONFIG_FILE,
            config.autosave_delay,
            len(config.default_projects),
        )
        return config

    def _fallback(self, message: str) -> TaskboardConfig:
        self._config_error = message
        logger.warning(message)
        return TaskboardConfig.default()
