"""Tests for ConfigService."""

from pathlib import Path

import pytest

from taskboard.services import ConfigService


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory."""
    root = tmp_path / "board"
    root.mkdir()
    return root


class TestConfigServiceLoading:
    """Tests for ConfigService file loading."""

    def test_default_on_missing_file(self, data_dir: Path):
        """Missing taskboard.yml returns default config."""
        service = ConfigService(data_dir)
        config = service.get_config()

        assert config.autosave_delay == 0.5
        assert config.seed_sample_tasks is True
        assert len(config.default_projects) == 3
        assert not service.has_config_error

    def test_load_valid_config(self, data_dir: Path):
        """Valid config loads correctly."""
        (data_dir / "taskboard.yml").write_text(
            """
version: 1
autosave_delay: 1.5
seed_sample_tasks: false
default_projects:
  - name: Home
    color: "#FF8800"
  - name: Garden
    color: "22AA44"
"""
        )

        service = ConfigService(data_dir)
        config = service.get_config()

        assert config.autosave_delay == 1.5
        assert config.seed_sample_tasks is False
        assert config.project_templates == [("Home", "#FF8800"), ("Garden", "22AA44")]
        assert not service.has_config_error

    def test_partial_config_keeps_defaults(self, data_dir: Path):
        """Keys not given fall back to defaults."""
        (data_dir / "taskboard.yml").write_text("autosave_delay: 2\n")

        config = ConfigService(data_dir).get_config()

        assert config.autosave_delay == 2
        assert [name for name, _ in config.project_templates] == ["Work", "Personal", "Learning"]


class TestConfigServiceErrors:
    """Tests for ConfigService error handling."""

    @pytest.mark.parametrize(
        "content, fragment",
        [
            ("autosave_delay: [unclosed", "Invalid YAML"),
            ("", "is empty"),
            ("- just\n- a list\n", "must contain a mapping"),
            ("autosave_delay: -1\n", "Invalid taskboard.yml"),
            ("default_projects: []\n", "Invalid taskboard.yml"),
            (
                "default_projects:\n  - name: Bad\n    color: purple\n",
                "Invalid taskboard.yml",
            ),
        ],
    )
    def test_invalid_config_falls_back(self, data_dir: Path, content: str, fragment: str):
        """Broken config files produce defaults plus an error message."""
        (data_dir / "taskboard.yml").write_text(content)

        service = ConfigService(data_dir)
        config = service.get_config()

        assert config.autosave_delay == 0.5
        assert service.has_config_error
        assert fragment in service.config_error


class TestConfigServiceCaching:
    """Tests for ConfigService caching."""

    def test_config_is_cached(self, data_dir: Path):
        service = ConfigService(data_dir)

        assert service.get_config() is service.get_config()

    def test_reload_reads_file_again(self, data_dir: Path):
        config_file = data_dir / "taskboard.yml"
        config_file.write_text("autosave_delay: 1\n")
        service = ConfigService(data_dir)
        assert service.get_config().autosave_delay == 1

        config_file.write_text("autosave_delay: 3\n")
        assert service.get_config().autosave_delay == 1

        service.reload()
        assert service.get_config().autosave_delay == 3

    def test_reload_clears_error(self, data_dir: Path):
        config_file = data_dir / "taskboard.yml"
        config_file.write_text("{{{")
        service = ConfigService(data_dir)
        service.get_config()
        assert service.has_config_error

        config_file.unlink()
        service.reload()
        service.get_config()

        assert not service.has_config_error
