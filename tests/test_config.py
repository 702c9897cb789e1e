"""Tests for taskmaster.config module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from taskmaster.config import (
    CONFIG_FILE,
    TASKMASTER_DIR,
    CategoriesConfig,
    DisplayConfig,
    LoggingConfig,
    TaskmasterConfig,
)
from taskmaster.models import DEFAULT_CATEGORIES, UNCATEGORIZED


class TestCategoriesConfig:
    """Tests for CategoriesConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = CategoriesConfig()
        assert config.defaults == list(DEFAULT_CATEGORIES)
        assert config.uncategorized == UNCATEGORIZED


class TestDisplayConfig:
    """Tests for DisplayConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = DisplayConfig()
        assert config.id_width == 4
        assert config.empty_marker == "—"

    def test_id_width_must_be_positive(self) -> None:
        """Test that a zero id width is rejected."""
        with pytest.raises(Exception):
            DisplayConfig(id_width=0)


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert config.file is None

    def test_invalid_level(self) -> None:
        """Test that unknown levels are rejected."""
        with pytest.raises(Exception):
            LoggingConfig(level="LOUD")  # type: ignore[arg-type]


class TestTaskmasterConfig:
    """Tests for TaskmasterConfig model."""

    def test_load_missing_file(self, temp_project: Path) -> None:
        """Test loading returns defaults when file doesn't exist."""
        config = TaskmasterConfig.load()
        assert config.categories.defaults == list(DEFAULT_CATEGORIES)
        assert config.display.id_width == 4

    def test_load_existing_file(self, temp_project: Path) -> None:
        """Test loading from an explicit path."""
        path = temp_project / "custom.json"
        path.write_text(
            json.dumps(
                {
                    "categories": {"defaults": ["Дом"], "uncategorized": "Прочее"},
                    "logging": {"level": "DEBUG"},
                }
            ),
            encoding="utf-8",
        )

        config = TaskmasterConfig.load(path)

        assert config.categories.defaults == ["Дом"]
        assert config.categories.uncategorized == "Прочее"
        assert config.logging.level == "DEBUG"
        assert config.display.id_width == 4

    def test_save_and_load_default_location(self, temp_project: Path) -> None:
        """Test save creates .taskmaster/config.json and load reads it back."""
        config = TaskmasterConfig()
        config.display.id_width = 6
        config.save()

        assert (temp_project / CONFIG_FILE).exists()
        assert (temp_project / TASKMASTER_DIR).is_dir()
        assert TaskmasterConfig.load().display.id_width == 6

    def test_save_omits_none(self, temp_project: Path) -> None:
        """Test that unset optional values are not written."""
        path = temp_project / "out.json"
        TaskmasterConfig().save(path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert "file" not in data["logging"]
        assert data["categories"]["uncategorized"] == UNCATEGORIZED
