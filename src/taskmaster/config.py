"""Configuration models for taskmaster."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from taskmaster.models import DEFAULT_CATEGORIES, UNCATEGORIZED


class CategoriesConfig(BaseModel):
    """Configuration for the category registry."""

    defaults: list[str] = Field(default_factory=lambda: list(DEFAULT_CATEGORIES))
    uncategorized: str = UNCATEGORIZED


class DisplayConfig(BaseModel):
    """Configuration for task rendering."""

    id_width: int = Field(default=4, ge=1)
    empty_marker: str = "—"


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: str | None = None


class TaskmasterConfig(BaseModel):
    """Main configuration for taskmaster."""

    categories: CategoriesConfig = Field(default_factory=CategoriesConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TaskmasterConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(exclude_none=True), f, indent=2, ensure_ascii=False)


# Default config directory
TASKMASTER_DIR = Path(".taskmaster")
CONFIG_FILE = TASKMASTER_DIR / "config.json"
