"""Data models for taskmaster."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

# Ordered from lowest to highest severity.
PRIORITIES: tuple[str, ...] = (
    "Низкий 🔵",
    "Средний 🟡",
    "Высокий 🟠",
    "Срочный 🔴",
)

DEFAULT_CATEGORIES: tuple[str, ...] = ("Работа", "Личное", "Учеба", "Здоровье", "Финансы")

UNCATEGORIZED = "Без категории"

# dd.mm.yyyy
DATE_FORMAT = "%d.%m.%Y"


class StatusFilter(Enum):
    """Task status filters."""

    ALL = "all"
    ACTIVE = "active"
    DONE = "done"


@dataclass
class Task:
    """A single tracked task."""

    id: int
    title: str
    priority: str
    due_date: str
    category: str
    created_at: date
    description: str | None = None
    completed: bool = False

    def complete(self) -> None:
        """Mark the task as completed."""
        self.completed = True

    def matches_text(self, query: str) -> bool:
        """Check whether a lowercased query occurs in the title or description."""
        if query in self.title.lower():
            return True
        return self.description is not None and query in self.description.lower()


def format_date(value: date) -> str:
    """Format a date the way due dates are written."""
    return value.strftime(DATE_FORMAT)
