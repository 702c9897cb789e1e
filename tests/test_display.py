"""Tests for taskmaster.display module."""

from __future__ import annotations

import io
from datetime import date

import pytest
from rich.console import Console

from taskmaster.analytics import compute_stats
from taskmaster.config import DisplayConfig
from taskmaster.display import (
    EMPTY_LIST,
    format_task,
    print_error,
    print_grouped,
    print_stats,
    print_task_line,
    print_tasks,
)
from taskmaster.models import PRIORITIES, Task
from taskmaster.query import group_by_category
from taskmaster.store import TaskStore


@pytest.fixture
def console() -> tuple[Console, io.StringIO]:
    """A console writing to a buffer, wide enough to avoid wrapping."""
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def _task(**overrides) -> Task:
    fields = {
        "id": 1,
        "title": "Buy milk",
        "priority": PRIORITIES[0],
        "due_date": "01.01.2020",
        "category": "Groceries",
        "created_at": date(2024, 6, 15),
    }
    fields.update(overrides)
    return Task(**fields)


class TestFormatTask:
    """Tests for format_task."""

    def test_active_task(self) -> None:
        """Test the single-line layout of an active task."""
        assert format_task(_task()) == (
            "🟩 #0001 | Buy milk | Низкий 🔵 | Groceries | до 01.01.2020 | создано 15.06.2024 | —"
        )

    def test_completed_with_description(self) -> None:
        """Test the done marker and description."""
        line = format_task(_task(id=42, completed=True, description="2%"))
        assert line.startswith("✅ #0042 | ")
        assert line.endswith("| 2%")

    def test_display_config(self) -> None:
        """Test id padding and empty marker come from the display config."""
        line = format_task(_task(id=7), DisplayConfig(id_width=2, empty_marker="-"))
        assert "#07 |" in line
        assert line.endswith("| -")


class TestPrintTasks:
    """Tests for list printing."""

    def test_empty(self, console: tuple[Console, io.StringIO]) -> None:
        """Test that an empty list prints the empty marker."""
        con, buffer = console
        print_tasks(con, [])
        assert buffer.getvalue().strip() == EMPTY_LIST

    def test_markup_in_title_is_literal(self, console: tuple[Console, io.StringIO]) -> None:
        """Test that user text is not interpreted as rich markup."""
        con, buffer = console
        print_tasks(con, [_task(title="[bold]x[/bold]")])
        assert "[bold]x[/bold]" in buffer.getvalue()

    def test_grouped(self, console: tuple[Console, io.StringIO], populated_store: TaskStore) -> None:
        """Test grouped printing shows a heading per category."""
        con, buffer = console
        print_grouped(con, group_by_category(populated_store.read_all()))

        output = buffer.getvalue()
        assert "— Категория: Здоровье —" in output
        assert output.index("Здоровье") < output.index("Работа")
        assert "#0003" in output

    def test_task_line_prefix(self, console: tuple[Console, io.StringIO]) -> None:
        """Test a prefixed result line."""
        con, buffer = console
        print_task_line(con, "Создано", _task())
        assert buffer.getvalue().startswith("Создано: 🟩 #0001 | Buy milk")

    def test_error(self, console: tuple[Console, io.StringIO]) -> None:
        """Test the error line."""
        con, buffer = console
        print_error(con, "Задача не найдена")
        assert buffer.getvalue().strip() == "Ошибка: Задача не найдена"


class TestPrintStats:
    """Tests for print_stats."""

    def test_stats_screen(self, console: tuple[Console, io.StringIO], populated_store: TaskStore) -> None:
        """Test that all counters are printed."""
        con, buffer = console
        print_stats(con, compute_stats(populated_store))

        output = buffer.getvalue()
        assert "Всего: 4" in output
        assert "Выполнено: 1" in output
        assert "Активные: 3" in output
        assert "Процент выполнения: 25%" in output
        assert "Просроченные: 1" in output
        for priority in PRIORITIES:
            assert priority in output
        assert "Финансы" in output
